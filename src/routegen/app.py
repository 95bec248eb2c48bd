"""Typer application factory and CLI entry point for routegen.

Running ``routegen`` with no sub-command starts the interactive wizard
(:mod:`routegen.commands.generate`). ``routegen templates`` lists the
built-in templates.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs signal handlers and invokes the Typer app.
Unhandled exceptions are written to a crash log under the data directory.

See Also:
    :mod:`routegen.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import signal
import sys
import traceback
from datetime import datetime
from typing import Any, Optional

import typer

from routegen import __version__
from routegen.commands.templates import templates_command
from routegen.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INTERRUPTED


app = typer.Typer(
    name="routegen",
    help="Generate Next.js App Router API route handlers.",
    invoke_without_command=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command("templates")(templates_command)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"routegen {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Print the route instead of writing it."
    ),
    typescript: Optional[bool] = typer.Option(
        None,
        "--typescript/--javascript",
        help="Default answer for the TypeScript step.",
    ),
    base_dir: Optional[str] = typer.Option(
        None, "--base-dir", "-d", help="Default answer for the Base Directory step."
    ),
) -> None:
    """Generate Next.js App Router API route handlers.

    Initialises the global :class:`~routegen.output.OutputManager` from
    CLI flags and stores shared options in ``ctx.obj``. When no
    sub-command is given, runs the interactive wizard.

    Args:
        ctx: Typer invocation context.
        version: If ``True``, print the version string and exit.
        json_output: Force JSON output format.
        plain_output: Force plain-text output format.
        no_color: Disable all colour and Rich markup.
        quiet: Suppress non-essential diagnostic output.
        verbose: Enable debug-level diagnostic output.
        dry_run: Render the handler to stdout without writing it.
        typescript: Pre-selected answer for the TypeScript step.
        base_dir: Pre-filled answer for the Base Directory step.
    """
    import logging

    from routegen.config import load_defaults
    from routegen.output import OutputFormat, OutputManager, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    set_output(
        OutputManager(
            format=fmt,
            no_color=no_color,
            quiet=quiet,
            verbose=verbose,
        )
    )
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="[%(name)s] %(message)s")

    ctx.ensure_object(dict)
    ctx.obj["dry_run"] = dry_run
    ctx.obj["defaults"] = load_defaults(use_typescript=typescript, base_dir=base_dir)

    if ctx.invoked_subcommand is None:
        from routegen.commands.generate import generate_command

        generate_command(ctx)


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C outside a prompt exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path.

    Args:
        exc: The unhandled exception to log.

    Returns:
        Absolute path to the written crash log file.
    """
    from routegen.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    )
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``routegen`` console script.

    Unhandled :class:`~routegen.exceptions.RoutegenError` instances
    cause a clean exit with the error's ``exit_code``. All other exceptions
    produce a crash log and a generic failure exit.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as exc:
        from routegen.exceptions import RoutegenError, WizardCancelled
        from routegen.output import error, info

        if isinstance(exc, WizardCancelled):
            info(str(exc))
            sys.exit(exc.exit_code)
        elif isinstance(exc, RoutegenError):
            error(str(exc))
            sys.exit(exc.exit_code)
        else:
            log_path = _write_crash_log(exc)
            error(f"An error occurred: {exc}")
            error(f"Debug log: {log_path}")
            sys.exit(EXIT_GENERIC_FAILURE)


if __name__ == "__main__":
    main()
