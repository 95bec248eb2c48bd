"""Templates command -- list the built-in route handler templates."""

from __future__ import annotations

from typing import Optional

import typer

from routegen.output import print_code, print_table


def templates_command(
    show: Optional[str] = typer.Option(
        None,
        "--show",
        "-s",
        help="Print the rendered source of one template instead of the list.",
    ),
    method: str = typer.Option("GET", "--method", "-m", help="HTTP method used with --show."),
    typescript: bool = typer.Option(False, "--typescript", "-t", help="Render with TypeScript types."),
) -> None:
    """List the built-in templates.

    Prints one row per template (key, name, description). With ``--show``
    the named template is rendered for an ``example`` route and printed to
    stdout, which is handy for previewing before running the wizard.

    Example::

        routegen templates
        routegen templates --json
        routegen templates --show withValidation --method POST -t
    """
    from routegen.exceptions import UnknownTemplateError
    from routegen.exit_codes import EXIT_INVALID_USAGE
    from routegen.models import HTTPMethod
    from routegen.output import error
    from routegen.templates import get_template, list_templates

    if show is None:
        rows = [[t.key, t.name, t.description] for t in list_templates()]
        print_table(["Key", "Name", "Description"], rows, title="Route templates")
        return

    try:
        template = get_template(show)
        http_method = HTTPMethod(method.upper())
    except UnknownTemplateError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    except ValueError:
        error(f"Unknown HTTP method '{method}' (expected one of: {', '.join(m.value for m in HTTPMethod)})")
        raise typer.Exit(code=EXIT_INVALID_USAGE) from None

    print_code(
        template.render(http_method, "example", typescript),
        "typescript" if typescript else "javascript",
    )
