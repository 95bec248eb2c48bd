"""routegen -- Interactive generator for Next.js App Router API route handlers.

This package walks the user through a short prompt wizard (route path, HTTP
method, template, TypeScript, base directory) and writes a single
``app/api/<route>/route.{js,ts}`` file rendered from one of four built-in
templates.

Typical workflow::

    routegen              # run the wizard
    routegen templates    # list the available templates

Modules:
    app: Typer application factory and CLI entry point.
    wizard: The prompt wizard state machine and its prompter seam.
    templates: Built-in route handler templates.
    emitter: Path resolution, rendering and the single file write.
    models: Pydantic models and enums shared across the package.
    config: Defaults and XDG-aware data directory resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"
