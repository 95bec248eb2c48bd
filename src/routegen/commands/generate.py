"""Generate command -- run the wizard and write one route handler.

This is what a bare ``routegen`` invocation does: it prints the intro, walks
the :class:`~routegen.wizard.Wizard`, turns the answers into a
:class:`~routegen.models.GenerationRequest`, hands it to
:func:`~routegen.emitter.generate_route` exactly once, and prints the outro.

Exit codes:

* ``0`` -- the file was written, or the user cancelled the wizard.
* ``3`` -- the file could not be rendered or written.
"""

from __future__ import annotations

from typing import Optional

import typer

from routegen.exit_codes import EXIT_GENERATION_FAILURE, EXIT_SUCCESS
from routegen.models import GenerationRequest, GenerationResult, GeneratorDefaults
from routegen.output import debug, get_output, info, print_code


def _make_prompter():
    """Return the interactive prompter used by the wizard."""
    from routegen.wizard import QuestionaryPrompter

    return QuestionaryPrompter()


def run_generator(
    defaults: Optional[GeneratorDefaults] = None,
    dry_run: bool = False,
) -> GenerationResult:
    """Run the wizard to completion and emit the route file.

    Args:
        defaults: Fallbacks for the TypeScript and Base Directory answers.
        dry_run: Render and print the handler instead of writing it.

    Returns:
        The emitter's :class:`~routegen.models.GenerationResult`.

    Raises:
        WizardCancelled: If the user aborts any prompt. Nothing is written.
        AnswerBundleError: If the completed answers cannot form a request.
    """
    from routegen.emitter import generate_route
    from routegen.wizard import Wizard

    output = get_output()
    defaults = defaults or GeneratorDefaults()

    output.clear()
    with output.status(
        "Initializing Next.js API Route Generator",
        done="Next.js API Route Generator initialized",
    ):
        wizard = Wizard(prompter=_make_prompter(), defaults=defaults)

    output.intro(
        "Welcome to the Next.js API Route Generator!",
        "Create API routes with ease for your Next.js application.",
    )

    answers = wizard.run()
    debug(f"Wizard answers: {answers}")
    request = GenerationRequest.from_answers(answers, defaults)

    with output.status("Generating API route"):
        result = generate_route(request, dry_run=dry_run)

    if dry_run and result.success:
        print_code(result.content or "", "typescript" if request.use_typescript else "javascript")

    return result


def generate_command(
    ctx: typer.Context,
) -> None:
    """Interactively generate a Next.js API route handler.

    Reads ``dry_run`` and the generator defaults from ``ctx.obj`` (populated
    by :func:`~routegen.app.main_callback`).

    Raises:
        typer.Exit: With code 0 after success or cancellation, or
            :data:`~routegen.exit_codes.EXIT_GENERATION_FAILURE` when the
            route file could not be written.
    """
    from routegen.exceptions import WizardCancelled

    obj = ctx.obj or {}
    defaults = obj.get("defaults") or GeneratorDefaults()
    dry_run = bool(obj.get("dry_run", False))
    output = get_output()

    try:
        result = run_generator(defaults=defaults, dry_run=dry_run)
    except WizardCancelled as exc:
        info(str(exc))
        raise typer.Exit(code=EXIT_SUCCESS) from None

    if not result.success:
        output.outro(
            "API route generation failed.",
            f"Nothing was written for {result.route_name}.",
            ok=False,
        )
        raise typer.Exit(code=EXIT_GENERATION_FAILURE)

    if result.dry_run:
        output.outro("Dry run complete!", f"Would write {result.path}.")
    else:
        output.outro(
            "API route generation complete!",
            "Your new API route is ready to use.",
        )
