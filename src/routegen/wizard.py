"""Prompt wizard: a linear state machine with back navigation.

The wizard walks :data:`~routegen.models.STEPS` in order and keeps two pieces
of state, an integer cursor and an answer bundle keyed by
:attr:`~routegen.models.Step.key`:

* A forward answer is stored under the current step and moves the cursor on.
  Moving past the last step completes the wizard.
* Choosing "Go back" (offered at HTTP Method and Template) moves the cursor
  back one step, never below zero. Stored answers are kept and become the
  prompt defaults when a step is revisited.
* Cancelling any prompt ends the wizard immediately with
  :class:`~routegen.exceptions.WizardCancelled`.

Prompts go through a :class:`Prompter`. :class:`QuestionaryPrompter` is the
interactive implementation; tests drive the wizard with scripted prompters
or call :meth:`Wizard.advance` / :meth:`Wizard.back` directly.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Union

import questionary

from routegen.exceptions import RoutegenError, WizardCancelled
from routegen.models import STEPS, GeneratorDefaults, HTTPMethod, Step, WizardState
from routegen.output import debug, step as print_step
from routegen.templates import list_templates

BACK = "back"
"""Choice value of the "Go back" entry."""

BACK_LABEL = "Go back"

Validator = Callable[[str], Union[bool, str]]


class Prompter(Protocol):
    """The three widgets the wizard needs.

    Implementations return the user's answer, or raise
    :class:`~routegen.exceptions.WizardCancelled` when the user aborts.
    """

    def text(self, message: str, default: str = "", validate: Optional[Validator] = None) -> str:
        ...

    def select(
        self,
        message: str,
        choices: list[tuple[str, str]],
        default: Optional[str] = None,
    ) -> str:
        ...

    def confirm(self, message: str, default: bool = False) -> bool:
        ...


class QuestionaryPrompter:
    """Interactive prompter backed by :mod:`questionary`.

    ``Ctrl-C`` and ``EOF`` at any prompt are translated into
    :class:`~routegen.exceptions.WizardCancelled`.
    """

    def text(self, message: str, default: str = "", validate: Optional[Validator] = None) -> str:
        question = questionary.text(message, default=default, validate=validate)
        return self._ask(question)

    def select(
        self,
        message: str,
        choices: list[tuple[str, str]],
        default: Optional[str] = None,
    ) -> str:
        question = questionary.select(
            message,
            choices=[questionary.Choice(title=label, value=value) for label, value in choices],
            default=default,
        )
        return self._ask(question)

    def confirm(self, message: str, default: bool = False) -> bool:
        return self._ask(questionary.confirm(message, default=default))

    @staticmethod
    def _ask(question: questionary.Question) -> Any:
        try:
            answer = question.unsafe_ask()
        except (KeyboardInterrupt, EOFError):
            raise WizardCancelled() from None
        if answer is None:
            raise WizardCancelled()
        return answer


def validate_route_name(value: str) -> Union[bool, str]:
    """Return ``True`` for a usable route name, else the error message."""
    if value.strip() == "":
        return "Route name cannot be empty"
    return True


class Wizard:
    """Collects one answer per :class:`~routegen.models.Step`.

    Args:
        prompter: Widget implementation. Defaults to
            :class:`QuestionaryPrompter`.
        defaults: Fallbacks for the TypeScript and Base Directory prompts.
    """

    def __init__(
        self,
        prompter: Optional[Prompter] = None,
        defaults: Optional[GeneratorDefaults] = None,
    ) -> None:
        self.prompter: Prompter = prompter or QuestionaryPrompter()
        self.defaults = defaults or GeneratorDefaults()
        self.cursor = 0
        self.state = WizardState.RUNNING
        self._answers: dict[str, Any] = {}

    @property
    def current_step(self) -> Optional[Step]:
        """The step under the cursor, or ``None`` once the wizard has ended."""
        if self.state is not WizardState.RUNNING:
            return None
        return STEPS[self.cursor]

    @property
    def answers(self) -> dict[str, Any]:
        """A copy of the answers collected so far."""
        return dict(self._answers)

    # ------------------------------------------------------------------ #
    # Transitions
    # ------------------------------------------------------------------ #

    def advance(self, answer: Any) -> None:
        """Store *answer* for the current step and move to the next one."""
        current = self._require_running()
        self._answers[current.key] = answer
        self.cursor += 1
        if self.cursor >= len(STEPS):
            self.state = WizardState.COMPLETED

    def back(self) -> None:
        """Move to the previous step, keeping every stored answer."""
        self._require_running()
        self.cursor = max(0, self.cursor - 1)

    def cancel(self) -> None:
        """End the wizard without completing it."""
        self.state = WizardState.CANCELLED

    def _require_running(self) -> Step:
        current = self.current_step
        if current is None:
            raise RoutegenError(f"Wizard is already {self.state.value}")
        return current

    # ------------------------------------------------------------------ #
    # Prompting
    # ------------------------------------------------------------------ #

    def ask(self, step: Step) -> Any:
        """Prompt for *step* and return the answer (or :data:`BACK`)."""
        previous = self._answers.get(step.key)

        if step is Step.ROUTE_NAME:
            return self.prompter.text(
                "Enter the route name (e.g., users/[id]):",
                default=previous or "",
                validate=validate_route_name,
            )

        if step is Step.HTTP_METHOD:
            choices = [(m.value, m.value) for m in HTTPMethod]
            choices.append((BACK_LABEL, BACK))
            return self.prompter.select("Select the HTTP method:", choices, default=previous)

        if step is Step.TEMPLATE:
            choices = [(t.label, t.key) for t in list_templates()]
            choices.append((BACK_LABEL, BACK))
            return self.prompter.select("Choose a template:", choices, default=previous)

        if step is Step.TYPESCRIPT:
            default = previous if previous is not None else self.defaults.use_typescript
            return self.prompter.confirm("Use TypeScript?", default=default)

        return self.prompter.text(
            "Enter the base directory (leave empty for current directory):",
            default=previous or str(self.defaults.base_dir),
        )

    def run(self) -> dict[str, Any]:
        """Prompt until the wizard completes.

        Returns:
            A copy of the completed answer bundle.

        Raises:
            WizardCancelled: If the user aborts at any prompt.
        """
        while self.state is WizardState.RUNNING:
            current = STEPS[self.cursor]
            print_step(self.cursor + 1, current.value)
            try:
                answer = self.ask(current)
            except WizardCancelled:
                self.cancel()
                raise

            if answer == BACK and current in (Step.HTTP_METHOD, Step.TEMPLATE):
                debug(f"Going back from {current.value}")
                self.back()
            else:
                self.advance(answer)

        return self.answers
