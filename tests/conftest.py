"""Shared test fixtures for routegen.

Provides a scripted prompter that stands in for the interactive
questionary widgets, isolated XDG directories, and output-state resets.
These fixtures are automatically discovered by pytest and available to all
test modules without explicit imports.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import pytest

from routegen.exceptions import WizardCancelled
from routegen.output import OutputFormat, OutputManager, reset_output, set_output


CANCEL = object()
"""Scripted response that simulates Ctrl-C at a prompt."""


class ScriptedPrompter:
    """Prompter that replays a fixed list of answers.

    Each call to :meth:`text`, :meth:`select` or :meth:`confirm` consumes the
    next response. :data:`CANCEL` raises
    :class:`~routegen.exceptions.WizardCancelled`. Text answers rejected by
    the validator are recorded in :attr:`errors` and the next response is
    used, the way the real widget re-prompts in place.
    """

    def __init__(self, responses: list[Any]) -> None:
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []
        self.errors: list[str] = []

    def _next(self) -> Any:
        if not self.responses:
            raise AssertionError("ScriptedPrompter ran out of responses")
        response = self.responses.pop(0)
        if response is CANCEL:
            raise WizardCancelled()
        return response

    def text(self, message: str, default: str = "", validate: Optional[Any] = None) -> str:
        self.calls.append({"kind": "text", "message": message, "default": default})
        while True:
            answer = self._next()
            if validate is None:
                return answer
            verdict = validate(answer)
            if verdict is True:
                return answer
            self.errors.append(verdict)

    def select(self, message: str, choices: list[tuple[str, str]], default: Optional[str] = None) -> str:
        self.calls.append(
            {"kind": "select", "message": message, "choices": choices, "default": default}
        )
        return self._next()

    def confirm(self, message: str, default: bool = False) -> bool:
        self.calls.append({"kind": "confirm", "message": message, "default": default})
        return self._next()


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When Typer's CliRunner redirects those streams during
    a test and the test finishes, the cached references become stale.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Isolation fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_DATA_HOME into tmp_path and chdir there.

    Returns:
        The tmp_path root directory.
    """
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def quiet_output() -> OutputManager:
    """Install a PLAIN-format, quiet OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.PLAIN, no_color=True, quiet=True)
    set_output(output)
    yield output
    reset_output()


@pytest.fixture
def cancel() -> object:
    """The scripted response that simulates Ctrl-C."""
    return CANCEL


@pytest.fixture
def make_prompter():
    """Return the :class:`ScriptedPrompter` class for direct wizard tests."""
    return ScriptedPrompter


@pytest.fixture
def scripted(monkeypatch: pytest.MonkeyPatch):
    """Factory installing a :class:`ScriptedPrompter` for the generate command.

    Usage::

        prompter = scripted(["users", "GET", "basic", False, str(tmp_path)])
    """

    def _install(responses: list[Any]) -> ScriptedPrompter:
        prompter = ScriptedPrompter(responses)
        monkeypatch.setattr("routegen.commands.generate._make_prompter", lambda: prompter)
        return prompter

    return _install


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
