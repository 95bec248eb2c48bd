"""Canonical Pydantic models shared across all routegen modules.

This is the single source of truth for data shapes in the project. The
models fall into two groups:

**Wizard models** -- the ordered :class:`Step` enumeration, the
:class:`HTTPMethod` choices offered at the HTTP Method step, and the
:class:`WizardState` terminal markers.

**Generation models** -- :class:`GeneratorDefaults`, the read-only
:class:`GenerationRequest` derived from a completed answer bundle, and the
:class:`GenerationResult` reported once after the write.

All models use Pydantic v2.
"""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from routegen.exceptions import AnswerBundleError


# --- Wizard ---


class Step(str, enum.Enum):
    """The fixed, ordered wizard steps.

    The enum value is the human-readable label printed in the step banner.
    Iteration order is the order in which the wizard asks.
    """

    ROUTE_NAME = "Route Name"
    HTTP_METHOD = "HTTP Method"
    TEMPLATE = "Template"
    TYPESCRIPT = "TypeScript"
    BASE_DIRECTORY = "Base Directory"

    @property
    def key(self) -> str:
        """Answer-bundle key: the label lower-cased with spaces removed."""
        return self.value.lower().replace(" ", "")


STEPS: tuple[Step, ...] = tuple(Step)
"""Immutable step sequence walked by the wizard."""


class HTTPMethod(str, enum.Enum):
    """HTTP methods offered by the wizard.

    The value doubles as the name of the exported handler function, so it
    must match the App Router's expected export name exactly.
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class WizardState(str, enum.Enum):
    """Terminal wizard states. While running, the cursor index is the state."""

    RUNNING = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# --- Generation ---


class GeneratorDefaults(BaseModel):
    """Fallback values applied when the wizard leaves an answer empty."""

    use_typescript: bool = False
    base_dir: Path = Field(default_factory=Path.cwd)


class GenerationRequest(BaseModel):
    """Everything the emitter needs to write one route file.

    A read-only projection of the wizard's answer bundle with
    :class:`GeneratorDefaults` applied.

    Example::

        GenerationRequest(
            route_name="users/[id]",
            method=HTTPMethod.GET,
            template="basic",
            use_typescript=False,
            base_dir=Path("/tmp/x"),
        )
    """

    model_config = ConfigDict(frozen=True)

    route_name: str = Field(description="Route path, e.g. users/[id]")
    method: HTTPMethod
    template: str = Field(description="Key of a built-in template")
    use_typescript: bool = False
    base_dir: Path

    @field_validator("route_name")
    @classmethod
    def route_name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Route name cannot be empty")
        return value

    @property
    def extension(self) -> str:
        """File extension without the dot: ``ts`` or ``js``."""
        return "ts" if self.use_typescript else "js"

    @classmethod
    def from_answers(
        cls,
        answers: dict[str, Any],
        defaults: Optional[GeneratorDefaults] = None,
    ) -> GenerationRequest:
        """Build a request from a completed wizard answer bundle.

        Args:
            answers: Mapping keyed by :attr:`Step.key`.
            defaults: Fallbacks for the TypeScript flag and an empty base
                directory. A fresh :class:`GeneratorDefaults` when omitted.

        Raises:
            AnswerBundleError: If a required answer is missing or invalid.
        """
        defaults = defaults or GeneratorDefaults()

        missing = [
            step.value
            for step in (Step.ROUTE_NAME, Step.HTTP_METHOD, Step.TEMPLATE)
            if answers.get(step.key) in (None, "")
        ]
        if missing:
            raise AnswerBundleError(f"Missing answers for: {', '.join(missing)}")

        use_typescript = answers.get(Step.TYPESCRIPT.key)
        if use_typescript is None:
            use_typescript = defaults.use_typescript

        base_dir = answers.get(Step.BASE_DIRECTORY.key) or defaults.base_dir

        try:
            return cls(
                route_name=answers[Step.ROUTE_NAME.key],
                method=answers[Step.HTTP_METHOD.key],
                template=answers[Step.TEMPLATE.key],
                use_typescript=use_typescript,
                base_dir=Path(str(base_dir).strip() or defaults.base_dir).expanduser(),
            )
        except ValidationError as exc:
            raise AnswerBundleError(f"Invalid answers: {exc}") from exc


class GenerationResult(BaseModel):
    """Outcome of a single emitter run. Reported once, never persisted."""

    route_name: str
    path: Optional[Path] = None
    elapsed_ms: float = 0.0
    error: Optional[str] = None
    content: Optional[str] = None
    dry_run: bool = False

    @property
    def success(self) -> bool:
        """``True`` when no error was recorded."""
        return self.error is None
