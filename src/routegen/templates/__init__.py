"""Built-in route handler templates.

Each :class:`TemplateDefinition` pairs a display name and description with a
``*.route.j2`` file stored next to this module. Templates are rendered with
three variables only:

* ``method`` -- the HTTP method, used verbatim as the exported handler name.
* ``route_name`` -- the route path the user typed, e.g. ``users/[id]``.
* ``use_typescript`` -- whether to import ``NextRequest`` and annotate the
  handler arguments.

The set is fixed: :data:`TEMPLATES` is a plain lookup table keyed by the
template key shown in the wizard.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from routegen.exceptions import UnknownTemplateError
from routegen.models import HTTPMethod


TEMPLATE_DIR = Path(__file__).parent
"""Directory holding the ``*.route.j2`` files."""


class TemplateDefinition:
    """A named generator of route handler source text.

    Args:
        key: Lookup key, e.g. ``withValidation``.
        name: Short display name.
        description: One-line description shown in the wizard.
        filename: Template file name inside :data:`TEMPLATE_DIR`.
    """

    def __init__(self, key: str, name: str, description: str, filename: str) -> None:
        self.key = key
        self.name = name
        self.description = description
        self.filename = filename

    @property
    def label(self) -> str:
        """Wizard choice label: ``"<name> - <description>"``."""
        return f"{self.name} - {self.description}"

    def render(self, method: HTTPMethod | str, route_name: str, use_typescript: bool) -> str:
        """Render the handler source for *method* at *route_name*."""
        template = _create_jinja_env().get_template(self.filename)
        return template.render(
            method=HTTPMethod(method).value,
            route_name=route_name,
            use_typescript=use_typescript,
        )

    def __repr__(self) -> str:
        return f"TemplateDefinition(key={self.key!r}, name={self.name!r})"


TEMPLATES: dict[str, TemplateDefinition] = {
    "basic": TemplateDefinition(
        key="basic",
        name="Basic",
        description="A simple API route with a JSON response",
        filename="basic.route.j2",
    ),
    "withParams": TemplateDefinition(
        key="withParams",
        name="With Params",
        description="An API route that handles path and query parameters",
        filename="withParams.route.j2",
    ),
    "withErrorHandling": TemplateDefinition(
        key="withErrorHandling",
        name="With Error Handling",
        description="An API route with built-in error handling",
        filename="withErrorHandling.route.j2",
    ),
    "withValidation": TemplateDefinition(
        key="withValidation",
        name="With Validation",
        description="An API route with request body validation",
        filename="withValidation.route.j2",
    ),
}


def get_template(key: str) -> TemplateDefinition:
    """Return the template registered under *key*.

    Raises:
        UnknownTemplateError: If *key* is not one of :data:`TEMPLATES`.
    """
    try:
        return TEMPLATES[key]
    except KeyError:
        known = ", ".join(TEMPLATES)
        raise UnknownTemplateError(f"Unknown template '{key}' (expected one of: {known})") from None


def list_templates() -> list[TemplateDefinition]:
    """Return all templates in wizard order."""
    return list(TEMPLATES.values())


def _js_string(value: str) -> str:
    """Escape *value* for use inside a single-quoted JavaScript string."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


@lru_cache(maxsize=1)
def _create_jinja_env() -> Environment:
    """Create the Jinja2 environment for route templates.

    Autoescape stays off since the output is JavaScript, not HTML.
    ``StrictUndefined`` turns a misspelled variable into an error instead of
    an empty string.
    """
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["js_string"] = _js_string
    return env
