"""Render a route handler and write it to its App Router location.

Given a :class:`~routegen.models.GenerationRequest`, the emitter:

1. Picks the extension (``ts`` or ``js``) from the TypeScript flag.
2. Splits the route name on ``/`` into path segments. Dynamic segments
   such as ``[id]`` or ``[...slug]`` are opaque and passed through verbatim.
3. Resolves ``<base_dir>/app/api/<segments...>/route.<ext>``.
4. Renders the chosen template.
5. Creates missing parent directories.
6. Writes the file, silently replacing any existing one.

Any failure from step 3 on is caught here, reported with the route name and
returned as a failed :class:`~routegen.models.GenerationResult`; it never
propagates to the wizard.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from jinja2 import TemplateError

from routegen.exceptions import RoutegenError
from routegen.models import GenerationRequest, GenerationResult
from routegen.output import error, info, success
from routegen.templates import get_template

logger = logging.getLogger(__name__)


def split_route(route_name: str) -> list[str]:
    """Split *route_name* into path segments, dropping empty ones.

    Example::

        >>> split_route("/users/[id]/")
        ['users', '[id]']
    """
    return [segment for segment in route_name.split("/") if segment]


def resolve_route_path(request: GenerationRequest) -> Path:
    """Return the file path the request will be written to."""
    return Path(request.base_dir).joinpath(
        "app", "api", *split_route(request.route_name), f"route.{request.extension}"
    )


def render_route(request: GenerationRequest) -> str:
    """Render the handler source text for *request*.

    Raises:
        UnknownTemplateError: If the request names an unknown template.
    """
    template = get_template(request.template)
    return template.render(request.method, request.route_name, request.use_typescript)


def generate_route(request: GenerationRequest, dry_run: bool = False) -> GenerationResult:
    """Render *request* and write the route file.

    Args:
        request: The completed generation request.
        dry_run: Render and resolve the path without touching the disk.

    Returns:
        A successful result carrying the written path and the elapsed time,
        or a failed result carrying the error text.
    """
    start = time.perf_counter()
    try:
        file_path = resolve_route_path(request)
        content = render_route(request)

        if not dry_run:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug("Rendered %s template for %s in %.2fms", request.template, request.route_name, elapsed_ms)
        if dry_run:
            info(f"Dry run: would write {file_path}")
        else:
            success(f"API route handler generated: {file_path} ({elapsed_ms:.2f}ms)")
        return GenerationResult(
            route_name=request.route_name,
            path=file_path,
            elapsed_ms=round(elapsed_ms, 2),
            content=content,
            dry_run=dry_run,
        )
    except (OSError, ValueError, TemplateError, RoutegenError) as exc:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug("Generation failed for %s", request.route_name, exc_info=True)
        error(f"Error generating API route handler {request.route_name}: {exc}")
        return GenerationResult(
            route_name=request.route_name,
            elapsed_ms=round(elapsed_ms, 2),
            error=str(exc),
            dry_run=dry_run,
        )
