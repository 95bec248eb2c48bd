"""Defaults and XDG-aware directory resolution.

routegen keeps no configuration file and no state between runs. This module
only provides:

* **Defaults** -- :func:`load_defaults` returns the
  :class:`~routegen.models.GeneratorDefaults` used to fill empty wizard
  answers (JavaScript output, current working directory).
* **Data directory** -- :func:`get_data_dir` resolves where crash logs are
  written. XDG Base Directory compliant on Linux/BSD, ``~/.routegen/`` on
  macOS and Windows.
"""

from __future__ import annotations

import os
import platform
from pathlib import Path
from typing import Optional

from routegen.models import GeneratorDefaults

_APP_NAME = "routegen"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/routegen/`` (default ``~/.local/share/routegen/``).
    On macOS/Windows: ``~/.routegen/``.

    Returns:
        Absolute path to the data directory (guaranteed to exist).
    """
    if _is_xdg_platform():
        base = _xdg_base("XDG_DATA_HOME", (".local", "share"))
        path = base / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Defaults ---


def load_defaults(
    use_typescript: Optional[bool] = None,
    base_dir: Optional[str | Path] = None,
) -> GeneratorDefaults:
    """Build the generator defaults, applying any explicit overrides.

    Args:
        use_typescript: Override for the default TypeScript answer.
        base_dir: Override for the default base directory. The current
            working directory is used when omitted.

    Returns:
        A :class:`~routegen.models.GeneratorDefaults` instance.
    """
    overrides: dict[str, object] = {}
    if use_typescript is not None:
        overrides["use_typescript"] = use_typescript
    if base_dir is not None:
        overrides["base_dir"] = Path(base_dir)
    return GeneratorDefaults(**overrides)
