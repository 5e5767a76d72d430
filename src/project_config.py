"""Loading of the engine configuration (``config.toml``)."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped]


_CONFIG_FILENAME = "config.toml"
_CONFIG_ENV = "SUDOKU_CONFIG"
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
_MISSING = object()


def config_path() -> Path:
    """Return the configuration file in use.

    ``SUDOKU_CONFIG`` points at an alternative file; otherwise the
    ``config.toml`` at the project root is read.
    """

    override = os.environ.get(_CONFIG_ENV)
    if override:
        return Path(override)
    return _PROJECT_ROOT / _CONFIG_FILENAME


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """Load and cache the project configuration as a dictionary.

    A missing project-root file yields an empty configuration so installed
    copies run on built-in defaults; a missing ``SUDOKU_CONFIG`` target is an
    error.
    """
    path = config_path()
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except FileNotFoundError as exc:
        if os.environ.get(_CONFIG_ENV):
            raise RuntimeError(f"Configuration file '{path}' was not found") from exc
        return {}


def reload() -> None:
    """Drop the cached configuration so the next lookup re-reads the file."""

    get_config.cache_clear()


def get_section(path: str, default: Any = _MISSING) -> Any:
    """Retrieve a nested configuration value using dotted notation.

    ``default`` is returned for a missing path; without it a ``KeyError`` is
    raised.
    """

    data: Any = get_config()
    for part in path.split("."):
        if isinstance(data, dict) and part in data:
            data = data[part]
        elif default is not _MISSING:
            return default
        else:
            raise KeyError(f"Configuration path '{path}' not found")
    return data


__all__ = ["config_path", "get_config", "get_section", "reload"]
