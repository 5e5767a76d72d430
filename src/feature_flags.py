"""Runtime feature flag helpers."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped]

__all__ = ["get_replay_feature", "reuses_generation_order", "reload"]

_FEATURES_FILENAME = "config/features.toml"
_DEFAULT_REUSE_DIFFICULTIES = ("hard", "very_hard")


def _features_path() -> Path:
    return Path(__file__).resolve().parents[1] / _FEATURES_FILENAME


@lru_cache(maxsize=1)
def _load_features() -> dict[str, Any]:
    path = _features_path()
    if not path.exists():
        return {}
    with path.open("rb") as handle:
        return tomllib.load(handle)


def reload() -> None:
    """Clear the cached feature configuration."""

    _load_features.cache_clear()


def _coerce_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalised = value.strip().lower()
        if normalised in {"1", "true", "yes", "on"}:
            return True
        if normalised in {"0", "false", "no", "off"}:
            return False
    return None


def get_replay_feature() -> dict[str, Any]:
    """Return the ``[replay]`` block with defaults filled in."""

    entry = _load_features().get("replay")
    merged: dict[str, Any] = {
        "reuse_generation_order": True,
        "difficulties": list(_DEFAULT_REUSE_DIFFICULTIES),
    }
    if isinstance(entry, dict):
        merged.update(entry)
    merged["difficulties"] = [str(name).lower() for name in merged.get("difficulties") or []]
    return merged


def reuses_generation_order(difficulty: str, env: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when solve replays at ``difficulty`` keep the generation digit order.

    ``CLI_REPLAY_REUSE_ORDER`` and ``SUDOKU_REPLAY_REUSE_ORDER`` override the
    ``reuse_generation_order`` switch; the CLI key wins. The difficulty list
    always comes from the feature file.
    """

    feature = get_replay_feature()
    enabled = bool(feature.get("reuse_generation_order", False))

    if env:
        for key in ("CLI_REPLAY_REUSE_ORDER", "SUDOKU_REPLAY_REUSE_ORDER"):
            override = _coerce_bool(env.get(key))
            if override is not None:
                enabled = override
                break

    return enabled and difficulty.lower() in feature["difficulties"]
