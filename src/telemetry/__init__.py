"""Structured event logging for the Sudoku engine."""

from __future__ import annotations

from .log import append_event, configure, configure_from_config, current_log_path, is_enabled

__all__ = ["append_event", "configure", "configure_from_config", "current_log_path", "is_enabled"]
