from __future__ import annotations

import json

import pytest

import project_config
from sudoku_core import Difficulty, PuzzleEngine
from telemetry import log as event_log


@pytest.fixture
def log_dir(tmp_path):
    event_log.configure(tmp_path)
    yield tmp_path
    event_log.configure_from_config()


def test_disabled_log_writes_nothing(tmp_path) -> None:
    event_log.configure(None)
    try:
        assert event_log.is_enabled() is False
        assert event_log.append_event({"event": "noop"}) is None
    finally:
        event_log.configure_from_config()
    assert list(tmp_path.iterdir()) == []


def test_generation_appends_event(log_dir) -> None:
    engine = PuzzleEngine(Difficulty.EASY, seed=8, env={})
    path = event_log.current_log_path()
    assert path is not None and path.parent.parent == log_dir

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    event = json.loads(lines[0])
    assert event["event"] == "generate"
    assert event["difficulty"] == "easy"
    assert event["seed"] == 8
    assert event["removed"] == engine.last_generation.removed
    assert event["clues"] == 81 - event["removed"]
    assert "ts" in event


def test_rotation_starts_new_file(tmp_path) -> None:
    event_log.configure(tmp_path, max_bytes=1)
    try:
        first = event_log.append_event({"event": "a"})
        second = event_log.append_event({"event": "b"})
    finally:
        event_log.configure_from_config()
    assert first is not None and second is not None
    assert first.name == "events_00.jsonl"
    assert second.name == "events_01.jsonl"


def test_log_reads_config_on_first_use(tmp_path, monkeypatch) -> None:
    events_dir = tmp_path / "events"
    config = tmp_path / "config.toml"
    config.write_text(f'[events]\ndir = "{events_dir.as_posix()}"\n', encoding="utf-8")
    monkeypatch.setenv("SUDOKU_CONFIG", str(config))
    project_config.reload()
    monkeypatch.setattr(event_log, "_CONFIGURED", False)
    try:
        assert event_log.is_enabled() is True
        written = event_log.append_event({"event": "generate"})
    finally:
        monkeypatch.undo()
        project_config.reload()
        event_log.configure_from_config()
    assert written is not None
    assert written.parent.parent == events_dir
