from __future__ import annotations

import os
import sys

import pytest


def _ensure_project_root_on_path() -> None:
    # When running via the venv's pytest entrypoint, the CWD is not guaranteed to
    # be on sys.path. Ensure the repository root (containing `topic_todo/`) is importable.
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


_ensure_project_root_on_path()


class RecordingRenderer:
    """Renderer fake that records every draw call."""

    def __init__(self):
        self.calls: list[tuple] = []

    def start_screen(self, status):
        self.calls.append(("start", status))

    def topics(self, summaries, selected, status):
        self.calls.append(("topics", tuple(summaries), selected, status))

    def items(self, topic, items, selected, status):
        self.calls.append(("items", topic, tuple(items), selected, status))

    def text_input(self, target, text):
        self.calls.append(("text_input", target, text))

    def command(self, key):
        self.calls.append(("command", key))

    def flash(self):
        self.calls.append(("flash",))

    def last_draw(self) -> tuple:
        """Most recent screen draw (ignores command echoes)."""
        for call in reversed(self.calls):
            if call[0] not in {"command", "flash"}:
                return call
        raise AssertionError("nothing drawn")


class ScriptedKeys:
    """Key source that replays a fixed sequence and fails when exhausted."""

    def __init__(self, keys):
        self._keys = list(keys)

    def get_key(self) -> int:
        if not self._keys:
            raise AssertionError("key script exhausted before quit")
        return self._keys.pop(0)


def keys_of(*parts) -> list[int]:
    """Build key codes from strings and ints, e.g. keys_of("ta", "Work", 27)."""
    out: list[int] = []
    for part in parts:
        if isinstance(part, int):
            out.append(part)
        else:
            out.extend(ord(c) for c in part)
    return out


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def settings(tmp_path, monkeypatch):
    """Settings isolated from the developer's environment and .env."""
    from topic_todo.settings import Settings

    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("TODO_"):
            monkeypatch.delenv(key, raising=False)
    return Settings(TODO_LOG_DIR=tmp_path / "_logs")
