"""Tests for the command-line entrypoint."""
from __future__ import annotations

import json
import logging

import pytest
from typer.testing import CliRunner

import topic_todo.cli as cli
from conftest import RecordingRenderer, ScriptedKeys, keys_of
from topic_todo.errors import NavigationError, PoisonedLock, TopicNotFound

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated(settings, monkeypatch):
    """Run every CLI test in tmp_path with root logging restored afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    monkeypatch.setenv("TODO_LOG_DIR", str(settings.TODO_LOG_DIR))
    yield
    for h in root.handlers:
        h.close()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def todo_file(tmp_path):
    path = tmp_path / "todos.json"
    path.write_text(json.dumps({"Work": ["0Buy milk"]}), encoding="utf-8")
    return path


def _fake_terminal(script):
    def _run(store, path, settings):
        cli.run_session(store, path, settings, RecordingRenderer(), ScriptedKeys(script))
    return _run


def test_session_saves_on_quit(todo_file, monkeypatch):
    script = keys_of("ts", 9, 27, 27, "q")
    monkeypatch.setattr(cli, "_run_terminal", _fake_terminal(script))

    result = runner.invoke(cli.app, [str(todo_file)])

    assert result.exit_code == cli.ExitCode.OK
    assert json.loads(todo_file.read_text(encoding="utf-8")) == {"Work": ["1Buy milk"]}


def test_missing_argument_is_usage_error():
    result = runner.invoke(cli.app, [])
    assert result.exit_code == cli.ExitCode.USAGE


def test_missing_file_is_load_error(tmp_path, monkeypatch):
    monkeypatch.setattr(cli, "_run_terminal", lambda *a: pytest.fail("should not start"))
    result = runner.invoke(cli.app, [str(tmp_path / "nope.json")])
    assert result.exit_code == cli.ExitCode.LOAD


def test_malformed_file_is_load_error(tmp_path, monkeypatch):
    path = tmp_path / "todos.json"
    path.write_text('{"Work": ["xBad"]}', encoding="utf-8")
    monkeypatch.setattr(cli, "_run_terminal", lambda *a: pytest.fail("should not start"))

    result = runner.invoke(cli.app, [str(path)])

    assert result.exit_code == cli.ExitCode.LOAD


def test_invalid_configuration_is_usage_error(todo_file, monkeypatch):
    monkeypatch.setenv("TODO_COLOR_TODO_BG", "mauve")
    result = runner.invoke(cli.app, [str(todo_file)])
    assert result.exit_code == cli.ExitCode.USAGE


def test_navigation_error_aborts_without_saving(todo_file, monkeypatch):
    def _run(store, path, settings):
        raise NavigationError("topics", ord("d"), TopicNotFound(3, 1))

    monkeypatch.setattr(cli, "_run_terminal", _run)

    result = runner.invoke(cli.app, [str(todo_file)])

    assert result.exit_code == cli.ExitCode.RUNTIME
    assert json.loads(todo_file.read_text(encoding="utf-8")) == {"Work": ["0Buy milk"]}


def test_poisoned_store_is_unrecoverable(todo_file, monkeypatch):
    def _run(store, path, settings):
        raise PoisonedLock("poisoned")

    monkeypatch.setattr(cli, "_run_terminal", _run)

    result = runner.invoke(cli.app, [str(todo_file)])

    assert result.exit_code == cli.ExitCode.UNRECOVERABLE


def test_unexpected_error_exits_runtime(todo_file, monkeypatch):
    def _run(store, path, settings):
        raise RuntimeError("bug")

    monkeypatch.setattr(cli, "_run_terminal", _run)

    result = runner.invoke(cli.app, [str(todo_file)])

    assert result.exit_code == cli.ExitCode.RUNTIME


def test_keyboard_interrupt(todo_file, monkeypatch):
    def _run(store, path, settings):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "_run_terminal", _run)

    result = runner.invoke(cli.app, [str(todo_file)])

    assert result.exit_code == cli.ExitCode.INTERRUPTED
