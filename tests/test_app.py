"""Tests for the interactive loop and the command-line entry point."""

import io
import json

import pytest
from rich.console import Console

import cli
from store.collection import ProjectCollection
from store.models import Project
from ui_service.app import run
from ui_service.handlers import Session
from ui_service.render import Renderer


class ScriptedKeys:
    """Key reader replaying a fixed list of keys."""

    def __init__(self, keys, when_done=None):
        self._keys = list(keys)
        self._when_done = when_done
        self.entered = False
        self.exited = False

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exited = True

    def read_key(self):
        if not self._keys:
            raise self._when_done or AssertionError("ran out of keys")
        return self._keys.pop(0)


class RecordingRenderer(Renderer):
    """Renderer that remembers the status message of every frame."""

    def __init__(self):
        super().__init__()
        self.statuses = []

    def render(self, ui_state, projects):
        self.statuses.append(ui_state.status_message)
        return super().render(ui_state, projects)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=80)


def test_run_quits_with_zero(session, console) -> None:
    keys = ScriptedKeys(["n", "A", "enter", "q"])

    status = run(session, Renderer(), key_reader=keys, console=console)

    assert status == 0
    assert keys.entered and keys.exited
    assert [p.name for p in session.projects.projects] == ["A"]


def test_run_skips_unknown_keys(session, console) -> None:
    keys = ScriptedKeys([None, "n", None, "B", "enter", "ctrl+c"])

    assert run(session, Renderer(), key_reader=keys, console=console) == 0
    assert [p.name for p in session.projects.projects] == ["B"]


def test_status_message_shown_once(populated_session, console) -> None:
    renderer = RecordingRenderer()
    keys = ScriptedKeys(["enter", "enter", "enter", "down", "q"])

    run(populated_session, renderer, key_reader=keys, console=console)

    assert renderer.statuses.count("Copied #1ABC9C to clipboard!") == 1
    assert renderer.statuses[-1] == ""


def test_run_exits_cleanly_on_interrupt(session, console) -> None:
    keys = ScriptedKeys(["n"], when_done=KeyboardInterrupt())

    assert run(session, Renderer(), key_reader=keys, console=console) == 0
    assert keys.exited


def test_run_exits_cleanly_on_eof(session, console) -> None:
    keys = ScriptedKeys([], when_done=EOFError("stdin closed"))
    assert run(session, Renderer(), key_reader=keys, console=console) == 0


def test_main_exits_nonzero_on_parse_error(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setenv("DIAMONDS_CONFIG_DIR", str(tmp_path))
    (tmp_path / "data.json").write_text("{broken", encoding="utf-8")
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)

    with pytest.raises(SystemExit) as excinfo:
        cli.main()

    assert excinfo.value.code == 1
    assert "Error loading projects" in capsys.readouterr().err


def test_main_exits_nonzero_on_config_path_error(monkeypatch, tmp_path, capsys) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    monkeypatch.setenv("DIAMONDS_CONFIG_DIR", str(blocker / "diamonds"))

    with pytest.raises(SystemExit) as excinfo:
        cli.main()

    assert excinfo.value.code == 1
    assert "Error getting data path" in capsys.readouterr().err


def test_main_runs_with_loaded_projects(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("DIAMONDS_CONFIG_DIR", str(tmp_path))
    (tmp_path / "data.json").write_text(
        json.dumps([Project(name="Branding", colors=["#FFF"]).to_dict()]),
        encoding="utf-8",
    )
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)
    seen = {}

    def fake_run(session, renderer):
        seen["projects"] = session.projects
        seen["renderer"] = renderer
        return 0

    monkeypatch.setattr(cli, "run", fake_run)

    with pytest.raises(SystemExit) as excinfo:
        cli.main()

    assert excinfo.value.code == 0
    assert isinstance(seen["projects"], ProjectCollection)
    assert seen["projects"][0].colors == ["#FFF"]
    assert isinstance(seen["renderer"], Renderer)


def test_main_exits_nonzero_on_undecodable_data(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setenv("DIAMONDS_CONFIG_DIR", str(tmp_path))
    (tmp_path / "data.json").write_bytes(b"\xff[]")
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)

    with pytest.raises(SystemExit) as excinfo:
        cli.main()

    assert excinfo.value.code == 1
    assert "Error loading projects" in capsys.readouterr().err


def test_main_exits_nonzero_when_log_file_cannot_open(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setenv("DIAMONDS_CONFIG_DIR", str(tmp_path))
    (tmp_path / "diamonds.log").mkdir()

    with pytest.raises(SystemExit) as excinfo:
        cli.main()

    assert excinfo.value.code == 1
    assert "Error opening log file" in capsys.readouterr().err
