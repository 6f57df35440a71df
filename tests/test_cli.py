# tests/test_cli.py

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from pomotree import __version__
from pomotree.config import EXPORT_ENV, HOME_ENV
from pomotree.interfaces.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(HOME_ENV, raising=False)
    monkeypatch.delenv(EXPORT_ENV, raising=False)


def invoke(config_dir: Path, *args: str):
    return runner.invoke(app, ["--config-dir", str(config_dir), *args])


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"pomotree version {__version__}" in result.stdout


def test_add_then_status(config_dir: Path) -> None:
    result = invoke(config_dir, "add", "Write report")
    assert result.exit_code == 0, result.output
    assert "Added task 1: Write report" in result.stdout

    result = invoke(config_dir, "status")
    assert result.exit_code == 0, result.output
    assert "Progress: 0/1 tasks complete" in result.stdout
    assert "Work | 25:00 | Stopped | Cycles: 0 | 0%" in result.stdout
    assert "[ ] Write report" in result.stdout


def test_add_writes_state_and_export(config_dir: Path) -> None:
    invoke(config_dir, "add", "  First  ")
    invoke(config_dir, "add", "Second")

    state = json.loads((config_dir / "state.json").read_text(encoding="utf-8"))
    assert [t["title"] for t in state["tasks"]] == ["First", "Second"]
    assert state["next_task_id"] == 3
    assert (config_dir / "tasks.txt").read_text(encoding="utf-8") == "[ ] First\n[ ] Second\n"


def test_add_blank_title_fails(config_dir: Path) -> None:
    result = invoke(config_dir, "add", "   ")
    assert result.exit_code == 1
    assert not (config_dir / "state.json").exists()


def test_export(config_dir: Path) -> None:
    result = invoke(config_dir, "export")
    assert result.exit_code == 0, result.output
    assert "Exported to" in result.stdout
    assert (config_dir / "tasks.txt").read_text(encoding="utf-8") == "No tasks yet.\n"


def test_export_env_adds_extra_copy(
    config_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    extra = tmp_path / "todo.txt"
    monkeypatch.setenv(EXPORT_ENV, str(extra))
    invoke(config_dir, "add", "Shared")
    assert extra.read_text(encoding="utf-8") == "[ ] Shared\n"


def test_config_dir_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    home = tmp_path / "home"
    monkeypatch.setenv(HOME_ENV, str(home))
    result = runner.invoke(app, ["add", "From env"])
    assert result.exit_code == 0, result.output
    assert (home / "state.json").exists()
