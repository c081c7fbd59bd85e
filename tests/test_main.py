# -*- coding: utf-8 -*-
"""Tests for the application entry point and the CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

import thememanager.main as main_module
from conftest import make_theme
from thememanager.cli.manager_cli import app
from thememanager.config import SettingsStore
from thememanager.utils.logger import CRASH_LOG_NAME

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("THEME_MANAGER_HOME", "THEME_MANAGER_SDCARD", "THEME_MANAGER_CATALOG_SOURCE"):
        monkeypatch.delenv(key, raising=False)
    sdcard = tmp_path / "sdcard"
    sdcard.mkdir()
    monkeypatch.setenv("THEME_MANAGER_SDCARD", str(sdcard))
    monkeypatch.setattr(main_module, "setup_session_logging", lambda logs_dir, app_name: None)


def test_main_without_presenter_binaries_exits_2(tmp_path: Path) -> None:
    home = tmp_path / "app"
    assert main_module.main(home) == 2
    assert (home / "Themes").is_dir()


def test_main_writes_crash_report(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def explode(paths):
        raise RuntimeError("boom")

    monkeypatch.setattr(main_module, "run_app", explode)
    home = tmp_path / "app"

    assert main_module.main(home) == 1
    crash_log = home / "Logs" / CRASH_LOG_NAME
    assert "RuntimeError: boom" in crash_log.read_text(encoding="utf-8")


def test_main_interrupt_exits_130(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def interrupt(paths):
        raise KeyboardInterrupt

    monkeypatch.setattr(main_module, "run_app", interrupt)
    assert main_module.main(tmp_path / "app") == 130


def test_cli_auto_backup_on_and_show(tmp_path: Path) -> None:
    home = tmp_path / "app"

    result = runner.invoke(app, ["auto-backup", "on", "--home", str(home)])
    assert result.exit_code == 0
    assert "Auto-backup enabled" in result.output
    assert SettingsStore(home / "settings.json").auto_backup is True

    shown = runner.invoke(app, ["auto-backup", "--home", str(home)])
    assert shown.exit_code == 0
    assert json.loads(shown.output)["auto_backup"] is True


def test_cli_auto_backup_rejects_unknown_state(tmp_path: Path) -> None:
    result = runner.invoke(app, ["auto-backup", "maybe", "--home", str(tmp_path / "app")])
    assert result.exit_code == 2


def test_cli_sync_copies_catalog(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = tmp_path / "source"
    make_theme(source / "Themes", "Dark")
    monkeypatch.setenv("THEME_MANAGER_CATALOG_SOURCE", str(source))
    home = tmp_path / "app"

    result = runner.invoke(app, ["sync", "--home", str(home)])

    assert result.exit_code == 0
    assert "Synced 1 pack(s)" in result.output
    assert (home / "Catalog" / "Themes" / "Dark.theme").is_dir()


def test_cli_sync_without_source_fails(tmp_path: Path) -> None:
    result = runner.invoke(app, ["sync", "--home", str(tmp_path / "app")])
    assert result.exit_code == 1


def test_cli_diagnose_reports_missing_binaries(tmp_path: Path) -> None:
    result = runner.invoke(app, ["diagnose", "--home", str(tmp_path / "app")])

    assert result.exit_code == 1
    report = json.loads(result.output)
    assert report["status"] == "error"
    assert any(error.startswith("presenter_binaries") for error in report["errors"])
