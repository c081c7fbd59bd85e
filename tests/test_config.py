# -*- coding: utf-8 -*-
"""Tests for settings persistence and path configuration."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from thememanager.config import (
    ConfigError,
    SettingsStore,
    get_default_settings,
    load_app_paths,
    load_settings,
    save_settings,
    validate_settings,
)
from thememanager.constants import APP_VERSION, DEFAULT_SDCARD_ROOT


def test_default_settings() -> None:
    assert get_default_settings() == {"auto_backup": False, "version": APP_VERSION}


def test_missing_file_is_created_with_defaults(tmp_path: Path) -> None:
    target = tmp_path / "settings.json"
    loaded = load_settings(target)
    assert loaded["auto_backup"] is False
    assert json.loads(target.read_text(encoding="utf-8")) == loaded


def test_unparsable_file_falls_back_to_defaults(tmp_path: Path) -> None:
    target = tmp_path / "settings.json"
    target.write_text("{not json", encoding="utf-8")
    assert load_settings(target) == get_default_settings()
    assert target.read_text(encoding="utf-8") == "{not json"


def test_invalid_value_falls_back_to_defaults(tmp_path: Path) -> None:
    target = tmp_path / "settings.json"
    target.write_text(json.dumps({"auto_backup": "yes"}), encoding="utf-8")
    assert load_settings(target) == get_default_settings()


def test_unknown_keys_are_dropped(tmp_path: Path) -> None:
    target = tmp_path / "settings.json"
    target.write_text(json.dumps({"auto_backup": True, "legacy": 1}), encoding="utf-8")
    assert load_settings(target) == {"auto_backup": True, "version": APP_VERSION}


def test_validate_rejects_bad_types() -> None:
    with pytest.raises(ConfigError):
        validate_settings({"auto_backup": 1, "version": "1.0.0"})
    with pytest.raises(ConfigError):
        validate_settings({"auto_backup": False, "version": ""})


def test_save_is_atomic_and_leaves_no_temp_file(tmp_path: Path) -> None:
    target = tmp_path / "settings.json"
    save_settings({"auto_backup": True, "version": "1.0.0"}, target)
    assert json.loads(target.read_text(encoding="utf-8"))["auto_backup"] is True
    assert not (tmp_path / "settings.json.tmp").exists()


def test_store_writes_through_on_every_change(tmp_path: Path) -> None:
    target = tmp_path / "settings.json"
    store = SettingsStore(target)
    store.set_auto_backup(True)
    assert json.loads(target.read_text(encoding="utf-8"))["auto_backup"] is True
    assert SettingsStore(target).auto_backup is True

    store.set_auto_backup(False)
    assert SettingsStore(target).auto_backup is False


def test_app_paths_default_to_device_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("THEME_MANAGER_SDCARD", raising=False)
    monkeypatch.delenv("THEME_MANAGER_CATALOG_SOURCE", raising=False)
    paths = load_app_paths(tmp_path)
    assert paths.base_dir == tmp_path
    assert paths.sdcard_root == Path(DEFAULT_SDCARD_ROOT)
    assert paths.themes_dir == tmp_path / "Themes"
    assert paths.accent_settings_file == Path(DEFAULT_SDCARD_ROOT) / ".userdata" / "shared" / "minuisettings.txt"


def test_app_paths_read_env_file_and_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("THEME_MANAGER_SDCARD", raising=False)
    (tmp_path / ".env").write_text(
        '# device\nTHEME_MANAGER_SDCARD="/tmp/fake-sd"\nTHEME_MANAGER_CATALOG_SOURCE=/tmp/from-file\n',
        encoding="utf-8",
    )
    monkeypatch.setenv("THEME_MANAGER_CATALOG_SOURCE", "/tmp/from-env")
    paths = load_app_paths(tmp_path)
    assert paths.sdcard_root == Path("/tmp/fake-sd")
    assert paths.catalog_source == Path("/tmp/from-env")
