# -*- coding: utf-8 -*-
"""Settings persistence, validation and application paths."""

from __future__ import annotations

import json
import logging
import os
from copy import deepcopy
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from thememanager.constants import APP_VERSION, DEFAULT_SDCARD_ROOT, DEFAULT_SETTINGS_FILE
from thememanager.utils.file_utils import read_json_file, write_json_file


logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = {
    "auto_backup": False,
    "version": APP_VERSION,
}

ENV_HOME = "THEME_MANAGER_HOME"
ENV_SDCARD = "THEME_MANAGER_SDCARD"
ENV_CATALOG_SOURCE = "THEME_MANAGER_CATALOG_SOURCE"


class ConfigError(ValueError):
    """Raised when settings are invalid."""


def get_default_settings() -> dict[str, Any]:
    """Return a deep copy of the default settings."""
    return deepcopy(DEFAULT_SETTINGS)


def _load_env_file(env_path: Path) -> dict[str, str]:
    """Load a simple .env file (KEY=VALUE)."""
    values: dict[str, str] = {}
    if not env_path.exists():
        return values

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if (value.startswith('"') and value.endswith('"')) or (
            value.startswith("'") and value.endswith("'")
        ):
            value = value[1:-1]
        values[key] = value
    return values


def validate_settings(settings: dict[str, Any]) -> None:
    """Validate the persisted settings record."""
    if not isinstance(settings.get("auto_backup"), bool):
        raise ConfigError("auto_backup must be a boolean")
    version = settings.get("version")
    if not isinstance(version, str) or not version.strip():
        raise ConfigError("version must be a non-empty string")


def load_settings(path: str | Path | None = None) -> dict[str, Any]:
    """Load settings from JSON, falling back to defaults.

    A missing file is created with the defaults. A file that cannot be parsed
    or fails validation is left untouched and the defaults are returned.
    """
    settings_path = Path(path or DEFAULT_SETTINGS_FILE)
    if not settings_path.exists():
        defaults = get_default_settings()
        save_settings(defaults, settings_path)
        logger.info("Created default settings file: %s", settings_path)
        return defaults

    try:
        loaded = read_json_file(settings_path)
    except (OSError, ValueError) as exc:
        logger.warning("Unreadable settings file %s (%s), using defaults", settings_path, exc)
        return get_default_settings()

    merged = get_default_settings()
    merged.update({key: value for key, value in loaded.items() if key in DEFAULT_SETTINGS})
    try:
        validate_settings(merged)
    except ConfigError as exc:
        logger.warning("Invalid settings in %s (%s), using defaults", settings_path, exc)
        return get_default_settings()
    return merged


def save_settings(settings: dict[str, Any], path: str | Path | None = None) -> Path:
    """Validate and atomically rewrite the settings file."""
    validate_settings(settings)
    settings_path = Path(path or DEFAULT_SETTINGS_FILE)
    tmp_path = settings_path.with_name(settings_path.name + ".tmp")
    write_json_file(tmp_path, settings)
    os.replace(tmp_path, settings_path)
    return settings_path


class SettingsStore:
    """In-memory settings with write-through persistence."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._settings = load_settings(self.path)

    @property
    def auto_backup(self) -> bool:
        return bool(self._settings["auto_backup"])

    @property
    def version(self) -> str:
        return str(self._settings["version"])

    def set_auto_backup(self, enabled: bool) -> None:
        updated = dict(self._settings)
        updated["auto_backup"] = bool(enabled)
        save_settings(updated, self.path)
        self._settings = updated
        logger.info("Auto-backup set to %s", enabled)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._settings)


@dataclass(frozen=True)
class AppPaths:
    """Directories owned by the app plus the device locations it writes to."""

    base_dir: Path
    sdcard_root: Path
    catalog_source: Path

    @property
    def settings_file(self) -> Path:
        return self.base_dir / DEFAULT_SETTINGS_FILE

    @property
    def themes_dir(self) -> Path:
        return self.base_dir / "Themes"

    @property
    def overlays_dir(self) -> Path:
        return self.base_dir / "Overlays"

    @property
    def backups_dir(self) -> Path:
        return self.base_dir / "Backups"

    @property
    def catalog_dir(self) -> Path:
        return self.base_dir / "Catalog"

    @property
    def logs_dir(self) -> Path:
        return self.base_dir / "Logs"

    @property
    def cache_dir(self) -> Path:
        return self.base_dir / ".cache"

    @property
    def accents_dir(self) -> Path:
        return self.base_dir / "Accents"

    @property
    def fonts_dir(self) -> Path:
        return self.base_dir / "Fonts"

    @property
    def icons_dir(self) -> Path:
        return self.base_dir / "Icons"

    def component_dir(self, dirname: str) -> Path:
        return self.base_dir / dirname

    @property
    def system_res_dir(self) -> Path:
        return self.sdcard_root / ".system" / "res"

    @property
    def shared_userdata_dir(self) -> Path:
        return self.sdcard_root / ".userdata" / "shared"

    @property
    def accent_settings_file(self) -> Path:
        return self.shared_userdata_dir / "minuisettings.txt"

    @property
    def led_settings_file(self) -> Path:
        return self.shared_userdata_dir / "ledsettings_brick.txt"

    @property
    def system_overlays_dir(self) -> Path:
        return self.sdcard_root / "Overlays"

    def as_dict(self) -> dict[str, str]:
        return {
            "base_dir": str(self.base_dir),
            "sdcard_root": str(self.sdcard_root),
            "catalog_source": str(self.catalog_source),
            "settings_file": str(self.settings_file),
            "logs_dir": str(self.logs_dir),
        }


def load_app_paths(base_dir: str | Path | None = None) -> AppPaths:
    """Resolve application paths from the environment and an optional .env file."""
    env_values = dict(os.environ)
    home = Path(base_dir or env_values.get(ENV_HOME) or Path.cwd())
    file_values = _load_env_file(home / ".env")
    merged = {**file_values, **{key: value for key, value in env_values.items() if key.startswith("THEME_MANAGER_")}}

    sdcard_root = Path(merged.get(ENV_SDCARD, "").strip() or DEFAULT_SDCARD_ROOT)
    catalog_source = Path(merged.get(ENV_CATALOG_SOURCE, "").strip() or home / "Resources" / "Catalog")
    return AppPaths(base_dir=home, sdcard_root=sdcard_root, catalog_source=catalog_source)


def dump_settings(settings: dict[str, Any]) -> str:
    """Render settings for the CLI."""
    return json.dumps(settings, indent=2, sort_keys=True)
