# -*- coding: utf-8 -*-
"""Where each component lives on the device, and how to copy it in and out."""

from __future__ import annotations

import logging
from pathlib import Path

from thememanager.config import AppPaths
from thememanager.constants import ACCENT_KEYS, FONT_SLOTS
from thememanager.errors import OperationError
from thememanager.models.component import ComponentType
from thememanager.utils.file_utils import (
    clear_directory,
    copy_file,
    copy_tree,
    ensure_dir,
    read_key_values,
    update_key_values,
    write_text_atomic,
)

logger = logging.getLogger(__name__)

WALLPAPER_PATTERNS = (
    "bg.png",
    ".media/bg.png",
    "Roms/*/.media/bg.png",
    "Roms/*/.media/bglist.png",
    "Collections/.media/bg.png",
    "Collections/*/.media/bg.png",
    "Recently Played/.media/bg.png",
    "Tools/*/.media/bg.png",
)
ICON_PATTERNS = (
    ".media/*.png",
    "Roms/.media/*.png",
    "Collections/.media/*.png",
    "Tools/.media/*.png",
    "Tools/*/.media/*.png",
)
WALLPAPER_NAMES = {"bg.png", "bglist.png"}

ACCENT_FILE = "accents.txt"
LED_FILE = "ledsettings_brick.txt"
FONT_BACKUP_SUFFIX = ".backup.ttf"


def font_backup_path(target: Path) -> Path:
    """font1.ttf -> font1.backup.ttf"""
    return target.with_name(target.stem + FONT_BACKUP_SUFFIX)


class SystemLayout:
    """Collect, install and clear components on the device file system."""

    def __init__(self, paths: AppPaths) -> None:
        self.paths = paths

    def current_files(self, component: ComponentType) -> list[tuple[Path, Path]]:
        """Return (absolute, relative) pairs for files currently on the device."""
        if component is ComponentType.WALLPAPER:
            return self._glob(self.paths.sdcard_root, WALLPAPER_PATTERNS)
        if component is ComponentType.ICON:
            return [
                pair
                for pair in self._glob(self.paths.sdcard_root, ICON_PATTERNS)
                if pair[0].name not in WALLPAPER_NAMES
            ]
        if component is ComponentType.FONT:
            res_dir = self.paths.system_res_dir
            return [(res_dir / name, Path(name)) for name in FONT_SLOTS.values() if (res_dir / name).is_file()]
        if component is ComponentType.LED:
            led_file = self.paths.led_settings_file
            return [(led_file, Path(LED_FILE))] if led_file.is_file() else []
        if component is ComponentType.ACCENT:
            accent_file = self.paths.accent_settings_file
            return [(accent_file, Path(ACCENT_FILE))] if accent_file.is_file() else []
        raise ValueError(f"{component.name} has no device location")

    @staticmethod
    def _glob(root: Path, patterns: tuple[str, ...]) -> list[tuple[Path, Path]]:
        found: dict[Path, Path] = {}
        for pattern in patterns:
            for match in root.glob(pattern):
                if match.is_file():
                    found[match] = match.relative_to(root)
        return sorted(found.items())

    def collect(self, component: ComponentType, dest_dir: Path) -> int:
        """Copy the device's current files for `component` into `dest_dir`."""
        ensure_dir(dest_dir)
        if component is ComponentType.ACCENT:
            if not self.paths.accent_settings_file.is_file():
                return 0
            values = read_key_values(self.paths.accent_settings_file)
            lines = [f"{key}={values[key]}" for key in ACCENT_KEYS if key in values]
            if not lines:
                return 0
            write_text_atomic(dest_dir / ACCENT_FILE, "\n".join(lines) + "\n")
            return 1

        count = 0
        for absolute, relative in self.current_files(component):
            copy_file(absolute, dest_dir / relative)
            count += 1
        logger.debug("Collected %d %s file(s) into %s", count, component.plural, dest_dir)
        return count

    def install(self, component: ComponentType, source_dir: Path) -> int:
        """Copy a component's content directory onto the device."""
        if not source_dir.is_dir():
            raise OperationError(f"Missing {component.plural} content: {source_dir}")

        if component in (ComponentType.WALLPAPER, ComponentType.ICON):
            written = copy_tree(source_dir, self.paths.sdcard_root)
            count = len(written)
        elif component is ComponentType.FONT:
            count = 0
            for slot_file in FONT_SLOTS.values():
                source = source_dir / slot_file
                if source.is_file():
                    self.install_font_file(source, self.paths.system_res_dir / slot_file)
                    count += 1
        elif component is ComponentType.ACCENT:
            source = source_dir / ACCENT_FILE
            if not source.is_file():
                raise OperationError(f"Missing {ACCENT_FILE} in {source_dir}")
            values = read_key_values(source)
            updates = {key: values[key] for key in ACCENT_KEYS if key in values}
            update_key_values(self.paths.accent_settings_file, updates)
            count = len(updates)
        elif component is ComponentType.LED:
            source = source_dir / LED_FILE
            if not source.is_file():
                raise OperationError(f"Missing {LED_FILE} in {source_dir}")
            copy_file(source, self.paths.led_settings_file)
            count = 1
        else:
            raise ValueError(f"{component.name} has no device location")

        logger.info("Installed %d %s item(s) from %s", count, component.plural, source_dir)
        return count

    def clear(self, component: ComponentType) -> int:
        """Remove image files replaced wholesale on revert; other components are overwritten."""
        if component not in (ComponentType.WALLPAPER, ComponentType.ICON):
            return 0
        removed = 0
        for absolute, _relative in self.current_files(component):
            absolute.unlink()
            removed += 1
        return removed

    def install_font_file(self, source: Path, target: Path) -> None:
        """Replace a system font, keeping the first original as *.backup.ttf."""
        backup = font_backup_path(target)
        if target.is_file() and not backup.exists():
            copy_file(target, backup)
            logger.info("Backed up system font %s -> %s", target.name, backup.name)
        copy_file(source, target)

    def collect_overlays(self, dest_dir: Path) -> int:
        source = self.paths.system_overlays_dir
        ensure_dir(dest_dir)
        if not source.is_dir():
            return 0
        return len(copy_tree(source, dest_dir))

    def install_overlays(self, systems_dir: Path, system: str = "") -> int:
        """Copy Systems/<TAG>/ folders to the device, optionally one tag only."""
        if not systems_dir.is_dir():
            raise OperationError(f"Overlay pack has no Systems folder: {systems_dir}")
        tags = [system] if system else sorted(child.name for child in systems_dir.iterdir() if child.is_dir())
        count = 0
        for tag in tags:
            tag_dir = systems_dir / tag
            if not tag_dir.is_dir():
                raise OperationError(f"Overlay pack has no files for system {tag}")
            count += len(copy_tree(tag_dir, self.paths.system_overlays_dir / tag))
        return count

    def clear_overlays(self) -> None:
        clear_directory(self.paths.system_overlays_dir)
