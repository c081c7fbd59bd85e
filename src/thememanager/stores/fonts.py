# -*- coding: utf-8 -*-
"""System font replacement with a one-time backup of the original."""

from __future__ import annotations

import logging

from thememanager.config import AppPaths
from thememanager.constants import FONT_EXTENSIONS, FONT_SLOTS
from thememanager.errors import OperationError
from thememanager.stores.system_layout import SystemLayout, font_backup_path
from thememanager.utils.file_utils import copy_file

logger = logging.getLogger(__name__)

RESTORE_FONTS = "Restore Original Fonts"


class FontStore:
    def __init__(self, paths: AppPaths, layout: SystemLayout) -> None:
        self.paths = paths
        self.layout = layout

    def list_fonts(self) -> list[str]:
        if not self.paths.fonts_dir.is_dir():
            return []
        return sorted(
            child.name
            for child in self.paths.fonts_dir.iterdir()
            if child.is_file() and child.suffix.lower() in FONT_EXTENSIONS
        )

    def slots(self) -> list[str]:
        return list(FONT_SLOTS)

    def has_backup(self) -> bool:
        return any(font_backup_path(self.paths.system_res_dir / name).is_file() for name in FONT_SLOTS.values())

    def apply(self, font_name: str, slot: str) -> None:
        if slot not in FONT_SLOTS:
            raise OperationError(f"Unknown font slot '{slot}'")
        source = self.paths.fonts_dir / font_name
        if not source.is_file():
            raise OperationError(f"Font '{font_name}' not found")
        self.layout.install_font_file(source, self.paths.system_res_dir / FONT_SLOTS[slot])
        logger.info("Applied font %s to %s slot", font_name, slot)

    def restore(self) -> int:
        restored = 0
        for name in FONT_SLOTS.values():
            target = self.paths.system_res_dir / name
            backup = font_backup_path(target)
            if backup.is_file():
                copy_file(backup, target)
                restored += 1
        if restored == 0:
            raise OperationError("No font backup to restore")
        logger.info("Restored %d original font(s)", restored)
        return restored
