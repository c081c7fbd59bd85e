# -*- coding: utf-8 -*-
"""Reset device wallpapers and icons without going through a theme."""

from __future__ import annotations

import logging
from pathlib import Path

from thememanager.config import AppPaths
from thememanager.errors import OperationError
from thememanager.models.component import ComponentType
from thememanager.stores.system_layout import SystemLayout
from thememanager.utils.file_utils import copy_file
from thememanager.utils.image_utils import render_color_swatch

logger = logging.getLogger(__name__)

RESET_BLACK_BACKGROUNDS = "Overwrite all backgrounds with black"
RESET_DELETE_BACKGROUNDS = "Delete all backgrounds"
RESET_DELETE_ICONS = "Delete all icons"
RESET_OPTIONS = (RESET_BLACK_BACKGROUNDS, RESET_DELETE_BACKGROUNDS, RESET_DELETE_ICONS)

BLACK_BACKGROUND_SIZE = (1024, 768)
FIXED_BACKGROUNDS = ("bg.png", ".media/bg.png", "Recently Played/.media/bg.png", "Tools/.media/bg.png")


class ResetStore:
    def __init__(self, paths: AppPaths, layout: SystemLayout) -> None:
        self.paths = paths
        self.layout = layout

    def background_targets(self) -> list[Path]:
        root = self.paths.sdcard_root
        targets = [root / relative for relative in FIXED_BACKGROUNDS]
        roms_dir = root / "Roms"
        if roms_dir.is_dir():
            targets += [
                system / ".media" / "bg.png"
                for system in sorted(roms_dir.iterdir())
                if system.is_dir() and not system.name.startswith(".")
            ]
        return targets

    def overwrite_backgrounds_black(self) -> int:
        source = render_color_swatch(["#000000"], self.paths.cache_dir / "black_bg.png", BLACK_BACKGROUND_SIZE)
        targets = self.background_targets()
        for target in targets:
            copy_file(source, target)
        logger.info("Wrote a black background to %d location(s)", len(targets))
        return len(targets)

    def delete_backgrounds(self) -> int:
        removed = self.layout.clear(ComponentType.WALLPAPER)
        logger.info("Deleted %d background(s)", removed)
        return removed

    def delete_icons(self) -> int:
        removed = self.layout.clear(ComponentType.ICON)
        logger.info("Deleted %d icon(s)", removed)
        return removed

    def run(self, option: str) -> int:
        actions = {
            RESET_BLACK_BACKGROUNDS: self.overwrite_backgrounds_black,
            RESET_DELETE_BACKGROUNDS: self.delete_backgrounds,
            RESET_DELETE_ICONS: self.delete_icons,
        }
        action = actions.get(option)
        if action is None:
            raise OperationError(f"Unknown reset option '{option}'")
        return action()
