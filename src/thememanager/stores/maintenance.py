# -*- coding: utf-8 -*-
"""Catalog sync and purge."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from thememanager.config import AppPaths
from thememanager.errors import OperationError
from thememanager.models.component import ComponentType
from thememanager.models.pack import PackKind
from thememanager.stores.directories import ensure_directory_structure
from thememanager.stores.system_layout import SystemLayout
from thememanager.utils.file_utils import remove_path

logger = logging.getLogger(__name__)

SYSTEM_FILE_PREFIXES = ("._",)
SYSTEM_FILE_NAMES = {".DS_Store", "Thumbs.db"}


class MaintenanceStore:
    def __init__(self, paths: AppPaths, layout: SystemLayout | None = None) -> None:
        self.paths = paths
        self.layout = layout or SystemLayout(paths)

    def sync_catalog(self) -> int:
        """Mirror the catalog source into Catalog/. Returns the number of packs copied."""
        source_root = self.paths.catalog_source
        if not source_root.is_dir():
            raise OperationError(f"Catalog source not found: {source_root}")

        copied = 0
        for kind in PackKind:
            source_dir = source_root / kind.title
            if not source_dir.is_dir():
                logger.debug("Catalog source has no %s folder", kind.title)
                continue
            target_dir = self.paths.catalog_dir / kind.title
            target_dir.mkdir(parents=True, exist_ok=True)
            for pack in sorted(source_dir.iterdir()):
                if not pack.is_dir() or pack.suffix != kind.extension:
                    continue
                remove_path(target_dir / pack.name)
                shutil.copytree(pack, target_dir / pack.name)
                copied += 1
        logger.info("Synced %d pack(s) from %s", copied, source_root)
        return copied

    def purge(self) -> None:
        """Erase applied device files, installed packs and backups, then rebuild an empty layout."""
        for component in (ComponentType.WALLPAPER, ComponentType.ICON):
            removed = self.layout.clear(component)
            logger.info("Removed %d applied %s file(s) from the device", removed, component.plural)
        self.layout.clear_overlays()
        for directory in (self.paths.themes_dir, self.paths.overlays_dir, self.paths.backups_dir):
            remove_path(directory)
            logger.info("Removed %s", directory)
        removed = self.clean_system_files(self.paths.base_dir)
        ensure_directory_structure(self.paths)
        logger.info("Purge complete (%d system file(s) removed)", removed)

    @staticmethod
    def clean_system_files(root: Path) -> int:
        removed = 0
        for item in list(root.rglob("*")):
            if item.is_file() and (item.name in SYSTEM_FILE_NAMES or item.name.startswith(SYSTEM_FILE_PREFIXES)):
                item.unlink()
                removed += 1
        return removed
