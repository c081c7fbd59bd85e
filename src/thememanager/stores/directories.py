# -*- coding: utf-8 -*-
"""Directory layout owned by the app."""

from __future__ import annotations

import logging
from pathlib import Path

from thememanager.config import AppPaths
from thememanager.models.component import ComponentType
from thememanager.utils.file_utils import ensure_dir

logger = logging.getLogger(__name__)


def app_directories(paths: AppPaths) -> list[Path]:
    directories = [
        paths.themes_dir,
        paths.overlays_dir,
        paths.backups_dir / "Themes",
        paths.backups_dir / "Overlays",
        paths.catalog_dir / "Themes",
        paths.catalog_dir / "Overlays",
        paths.accents_dir / "Presets",
        paths.accents_dir / "Custom",
        paths.component_dir(ComponentType.LED.dirname) / "Presets",
        paths.component_dir(ComponentType.LED.dirname) / "Custom",
        paths.logs_dir,
        paths.cache_dir,
    ]
    for component in ComponentType:
        component_dir = paths.component_dir(component.dirname)
        directories += [component_dir / "Imports", component_dir / "Exports"]
    return directories


def ensure_directory_structure(paths: AppPaths) -> list[Path]:
    """Create missing app directories and return the ones that were created."""
    created: list[Path] = []
    for directory in app_directories(paths):
        if not directory.is_dir():
            ensure_dir(directory)
            created.append(directory)
    if created:
        logger.info("Created %d app director(ies)", len(created))
    return created
