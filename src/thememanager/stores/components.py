# -*- coding: utf-8 -*-
"""Import, export and convert component packs."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from thememanager.config import AppPaths
from thememanager.constants import MANIFEST_FILE, PREVIEW_FILE
from thememanager.errors import OperationError
from thememanager.models.component import SELECTABLE_COMPONENTS, ComponentType
from thememanager.models.manifest import PackManifest
from thememanager.stores.catalog import read_manifest
from thememanager.stores.system_layout import SystemLayout
from thememanager.utils.file_utils import copy_file, copy_tree, remove_path

logger = logging.getLogger(__name__)

EXPORT_PREFIXES = {
    ComponentType.FULL_THEME: "theme",
    ComponentType.ACCENT: "accent",
    ComponentType.LED: "led",
    ComponentType.WALLPAPER: "wallpaper",
    ComponentType.ICON: "icon",
    ComponentType.FONT: "font",
}


class ComponentStore:
    def __init__(self, paths: AppPaths, layout: SystemLayout) -> None:
        self.paths = paths
        self.layout = layout

    def imports_dir(self, component: ComponentType) -> Path:
        return self.paths.component_dir(component.dirname) / "Imports"

    def exports_dir(self, component: ComponentType) -> Path:
        return self.paths.component_dir(component.dirname) / "Exports"

    def list_importable(self, component: ComponentType) -> list[str]:
        directory = self.imports_dir(component)
        if not directory.is_dir():
            return []
        return sorted(
            child.name
            for child in directory.iterdir()
            if child.is_dir() and child.suffix == component.extension
        )

    def import_pack(
        self,
        component: ComponentType,
        item: str,
        selected: Sequence[ComponentType] = (),
    ) -> list[ComponentType]:
        """Install a pack from <Type>/Imports onto the device."""
        pack_dir = self.imports_dir(component) / item
        if not pack_dir.is_dir():
            raise OperationError(f"{component.label} '{item}' not found")

        targets = list(selected) if component is ComponentType.FULL_THEME else [component]
        if not targets:
            raise OperationError("No components selected")

        installed = []
        for target in targets:
            content_dir = pack_dir / target.content_dir
            if not content_dir.is_dir():
                logger.info("%s has no %s, skipping", item, target.plural)
                continue
            self.layout.install(target, content_dir)
            installed.append(target)
        if not installed:
            raise OperationError(f"'{item}' contains none of the selected components")
        logger.info("Imported %s from %s", [c.plural for c in installed], item)
        return installed

    def next_export_names(self, component: ComponentType, count: int = 3) -> list[str]:
        """Sequential names (`theme_1`, `theme_2`, ...) not used in Exports yet."""
        prefix = EXPORT_PREFIXES[component]
        directory = self.exports_dir(component)
        names: list[str] = []
        index = 1
        while len(names) < count:
            name = f"{prefix}_{index}"
            if not (directory / f"{name}{component.extension}").exists():
                names.append(name)
            index += 1
        return names

    def export_pack(
        self,
        component: ComponentType,
        name: str,
        selected: Sequence[ComponentType] = (),
    ) -> Path:
        """Capture the device's current state into <Type>/Exports/<name><ext>."""
        targets = list(selected) if component is ComponentType.FULL_THEME else [component]
        if not targets:
            raise OperationError("No components selected")
        dest = self.exports_dir(component) / f"{name}{component.extension}"
        if dest.exists():
            raise OperationError(f"Export '{dest.name}' already exists")

        content: dict[str, object] = {}
        try:
            for target in targets:
                count = self.layout.collect(target, dest / target.content_dir)
                content[target.content_dir.lower()] = count > 0
            if not any(content.values()):
                raise OperationError("Nothing to export: no matching files on the device")
            wallpaper = dest / ComponentType.WALLPAPER.content_dir / "bg.png"
            if wallpaper.is_file():
                copy_file(wallpaper, dest / PREVIEW_FILE)
            PackManifest.create(name, **content).save(dest / MANIFEST_FILE)
        except (OperationError, OSError):
            remove_path(dest)
            raise
        logger.info("Exported %s to %s", component.label, dest)
        return dest

    def list_convertible(self) -> list[str]:
        directory = self.paths.themes_dir
        if not directory.is_dir():
            return []
        return sorted(
            child.stem
            for child in directory.iterdir()
            if child.is_dir() and child.suffix == ComponentType.FULL_THEME.extension
        )

    def convert(self, theme: str, selected: Sequence[ComponentType]) -> list[str]:
        """Split an installed theme into standalone packs under <Type>/Imports."""
        theme_dir = self.paths.themes_dir / f"{theme}{ComponentType.FULL_THEME.extension}"
        if not theme_dir.is_dir():
            raise OperationError(f"Theme '{theme}' not found")
        if not selected:
            raise OperationError("No components selected")

        manifest = read_manifest(theme_dir)
        created: list[str] = []
        for component in SELECTABLE_COMPONENTS:
            content_dir = theme_dir / component.content_dir
            if component not in selected or not content_dir.is_dir():
                continue
            dest = self.imports_dir(component) / f"{theme}{component.extension}"
            remove_path(dest)
            copy_tree(content_dir, dest / component.content_dir)
            pack_manifest = PackManifest.create(manifest.name, **{component.content_dir.lower(): True})
            pack_manifest.author = manifest.author
            pack_manifest.save(dest / MANIFEST_FILE)
            created.append(dest.name)
        if not created:
            raise OperationError(f"Theme '{theme}' has none of the selected components")
        logger.info("Converted %s into %s", theme, created)
        return created
