# -*- coding: utf-8 -*-
"""Icon packs stored under Icons/<name>.icon."""

from __future__ import annotations

from thememanager.config import AppPaths
from thememanager.errors import OperationError
from thememanager.models.component import ComponentType
from thememanager.stores.system_layout import SystemLayout

ICON = ComponentType.ICON


class IconStore:
    def __init__(self, paths: AppPaths, layout: SystemLayout) -> None:
        self.paths = paths
        self.layout = layout

    def list_packs(self) -> list[str]:
        if not self.paths.icons_dir.is_dir():
            return []
        return sorted(
            child.stem
            for child in self.paths.icons_dir.iterdir()
            if child.is_dir() and child.suffix == ICON.extension
        )

    def apply(self, name: str) -> int:
        pack_dir = self.paths.icons_dir / f"{name}{ICON.extension}"
        if not pack_dir.is_dir():
            raise OperationError(f"Icon pack '{name}' not found")
        return self.layout.install(ICON, pack_dir / ICON.content_dir)
