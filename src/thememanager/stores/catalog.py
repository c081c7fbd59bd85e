# -*- coding: utf-8 -*-
"""Themes and overlays: catalog listing, download, apply, backup and revert."""

from __future__ import annotations

import logging
import shutil
from datetime import datetime
from pathlib import Path

from thememanager.config import AppPaths
from thememanager.constants import MANIFEST_FILE, MAX_BACKUPS, PREVIEW_FILE
from thememanager.errors import OperationError
from thememanager.models.component import SELECTABLE_COMPONENTS, ComponentType
from thememanager.models.manifest import PackManifest
from thememanager.models.pack import GalleryItem, PackKind
from thememanager.stores.system_layout import SystemLayout
from thememanager.utils.file_utils import ensure_dir, remove_path
from thememanager.utils.image_utils import is_valid_image

logger = logging.getLogger(__name__)

INSTALLED_PREFIX = "[Installed] "
SYSTEMS_DIR = "Systems"
OVERLAYS_CONTENT_DIR = "Overlays"
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def read_manifest(pack_dir: Path) -> PackManifest:
    """Load a pack's manifest, falling back to its directory name."""
    manifest_path = pack_dir / MANIFEST_FILE
    if manifest_path.is_file():
        try:
            return PackManifest.load(manifest_path)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring manifest of %s: %s", pack_dir.name, exc)
    return PackManifest(name=pack_dir.stem)


def _backup_sort_key(name: str) -> tuple[str, int, str]:
    """Order `<label>_<YYYYmmdd_HHMMSS>[_n]` names by timestamp, then suffix."""
    _label, _, rest = name.partition("_")
    stamp, suffix = rest[:15], rest[16:]
    return stamp, int(suffix) if suffix.isdigit() else 0, name


class PackStore:
    """File operations for one pack kind (themes or overlays)."""

    def __init__(self, paths: AppPaths, kind: PackKind, layout: SystemLayout) -> None:
        self.paths = paths
        self.kind = kind
        self.layout = layout

    @property
    def installed_dir(self) -> Path:
        return self.paths.themes_dir if self.kind is PackKind.THEME else self.paths.overlays_dir

    @property
    def catalog_dir(self) -> Path:
        return self.paths.catalog_dir / self.kind.title

    @property
    def backup_dir(self) -> Path:
        return self.paths.backups_dir / self.kind.title

    def pack_path(self, name: str) -> Path:
        return self.installed_dir / f"{name}{self.kind.extension}"

    def catalog_names(self) -> list[str]:
        if not self.catalog_dir.is_dir():
            return []
        return sorted(
            child.stem
            for child in self.catalog_dir.iterdir()
            if child.is_dir() and child.suffix == self.kind.extension
        )

    def is_downloaded(self, name: str) -> bool:
        return self.pack_path(name).is_dir()

    def list_gallery(self) -> list[GalleryItem]:
        items: list[GalleryItem] = []
        for name in self.catalog_names():
            pack_dir = self.catalog_dir / f"{name}{self.kind.extension}"
            manifest = read_manifest(pack_dir)
            text = manifest.name
            if manifest.author and manifest.author != "Unknown":
                text += f" by {manifest.author}"
            if self.is_downloaded(name):
                text = INSTALLED_PREFIX + text
            preview = pack_dir / PREVIEW_FILE
            items.append(GalleryItem(text=text, value=name, background_image=preview if is_valid_image(preview) else None))
        return items

    def download(self, name: str) -> Path:
        source = self.catalog_dir / f"{name}{self.kind.extension}"
        if not source.is_dir():
            raise OperationError(f"{self.kind.label.capitalize()} '{name}' is not in the catalog")
        target = self.pack_path(name)
        staging = target.with_name(target.name + ".partial")
        remove_path(staging)
        shutil.copytree(source, staging)
        remove_path(target)
        staging.rename(target)
        logger.info("Downloaded %s '%s' to %s", self.kind.label, name, target)
        return target

    def systems(self, name: str) -> list[str]:
        """System tags an installed overlay pack provides."""
        pack_dir = self.pack_path(name)
        listed = read_manifest(pack_dir).systems
        systems_dir = pack_dir / SYSTEMS_DIR
        present = sorted(child.name for child in systems_dir.iterdir() if child.is_dir()) if systems_dir.is_dir() else []
        return [system for system in listed if system in present] or present

    def apply(self, name: str, system: str = "") -> int:
        pack_dir = self.pack_path(name)
        if not pack_dir.is_dir():
            raise OperationError(f"{self.kind.label.capitalize()} '{name}' is not downloaded")

        if self.kind is PackKind.OVERLAY:
            count = self.layout.install_overlays(pack_dir / SYSTEMS_DIR, system)
        else:
            manifest = read_manifest(pack_dir)
            count = 0
            applied = 0
            for component in SELECTABLE_COMPONENTS:
                content_dir = pack_dir / component.content_dir
                if manifest.has_component(component) and content_dir.is_dir():
                    count += self.layout.install(component, content_dir)
                    applied += 1
            if applied == 0:
                raise OperationError(f"Theme '{name}' contains no components")
        logger.info("Applied %s '%s' (%d file(s))", self.kind.label, name, count)
        return count

    def create_backup(self, label: str) -> str:
        """Snapshot the device's current state into Backups/<kind>/<label>_<timestamp>."""
        ensure_dir(self.backup_dir)
        stamp = datetime.now().strftime(BACKUP_TIMESTAMP_FORMAT)
        name = f"{label}_{stamp}"
        taken = [existing for existing in self.list_backups() if existing == name or existing.startswith(name + "_")]
        if taken:
            name = f"{name}_{max(_backup_sort_key(existing)[1] for existing in taken) + 1}"
        backup_path = self.backup_dir / name

        try:
            if self.kind is PackKind.OVERLAY:
                self.layout.collect_overlays(backup_path / OVERLAYS_CONTENT_DIR)
                content: dict[str, object] = {"kind": label}
            else:
                content = {"kind": label}
                for component in SELECTABLE_COMPONENTS:
                    count = self.layout.collect(component, backup_path / component.content_dir)
                    content[component.content_dir.lower()] = count > 0
            PackManifest.create(name, **content).save(backup_path / MANIFEST_FILE)
        except OSError:
            remove_path(backup_path)
            raise

        logger.info("Created %s backup %s", self.kind.label, name)
        self.prune_backups(label)
        return name

    def list_backups(self) -> list[str]:
        """Backup names, newest first."""
        if not self.backup_dir.is_dir():
            return []
        names = [child.name for child in self.backup_dir.iterdir() if child.is_dir()]
        return sorted(names, key=_backup_sort_key, reverse=True)

    def backup_gallery(self) -> list[GalleryItem]:
        items = []
        for name in self.list_backups():
            preview = self.backup_dir / name / ComponentType.WALLPAPER.content_dir / "bg.png"
            items.append(GalleryItem(text=name, value=name, background_image=preview if is_valid_image(preview) else None))
        return items

    def prune_backups(self, label: str, keep: int = MAX_BACKUPS) -> list[str]:
        matching = [name for name in self.list_backups() if name.startswith(f"{label}_")]
        removed = matching[keep:]
        for name in removed:
            remove_path(self.backup_dir / name)
            logger.info("Pruned old %s backup %s", self.kind.label, name)
        return removed

    def revert_from_backup(self, name: str) -> int:
        backup_path = self.backup_dir / name
        if not backup_path.is_dir():
            raise OperationError(f"Backup '{name}' not found")

        if self.kind is PackKind.OVERLAY:
            content_dir = backup_path / OVERLAYS_CONTENT_DIR
            self.layout.clear_overlays()
            count = 0
            if content_dir.is_dir():
                count = len([item for item in content_dir.rglob("*") if item.is_file()])
                self.layout.install_overlays(content_dir)
        else:
            manifest = read_manifest(backup_path)
            count = 0
            for component in SELECTABLE_COMPONENTS:
                # A component absent at backup time must be absent after revert too.
                self.layout.clear(component)
                content_dir = backup_path / component.content_dir
                if manifest.content.get(component.content_dir.lower()) and content_dir.is_dir():
                    count += self.layout.install(component, content_dir)
        logger.info("Reverted %s from backup %s (%d item(s))", self.kind.label, name, count)
        return count
