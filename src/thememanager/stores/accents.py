# -*- coding: utf-8 -*-
"""Accent color sets: presets, custom files and the device settings file."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from thememanager.config import AppPaths
from thememanager.constants import ACCENT_KEYS, DEFAULT_ACCENT
from thememanager.errors import OperationError
from thememanager.models.pack import GalleryItem
from thememanager.utils.file_utils import next_numbered_path, read_key_values, update_key_values, write_text_atomic
from thememanager.utils.image_utils import render_color_swatch

logger = logging.getLogger(__name__)

DEFAULT_ACCENT_NAME = "Default"
CURRENT_ACCENT_NAME = "Current"
EXPORT_PREFIX = "Accents"


def to_storage(color: str) -> str:
    """#RRGGBB -> 0xRRGGBB"""
    return "0x" + color[1:] if color.startswith("#") else color


def to_display(color: str) -> str:
    """0xRRGGBB -> #RRGGBB"""
    return "#" + color[2:] if color.lower().startswith("0x") else color


@dataclass
class AccentColors:
    name: str
    colors: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ACCENT))

    def ordered(self) -> list[str]:
        return [self.colors.get(key, DEFAULT_ACCENT[key]) for key in ACCENT_KEYS]


def read_accent_file(path: Path, name: str | None = None) -> AccentColors:
    values = read_key_values(path)
    colors = dict(DEFAULT_ACCENT)
    colors.update({key: to_display(values[key]) for key in ACCENT_KEYS if key in values})
    return AccentColors(name=name or path.stem, colors=colors)


class AccentStore:
    """Lists accent sets and writes the chosen one to minuisettings.txt."""

    def __init__(self, paths: AppPaths) -> None:
        self.paths = paths

    def current(self) -> AccentColors:
        settings_file = self.paths.accent_settings_file
        if not settings_file.is_file():
            return AccentColors(name=CURRENT_ACCENT_NAME)
        return read_accent_file(settings_file, CURRENT_ACCENT_NAME)

    def available(self) -> list[AccentColors]:
        accents = [AccentColors(name=DEFAULT_ACCENT_NAME)]
        for folder in ("Presets", "Custom"):
            directory = self.paths.accents_dir / folder
            if not directory.is_dir():
                continue
            for path in sorted(directory.glob("*.txt")):
                try:
                    accents.append(read_accent_file(path))
                except (OSError, UnicodeDecodeError) as exc:
                    logger.warning("Skipping accent file %s: %s", path, exc)
        return accents

    def find(self, name: str) -> AccentColors:
        for accent in self.available():
            if accent.name == name:
                return accent
        raise OperationError(f"Accent '{name}' not found")

    def gallery_items(self) -> list[GalleryItem]:
        cache = self.paths.cache_dir / "accents"
        items = []
        for accent in self.available():
            slug = re.sub(r"[^A-Za-z0-9_-]+", "_", accent.name)
            swatch = render_color_swatch(accent.ordered(), cache / f"{slug}.png")
            items.append(GalleryItem(text=accent.name, value=accent.name, background_image=swatch))
        return items

    def apply(self, name: str) -> AccentColors:
        accent = self.find(name)
        updates = {key: to_storage(value) for key, value in zip(ACCENT_KEYS, accent.ordered())}
        update_key_values(self.paths.accent_settings_file, updates)
        logger.info("Applied accent colors '%s'", name)
        return accent

    def export_current(self) -> Path:
        """Save the device's accent colors as the next Custom/Accents_<n>.txt."""
        accent = self.current()
        target = next_numbered_path(self.paths.accents_dir / "Custom", EXPORT_PREFIX)
        lines = [f"{key}={to_storage(value)}" for key, value in zip(ACCENT_KEYS, accent.ordered())]
        write_text_atomic(target, "\n".join(lines) + "\n")
        logger.info("Exported accent colors to %s", target)
        return target
