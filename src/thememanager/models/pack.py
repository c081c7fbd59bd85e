# -*- coding: utf-8 -*-
"""Catalog pack kinds and gallery entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from thememanager.constants import OVERLAY_EXTENSION, THEME_EXTENSION


class PackKind(Enum):
    THEME = "theme"
    OVERLAY = "overlay"

    @property
    def label(self) -> str:
        return self.value

    @property
    def title(self) -> str:
        return "Themes" if self is PackKind.THEME else "Overlays"

    @property
    def extension(self) -> str:
        return THEME_EXTENSION if self is PackKind.THEME else OVERLAY_EXTENSION


@dataclass
class GalleryItem:
    """One page of a gallery: caption, optional background and returned value."""

    text: str
    value: str
    background_image: Path | None = None
