# -*- coding: utf-8 -*-
"""Component types handled by import, export and convert."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class ComponentType(IntEnum):
    FULL_THEME = 1
    ACCENT = 2
    LED = 3
    WALLPAPER = 4
    ICON = 5
    FONT = 6

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def plural(self) -> str:
        return _PLURALS[self]

    @property
    def dirname(self) -> str:
        """Top-level app directory holding packs of this type."""
        return _DIRNAMES[self]

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]

    @property
    def content_dir(self) -> str:
        """Subdirectory inside a theme or pack holding this component."""
        return _PLURALS[self]

    @classmethod
    def from_label(cls, label: str) -> ComponentType | None:
        for member in cls:
            if label in (member.label, member.plural):
                return member
        return None


_LABELS = {
    ComponentType.FULL_THEME: "Full Theme",
    ComponentType.ACCENT: "Accent Pack",
    ComponentType.LED: "LED Pack",
    ComponentType.WALLPAPER: "Wallpaper Pack",
    ComponentType.ICON: "Icon Pack",
    ComponentType.FONT: "Font Pack",
}

_PLURALS = {
    ComponentType.FULL_THEME: "Themes",
    ComponentType.ACCENT: "Accents",
    ComponentType.LED: "LEDs",
    ComponentType.WALLPAPER: "Wallpapers",
    ComponentType.ICON: "Icons",
    ComponentType.FONT: "Fonts",
}

_DIRNAMES = dict(_PLURALS)

_EXTENSIONS = {
    ComponentType.FULL_THEME: ".theme",
    ComponentType.ACCENT: ".acc",
    ComponentType.LED: ".led",
    ComponentType.WALLPAPER: ".bg",
    ComponentType.ICON: ".icon",
    ComponentType.FONT: ".font",
}

# Order used by every component toggle menu.
SELECTABLE_COMPONENTS: tuple[ComponentType, ...] = (
    ComponentType.WALLPAPER,
    ComponentType.ICON,
    ComponentType.ACCENT,
    ComponentType.LED,
    ComponentType.FONT,
)
