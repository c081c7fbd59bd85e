# -*- coding: utf-8 -*-
"""LED themes and the sectioned ledsettings file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from thememanager.config import AppPaths
from thememanager.constants import LED_DEFAULTS, LED_LIGHTS
from thememanager.errors import OperationError
from thememanager.models.component import ComponentType
from thememanager.stores.accents import to_display, to_storage
from thememanager.utils.file_utils import next_numbered_path, read_text_file, write_text_atomic

logger = logging.getLogger(__name__)

LED_FOLDERS = ("Presets", "Custom")
EXPORT_PREFIX = "LEDs"
PLACEHOLDER_PREFIX = "Place-"


@dataclass
class LightSettings:
    """One `[Name]` section of the settings file."""

    name: str
    values: dict[str, str] = field(default_factory=lambda: dict(LED_DEFAULTS))

    @property
    def color(self) -> str:
        return to_display(self.values.get("color1", LED_DEFAULTS["color1"]))


@dataclass
class LedTheme:
    name: str
    color: str
    path: Path


def default_lights() -> list[LightSettings]:
    return [LightSettings(name) for name in LED_LIGHTS]


def parse_led_settings(text: str) -> list[LightSettings]:
    lights: list[LightSettings] = []
    current: LightSettings | None = None
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("[") and line.endswith("]"):
            current = LightSettings(line[1:-1])
            lights.append(current)
            continue
        if current is None or "=" not in line:
            continue
        key, value = line.split("=", 1)
        current.values[key.strip()] = value.strip()
    return lights


def format_led_settings(lights: list[LightSettings]) -> str:
    blocks = []
    for light in lights:
        lines = [f"[{light.name}]"] + [f"{key}={value}" for key, value in light.values.items()]
        blocks.append("\n".join(lines) + "\n\n")
    return "".join(blocks)


class LedStore:
    """Lists LED themes and rewrites the device's ledsettings file."""

    def __init__(self, paths: AppPaths) -> None:
        self.paths = paths

    @property
    def leds_dir(self) -> Path:
        return self.paths.component_dir(ComponentType.LED.dirname)

    def current(self) -> list[LightSettings]:
        settings_file = self.paths.led_settings_file
        if not settings_file.is_file():
            return default_lights()
        lights = parse_led_settings(read_text_file(settings_file))
        if not lights:
            logger.warning("No light sections in %s, using defaults", settings_file)
            return default_lights()
        return lights

    def available(self) -> list[LedTheme]:
        themes = []
        for folder in LED_FOLDERS:
            directory = self.leds_dir / folder
            if not directory.is_dir():
                continue
            for path in sorted(directory.glob("*.txt")):
                if path.name.startswith((".", PLACEHOLDER_PREFIX)):
                    continue
                try:
                    lights = parse_led_settings(read_text_file(path))
                except (OSError, UnicodeDecodeError) as exc:
                    logger.warning("Skipping LED file %s: %s", path, exc)
                    continue
                if not lights:
                    logger.warning("Skipping LED file %s: no light sections", path)
                    continue
                themes.append(LedTheme(name=path.stem, color=lights[0].color, path=path))
        return themes

    def find(self, name: str) -> LedTheme:
        for theme in self.available():
            if theme.name == name:
                return theme
        raise OperationError(f"LED theme '{name}' not found")

    def apply(self, name: str, effect: int) -> list[LightSettings]:
        """Set every light to the theme's color with the given effect."""
        theme = self.find(name)
        lights = self.current()
        for light in lights:
            light.values["effect"] = str(effect)
            light.values["color1"] = to_storage(theme.color)
        write_text_atomic(self.paths.led_settings_file, format_led_settings(lights))
        logger.info("Applied LED theme '%s' (effect %d) to %d light(s)", name, effect, len(lights))
        return lights

    def export_current(self) -> Path:
        target = next_numbered_path(self.leds_dir / "Custom", EXPORT_PREFIX)
        write_text_atomic(target, format_led_settings(self.current()))
        logger.info("Exported LED settings to %s", target)
        return target
