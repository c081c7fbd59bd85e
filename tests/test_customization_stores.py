# -*- coding: utf-8 -*-
"""Tests for accent, font and icon stores."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from conftest import PNG_1X1_BYTES
from thememanager.config import AppPaths
from thememanager.errors import OperationError
from thememanager.models.component import ComponentType
from thememanager.stores.accents import AccentStore, to_display, to_storage
from thememanager.stores.fonts import FontStore
from thememanager.stores.icons import IconStore
from thememanager.stores.leds import LedStore, parse_led_settings
from thememanager.stores.system_layout import SystemLayout


def test_hex_format_conversion() -> None:
    assert to_storage("#9B2257") == "0x9B2257"
    assert to_storage("0x9B2257") == "0x9B2257"
    assert to_display("0x1E2329") == "#1E2329"
    assert to_display("#1E2329") == "#1E2329"


def test_accents_list_presets_and_custom(app_paths: AppPaths) -> None:
    (app_paths.accents_dir / "Presets" / "Ocean.txt").write_text("color1=0x0000FF\n", encoding="utf-8")
    (app_paths.accents_dir / "Custom" / "Mine.txt").write_text("color2=#00FF00\n", encoding="utf-8")

    accents = {accent.name: accent for accent in AccentStore(app_paths).available()}

    assert list(accents) == ["Default", "Ocean", "Mine"]
    assert accents["Ocean"].colors["color1"] == "#0000FF"
    assert accents["Mine"].colors["color2"] == "#00FF00"


def test_accent_apply_writes_storage_format(app_paths: AppPaths) -> None:
    (app_paths.accents_dir / "Presets" / "Ocean.txt").write_text("color1=#0000FF\n", encoding="utf-8")
    settings = app_paths.accent_settings_file
    settings.parent.mkdir(parents=True)
    settings.write_text("language=en\ncolor1=0xFFFFFF\n", encoding="utf-8")

    store = AccentStore(app_paths)
    store.apply("Ocean")

    lines = settings.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "language=en"
    assert "color1=0x0000FF" in lines
    assert "color6=0xFFFFFF" in lines
    assert store.current().colors["color1"] == "#0000FF"


def test_accent_apply_unknown_fails(app_paths: AppPaths) -> None:
    with pytest.raises(OperationError):
        AccentStore(app_paths).apply("Nope")


def test_accent_gallery_renders_swatches(app_paths: AppPaths) -> None:
    items = AccentStore(app_paths).gallery_items()
    assert items[0].value == "Default"
    with Image.open(items[0].background_image) as swatch:
        assert swatch.size == (640, 480)
        assert swatch.getpixel((5, 5)) == (255, 255, 255)


def test_font_apply_backs_up_original_once(app_paths: AppPaths) -> None:
    res = app_paths.system_res_dir
    res.mkdir(parents=True)
    (res / "font1.ttf").write_bytes(b"stock")
    (app_paths.fonts_dir / "Retro.ttf").write_bytes(b"retro")
    (app_paths.fonts_dir / "Pixel.otf").write_bytes(b"pixel")
    store = FontStore(app_paths, SystemLayout(app_paths))

    assert store.list_fonts() == ["Pixel.otf", "Retro.ttf"]
    store.apply("Retro.ttf", "Next")
    store.apply("Pixel.otf", "Next")

    assert (res / "font1.ttf").read_bytes() == b"pixel"
    assert (res / "font1.backup.ttf").read_bytes() == b"stock"
    assert store.has_backup() is True

    store.restore()
    assert (res / "font1.ttf").read_bytes() == b"stock"


def test_font_unknown_slot_fails(app_paths: AppPaths) -> None:
    (app_paths.fonts_dir / "Retro.ttf").write_bytes(b"retro")
    with pytest.raises(OperationError, match="slot"):
        FontStore(app_paths, SystemLayout(app_paths)).apply("Retro.ttf", "Huge")


def test_font_restore_without_backup_fails(app_paths: AppPaths) -> None:
    with pytest.raises(OperationError):
        FontStore(app_paths, SystemLayout(app_paths)).restore()


def test_icon_pack_apply(app_paths: AppPaths) -> None:
    icon = app_paths.icons_dir / "Flat.icon" / "Icons" / "Roms" / ".media" / "GBA.png"
    icon.parent.mkdir(parents=True)
    icon.write_bytes(PNG_1X1_BYTES)
    store = IconStore(app_paths, SystemLayout(app_paths))

    assert store.list_packs() == ["Flat"]
    assert store.apply("Flat") == 1
    assert (app_paths.sdcard_root / "Roms" / ".media" / "GBA.png").is_file()


def test_icons_do_not_include_wallpapers(app_paths: AppPaths) -> None:
    media = app_paths.sdcard_root / ".media"
    media.mkdir(parents=True)
    (media / "bg.png").write_bytes(PNG_1X1_BYTES)
    (media / "Collections.png").write_bytes(PNG_1X1_BYTES)

    layout = SystemLayout(app_paths)
    icons = [relative for _absolute, relative in layout.current_files(ComponentType.ICON)]
    wallpapers = [relative for _absolute, relative in layout.current_files(ComponentType.WALLPAPER)]
    assert icons == [Path(".media/Collections.png")]
    assert wallpapers == [Path(".media/bg.png")]


def test_accent_export_numbers_after_highest_existing(app_paths: AppPaths) -> None:
    custom = app_paths.accents_dir / "Custom"
    (custom / "Accents_2.txt").write_text("color1=0x000000\n", encoding="utf-8")
    (custom / "Accents_x.txt").write_text("color1=0x000000\n", encoding="utf-8")
    settings = app_paths.accent_settings_file
    settings.parent.mkdir(parents=True)
    settings.write_text("language=en\ncolor1=0x0000FF\n", encoding="utf-8")

    exported = AccentStore(app_paths).export_current()

    assert exported == custom / "Accents_3.txt"
    lines = exported.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "color1=0x0000FF"
    assert "color2=0x9B2257" in lines
    assert "language=en" not in lines


def _write_led_theme(app_paths: AppPaths, folder: str, name: str, color: str) -> Path:
    path = app_paths.component_dir("LEDs") / folder / f"{name}.txt"
    path.write_text(f"[F1 key]\neffect=1\ncolor1={color}\n", encoding="utf-8")
    return path


def test_led_themes_use_first_light_color_and_skip_placeholders(app_paths: AppPaths) -> None:
    _write_led_theme(app_paths, "Presets", "Ocean", "0x0000FF")
    _write_led_theme(app_paths, "Custom", "Mine", "0x00FF00")
    placeholder = app_paths.component_dir("LEDs") / "Custom" / "Place-LED-Files-Here.txt"
    placeholder.write_text("# Place custom LED theme files in this directory\n", encoding="utf-8")

    themes = LedStore(app_paths).available()

    assert [(theme.name, theme.color) for theme in themes] == [("Ocean", "#0000FF"), ("Mine", "#00FF00")]


def test_led_apply_sets_color_and_effect_on_every_light(app_paths: AppPaths) -> None:
    _write_led_theme(app_paths, "Presets", "Ocean", "0x0000FF")

    LedStore(app_paths).apply("Ocean", 2)

    text = app_paths.led_settings_file.read_text(encoding="utf-8")
    lights = parse_led_settings(text)
    assert [light.name for light in lights] == ["F1 key", "F2 key", "Top bar", "L&R triggers"]
    assert all(light.values["effect"] == "2" for light in lights)
    assert all(light.values["color1"] == "0x0000FF" for light in lights)
    assert text.startswith("[F1 key]\neffect=2\ncolor1=0x0000FF\ncolor2=0x000000\n")
    assert "inbrightness=100\n\n[F2 key]" in text


def test_led_apply_keeps_other_keys_of_existing_lights(app_paths: AppPaths) -> None:
    _write_led_theme(app_paths, "Presets", "Ocean", "0x0000FF")
    settings = app_paths.led_settings_file
    settings.parent.mkdir(parents=True)
    settings.write_text("[Top bar]\neffect=4\ncolor1=0xFFFFFF\nbrightness=40\n\n", encoding="utf-8")

    lights = LedStore(app_paths).apply("Ocean", 4)

    assert len(lights) == 1
    assert lights[0].values["brightness"] == "40"
    assert lights[0].values["color1"] == "0x0000FF"


def test_led_apply_unknown_fails(app_paths: AppPaths) -> None:
    with pytest.raises(OperationError, match="LED theme 'Nope' not found"):
        LedStore(app_paths).apply("Nope", 4)


def test_led_export_writes_current_settings(app_paths: AppPaths) -> None:
    store = LedStore(app_paths)

    first = store.export_current()
    second = store.export_current()

    assert first.name == "LEDs_1.txt"
    assert second.name == "LEDs_2.txt"
    assert [light.name for light in parse_led_settings(first.read_text(encoding="utf-8"))] == [
        "F1 key",
        "F2 key",
        "Top bar",
        "L&R triggers",
    ]
