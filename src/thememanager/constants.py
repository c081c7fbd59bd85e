# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "theme-manager"
APP_TITLE = "Theme Manager"
APP_VERSION = "1.0.0"

DEFAULT_SETTINGS_FILE = "settings.json"
DEFAULT_SDCARD_ROOT = "/mnt/SDCARD"

LIST_BINARY = "minui-list"
PRESENTER_BINARY = "minui-presenter"

# Presenter exit codes
EXIT_SELECTED = 0
EXIT_CANCELLED = 1
EXIT_BACK = 2
EXIT_GALLERY_NEXT = 4
EXIT_GALLERY_PREVIOUS = 5
EXIT_TIMEOUT = 124
EXIT_INTERRUPTED = 130
EXIT_TERMINATED = 143

MESSAGE_TIMEOUT_SHORT = "2"
MESSAGE_TIMEOUT_LONG = "3"

INDICATOR_MIN_DISPLAY_SECONDS = 0.5
INDICATOR_STOP_GRACE_SECONDS = 1.0

MAX_BACKUPS = 3

THEME_EXTENSION = ".theme"
OVERLAY_EXTENSION = ".over"
MANIFEST_FILE = "manifest.yml"
PREVIEW_FILE = "preview.png"

FONT_EXTENSIONS = (".ttf", ".otf")
FONT_SLOTS = {"Next": "font1.ttf", "OG": "font2.ttf"}

ACCENT_KEYS = ("color1", "color2", "color3", "color4", "color5", "color6")
DEFAULT_ACCENT = {
    "color1": "#FFFFFF",
    "color2": "#9B2257",
    "color3": "#1E2329",
    "color4": "#FFFFFF",
    "color5": "#000000",
    "color6": "#FFFFFF",
}

YES = "Yes"
NO = "No"
ALL_SYSTEMS = "All Systems"
ALL_COMPONENTS = "All Components"
CONTINUE_WITH_SELECTED = "Continue with Selected Components"

# Effect numbers understood by the LED daemon
LED_EFFECTS = {"Static": 4, "Breathing": 2}
LED_LIGHTS = ("F1 key", "F2 key", "Top bar", "L&R triggers")
LED_DEFAULTS = {
    "effect": "4",
    "color1": "0xFFFFFF",
    "color2": "0x000000",
    "speed": "1000",
    "brightness": "100",
    "trigger": "1",
    "filename": "",
    "inbrightness": "100",
}
