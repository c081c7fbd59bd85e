# -*- coding: utf-8 -*-
"""Closed set of screens and bounds coercion for values crossing a boundary."""

from __future__ import annotations

import logging
from enum import IntEnum, unique

logger = logging.getLogger(__name__)


@unique
class Screen(IntEnum):
    MAIN_MENU = 1

    THEME_GALLERY = 2
    THEME_DOWNLOAD_CONFIRM = 3
    THEME_DOWNLOADING = 4
    THEME_APPLY_CONFIRM = 5
    THEME_APPLYING = 6

    OVERLAY_GALLERY = 7
    OVERLAY_DOWNLOAD_CONFIRM = 8
    OVERLAY_DOWNLOADING = 9
    OVERLAY_SYSTEM_SELECT = 10
    OVERLAY_APPLY_CONFIRM = 11
    OVERLAY_APPLYING = 12

    SYNC_CATALOG = 13

    BACKUP_MENU = 14
    BACKUP_THEME_CONFIRM = 15
    BACKUP_THEME_CREATING = 16
    BACKUP_OVERLAY_CONFIRM = 17
    BACKUP_OVERLAY_CREATING = 18
    AUTO_BACKUP_TOGGLE = 19

    REVERT_MENU = 20
    REVERT_THEME_GALLERY = 21
    REVERT_THEME_CONFIRM = 22
    REVERT_THEME_APPLYING = 23
    REVERT_OVERLAY_GALLERY = 24
    REVERT_OVERLAY_CONFIRM = 25
    REVERT_OVERLAY_APPLYING = 26

    PURGE_CONFIRM = 27
    PURGING = 28

    CUSTOMIZATION_MENU = 29
    ACCENT_SELECTION = 30
    ACCENT_APPLY_CONFIRM = 31
    ACCENT_APPLYING = 32
    FONT_SELECTION = 33
    FONT_SLOT_SELECTION = 34
    FONT_APPLY_CONFIRM = 35
    FONT_APPLYING = 36
    ICON_SELECTION = 37
    ICON_APPLY_CONFIRM = 38
    ICON_APPLYING = 39

    COMPONENTS_MENU = 40
    IMPORT_TYPE = 41
    IMPORT_SELECTION = 42
    IMPORT_COMPONENTS = 43
    IMPORT_CONFIRM = 44
    IMPORTING = 45
    EXPORT_TYPE = 46
    EXPORT_NAME = 47
    EXPORT_COMPONENTS = 48
    EXPORT_CONFIRM = 49
    EXPORTING = 50
    CONVERT_SELECTION = 51
    CONVERT_COMPONENTS = 52
    CONVERT_CONFIRM = 53
    CONVERTING = 54

    LED_SELECTION = 55
    LED_EFFECT_SELECTION = 56
    LED_APPLY_CONFIRM = 57
    LED_APPLYING = 58
    LED_EXPORTING = 59
    ACCENT_EXPORTING = 60

    RESET_MENU = 61
    RESET_CONFIRM = 62
    RESETTING = 63


HOME_SCREEN = Screen.MAIN_MENU

SCREEN_MIN = min(Screen).value
SCREEN_MAX = max(Screen).value


def is_valid_screen(value: object) -> bool:
    """Return True if `value` names a member of `Screen`."""
    if isinstance(value, Screen):
        return True
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    if not SCREEN_MIN <= value <= SCREEN_MAX:
        return False
    return value in Screen._value2member_map_


def coerce_screen(value: object) -> Screen:
    """Map `value` onto a Screen, substituting the home screen when invalid."""
    if isinstance(value, Screen):
        return value
    if is_valid_screen(value):
        return Screen(value)
    logger.warning("Invalid screen %r (valid range %d..%d), returning to %s", value, SCREEN_MIN, SCREEN_MAX, HOME_SCREEN.name)
    return HOME_SCREEN
