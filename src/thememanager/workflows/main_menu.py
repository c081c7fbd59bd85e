# -*- coding: utf-8 -*-
"""Main menu."""

from __future__ import annotations

import logging

from thememanager.constants import APP_TITLE
from thememanager.core.controller import QuitRequested, ScreenHandler
from thememanager.models.screen import Screen
from thememanager.models.selection import Selection
from thememanager.workflows.base import FlowContext, HandlerTable

logger = logging.getLogger(__name__)

MAIN_MENU_ITEMS: dict[str, Screen] = {
    "Themes": Screen.THEME_GALLERY,
    "Overlays": Screen.OVERLAY_GALLERY,
    "Customization": Screen.CUSTOMIZATION_MENU,
    "Components": Screen.COMPONENTS_MENU,
    "Sync Catalog": Screen.SYNC_CATALOG,
    "Backup": Screen.BACKUP_MENU,
    "Revert": Screen.REVERT_MENU,
    "Reset": Screen.RESET_MENU,
    "Purge": Screen.PURGE_CONFIRM,
}


class MainMenuFlow:
    def __init__(self, ctx: FlowContext) -> None:
        self.ctx = ctx

    def render(self) -> Selection:
        return self.ctx.presenter.show_list(list(MAIN_MENU_ITEMS), APP_TITLE, cancel_text="QUIT")

    def transition(self, selection: Selection) -> Screen:
        if selection.cancelled:
            raise QuitRequested()
        if not selection.confirmed:
            return Screen.MAIN_MENU
        target = MAIN_MENU_ITEMS.get(selection.value)
        if target is None:
            logger.warning("Unknown main menu entry %r", selection.value)
            return Screen.MAIN_MENU
        self.ctx.selection.reset()
        return target

    def handlers(self) -> HandlerTable:
        return {Screen.MAIN_MENU: ScreenHandler(self.render, self.transition)}
