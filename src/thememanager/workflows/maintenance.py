# -*- coding: utf-8 -*-
"""Catalog sync, purge and device reset."""

from __future__ import annotations

import logging

from thememanager.core.controller import ScreenHandler
from thememanager.models.screen import Screen
from thememanager.models.selection import Selection
from thememanager.stores.reset import RESET_OPTIONS
from thememanager.workflows.base import FlowContext, HandlerTable, route_confirm

logger = logging.getLogger(__name__)

PURGE_WARNING = "WARNING: Erase everything?"


class SyncFlow:
    def __init__(self, ctx: FlowContext) -> None:
        self.ctx = ctx

    def render(self) -> Selection:
        return self.ctx.operation_selection(
            "Syncing catalog...",
            self.ctx.maintenance.sync_catalog,
            "Catalog synced successfully!",
            "Error syncing catalog",
        )

    def transition(self, selection: Selection) -> Screen:
        return Screen.MAIN_MENU

    def handlers(self) -> HandlerTable:
        return {Screen.SYNC_CATALOG: ScreenHandler(self.render, self.transition)}


class PurgeFlow:
    """Confirm (preselected on "No") then erase installed packs and backups."""

    def __init__(self, ctx: FlowContext) -> None:
        self.ctx = ctx

    def render_confirm(self) -> Selection:
        return self.ctx.presenter.confirm(PURGE_WARNING, default_yes=False)

    def transition_confirm(self, selection: Selection) -> Screen:
        return route_confirm(selection, yes=Screen.PURGING, no=Screen.MAIN_MENU, stay=Screen.PURGE_CONFIRM)

    def render_purging(self) -> Selection:
        return self.ctx.operation_selection(
            "Purging...",
            self.ctx.maintenance.purge,
            "Purge complete!",
            "Error during purge",
        )

    def transition_purging(self, selection: Selection) -> Screen:
        self.ctx.selection.reset()
        return Screen.MAIN_MENU

    def handlers(self) -> HandlerTable:
        return {
            Screen.PURGE_CONFIRM: ScreenHandler(self.render_confirm, self.transition_confirm),
            Screen.PURGING: ScreenHandler(self.render_purging, self.transition_purging),
        }


class ResetFlow:
    """Pick a reset option, confirm (preselected on "No"), then run it."""

    def __init__(self, ctx: FlowContext) -> None:
        self.ctx = ctx

    def render_menu(self) -> Selection:
        return self.ctx.presenter.show_list(list(RESET_OPTIONS), "Reset Options")

    def transition_menu(self, selection: Selection) -> Screen:
        if selection.cancelled:
            return Screen.MAIN_MENU
        if not selection.confirmed:
            return Screen.RESET_MENU
        if selection.value not in RESET_OPTIONS:
            logger.warning("Unknown reset option %r", selection.value)
            return Screen.RESET_MENU
        self.ctx.selection.reset_option = selection.value
        return Screen.RESET_CONFIRM

    def render_confirm(self) -> Selection:
        return self.ctx.presenter.confirm(f"{self.ctx.selection.reset_option}?", default_yes=False)

    def transition_confirm(self, selection: Selection) -> Screen:
        return route_confirm(selection, yes=Screen.RESETTING, no=Screen.RESET_MENU, stay=Screen.RESET_CONFIRM)

    def render_resetting(self) -> Selection:
        option = self.ctx.selection.reset_option
        return self.ctx.operation_selection(
            "Resetting...",
            lambda: self.ctx.reset.run(option),
            "Reset complete!",
            "Error during reset",
        )

    def transition_resetting(self, selection: Selection) -> Screen:
        self.ctx.selection.reset_option = ""
        return Screen.MAIN_MENU

    def handlers(self) -> HandlerTable:
        return {
            Screen.RESET_MENU: ScreenHandler(self.render_menu, self.transition_menu),
            Screen.RESET_CONFIRM: ScreenHandler(self.render_confirm, self.transition_confirm),
            Screen.RESETTING: ScreenHandler(self.render_resetting, self.transition_resetting),
        }
