# -*- coding: utf-8 -*-
"""Manual backups, the auto-backup toggle, and reverting from a backup."""

from __future__ import annotations

import logging
from typing import NamedTuple

from thememanager.config import ConfigError
from thememanager.constants import MESSAGE_TIMEOUT_LONG, MESSAGE_TIMEOUT_SHORT, YES
from thememanager.core.controller import ScreenHandler
from thememanager.models.pack import PackKind
from thememanager.models.screen import Screen
from thememanager.models.selection import Selection
from thememanager.workflows.base import FlowContext, HandlerTable, route, route_confirm, route_menu

logger = logging.getLogger(__name__)

MANUAL_BACKUP_LABEL = "manual"

BACKUP_MENU_ITEMS: dict[str, Screen] = {
    "Backup Theme": Screen.BACKUP_THEME_CONFIRM,
    "Backup Overlays": Screen.BACKUP_OVERLAY_CONFIRM,
    "Auto-Backup": Screen.AUTO_BACKUP_TOGGLE,
}

REVERT_MENU_ITEMS: dict[str, Screen] = {
    "Revert Theme": Screen.REVERT_THEME_GALLERY,
    "Revert Overlays": Screen.REVERT_OVERLAY_GALLERY,
}


class BackupScreens(NamedTuple):
    confirm: Screen
    creating: Screen


class RevertScreens(NamedTuple):
    gallery: Screen
    confirm: Screen
    applying: Screen


BACKUP_SCREENS = {
    PackKind.THEME: BackupScreens(Screen.BACKUP_THEME_CONFIRM, Screen.BACKUP_THEME_CREATING),
    PackKind.OVERLAY: BackupScreens(Screen.BACKUP_OVERLAY_CONFIRM, Screen.BACKUP_OVERLAY_CREATING),
}

REVERT_SCREENS = {
    PackKind.THEME: RevertScreens(Screen.REVERT_THEME_GALLERY, Screen.REVERT_THEME_CONFIRM, Screen.REVERT_THEME_APPLYING),
    PackKind.OVERLAY: RevertScreens(
        Screen.REVERT_OVERLAY_GALLERY, Screen.REVERT_OVERLAY_CONFIRM, Screen.REVERT_OVERLAY_APPLYING
    ),
}


class BackupFlow:
    """Backup menu. Every path ends back on the menu it started from."""

    def __init__(self, ctx: FlowContext) -> None:
        self.ctx = ctx

    def render_menu(self) -> Selection:
        return self.ctx.presenter.show_list(list(BACKUP_MENU_ITEMS), "Backup")

    def transition_menu(self, selection: Selection) -> Screen:
        return route_menu(selection, BACKUP_MENU_ITEMS, back=Screen.MAIN_MENU, stay=Screen.BACKUP_MENU)

    def _render_confirm(self, kind: PackKind) -> Selection:
        return self.ctx.presenter.confirm(f"Create {kind.label} backup?")

    def _transition_confirm(self, kind: PackKind, selection: Selection) -> Screen:
        screens = BACKUP_SCREENS[kind]
        return route_confirm(selection, yes=screens.creating, no=Screen.BACKUP_MENU, stay=screens.confirm)

    def _render_creating(self, kind: PackKind) -> Selection:
        store = self.ctx.pack_store(kind)
        return self.ctx.operation_selection(
            f"Creating {kind.label} backup...",
            lambda: store.create_backup(MANUAL_BACKUP_LABEL),
            f"{kind.label.capitalize()} backup created successfully!",
            "Error creating backup",
        )

    def transition_creating(self, selection: Selection) -> Screen:
        return Screen.BACKUP_MENU

    def render_auto_toggle(self) -> Selection:
        return self.ctx.presenter.confirm("Enable Auto-Backup?", default_yes=self.ctx.settings.auto_backup)

    def transition_auto_toggle(self, selection: Selection) -> Screen:
        if selection.confirmed:
            enabled = selection.value == YES
            try:
                self.ctx.settings.set_auto_backup(enabled)
            except (OSError, ConfigError) as exc:
                logger.error("Could not save auto-backup setting: %s", exc)
                self.ctx.presenter.show_message(f"Error saving settings: {exc}", MESSAGE_TIMEOUT_LONG)
            else:
                message = "Auto-backup enabled" if enabled else "Auto-backup disabled"
                self.ctx.presenter.show_message(message, MESSAGE_TIMEOUT_SHORT)
        return route(selection, forward=Screen.BACKUP_MENU, back=Screen.BACKUP_MENU, stay=Screen.AUTO_BACKUP_TOGGLE)

    def handlers(self) -> HandlerTable:
        table: HandlerTable = {
            Screen.BACKUP_MENU: ScreenHandler(self.render_menu, self.transition_menu),
            Screen.AUTO_BACKUP_TOGGLE: ScreenHandler(self.render_auto_toggle, self.transition_auto_toggle),
        }
        for kind, screens in BACKUP_SCREENS.items():
            table[screens.confirm] = ScreenHandler(
                lambda kind=kind: self._render_confirm(kind),
                lambda selection, kind=kind: self._transition_confirm(kind, selection),
            )
            table[screens.creating] = ScreenHandler(
                lambda kind=kind: self._render_creating(kind),
                self.transition_creating,
            )
        return table


class RevertFlow:
    """Pick a backup from a gallery, confirm, restore."""

    def __init__(self, ctx: FlowContext) -> None:
        self.ctx = ctx

    def render_menu(self) -> Selection:
        return self.ctx.presenter.show_list(list(REVERT_MENU_ITEMS), "Revert")

    def transition_menu(self, selection: Selection) -> Screen:
        return route_menu(selection, REVERT_MENU_ITEMS, back=Screen.MAIN_MENU, stay=Screen.REVERT_MENU)

    def _render_gallery(self, kind: PackKind) -> Selection:
        try:
            items = self.ctx.pack_store(kind).backup_gallery()
        except OSError as exc:
            return self.ctx.fail(f"Cannot read {kind.label} backups: {exc}")
        if not items:
            return self.ctx.fail(f"No {kind.label} backups found")
        return self.ctx.presenter.show_gallery(items)

    def _transition_gallery(self, kind: PackKind, selection: Selection) -> Screen:
        screens = REVERT_SCREENS[kind]
        if selection.confirmed and selection.value:
            self.ctx.selection.selected_backup = selection.value
            return screens.confirm
        if selection.cancelled:
            self.ctx.selection.selected_backup = ""
            return Screen.REVERT_MENU
        return screens.gallery

    def _render_confirm(self, kind: PackKind) -> Selection:
        return self.ctx.presenter.confirm(f"Revert to {kind.label} backup '{self.ctx.selection.selected_backup}'?")

    def _transition_confirm(self, kind: PackKind, selection: Selection) -> Screen:
        screens = REVERT_SCREENS[kind]
        return route_confirm(selection, yes=screens.applying, no=screens.gallery, stay=screens.confirm)

    def _render_applying(self, kind: PackKind) -> Selection:
        store = self.ctx.pack_store(kind)
        name = self.ctx.selection.selected_backup
        return self.ctx.operation_selection(
            f"Reverting from {kind.label} backup...",
            lambda: store.revert_from_backup(name),
            f"{kind.label.capitalize()} reverted successfully!",
            "Error reverting from backup",
        )

    def transition_applying(self, selection: Selection) -> Screen:
        self.ctx.selection.reset_catalog()
        return Screen.MAIN_MENU

    def handlers(self) -> HandlerTable:
        table: HandlerTable = {Screen.REVERT_MENU: ScreenHandler(self.render_menu, self.transition_menu)}
        for kind, screens in REVERT_SCREENS.items():
            table[screens.gallery] = ScreenHandler(
                lambda kind=kind: self._render_gallery(kind),
                lambda selection, kind=kind: self._transition_gallery(kind, selection),
            )
            table[screens.confirm] = ScreenHandler(
                lambda kind=kind: self._render_confirm(kind),
                lambda selection, kind=kind: self._transition_confirm(kind, selection),
            )
            table[screens.applying] = ScreenHandler(
                lambda kind=kind: self._render_applying(kind),
                self.transition_applying,
            )
        return table
