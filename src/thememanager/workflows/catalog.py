# -*- coding: utf-8 -*-
"""Gallery -> download -> apply flows for themes and overlays."""

from __future__ import annotations

import logging
from typing import NamedTuple

from thememanager.constants import ALL_SYSTEMS
from thememanager.core.controller import ScreenHandler
from thememanager.models.pack import PackKind
from thememanager.models.screen import Screen
from thememanager.models.selection import Selection
from thememanager.stores.catalog import PackStore
from thememanager.workflows.base import FlowContext, HandlerTable, route, route_confirm

logger = logging.getLogger(__name__)

AUTO_BACKUP_LABEL = "auto"


class CatalogScreens(NamedTuple):
    gallery: Screen
    download_confirm: Screen
    downloading: Screen
    apply_confirm: Screen
    applying: Screen
    system_select: Screen | None = None


THEME_SCREENS = CatalogScreens(
    gallery=Screen.THEME_GALLERY,
    download_confirm=Screen.THEME_DOWNLOAD_CONFIRM,
    downloading=Screen.THEME_DOWNLOADING,
    apply_confirm=Screen.THEME_APPLY_CONFIRM,
    applying=Screen.THEME_APPLYING,
)

OVERLAY_SCREENS = CatalogScreens(
    gallery=Screen.OVERLAY_GALLERY,
    download_confirm=Screen.OVERLAY_DOWNLOAD_CONFIRM,
    downloading=Screen.OVERLAY_DOWNLOADING,
    apply_confirm=Screen.OVERLAY_APPLY_CONFIRM,
    applying=Screen.OVERLAY_APPLYING,
    system_select=Screen.OVERLAY_SYSTEM_SELECT,
)


class CatalogFlow:
    """Browse the catalog, download on demand and apply with confirmation."""

    def __init__(self, ctx: FlowContext, kind: PackKind) -> None:
        self.ctx = ctx
        self.kind = kind
        self.screens = THEME_SCREENS if kind is PackKind.THEME else OVERLAY_SCREENS

    @property
    def store(self) -> PackStore:
        return self.ctx.pack_store(self.kind)

    @property
    def selected(self) -> str:
        state = self.ctx.selection
        return state.selected_theme if self.kind is PackKind.THEME else state.selected_overlay

    @selected.setter
    def selected(self, name: str) -> None:
        if self.kind is PackKind.THEME:
            self.ctx.selection.selected_theme = name
        else:
            self.ctx.selection.selected_overlay = name

    # Gallery

    def render_gallery(self) -> Selection:
        try:
            items = self.store.list_gallery()
        except OSError as exc:
            return self.ctx.fail(f"Cannot read {self.kind.label} catalog: {exc}")
        if not items:
            return self.ctx.fail(f"No {self.kind.title.lower()} in the catalog. Try Sync Catalog.")
        return self.ctx.presenter.show_gallery(items)

    def transition_gallery(self, selection: Selection) -> Screen:
        if selection.confirmed and selection.value:
            self.selected = selection.value
            self.ctx.selection.selected_system = ""
            if self.store.is_downloaded(selection.value):
                return self._after_download()
            return self.screens.download_confirm
        if selection.cancelled:
            self.ctx.selection.reset_catalog()
            return Screen.MAIN_MENU
        return self.screens.gallery

    def _after_download(self) -> Screen:
        if self.screens.system_select is None:
            return self.screens.apply_confirm
        try:
            systems = self.store.systems(self.selected)
        except OSError as exc:
            self.ctx.fail(f"Cannot read {self.kind.label} '{self.selected}': {exc}")
            return self.screens.gallery
        if len(systems) > 1:
            return self.screens.system_select
        return self.screens.apply_confirm

    # Download

    def render_download_confirm(self) -> Selection:
        return self.ctx.presenter.confirm(f"Download {self.kind.label} '{self.selected}'?")

    def transition_download_confirm(self, selection: Selection) -> Screen:
        return route_confirm(
            selection,
            yes=self.screens.downloading,
            no=self.screens.gallery,
            stay=self.screens.download_confirm,
        )

    def render_downloading(self) -> Selection:
        name = self.selected
        return self.ctx.operation_selection(
            f"Downloading {self.kind.label} '{name}'...",
            lambda: self.store.download(name),
            f"{self.kind.label.capitalize()} downloaded successfully!",
            f"Error downloading {self.kind.label}",
        )

    def transition_downloading(self, selection: Selection) -> Screen:
        if selection.confirmed:
            return self._after_download()
        return self.screens.gallery

    # System choice (overlays)

    def render_system_select(self) -> Selection:
        try:
            systems = self.store.systems(self.selected)
        except OSError as exc:
            return self.ctx.fail(f"Cannot read {self.kind.label} '{self.selected}': {exc}")
        return self.ctx.presenter.show_list([ALL_SYSTEMS, *systems], f"Apply '{self.selected}' to")

    def transition_system_select(self, selection: Selection) -> Screen:
        stay = self.screens.system_select or self.screens.apply_confirm
        if selection.confirmed:
            self.ctx.selection.selected_system = "" if selection.value == ALL_SYSTEMS else selection.value
        return route(selection, forward=self.screens.apply_confirm, back=self.screens.gallery, stay=stay)

    # Apply

    def render_apply_confirm(self) -> Selection:
        message = f"Apply {self.kind.label} '{self.selected}'?"
        if self.ctx.selection.selected_system:
            message = f"Apply {self.kind.label} '{self.selected}' to {self.ctx.selection.selected_system}?"
        return self.ctx.presenter.confirm(message)

    def transition_apply_confirm(self, selection: Selection) -> Screen:
        return route_confirm(
            selection,
            yes=self.screens.applying,
            no=self.screens.gallery,
            stay=self.screens.apply_confirm,
        )

    def render_applying(self) -> Selection:
        name = self.selected
        system = self.ctx.selection.selected_system
        label = self.kind.label
        if self.ctx.settings.auto_backup:
            backed_up = self.ctx.run_operation(
                f"Creating {label} backup...",
                lambda: self.store.create_backup(AUTO_BACKUP_LABEL),
                "Auto-backup created",
                "Error creating auto-backup",
            )
            if not backed_up:
                logger.warning("Applying %s '%s' without an auto-backup", label, name)
        return self.ctx.operation_selection(
            f"Applying {label} '{name}'...",
            lambda: self.store.apply(name, system),
            f"{label.capitalize()} applied successfully!",
            f"Error applying {label}",
        )

    def transition_applying(self, selection: Selection) -> Screen:
        self.ctx.selection.reset_catalog()
        return Screen.MAIN_MENU

    def handlers(self) -> HandlerTable:
        table = {
            self.screens.gallery: ScreenHandler(self.render_gallery, self.transition_gallery),
            self.screens.download_confirm: ScreenHandler(self.render_download_confirm, self.transition_download_confirm),
            self.screens.downloading: ScreenHandler(self.render_downloading, self.transition_downloading),
            self.screens.apply_confirm: ScreenHandler(self.render_apply_confirm, self.transition_apply_confirm),
            self.screens.applying: ScreenHandler(self.render_applying, self.transition_applying),
        }
        if self.screens.system_select is not None:
            table[self.screens.system_select] = ScreenHandler(self.render_system_select, self.transition_system_select)
        return table
