# -*- coding: utf-8 -*-
"""Shared collaborators and routing helpers for every flow."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from thememanager.config import SettingsStore
from thememanager.constants import MESSAGE_TIMEOUT_LONG, MESSAGE_TIMEOUT_SHORT
from thememanager.core.controller import ScreenHandler
from thememanager.core.state import SelectionContext
from thememanager.core.supervisor import OperationSupervisor
from thememanager.errors import OperationError
from thememanager.models.pack import PackKind
from thememanager.models.screen import Screen
from thememanager.models.selection import CANCELLED, DONE, Selection
from thememanager.stores.accents import AccentStore
from thememanager.stores.catalog import PackStore
from thememanager.stores.components import ComponentStore
from thememanager.stores.fonts import FontStore
from thememanager.stores.icons import IconStore
from thememanager.stores.leds import LedStore
from thememanager.stores.maintenance import MaintenanceStore
from thememanager.stores.reset import ResetStore
from thememanager.ui.presenter import Presenter

logger = logging.getLogger(__name__)

HandlerTable = dict[Screen, ScreenHandler]


@dataclass
class FlowContext:
    """Everything a flow needs: presenter, supervisor, state and stores."""

    presenter: Presenter
    supervisor: OperationSupervisor
    settings: SettingsStore
    themes: PackStore
    overlays: PackStore
    maintenance: MaintenanceStore
    accents: AccentStore
    fonts: FontStore
    icons: IconStore
    components: ComponentStore
    leds: LedStore
    reset: ResetStore
    selection: SelectionContext = field(default_factory=SelectionContext)

    def pack_store(self, kind: PackKind) -> PackStore:
        return self.themes if kind is PackKind.THEME else self.overlays

    def run_operation(
        self,
        busy_message: str,
        operation: Callable[[], Any],
        success_message: str | Callable[[Any], str],
        failure_prefix: str,
    ) -> bool:
        """Run a state-changing store call under the busy indicator and report the outcome.

        A callable `success_message` receives the operation's result.
        """
        try:
            result = self.supervisor.run(busy_message, operation)
        except (OperationError, OSError) as exc:
            logger.error("%s: %s", failure_prefix, exc)
            self.presenter.show_message(f"{failure_prefix}: {exc}", MESSAGE_TIMEOUT_LONG)
            return False
        if callable(success_message):
            success_message = success_message(result)
        logger.info(success_message)
        self.presenter.show_message(success_message, MESSAGE_TIMEOUT_SHORT)
        return True

    def operation_selection(
        self,
        busy_message: str,
        operation: Callable[[], Any],
        success_message: str | Callable[[Any], str],
        failure_prefix: str,
    ) -> Selection:
        """`run_operation` folded into a render result: DONE on success, CANCELLED otherwise."""
        if self.run_operation(busy_message, operation, success_message, failure_prefix):
            return DONE
        return CANCELLED

    def fail(self, message: str) -> Selection:
        """Report a failed render precondition."""
        logger.warning(message)
        self.presenter.show_message(message, MESSAGE_TIMEOUT_LONG)
        return CANCELLED


def route(selection: Selection, *, forward: Screen, back: Screen, stay: Screen) -> Screen:
    """Map an input result: confirmed -> forward, cancel/back -> back, anything else -> stay."""
    if selection.confirmed:
        return forward
    if selection.cancelled:
        return back
    logger.debug("Unhandled exit code %d, staying on %s", selection.code, stay.name)
    return stay


def route_confirm(selection: Selection, *, yes: Screen, no: Screen, stay: Screen) -> Screen:
    """Yes/No dialogs: "Yes" -> yes, "No" or cancel/back -> no, anything else -> stay."""
    if selection.is_yes:
        return yes
    if selection.confirmed or selection.cancelled:
        return no
    logger.debug("Unhandled exit code %d, staying on %s", selection.code, stay.name)
    return stay


def route_menu(selection: Selection, items: dict[str, Screen], *, back: Screen, stay: Screen) -> Screen:
    if selection.confirmed:
        target = items.get(selection.value)
        if target is None:
            logger.warning("Unknown menu entry %r on %s", selection.value, stay.name)
            return stay
        return target
    return route(selection, forward=stay, back=back, stay=stay)
