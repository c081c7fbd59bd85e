# -*- coding: utf-8 -*-
"""Assemble the handler table for every screen."""

from __future__ import annotations

import logging

from thememanager.models.pack import PackKind
from thememanager.models.screen import Screen
from thememanager.workflows.backup import BackupFlow, RevertFlow
from thememanager.workflows.base import FlowContext, HandlerTable
from thememanager.workflows.catalog import CatalogFlow
from thememanager.workflows.components import ComponentsFlow
from thememanager.workflows.customization import CustomizationFlow
from thememanager.workflows.main_menu import MainMenuFlow
from thememanager.workflows.maintenance import PurgeFlow, ResetFlow, SyncFlow

logger = logging.getLogger(__name__)


def build_handlers(ctx: FlowContext) -> HandlerTable:
    flows = (
        MainMenuFlow(ctx),
        CatalogFlow(ctx, PackKind.THEME),
        CatalogFlow(ctx, PackKind.OVERLAY),
        SyncFlow(ctx),
        BackupFlow(ctx),
        RevertFlow(ctx),
        PurgeFlow(ctx),
        ResetFlow(ctx),
        CustomizationFlow(ctx),
        ComponentsFlow(ctx),
    )
    table: HandlerTable = {}
    for flow in flows:
        for screen, handler in flow.handlers().items():
            if screen in table:
                raise ValueError(f"Screen {screen.name} registered twice")
            table[screen] = handler

    missing = [screen.name for screen in Screen if screen not in table]
    if missing:
        logger.warning("Screens without handlers: %s", ", ".join(missing))
    return table
