# -*- coding: utf-8 -*-
"""Wire paths, settings, stores and flows into a runnable controller."""

from __future__ import annotations

from thememanager.config import AppPaths, SettingsStore
from thememanager.core.controller import ScreenController
from thememanager.core.supervisor import OperationSupervisor
from thememanager.models.pack import PackKind
from thememanager.stores.accents import AccentStore
from thememanager.stores.catalog import PackStore
from thememanager.stores.components import ComponentStore
from thememanager.stores.fonts import FontStore
from thememanager.stores.icons import IconStore
from thememanager.stores.leds import LedStore
from thememanager.stores.maintenance import MaintenanceStore
from thememanager.stores.reset import ResetStore
from thememanager.stores.system_layout import SystemLayout
from thememanager.ui.presenter import Presenter
from thememanager.workflows.base import FlowContext
from thememanager.workflows.registry import build_handlers


def build_context(
    paths: AppPaths,
    presenter: Presenter | None = None,
    supervisor: OperationSupervisor | None = None,
) -> FlowContext:
    presenter = presenter or Presenter(paths.base_dir)
    supervisor = supervisor or OperationSupervisor(presenter.start_indicator)
    layout = SystemLayout(paths)
    return FlowContext(
        presenter=presenter,
        supervisor=supervisor,
        settings=SettingsStore(paths.settings_file),
        themes=PackStore(paths, PackKind.THEME, layout),
        overlays=PackStore(paths, PackKind.OVERLAY, layout),
        maintenance=MaintenanceStore(paths, layout),
        accents=AccentStore(paths),
        fonts=FontStore(paths, layout),
        icons=IconStore(paths, layout),
        components=ComponentStore(paths, layout),
        leds=LedStore(paths),
        reset=ResetStore(paths, layout),
    )


def build_controller(ctx: FlowContext) -> ScreenController:
    return ScreenController(build_handlers(ctx))
