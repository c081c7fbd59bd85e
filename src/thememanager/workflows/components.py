# -*- coding: utf-8 -*-
"""Import, export and convert component packs."""

from __future__ import annotations

import logging
from collections.abc import Callable

from thememanager.constants import ALL_COMPONENTS, CONTINUE_WITH_SELECTED, MESSAGE_TIMEOUT_LONG
from thememanager.core.controller import ScreenHandler
from thememanager.core.state import ComponentSelection, SelectionContext
from thememanager.models.component import SELECTABLE_COMPONENTS, ComponentType
from thememanager.models.screen import Screen
from thememanager.models.selection import Selection
from thememanager.workflows.base import FlowContext, HandlerTable, route, route_confirm, route_menu

logger = logging.getLogger(__name__)

COMPONENTS_ITEMS: dict[str, Screen] = {
    "Import": Screen.IMPORT_TYPE,
    "Export": Screen.EXPORT_TYPE,
    "Convert Theme": Screen.CONVERT_SELECTION,
}

CHECKED = "[x] "
UNCHECKED = "[ ] "


def toggle_label(name: str, checked: bool) -> str:
    return (CHECKED if checked else UNCHECKED) + name


def strip_toggle_label(label: str) -> str:
    for prefix in (CHECKED, UNCHECKED):
        if label.startswith(prefix):
            return label[len(prefix):]
    return label


class ComponentToggleScreen:
    """Multi-select over components, shared by import, export and convert."""

    def __init__(
        self,
        ctx: FlowContext,
        screen: Screen,
        title: str,
        get_selection: Callable[[], ComponentSelection],
        forward: Screen,
        back: Screen,
    ) -> None:
        self.ctx = ctx
        self.screen = screen
        self.title = title
        self._get_selection = get_selection
        self.forward = forward
        self.back = back

    def items(self) -> list[str]:
        selection = self._get_selection()
        items = [toggle_label(ALL_COMPONENTS, selection.all_selected)]
        items += [toggle_label(component.plural, selection.is_selected(component)) for component in SELECTABLE_COMPONENTS]
        items.append(CONTINUE_WITH_SELECTED)
        return items

    def render(self) -> Selection:
        return self.ctx.presenter.show_list(self.items(), self.title)

    def transition(self, selection: Selection) -> Screen:
        if not selection.confirmed:
            return route(selection, forward=self.screen, back=self.back, stay=self.screen)

        components = self._get_selection()
        if selection.value == CONTINUE_WITH_SELECTED:
            if not components.resolve():
                self.ctx.presenter.show_message("Select at least one component", MESSAGE_TIMEOUT_LONG)
                return self.screen
            return self.forward

        name = strip_toggle_label(selection.value)
        if name == ALL_COMPONENTS:
            if components.all_selected:
                components.clear()
            else:
                components.select_all()
            return self.screen

        component = ComponentType.from_label(name)
        if component is None or component not in SELECTABLE_COMPONENTS:
            logger.warning("Unknown component entry %r", selection.value)
            return self.screen
        components.toggle(component)
        return self.screen

    def handler(self) -> ScreenHandler:
        return ScreenHandler(self.render, self.transition)


def _component_summary(components: tuple[ComponentType, ...]) -> str:
    if components == SELECTABLE_COMPONENTS:
        return "all components"
    return ", ".join(component.plural for component in components)


class ComponentsFlow:
    """Components menu and the import, export and convert sub-flows."""

    def __init__(self, ctx: FlowContext) -> None:
        self.ctx = ctx
        self.import_toggle = ComponentToggleScreen(
            ctx, Screen.IMPORT_COMPONENTS, "Import Components",
            lambda: self.state.import_components, Screen.IMPORT_CONFIRM, Screen.IMPORT_SELECTION,
        )
        self.export_toggle = ComponentToggleScreen(
            ctx, Screen.EXPORT_COMPONENTS, "Export Components",
            lambda: self.state.export_components, Screen.EXPORT_CONFIRM, Screen.EXPORT_NAME,
        )
        self.convert_toggle = ComponentToggleScreen(
            ctx, Screen.CONVERT_COMPONENTS, "Convert Components",
            lambda: self.state.convert_components, Screen.CONVERT_CONFIRM, Screen.CONVERT_SELECTION,
        )

    @property
    def state(self) -> SelectionContext:
        return self.ctx.selection

    def _back_to_menu(self) -> Screen:
        self.state.reset_components()
        return Screen.COMPONENTS_MENU

    def render_menu(self) -> Selection:
        return self.ctx.presenter.show_list(list(COMPONENTS_ITEMS), "Components")

    def transition_menu(self, selection: Selection) -> Screen:
        target = route_menu(selection, COMPONENTS_ITEMS, back=Screen.MAIN_MENU, stay=Screen.COMPONENTS_MENU)
        if target is not Screen.COMPONENTS_MENU:
            self.state.reset_components()
            self.state.component_context = selection.value if target is not Screen.MAIN_MENU else ""
        return target

    def _render_type_menu(self, title: str) -> Selection:
        return self.ctx.presenter.show_list([component.label for component in ComponentType], title)

    def _pick_type(self, selection: Selection) -> ComponentType | None:
        if not selection.confirmed:
            return None
        component = ComponentType.from_label(selection.value)
        if component is None:
            logger.warning("Unknown component type %r", selection.value)
        return component

    # Import

    def render_import_type(self) -> Selection:
        return self._render_type_menu("Import Type")

    def transition_import_type(self, selection: Selection) -> Screen:
        component = self._pick_type(selection)
        if component is not None:
            self.state.import_type = component
            return Screen.IMPORT_SELECTION
        if selection.cancelled:
            return self._back_to_menu()
        return Screen.IMPORT_TYPE

    def render_import_selection(self) -> Selection:
        component = self.state.import_type or ComponentType.FULL_THEME
        try:
            items = self.ctx.components.list_importable(component)
        except OSError as exc:
            return self.ctx.fail(f"Cannot read imports: {exc}")
        if not items:
            return self.ctx.fail(f"No {component.label.lower()}s found in {component.dirname}/Imports")
        return self.ctx.presenter.show_list(items, f"Import {component.label}")

    def transition_import_selection(self, selection: Selection) -> Screen:
        if not selection.confirmed:
            return route(selection, forward=Screen.IMPORT_SELECTION, back=Screen.IMPORT_TYPE, stay=Screen.IMPORT_SELECTION)
        self.state.import_item = selection.value
        if self.state.import_type is ComponentType.FULL_THEME:
            self.state.import_components.select_all()
            return Screen.IMPORT_COMPONENTS
        return Screen.IMPORT_CONFIRM

    def render_import_confirm(self) -> Selection:
        message = f"Import '{self.state.import_item}'?"
        if self.state.import_type is ComponentType.FULL_THEME:
            summary = _component_summary(self.state.import_components.resolve())
            message = f"Import {summary} from '{self.state.import_item}'?"
        return self.ctx.presenter.confirm(message)

    def transition_import_confirm(self, selection: Selection) -> Screen:
        return route_confirm(selection, yes=Screen.IMPORTING, no=Screen.IMPORT_SELECTION, stay=Screen.IMPORT_CONFIRM)

    def render_importing(self) -> Selection:
        component = self.state.import_type or ComponentType.FULL_THEME
        item = self.state.import_item
        selected = self.state.import_components.resolve()
        return self.ctx.operation_selection(
            f"Importing '{item}'...",
            lambda: self.ctx.components.import_pack(component, item, selected),
            "Import complete!",
            "Error importing",
        )

    # Export

    def render_export_type(self) -> Selection:
        return self._render_type_menu("Export Type")

    def transition_export_type(self, selection: Selection) -> Screen:
        component = self._pick_type(selection)
        if component is not None:
            self.state.export_type = component
            return Screen.EXPORT_NAME
        if selection.cancelled:
            return self._back_to_menu()
        return Screen.EXPORT_TYPE

    def render_export_name(self) -> Selection:
        component = self.state.export_type or ComponentType.FULL_THEME
        try:
            names = self.ctx.components.next_export_names(component)
        except OSError as exc:
            return self.ctx.fail(f"Cannot read exports: {exc}")
        return self.ctx.presenter.show_list(names, "Export Name")

    def transition_export_name(self, selection: Selection) -> Screen:
        if not selection.confirmed:
            return route(selection, forward=Screen.EXPORT_NAME, back=Screen.EXPORT_TYPE, stay=Screen.EXPORT_NAME)
        self.state.export_name = selection.value
        if self.state.export_type is ComponentType.FULL_THEME:
            self.state.export_components.select_all()
            return Screen.EXPORT_COMPONENTS
        return Screen.EXPORT_CONFIRM

    def render_export_confirm(self) -> Selection:
        component = self.state.export_type or ComponentType.FULL_THEME
        return self.ctx.presenter.confirm(f"Export current {component.label.lower()} as '{self.state.export_name}'?")

    def transition_export_confirm(self, selection: Selection) -> Screen:
        return route_confirm(selection, yes=Screen.EXPORTING, no=Screen.EXPORT_NAME, stay=Screen.EXPORT_CONFIRM)

    def render_exporting(self) -> Selection:
        component = self.state.export_type or ComponentType.FULL_THEME
        name = self.state.export_name
        selected = self.state.export_components.resolve()
        return self.ctx.operation_selection(
            f"Exporting '{name}'...",
            lambda: self.ctx.components.export_pack(component, name, selected),
            f"Exported to {component.dirname}/Exports/{name}{component.extension}",
            "Error exporting",
        )

    # Convert

    def render_convert_selection(self) -> Selection:
        try:
            themes = self.ctx.components.list_convertible()
        except OSError as exc:
            return self.ctx.fail(f"Cannot read themes: {exc}")
        if not themes:
            return self.ctx.fail("No installed themes to convert")
        return self.ctx.presenter.show_list(themes, "Convert Theme")

    def transition_convert_selection(self, selection: Selection) -> Screen:
        if not selection.confirmed:
            if selection.cancelled:
                return self._back_to_menu()
            return Screen.CONVERT_SELECTION
        self.state.convert_theme = selection.value
        self.state.convert_components.select_all()
        return Screen.CONVERT_COMPONENTS

    def render_convert_confirm(self) -> Selection:
        summary = _component_summary(self.state.convert_components.resolve())
        return self.ctx.presenter.confirm(f"Extract {summary} from '{self.state.convert_theme}'?")

    def transition_convert_confirm(self, selection: Selection) -> Screen:
        return route_confirm(selection, yes=Screen.CONVERTING, no=Screen.CONVERT_COMPONENTS, stay=Screen.CONVERT_CONFIRM)

    def render_converting(self) -> Selection:
        theme = self.state.convert_theme
        selected = self.state.convert_components.resolve()
        return self.ctx.operation_selection(
            f"Converting '{theme}'...",
            lambda: self.ctx.components.convert(theme, selected),
            "Theme converted into component packs!",
            "Error converting theme",
        )

    def transition_done(self, selection: Selection) -> Screen:
        return self._back_to_menu()

    def handlers(self) -> HandlerTable:
        return {
            Screen.COMPONENTS_MENU: ScreenHandler(self.render_menu, self.transition_menu),
            Screen.IMPORT_TYPE: ScreenHandler(self.render_import_type, self.transition_import_type),
            Screen.IMPORT_SELECTION: ScreenHandler(self.render_import_selection, self.transition_import_selection),
            Screen.IMPORT_COMPONENTS: self.import_toggle.handler(),
            Screen.IMPORT_CONFIRM: ScreenHandler(self.render_import_confirm, self.transition_import_confirm),
            Screen.IMPORTING: ScreenHandler(self.render_importing, self.transition_done),
            Screen.EXPORT_TYPE: ScreenHandler(self.render_export_type, self.transition_export_type),
            Screen.EXPORT_NAME: ScreenHandler(self.render_export_name, self.transition_export_name),
            Screen.EXPORT_COMPONENTS: self.export_toggle.handler(),
            Screen.EXPORT_CONFIRM: ScreenHandler(self.render_export_confirm, self.transition_export_confirm),
            Screen.EXPORTING: ScreenHandler(self.render_exporting, self.transition_done),
            Screen.CONVERT_SELECTION: ScreenHandler(self.render_convert_selection, self.transition_convert_selection),
            Screen.CONVERT_COMPONENTS: self.convert_toggle.handler(),
            Screen.CONVERT_CONFIRM: ScreenHandler(self.render_convert_confirm, self.transition_convert_confirm),
            Screen.CONVERTING: ScreenHandler(self.render_converting, self.transition_done),
        }
