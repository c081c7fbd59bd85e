# -*- coding: utf-8 -*-
"""Accent colors, LEDs, system fonts and icon packs."""

from __future__ import annotations

from thememanager.constants import LED_EFFECTS
from thememanager.core.controller import ScreenHandler
from thememanager.core.state import SelectionContext
from thememanager.models.screen import Screen
from thememanager.models.selection import Selection
from thememanager.stores.fonts import RESTORE_FONTS
from thememanager.workflows.base import FlowContext, HandlerTable, route, route_confirm, route_menu

CUSTOMIZATION_ITEMS: dict[str, Screen] = {
    "Accents": Screen.ACCENT_SELECTION,
    "Export Accents": Screen.ACCENT_EXPORTING,
    "LEDs": Screen.LED_SELECTION,
    "Export LEDs": Screen.LED_EXPORTING,
    "Fonts": Screen.FONT_SELECTION,
    "Icon Packs": Screen.ICON_SELECTION,
}


class CustomizationFlow:
    def __init__(self, ctx: FlowContext) -> None:
        self.ctx = ctx

    @property
    def state(self) -> SelectionContext:
        return self.ctx.selection

    def render_menu(self) -> Selection:
        return self.ctx.presenter.show_list(list(CUSTOMIZATION_ITEMS), "Customization")

    def transition_menu(self, selection: Selection) -> Screen:
        if selection.cancelled:
            self.state.reset_customization()
        return route_menu(selection, CUSTOMIZATION_ITEMS, back=Screen.MAIN_MENU, stay=Screen.CUSTOMIZATION_MENU)

    def _back_to_menu(self) -> Screen:
        self.state.reset_customization()
        return Screen.CUSTOMIZATION_MENU

    # Accents

    def render_accents(self) -> Selection:
        try:
            items = self.ctx.accents.gallery_items()
        except OSError as exc:
            return self.ctx.fail(f"Cannot load accent colors: {exc}")
        return self.ctx.presenter.show_gallery(items)

    def transition_accents(self, selection: Selection) -> Screen:
        if selection.confirmed:
            self.state.selected_accent = selection.value
        if selection.cancelled:
            return self._back_to_menu()
        return route(selection, forward=Screen.ACCENT_APPLY_CONFIRM, back=Screen.CUSTOMIZATION_MENU, stay=Screen.ACCENT_SELECTION)

    def render_accent_confirm(self) -> Selection:
        return self.ctx.presenter.confirm(f"Apply accent colors '{self.state.selected_accent}'?")

    def transition_accent_confirm(self, selection: Selection) -> Screen:
        return route_confirm(
            selection, yes=Screen.ACCENT_APPLYING, no=Screen.ACCENT_SELECTION, stay=Screen.ACCENT_APPLY_CONFIRM
        )

    def render_accent_applying(self) -> Selection:
        name = self.state.selected_accent
        return self.ctx.operation_selection(
            f"Applying accent colors '{name}'...",
            lambda: self.ctx.accents.apply(name),
            "Accent colors applied successfully!",
            "Error applying accent colors",
        )

    def render_accent_exporting(self) -> Selection:
        return self.ctx.operation_selection(
            "Exporting accent colors...",
            self.ctx.accents.export_current,
            lambda path: f"Accent settings exported as: {path.name}",
            "Error exporting accent colors",
        )

    # LEDs

    def render_leds(self) -> Selection:
        try:
            themes = self.ctx.leds.available()
        except OSError as exc:
            return self.ctx.fail(f"Cannot read LED themes: {exc}")
        if not themes:
            return self.ctx.fail("No LED themes found in LEDs/Presets or LEDs/Custom")
        payload = {"items": [{"name": theme.name, "color": theme.color} for theme in themes]}
        return self.ctx.presenter.show_json_list(payload, "Select LED Theme")

    def transition_leds(self, selection: Selection) -> Screen:
        if selection.cancelled:
            return self._back_to_menu()
        if selection.confirmed:
            self.state.selected_led = selection.value
        return route(selection, forward=Screen.LED_EFFECT_SELECTION, back=Screen.CUSTOMIZATION_MENU, stay=Screen.LED_SELECTION)

    def render_led_effect(self) -> Selection:
        return self.ctx.presenter.show_list(list(LED_EFFECTS), f"Effect for '{self.state.selected_led}'")

    def transition_led_effect(self, selection: Selection) -> Screen:
        if selection.confirmed:
            if selection.value not in LED_EFFECTS:
                return Screen.LED_EFFECT_SELECTION
            self.state.led_effect = selection.value
        return route(selection, forward=Screen.LED_APPLY_CONFIRM, back=Screen.LED_SELECTION, stay=Screen.LED_EFFECT_SELECTION)

    def render_led_confirm(self) -> Selection:
        return self.ctx.presenter.confirm(f"Apply LED theme '{self.state.selected_led}' ({self.state.led_effect})?")

    def transition_led_confirm(self, selection: Selection) -> Screen:
        return route_confirm(selection, yes=Screen.LED_APPLYING, no=Screen.LED_SELECTION, stay=Screen.LED_APPLY_CONFIRM)

    def render_led_applying(self) -> Selection:
        name = self.state.selected_led
        effect = LED_EFFECTS[self.state.led_effect]
        return self.ctx.operation_selection(
            f"Applying LED theme '{name}'...",
            lambda: self.ctx.leds.apply(name, effect),
            "LED theme applied successfully!",
            "Error applying LED theme",
        )

    def render_led_exporting(self) -> Selection:
        return self.ctx.operation_selection(
            "Exporting LED settings...",
            self.ctx.leds.export_current,
            lambda path: f"LED settings exported as: {path.name}",
            "Error exporting LED settings",
        )

    # Fonts


    def render_fonts(self) -> Selection:
        try:
            fonts = self.ctx.fonts.list_fonts()
            if self.ctx.fonts.has_backup():
                fonts.append(RESTORE_FONTS)
        except OSError as exc:
            return self.ctx.fail(f"Cannot read fonts: {exc}")
        if not fonts:
            return self.ctx.fail("No fonts found. Copy .ttf or .otf files to Fonts/")
        return self.ctx.presenter.show_list(fonts, "Select Font")

    def transition_fonts(self, selection: Selection) -> Screen:
        if selection.cancelled:
            return self._back_to_menu()
        if not selection.confirmed:
            return Screen.FONT_SELECTION
        self.state.selected_font = selection.value
        self.state.font_slot = ""
        if selection.value == RESTORE_FONTS:
            return Screen.FONT_APPLY_CONFIRM
        return Screen.FONT_SLOT_SELECTION

    def render_font_slot(self) -> Selection:
        return self.ctx.presenter.show_list(self.ctx.fonts.slots(), f"Use '{self.state.selected_font}' as")

    def transition_font_slot(self, selection: Selection) -> Screen:
        if selection.confirmed:
            self.state.font_slot = selection.value
        return route(selection, forward=Screen.FONT_APPLY_CONFIRM, back=Screen.FONT_SELECTION, stay=Screen.FONT_SLOT_SELECTION)

    def render_font_confirm(self) -> Selection:
        if self.state.selected_font == RESTORE_FONTS:
            return self.ctx.presenter.confirm("Restore original fonts?")
        return self.ctx.presenter.confirm(f"Apply '{self.state.selected_font}' as {self.state.font_slot} font?")

    def transition_font_confirm(self, selection: Selection) -> Screen:
        return route_confirm(selection, yes=Screen.FONT_APPLYING, no=Screen.FONT_SELECTION, stay=Screen.FONT_APPLY_CONFIRM)

    def render_font_applying(self) -> Selection:
        font, slot = self.state.selected_font, self.state.font_slot
        if font == RESTORE_FONTS:
            return self.ctx.operation_selection(
                "Restoring fonts...",
                self.ctx.fonts.restore,
                "Fonts restored successfully!",
                "Error restoring fonts",
            )
        return self.ctx.operation_selection(
            f"Applying font '{font}'...",
            lambda: self.ctx.fonts.apply(font, slot),
            "Font applied successfully!",
            "Error applying font",
        )

    # Icons

    def render_icons(self) -> Selection:
        try:
            packs = self.ctx.icons.list_packs()
        except OSError as exc:
            return self.ctx.fail(f"Cannot read icon packs: {exc}")
        if not packs:
            return self.ctx.fail("No icon packs found in Icons/")
        return self.ctx.presenter.show_list(packs, "Select Icon Pack")

    def transition_icons(self, selection: Selection) -> Screen:
        if selection.confirmed:
            self.state.selected_icon_pack = selection.value
        if selection.cancelled:
            return self._back_to_menu()
        return route(selection, forward=Screen.ICON_APPLY_CONFIRM, back=Screen.CUSTOMIZATION_MENU, stay=Screen.ICON_SELECTION)

    def render_icon_confirm(self) -> Selection:
        return self.ctx.presenter.confirm(f"Apply icon pack '{self.state.selected_icon_pack}'?")

    def transition_icon_confirm(self, selection: Selection) -> Screen:
        return route_confirm(selection, yes=Screen.ICON_APPLYING, no=Screen.ICON_SELECTION, stay=Screen.ICON_APPLY_CONFIRM)

    def render_icon_applying(self) -> Selection:
        name = self.state.selected_icon_pack
        return self.ctx.operation_selection(
            f"Applying icon pack '{name}'...",
            lambda: self.ctx.icons.apply(name),
            "Icon pack applied successfully!",
            "Error applying icon pack",
        )

    def transition_applied(self, selection: Selection) -> Screen:
        return self._back_to_menu()

    def handlers(self) -> HandlerTable:
        return {
            Screen.CUSTOMIZATION_MENU: ScreenHandler(self.render_menu, self.transition_menu),
            Screen.ACCENT_SELECTION: ScreenHandler(self.render_accents, self.transition_accents),
            Screen.ACCENT_APPLY_CONFIRM: ScreenHandler(self.render_accent_confirm, self.transition_accent_confirm),
            Screen.ACCENT_APPLYING: ScreenHandler(self.render_accent_applying, self.transition_applied),
            Screen.ACCENT_EXPORTING: ScreenHandler(self.render_accent_exporting, self.transition_applied),
            Screen.LED_SELECTION: ScreenHandler(self.render_leds, self.transition_leds),
            Screen.LED_EFFECT_SELECTION: ScreenHandler(self.render_led_effect, self.transition_led_effect),
            Screen.LED_APPLY_CONFIRM: ScreenHandler(self.render_led_confirm, self.transition_led_confirm),
            Screen.LED_APPLYING: ScreenHandler(self.render_led_applying, self.transition_applied),
            Screen.LED_EXPORTING: ScreenHandler(self.render_led_exporting, self.transition_applied),
            Screen.FONT_SELECTION: ScreenHandler(self.render_fonts, self.transition_fonts),
            Screen.FONT_SLOT_SELECTION: ScreenHandler(self.render_font_slot, self.transition_font_slot),
            Screen.FONT_APPLY_CONFIRM: ScreenHandler(self.render_font_confirm, self.transition_font_confirm),
            Screen.FONT_APPLYING: ScreenHandler(self.render_font_applying, self.transition_applied),
            Screen.ICON_SELECTION: ScreenHandler(self.render_icons, self.transition_icons),
            Screen.ICON_APPLY_CONFIRM: ScreenHandler(self.render_icon_confirm, self.transition_icon_confirm),
            Screen.ICON_APPLYING: ScreenHandler(self.render_icon_applying, self.transition_applied),
        }
