# -*- coding: utf-8 -*-
"""Selection state carried between screens."""

from __future__ import annotations

from dataclasses import dataclass, field

from thememanager.models.component import SELECTABLE_COMPONENTS, ComponentType


@dataclass
class ComponentSelection:
    """Multi-select over component types with an explicit "all" flag.

    When the flag is set it takes precedence over the explicit members, so
    the same state always resolves to the same components.
    """

    all_selected: bool = False
    members: set[ComponentType] = field(default_factory=set)

    def select_all(self) -> None:
        self.members.clear()
        self.all_selected = True

    def toggle(self, component: ComponentType) -> None:
        if component not in SELECTABLE_COMPONENTS:
            raise ValueError(f"{component.name} cannot be selected individually")
        if self.all_selected:
            self.members = set(SELECTABLE_COMPONENTS)
            self.all_selected = False
        if component in self.members:
            self.members.discard(component)
        else:
            self.members.add(component)

    def is_selected(self, component: ComponentType) -> bool:
        return self.all_selected or component in self.members

    def resolve(self) -> tuple[ComponentType, ...]:
        if self.all_selected:
            return SELECTABLE_COMPONENTS
        return tuple(component for component in SELECTABLE_COMPONENTS if component in self.members)

    def clear(self) -> None:
        self.all_selected = False
        self.members.clear()


@dataclass
class SelectionContext:
    """Mutable selection slots written by transitions and read by later steps."""

    selected_theme: str = ""
    selected_overlay: str = ""
    selected_system: str = ""
    selected_backup: str = ""

    selected_accent: str = ""
    selected_font: str = ""
    font_slot: str = ""
    selected_icon_pack: str = ""
    selected_led: str = ""
    led_effect: str = ""

    export_name: str = ""
    component_context: str = ""
    import_type: ComponentType | None = None
    export_type: ComponentType | None = None
    import_item: str = ""
    convert_theme: str = ""
    import_components: ComponentSelection = field(default_factory=ComponentSelection)
    export_components: ComponentSelection = field(default_factory=ComponentSelection)
    convert_components: ComponentSelection = field(default_factory=ComponentSelection)

    reset_option: str = ""

    def reset_catalog(self) -> None:
        self.selected_theme = ""
        self.selected_overlay = ""
        self.selected_system = ""
        self.selected_backup = ""

    def reset_customization(self) -> None:
        self.selected_accent = ""
        self.selected_font = ""
        self.font_slot = ""
        self.selected_icon_pack = ""
        self.selected_led = ""
        self.led_effect = ""

    def reset_components(self) -> None:
        self.export_name = ""
        self.component_context = ""
        self.import_type = None
        self.export_type = None
        self.import_item = ""
        self.convert_theme = ""
        self.import_components.clear()
        self.export_components.clear()
        self.convert_components.clear()

    def reset(self) -> None:
        self.reset_catalog()
        self.reset_customization()
        self.reset_components()
        self.reset_option = ""
