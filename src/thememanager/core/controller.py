# -*- coding: utf-8 -*-
"""Screen state machine: render the current screen, then transition."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import NamedTuple

from thememanager.models.screen import HOME_SCREEN, Screen, coerce_screen, is_valid_screen
from thememanager.models.selection import Selection

logger = logging.getLogger(__name__)


RenderStep = Callable[[], Selection]
TransitionStep = Callable[[Selection], Screen]


class ScreenHandler(NamedTuple):
    render: RenderStep
    transition: TransitionStep


class QuitRequested(Exception):
    """Raised by a transition when the user leaves the application."""


class ScreenController:
    """Drive the render/transition loop over a handler table."""

    def __init__(
        self,
        handlers: Mapping[Screen, ScreenHandler],
        *,
        initial: Screen = HOME_SCREEN,
    ) -> None:
        self._handlers = dict(handlers)
        self.current_screen: Screen | int = initial
        self.steps = 0

    def step(self) -> Screen:
        """Run one iteration and return the screen that is current afterwards."""
        if not is_valid_screen(self.current_screen):
            self.current_screen = coerce_screen(self.current_screen)
            return self.current_screen

        screen = Screen(self.current_screen)
        handler = self._handlers.get(screen)
        if handler is None:
            logger.warning("No handler registered for %s, returning to %s", screen.name, HOME_SCREEN.name)
            self.current_screen = HOME_SCREEN
            return self.current_screen

        selection = handler.render()
        logger.debug("%s rendered %r", screen.name, selection)
        next_screen = coerce_screen(handler.transition(selection))
        if next_screen is not screen:
            logger.info("Screen %s -> %s", screen.name, next_screen.name)
        self.current_screen = next_screen
        self.steps += 1
        return next_screen

    def run(self) -> int:
        """Loop until a transition requests quit; returns the process exit code."""
        logger.info("Starting screen loop at %s", coerce_screen(self.current_screen).name)
        try:
            while True:
                self.step()
        except QuitRequested:
            logger.info("Quit requested after %d step(s)", self.steps)
            return 0
