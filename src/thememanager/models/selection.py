# -*- coding: utf-8 -*-
"""Result of a render step: the chosen value plus the presenter exit code."""

from __future__ import annotations

from typing import NamedTuple

from thememanager.constants import EXIT_BACK, EXIT_CANCELLED, EXIT_SELECTED, YES


class Selection(NamedTuple):
    value: str = ""
    code: int = EXIT_SELECTED

    @property
    def confirmed(self) -> bool:
        return self.code == EXIT_SELECTED

    @property
    def cancelled(self) -> bool:
        """True for both cancel (1) and back (2)."""
        return self.code in (EXIT_CANCELLED, EXIT_BACK)

    @property
    def is_yes(self) -> bool:
        return self.confirmed and self.value == YES


CANCELLED = Selection("", EXIT_CANCELLED)
DONE = Selection("", EXIT_SELECTED)
