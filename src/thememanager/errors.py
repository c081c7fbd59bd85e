# -*- coding: utf-8 -*-
"""Exception hierarchy shared by stores, presenter and workflows."""

from __future__ import annotations


class ThemeManagerError(Exception):
    """Base class for expected application failures."""


class PresenterUnavailableError(ThemeManagerError):
    """Raised when a presenter binary is missing or not executable."""


class OperationError(ThemeManagerError):
    """Raised by store operations that could not complete."""


class IndicatorError(OperationError):
    """Raised when the busy indicator process cannot be launched."""
