"""Custom exceptions for dobby."""

from __future__ import annotations


class DobbyError(Exception):
    """Base exception for dobby errors."""


class ArityError(DobbyError, TypeError):
    """Raised when a tuple expectation is built with an unsupported arity."""


class NotConvertibleError(DobbyError, TypeError):
    """Raised when a value cannot be converted to an expectation."""


__all__ = ["ArityError", "DobbyError", "NotConvertibleError"]
