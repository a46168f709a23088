"""Exceptions raised by the library.

Only genuine errors are raised: a rule built with an impossible
configuration, or a message that cannot be resolved. A candidate that
fails a rule is never an exception.
"""
from __future__ import annotations

from .types import AppError


class AppErrorException(Exception):
    """Exception wrapper for AppError.

    Use this when an AppError has to leave code that doesn't use the
    Result monad (e.g., rule constructors).
    """

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))

    @property
    def code(self):
        return self.error.code


class ConfigurationError(AppErrorException, ValueError):
    """Rule constructed with invalid parameters (e.g., non-positive bound)."""


class MessageResolutionError(AppErrorException, LookupError):
    """No message could be produced for a failing rule."""


class CatalogError(AppErrorException):
    """A message catalog resource is missing or malformed."""
