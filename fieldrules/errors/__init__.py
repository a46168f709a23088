"""Monadic Error Handling System

Type-safe error handling inspired by Haskell's Either and Rust's Result,
shared across the library.

Key components:
- Result[T, E]: Monadic container for success/failure
- AppError: Base error type with full context
- ErrorCode: Hierarchical error code taxonomy
- Builder functions: Ergonomic error construction
- Exceptions: the few failures that are raised instead of returned

Usage:
    from fieldrules.errors import Ok, Err, Result, AppError, invalid_format

    def parse_port(text: str) -> Result[int, AppError]:
        if not text.isdigit():
            return invalid_format(text, "port")
        return Ok(int(text))
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
)

from .builders import (
    validation_error,
    invalid_type,
    invalid_format,
    invalid_configuration,
    message_unavailable,
    catalog_invalid,
)

from .exceptions import (
    AppErrorException,
    ConfigurationError,
    MessageResolutionError,
    CatalogError,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    # Builders
    "validation_error",
    "invalid_type",
    "invalid_format",
    "invalid_configuration",
    "message_unavailable",
    "catalog_invalid",
    # Exceptions
    "AppErrorException",
    "ConfigurationError",
    "MessageResolutionError",
    "CatalogError",
]
