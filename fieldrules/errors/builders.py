"""Error Builders

Ergonomic constructors for the typed errors raised or returned by the
rule layer. Each builder creates an AppError with the right code and
metadata.
"""
from typing import Any

from .types import AppError, ErrorCode, ErrorContext, Err


def validation_error(
    message: str,
    *,
    code: ErrorCode,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create validation-layer error."""
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in metadata.items() if v is not None},
        cause=cause,
    ))


def invalid_type(value: Any, expected: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Expected {expected}, got {type(value).__name__}",
        code=ErrorCode.E2004_INVALID_TYPE,
        origin=origin,
        expected=expected,
        actual=type(value).__name__,
    )


def invalid_format(
    value: str, expected: str, origin: str = "", cause: Exception | None = None
) -> Err[AppError]:
    return validation_error(
        f"Cannot read '{value[:50]}' as {expected}",
        code=ErrorCode.E2002_INVALID_FORMAT,
        origin=origin,
        cause=cause,
        expected=expected,
    )


def invalid_configuration(rule: str, message: str, **metadata) -> AppError:
    """Build the error carried by ConfigurationError.

    Returned unwrapped since configuration problems are raised, not
    propagated through Result.
    """
    return AppError(
        code=ErrorCode.E2006_INVALID_RULE_CONFIGURATION,
        message=f"{rule}: {message}",
        context=ErrorContext(origin=rule),
        metadata={"rule": rule, **metadata},
    )


def message_unavailable(key: str, message: str, **metadata) -> AppError:
    return AppError(
        code=ErrorCode.E2007_MESSAGE_UNAVAILABLE,
        message=message,
        context=ErrorContext(origin="messages"),
        metadata={"key": key, **metadata},
    )


def catalog_invalid(locale: str, message: str, cause: Exception | None = None) -> AppError:
    return AppError(
        code=ErrorCode.E2008_CATALOG_INVALID,
        message=f"Message catalog '{locale}' is invalid: {message}",
        context=ErrorContext(origin="messages"),
        metadata={"locale": locale},
        cause=cause,
    )
