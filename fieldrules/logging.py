"""Structured Logging for fieldrules

The library only emits events; applications decide where they go.
configure_logging() is a convenience for scripts and tests that want:
- Colored, human-readable dev output
- JSON structured output
- Context propagation through contextvars
"""
import logging
import sys

import structlog
from structlog.types import EventDict, Processor

from fieldrules import __version__
from fieldrules.config import settings


def _censor_sensitive_keys(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that redacts sensitive information."""
    sensitive_keys = {"password", "token", "secret", "candidate", "value"}

    def _redact(obj: dict | list | str, depth: int = 0) -> dict | list | str:
        if depth > 5:  # Prevent infinite recursion
            return obj
        if isinstance(obj, dict):
            return {
                k: "[REDACTED]" if k.lower() in sensitive_keys else _redact(v, depth + 1)
                for k, v in obj.items()
            }
        if isinstance(obj, list):
            return [_redact(item, depth + 1) for item in obj]
        return obj

    return _redact(event_dict)


def _add_library_info(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that adds library metadata."""
    event_dict.setdefault("library", "fieldrules")
    event_dict.setdefault("version", __version__)
    return event_dict


def get_shared_processors() -> list[Processor]:
    """Processors used in both console and JSON configurations."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_library_info,
        _censor_sensitive_keys,
    ]


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Configure the logging system.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to settings.LOG_LEVEL.
        json_logs: If True, output JSON format. If False, colored console output.
            Defaults to settings.LOG_JSON.
    """
    if level is None:
        level = settings.LOG_LEVEL
    if json_logs is None:
        json_logs = settings.LOG_JSON
    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors = get_shared_processors()

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )

    # Formatter for stdlib logger (handles logs from third-party libs)
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    library_logger = logging.getLogger("fieldrules")
    library_logger.handlers = [handler]
    library_logger.setLevel(log_level)
    library_logger.propagate = False


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ from the calling module)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """Bind key-value pairs to the current logging context.

    These will appear in all subsequent log messages within this context.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


def unbind_context(*keys: str) -> None:
    """Remove specific keys from the logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


class LoggerRegistry:
    """Registry of pre-configured loggers for the library's layers."""

    _loggers: dict[str, structlog.stdlib.BoundLogger] = {}

    @classmethod
    def get(cls, name: str) -> structlog.stdlib.BoundLogger:
        """Get or create a logger for the given layer."""
        if name not in cls._loggers:
            cls._loggers[name] = get_logger(f"fieldrules.{name}")
        return cls._loggers[name]


def rules_logger() -> structlog.stdlib.BoundLogger:
    """Logger for rule construction and composition."""
    return LoggerRegistry.get("rules")


def messages_logger() -> structlog.stdlib.BoundLogger:
    """Logger for catalog loading and message resolution."""
    return LoggerRegistry.get("messages")


def form_logger() -> structlog.stdlib.BoundLogger:
    """Logger for form-level validation."""
    return LoggerRegistry.get("form")
