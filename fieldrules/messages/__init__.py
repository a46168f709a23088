"""Localized validation messages."""
from .keys import MessageKey
from .catalog import MessageCatalog, CatalogFile, available_locales, canonicalize_locale
from .context import (
    MessageResolver,
    activate,
    deactivate,
    use_messages,
    current_resolver,
)

__all__ = [
    "MessageKey",
    "MessageCatalog",
    "CatalogFile",
    "available_locales",
    "canonicalize_locale",
    "MessageResolver",
    "activate",
    "deactivate",
    "use_messages",
    "current_resolver",
]
