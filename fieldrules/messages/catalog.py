"""Message Catalogs

A catalog maps every MessageKey to a positional str.format template
("Value must be greater than or equal to {0}."). Catalogs are immutable
once built, so one instance can serve any number of threads.

Bundled catalogs live in fieldrules/messages/locales/<locale>.yaml and are
parsed with PyYAML, then checked with a pydantic model: a catalog missing
a key, or with a template whose placeholders don't fit the key's arity,
is rejected at load time instead of failing on the first invalid input.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from importlib.resources import files
from types import MappingProxyType
from typing import Any, Mapping, Self, Sequence

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from fieldrules.config import settings
from fieldrules.errors import (
    CatalogError,
    MessageResolutionError,
    catalog_invalid,
    message_unavailable,
)
from fieldrules.logging import messages_logger

from .keys import MessageKey

log = messages_logger()


class CatalogFile(BaseModel):
    """Schema of a catalog resource."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    locale: str
    messages: dict[MessageKey, str]

    @model_validator(mode="after")
    def _check_templates(self) -> Self:
        if missing := [k.value for k in MessageKey if k not in self.messages]:
            raise ValueError(f"missing keys: {', '.join(missing)}")
        for key, template in self.messages.items():
            try:
                template.format(*(["x"] * key.arity))
            except (IndexError, KeyError, ValueError) as e:
                raise ValueError(f"template for {key.value} does not take {key.arity} parameter(s): {e}") from e
        return self


def canonicalize_locale(locale: str) -> str:
    """Normalize 'de-AT' / 'DE_at' to 'de_AT'."""
    lang, _, region = locale.replace("-", "_").partition("_")
    return f"{lang.lower()}_{region.upper()}" if region else lang.lower()


def available_locales() -> list[str]:
    """Locales with a bundled catalog resource."""
    root = files("fieldrules.messages").joinpath("locales")
    return sorted(p.name.removesuffix(".yaml") for p in root.iterdir() if p.name.endswith(".yaml"))


@dataclass(frozen=True, slots=True)
class MessageCatalog:
    """Read-only message lookup for one locale.

    Usage:
        catalog = MessageCatalog.load("de")
        catalog.resolve("minErrorText", [5])
        # 'Der Wert muss größer als oder gleich 5 sein.'
    """
    locale: str
    templates: Mapping[MessageKey, str] = field(hash=False)

    @classmethod
    def load(cls, locale: str | None = None) -> MessageCatalog:
        """Load a bundled catalog.

        Tries the canonical locale name, then its language code, then the
        configured fallback locale.
        """
        requested = canonicalize_locale(locale or settings.DEFAULT_LOCALE)
        candidates = [requested, requested.partition("_")[0], canonicalize_locale(settings.FALLBACK_LOCALE)]
        bundled = set(available_locales())
        for name in dict.fromkeys(candidates):
            if name in bundled:
                if name != requested:
                    log.debug("catalog_fallback", requested=requested, loaded=name)
                return _load_bundled(name)
        raise CatalogError(catalog_invalid(requested, f"no bundled catalog among {candidates}"))

    @classmethod
    def from_mapping(cls, locale: str, templates: Mapping[str, str]) -> MessageCatalog:
        """Build a catalog from caller-supplied templates (all keys required)."""
        return cls._from_data({"locale": locale, "messages": dict(templates)})

    @classmethod
    def _from_data(cls, data: Any) -> MessageCatalog:
        locale = data.get("locale", "?") if isinstance(data, dict) else "?"
        try:
            parsed = CatalogFile.model_validate(data)
        except ValidationError as e:
            raise CatalogError(catalog_invalid(locale, str(e), cause=e)) from e
        return cls(locale=parsed.locale, templates=MappingProxyType(dict(parsed.messages)))

    def resolve(self, key: str, params: Sequence[Any] = ()) -> str:
        """Format the template for key with positional params."""
        try:
            message_key = MessageKey(key)
        except ValueError:
            raise MessageResolutionError(message_unavailable(
                str(key), f"Unknown message key '{key}'", locale=self.locale)) from None
        if len(params) != message_key.arity:
            raise MessageResolutionError(message_unavailable(
                message_key.value,
                f"{message_key.value} takes {message_key.arity} parameter(s), got {len(params)}",
                locale=self.locale,
            ))
        return self.templates[message_key].format(*params)

    def __contains__(self, key: object) -> bool:
        try:
            return MessageKey(key) in self.templates
        except ValueError:
            return False


@lru_cache
def _load_bundled(name: str) -> MessageCatalog:
    resource = files("fieldrules.messages").joinpath("locales", f"{name}.yaml")
    try:
        data = yaml.safe_load(resource.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise CatalogError(catalog_invalid(name, "unreadable YAML", cause=e)) from e
    catalog = MessageCatalog._from_data(data)
    log.debug("catalog_loaded", locale=catalog.locale, keys=len(catalog.templates))
    return catalog
