"""Rule Constructors

Ergonomic factories for every rule. Each returns a new immutable rule;
calling a factory twice with the same arguments gives two equal,
independently usable rules.

Common keyword arguments:
    error_text: fixed message reported instead of the catalog message.
    messages: resolver used for this rule instead of the active catalog.

Usage:
    from fieldrules.validation import rules

    age = rules.compose([
        rules.required(),
        rules.numeric(),
        rules.min(18),
        rules.max(130, inclusive=False),
    ])
    age("17")  # 'Value must be greater than or equal to 18.'
"""
from __future__ import annotations

import re
from typing import Any, Iterable, Sequence

from fieldrules.messages import MessageResolver

from .candidate import SizeAccessor, file_size
from .validators import (
    Compose,
    CreditCard,
    DateString,
    Email,
    Equal,
    EqualLength,
    File,
    Integer,
    Ip,
    Match,
    Max,
    MaxLength,
    Min,
    MinLength,
    NotEqual,
    Numeric,
    Required,
    Rule,
    Url,
)

__all__ = [
    "compose",
    "required",
    "equal",
    "not_equal",
    "min",
    "max",
    "min_length",
    "max_length",
    "equal_length",
    "email",
    "match",
    "numeric",
    "integer",
    "date_string",
    "url",
    "ip",
    "credit_card",
    "file",
]


def compose(rules: Iterable[Rule]) -> Compose:
    """Sequence rules into one; the first failure wins, [] always passes."""
    return Compose(tuple(rules))


def required(*, error_text: str | None = None, messages: MessageResolver | None = None) -> Required:
    return Required(error_text=error_text, messages=messages)


def equal(value: Any, *, error_text: str | None = None, messages: MessageResolver | None = None) -> Equal:
    return Equal(value, error_text=error_text, messages=messages)


def not_equal(value: Any, *, error_text: str | None = None, messages: MessageResolver | None = None) -> NotEqual:
    return NotEqual(value, error_text=error_text, messages=messages)


def min(
    bound: int | float,
    *,
    inclusive: bool = True,
    error_text: str | None = None,
    messages: MessageResolver | None = None,
) -> Min:
    """Lower bound; with inclusive=False the bound itself fails."""
    return Min(bound, inclusive, error_text=error_text, messages=messages)


def max(
    bound: int | float,
    *,
    inclusive: bool = True,
    error_text: str | None = None,
    messages: MessageResolver | None = None,
) -> Max:
    """Upper bound; with inclusive=False the bound itself fails."""
    return Max(bound, inclusive, error_text=error_text, messages=messages)


def min_length(
    length: int,
    *,
    allow_empty: bool = False,
    error_text: str | None = None,
    messages: MessageResolver | None = None,
) -> MinLength:
    return MinLength(length, allow_empty, error_text=error_text, messages=messages)


def max_length(length: int, *, error_text: str | None = None, messages: MessageResolver | None = None) -> MaxLength:
    return MaxLength(length, error_text=error_text, messages=messages)


def equal_length(
    length: int,
    *,
    allow_empty: bool = False,
    error_text: str | None = None,
    messages: MessageResolver | None = None,
) -> EqualLength:
    return EqualLength(length, allow_empty, error_text=error_text, messages=messages)


def email(*, error_text: str | None = None, messages: MessageResolver | None = None) -> Email:
    return Email(error_text=error_text, messages=messages)


def match(
    pattern: str | re.Pattern,
    *,
    flags: int = 0,
    error_text: str | None = None,
    messages: MessageResolver | None = None,
) -> Match:
    return Match(pattern, flags, error_text=error_text, messages=messages)


def numeric(*, error_text: str | None = None, messages: MessageResolver | None = None) -> Numeric:
    return Numeric(error_text=error_text, messages=messages)


def integer(
    *, radix: int = 10, error_text: str | None = None, messages: MessageResolver | None = None
) -> Integer:
    return Integer(radix, error_text=error_text, messages=messages)


def date_string(*, error_text: str | None = None, messages: MessageResolver | None = None) -> DateString:
    return DateString(error_text=error_text, messages=messages)


def url(
    *,
    schemes: Sequence[str] | None = None,
    require_scheme: bool = False,
    require_tld: bool | None = None,
    error_text: str | None = None,
    messages: MessageResolver | None = None,
) -> Url:
    return Url(schemes, require_scheme, require_tld, error_text=error_text, messages=messages)


def ip(*, version: int | None = None, error_text: str | None = None, messages: MessageResolver | None = None) -> Ip:
    return Ip(version, error_text=error_text, messages=messages)


def credit_card(*, error_text: str | None = None, messages: MessageResolver | None = None) -> CreditCard:
    return CreditCard(error_text=error_text, messages=messages)


def file(
    max_size: int,
    *,
    size_of: SizeAccessor = file_size,
    error_text: str | None = None,
    messages: MessageResolver | None = None,
) -> File:
    """Maximum size in bytes, measured with size_of."""
    return File(max_size, size_of, error_text=error_text, messages=messages)
