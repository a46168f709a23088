"""Format predicates

Pure `str -> bool` checks behind the format rules. Each accepts a single
non-empty string and answers whether it has the format; they never raise
for malformed input.

Grammars:
- email: simplified RFC 5322 (local@domain.tld)
- url: scheme optional by default, host required, TLD or IP literal
- ip: ipaddress module, IPv4 and/or IPv6
- credit card: 13-19 digits (spaces/hyphens ignored) with a valid Luhn sum
- date: ISO 8601 date or datetime
"""
from __future__ import annotations

import re
from datetime import datetime
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Iterable
from urllib.parse import urlparse

# RFC 5322 simplified pattern
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_HOST_LABEL = re.compile(r"(?!-)(?:[^\W_]|-){1,63}(?<!-)")
_CARD_SEPARATORS = re.compile(r"[ -]")
_CARD_DIGITS = re.compile(r"[0-9]{13,19}")


def is_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value))


def is_ip(value: str, version: int | None = None) -> bool:
    try:
        if version == 4:
            IPv4Address(value)
        elif version == 6:
            IPv6Address(value)
        else:
            ip_address(value)
        return True
    except ValueError:
        return False


def is_url(
    value: str,
    schemes: Iterable[str] = ("http", "https", "ftp"),
    *,
    require_scheme: bool = False,
    require_tld: bool = True,
) -> bool:
    if not value or any(c.isspace() for c in value):
        return False
    has_scheme = "://" in value
    if not has_scheme and require_scheme:
        return False
    try:
        parsed = urlparse(value if has_scheme else f"//{value}")
        host = parsed.hostname
        parsed.port  # raises ValueError for a malformed port
    except ValueError:
        return False

    if has_scheme and parsed.scheme.lower() not in {s.lower() for s in schemes}:
        return False
    if not host:
        return False
    if is_ip(host):
        return True

    labels = host.rstrip(".").split(".")
    if not all(_HOST_LABEL.fullmatch(label) for label in labels):
        return False
    if require_tld:
        return len(labels) >= 2 and labels[-1].isalpha() and len(labels[-1]) >= 2
    return True


def luhn_checksum_valid(digits: str) -> bool:
    total = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def is_credit_card(value: str) -> bool:
    digits = _CARD_SEPARATORS.sub("", value)
    return bool(_CARD_DIGITS.fullmatch(digits)) and luhn_checksum_valid(digits)


def is_date(value: str) -> bool:
    try:
        datetime.fromisoformat(value.replace("Z", "+00:00"))
        return True
    except ValueError:
        return False
