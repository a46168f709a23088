"""Explicit Numeric Coercion

Numeric rules accept numbers and numeric strings. Coercion is explicit and
fallible: it returns a Result, and an Err means "this rule does not apply
to the candidate", never an exception.

Strings follow a strict grammar: surrounding whitespace is ignored,
digit-group underscores are rejected, "0x" hex integers are accepted for
plain number parsing, and floats use Python's float() syntax.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fieldrules.errors import AppError, Ok, Result, invalid_format, invalid_type

from .candidate import CandidateKind, classify

T = TypeVar("T")

_HEX_INT = re.compile(r"[+-]?0[xX][0-9a-fA-F]+")


@dataclass(frozen=True, slots=True)
class CoercionRule(ABC, Generic[T]):
    """Base class for string coercions."""

    @property
    @abstractmethod
    def target(self) -> str:
        """Name of the target type, for error messages."""

    @abstractmethod
    def coerce(self, value: str) -> Result[T, AppError]:
        """Coerce value to the target type."""

    def can_coerce(self, value: Any) -> bool:
        return isinstance(value, str) and self.coerce(value).is_ok()

    def __call__(self, value: str) -> Result[T, AppError]:
        return self.coerce(value)


@dataclass(frozen=True, slots=True)
class StringToNumber(CoercionRule[int | float]):
    """Coerce string to int when it is an integer literal, else float."""

    @property
    def target(self) -> str:
        return "number"

    def coerce(self, value: str) -> Result[int | float, AppError]:
        stripped = value.strip()
        if not stripped or "_" in stripped:
            return invalid_format(value, self.target, origin="coercion")
        try:
            return Ok(int(stripped))
        except ValueError:
            pass
        if _HEX_INT.fullmatch(stripped):
            return Ok(int(stripped, 16))
        try:
            return Ok(float(stripped))
        except ValueError as e:
            return invalid_format(value, self.target, origin="coercion", cause=e)


@dataclass(frozen=True, slots=True)
class StringToInt(CoercionRule[int]):
    """Coerce string to int in the given radix (2..36)."""
    radix: int = 10

    @property
    def target(self) -> str:
        return f"base-{self.radix} integer"

    def coerce(self, value: str) -> Result[int, AppError]:
        stripped = value.strip()
        if not stripped or "_" in stripped:
            return invalid_format(value, self.target, origin="coercion")
        try:
            return Ok(int(stripped, self.radix))
        except ValueError as e:
            return invalid_format(value, self.target, origin="coercion", cause=e)


_TO_NUMBER = StringToNumber()


def coerce_number(value: Any) -> Result[Any, AppError]:
    """Numeric view of a candidate.

    Numbers pass through unchanged, strings are parsed, every other shape
    is an Err.
    """
    match classify(value):
        case CandidateKind.INTEGER | CandidateKind.NUMBER:
            return Ok(value)
        case CandidateKind.STRING:
            return _TO_NUMBER(value)
        case _:
            return invalid_type(value, "number or numeric string", origin="coercion")
