"""Candidate shapes

Rules decide applicability from the runtime shape of the value under
validation. classify() maps a value onto CandidateKind once; everything
that depends on shape (blankness, length, size) matches on the kind, with
an explicit UNSUPPORTED arm.
"""
from __future__ import annotations

import io
import math
import os
from collections.abc import Mapping, Sequence, Set
from decimal import Decimal
from enum import Enum
from numbers import Integral, Real
from typing import Any, Callable

_LOG10_2 = math.log10(2)


class CandidateKind(Enum):
    ABSENT = "absent"
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    SEQUENCE = "sequence"
    SET = "set"
    MAPPING = "mapping"
    UNSUPPORTED = "unsupported"


def classify(value: Any) -> CandidateKind:
    """Shape of a candidate value.

    bool is not a number here, and bytes-like values are not sequences.
    """
    match value:
        case None:
            return CandidateKind.ABSENT
        case bool():
            return CandidateKind.UNSUPPORTED
        case str():
            return CandidateKind.STRING
        case Integral():
            return CandidateKind.INTEGER
        case Real() | Decimal():
            return CandidateKind.NUMBER
        case bytes() | bytearray() | memoryview():
            return CandidateKind.UNSUPPORTED
        case Mapping():
            return CandidateKind.MAPPING
        case Set():
            return CandidateKind.SET
        case Sequence():
            return CandidateKind.SEQUENCE
        case _:
            return CandidateKind.UNSUPPORTED


def is_blank(value: Any) -> bool:
    """True for None, whitespace-only strings and empty collections."""
    match classify(value):
        case CandidateKind.ABSENT:
            return True
        case CandidateKind.STRING:
            return not value.strip()
        case CandidateKind.SEQUENCE | CandidateKind.SET | CandidateKind.MAPPING:
            return len(value) == 0
        case CandidateKind.INTEGER | CandidateKind.NUMBER | CandidateKind.UNSUPPORTED:
            return False


def value_length(value: Any, *, count_digits: bool = False) -> int:
    """Length used by the length rules.

    Strings count characters, sequences and sets count elements. With
    count_digits, integers count their decimal digits, sign included.
    Every other shape has length 0.
    """
    match classify(value):
        case CandidateKind.STRING | CandidateKind.SEQUENCE | CandidateKind.SET:
            return len(value)
        case CandidateKind.INTEGER if count_digits:
            return digit_count(int(value))
        case (
            CandidateKind.INTEGER
            | CandidateKind.ABSENT
            | CandidateKind.NUMBER
            | CandidateKind.MAPPING
            | CandidateKind.UNSUPPORTED
        ):
            return 0


def digit_count(value: int) -> int:
    """Characters in the decimal form of value, sign included.

    Works from bit_length, so integers past the str() conversion limit
    are measured too.
    """
    magnitude = abs(value)
    estimate = int(magnitude.bit_length() * _LOG10_2)
    digits = estimate + 1 if magnitude >= 10 ** estimate else max(estimate, 1)
    return digits + (value < 0)


SizeAccessor = Callable[[Any], int]


def file_size(resource: Any) -> int:
    """Size in bytes of a file-like candidate.

    Accepts paths (str or os.PathLike), objects with an int `size`
    attribute (upload wrappers), real files via fstat, and seekable
    streams. OSError from the filesystem propagates; unknown shapes raise
    TypeError.
    """
    if isinstance(resource, (str, os.PathLike)):
        return os.stat(resource).st_size
    if isinstance(size := getattr(resource, "size", None), int) and not isinstance(size, bool):
        return size
    if hasattr(resource, "fileno"):
        try:
            return os.fstat(resource.fileno()).st_size
        except io.UnsupportedOperation:
            pass
    if hasattr(resource, "seek") and hasattr(resource, "tell"):
        position = resource.tell()
        end = resource.seek(0, io.SEEK_END)
        resource.seek(position)
        return end
    raise TypeError(f"Cannot determine the size of {type(resource).__name__}")
