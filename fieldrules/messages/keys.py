from __future__ import annotations

from enum import Enum


class MessageKey(str, Enum):
    """Message keys understood by every catalog."""
    REQUIRED = "requiredErrorText"
    MIN = "minErrorText"
    MIN_LENGTH = "minLengthErrorText"
    MAX = "maxErrorText"
    MAX_LENGTH = "maxLengthErrorText"
    EQUAL_LENGTH = "equalLengthErrorText"
    EMAIL = "emailErrorText"
    INTEGER = "integerErrorText"
    EQUAL = "equalErrorText"
    NOT_EQUAL = "notEqualErrorText"
    URL = "urlErrorText"
    MATCH = "matchErrorText"
    NUMERIC = "numericErrorText"
    CREDIT_CARD = "creditCardErrorText"
    IP = "ipErrorText"
    DATE_STRING = "dateStringErrorText"
    FILE = "fileErrorText"

    @property
    def arity(self) -> int:
        """Number of positional parameters the template takes."""
        return 1 if self in _PARAMETERIZED else 0


_PARAMETERIZED = frozenset({
    MessageKey.MIN,
    MessageKey.MIN_LENGTH,
    MessageKey.MAX,
    MessageKey.MAX_LENGTH,
    MessageKey.EQUAL_LENGTH,
    MessageKey.EQUAL,
    MessageKey.NOT_EQUAL,
    MessageKey.FILE,
})
