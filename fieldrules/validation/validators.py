"""Compositional Rule System

Every rule is a callable `candidate -> message | None`: None means the
candidate is acceptable, a string is the message to show. Rules combine
with `&` (or compose()) into a fail-fast pipeline that reports the first
failing rule's message.

Features:
- Frozen dataclass rules: configuration is fixed at construction
- Configuration errors raised at construction, never per candidate
- Absence-tolerant: only Required treats None as a failure
  (Equal/NotEqual compare None like any other value)
- Messages from error_text, an explicit resolver, or the active catalog
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, NoReturn, Sequence

from fieldrules.config import settings
from fieldrules.errors import ConfigurationError, Err, Ok, invalid_configuration
from fieldrules.logging import rules_logger
from fieldrules.messages import MessageKey, MessageResolver, current_resolver

from . import predicates
from .candidate import CandidateKind, SizeAccessor, classify, file_size, is_blank, value_length
from .coercion import StringToInt, coerce_number

log = rules_logger()

Rule = Callable[[Any], "str | None"]


def _reject(rule: str, message: str, cause: Exception | None = None, **metadata) -> NoReturn:
    """Refuse to build a rule with an impossible configuration."""
    log.warning("rule_configuration_rejected", rule=rule, reason=message)
    raise ConfigurationError(invalid_configuration(rule, message, **metadata)) from cause


def _require(condition: bool, rule: str, message: str, **metadata) -> None:
    if not condition:
        _reject(rule, message, **metadata)


def _is_number(value: Any) -> bool:
    return classify(value) in (CandidateKind.INTEGER, CandidateKind.NUMBER)


def _is_count(value: Any) -> bool:
    return classify(value) is CandidateKind.INTEGER and value > 0


class ValidationRule(ABC):
    """Base class for rules.

    Rules are immutable and composable via operators:
    - & : run left, then right, report the first failure
    - with_message(): replace the failure message
    """

    @abstractmethod
    def check(self, candidate: Any) -> str | None:
        """Validate a candidate. Returns the failure message or None."""

    @property
    @abstractmethod
    def constraint_name(self) -> str:
        """Short description of the constraint, for debugging."""

    def __call__(self, candidate: Any) -> str | None: return self.check(candidate)

    def __and__(self, other: Rule) -> Compose: return Compose((self, other))

    def with_message(self, message: str) -> WithMessage: return WithMessage(self, message)


@dataclass(frozen=True, slots=True, kw_only=True)
class MessageRule(ValidationRule):
    """Rule that reports a catalog message unless error_text overrides it."""
    key: ClassVar[MessageKey]
    error_text: str | None = None
    messages: MessageResolver | None = field(default=None, repr=False, hash=False)

    def fail(self, *params: Any) -> str:
        """Message for a failing candidate."""
        if self.error_text is not None:
            return self.error_text
        resolver = self.messages if self.messages is not None else current_resolver()
        return resolver.resolve(self.key.value, params)


# ============================================================================
# Presence and Equality
# ============================================================================

@dataclass(frozen=True, slots=True)
class Required(MessageRule):
    """Fail on None, blank strings and empty collections."""
    key: ClassVar[MessageKey] = MessageKey.REQUIRED

    @property
    def constraint_name(self) -> str:
        return "required"

    def check(self, candidate: Any) -> str | None:
        return self.fail() if is_blank(candidate) else None


@dataclass(frozen=True, slots=True)
class Equal(MessageRule):
    """Fail unless candidate == value. None is compared, not skipped."""
    key: ClassVar[MessageKey] = MessageKey.EQUAL
    value: Any

    @property
    def constraint_name(self) -> str:
        return f"equal[{self.value!r}]"

    def check(self, candidate: Any) -> str | None:
        return self.fail(self.value) if candidate != self.value else None


@dataclass(frozen=True, slots=True)
class NotEqual(MessageRule):
    """Fail when candidate == value. None is compared, not skipped."""
    key: ClassVar[MessageKey] = MessageKey.NOT_EQUAL
    value: Any

    @property
    def constraint_name(self) -> str:
        return f"not_equal[{self.value!r}]"

    def check(self, candidate: Any) -> str | None:
        return self.fail(self.value) if candidate == self.value else None


# ============================================================================
# Numeric Bounds
# ============================================================================

@dataclass(frozen=True, slots=True)
class Min(MessageRule):
    """Lower bound for numbers and numeric strings.

    Candidates without a numeric reading are out of scope and pass;
    pair with Numeric to reject them.
    """
    key: ClassVar[MessageKey] = MessageKey.MIN
    bound: int | float
    inclusive: bool = True

    def __post_init__(self):
        _require(_is_number(self.bound), "min", "bound must be a number", bound=repr(self.bound))

    @property
    def constraint_name(self) -> str:
        return f"{'>=' if self.inclusive else '>'}{self.bound}"

    def check(self, candidate: Any) -> str | None:
        if candidate is None:
            return None
        match coerce_number(candidate):
            case Ok(number):
                too_small = number < self.bound if self.inclusive else number <= self.bound
                return self.fail(self.bound) if too_small else None
            case Err():
                return None


@dataclass(frozen=True, slots=True)
class Max(MessageRule):
    """Upper bound for numbers and numeric strings."""
    key: ClassVar[MessageKey] = MessageKey.MAX
    bound: int | float
    inclusive: bool = True

    def __post_init__(self):
        _require(_is_number(self.bound), "max", "bound must be a number", bound=repr(self.bound))

    @property
    def constraint_name(self) -> str:
        return f"{'<=' if self.inclusive else '<'}{self.bound}"

    def check(self, candidate: Any) -> str | None:
        if candidate is None:
            return None
        match coerce_number(candidate):
            case Ok(number):
                too_large = number > self.bound if self.inclusive else number >= self.bound
                return self.fail(self.bound) if too_large else None
            case Err():
                return None


# ============================================================================
# Length Bounds
# ============================================================================

@dataclass(frozen=True, slots=True)
class MinLength(MessageRule):
    key: ClassVar[MessageKey] = MessageKey.MIN_LENGTH
    length: int
    allow_empty: bool = False

    def __post_init__(self):
        _require(_is_count(self.length), "min_length", "length must be a positive integer", length=repr(self.length))

    @property
    def constraint_name(self) -> str:
        return f"min_length[{self.length}]"

    def check(self, candidate: Any) -> str | None:
        length = value_length(candidate)
        if length < self.length and not (self.allow_empty and length == 0):
            return self.fail(self.length)
        return None


@dataclass(frozen=True, slots=True)
class MaxLength(MessageRule):
    key: ClassVar[MessageKey] = MessageKey.MAX_LENGTH
    length: int

    def __post_init__(self):
        _require(_is_count(self.length), "max_length", "length must be a positive integer", length=repr(self.length))

    @property
    def constraint_name(self) -> str:
        return f"max_length[{self.length}]"

    def check(self, candidate: Any) -> str | None:
        if candidate is not None and value_length(candidate) > self.length:
            return self.fail(self.length)
        return None


@dataclass(frozen=True, slots=True)
class EqualLength(MessageRule):
    """Exact length; integers are measured by their digit count."""
    key: ClassVar[MessageKey] = MessageKey.EQUAL_LENGTH
    length: int
    allow_empty: bool = False

    def __post_init__(self):
        _require(_is_count(self.length), "equal_length", "length must be a positive integer", length=repr(self.length))

    @property
    def constraint_name(self) -> str:
        return f"length[{self.length}]"

    def check(self, candidate: Any) -> str | None:
        length = value_length(candidate, count_digits=True)
        if length != self.length and not (self.allow_empty and length == 0):
            return self.fail(self.length)
        return None


# ============================================================================
# Format Rules
# ============================================================================

@dataclass(frozen=True, slots=True, kw_only=True)
class FormatRule(MessageRule):
    """Rule that only looks at non-empty strings.

    None, "" and non-string candidates always pass; use Required to
    demand a value.
    """

    @abstractmethod
    def accepts(self, value: str) -> bool:
        """True when the non-empty string has the expected format."""

    def check(self, candidate: Any) -> str | None:
        if isinstance(candidate, str) and candidate and not self.accepts(candidate):
            return self.fail()
        return None


@dataclass(frozen=True, slots=True)
class Email(FormatRule):
    key: ClassVar[MessageKey] = MessageKey.EMAIL

    @property
    def constraint_name(self) -> str:
        return "email"

    def accepts(self, value: str) -> bool:
        return predicates.is_email(value)


@dataclass(frozen=True, slots=True)
class Match(FormatRule):
    """Fail when the pattern is found nowhere in the string (re.search)."""
    key: ClassVar[MessageKey] = MessageKey.MATCH
    pattern: str | re.Pattern
    flags: int = 0
    _compiled: re.Pattern = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self):
        try:
            compiled = re.compile(self.pattern, self.flags)
        except (re.error, TypeError, ValueError) as e:
            _reject("match", f"invalid pattern: {e}", cause=e, pattern=str(self.pattern))
        object.__setattr__(self, "_compiled", compiled)

    @property
    def constraint_name(self) -> str:
        return f"pattern[{self._compiled.pattern}]"

    def accepts(self, value: str) -> bool:
        return self._compiled.search(value) is not None


@dataclass(frozen=True, slots=True)
class Numeric(FormatRule):
    key: ClassVar[MessageKey] = MessageKey.NUMERIC

    @property
    def constraint_name(self) -> str:
        return "numeric"

    def accepts(self, value: str) -> bool:
        return coerce_number(value).is_ok()


@dataclass(frozen=True, slots=True)
class Integer(FormatRule):
    key: ClassVar[MessageKey] = MessageKey.INTEGER
    radix: int = 10
    _coercion: StringToInt = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self):
        _require(classify(self.radix) is CandidateKind.INTEGER and 2 <= self.radix <= 36,
            "integer", "radix must be between 2 and 36", radix=repr(self.radix))
        object.__setattr__(self, "_coercion", StringToInt(self.radix))

    @property
    def constraint_name(self) -> str:
        return "integer" if self.radix == 10 else f"integer[base {self.radix}]"

    def accepts(self, value: str) -> bool:
        return self._coercion.coerce(value).is_ok()


@dataclass(frozen=True, slots=True)
class DateString(FormatRule):
    key: ClassVar[MessageKey] = MessageKey.DATE_STRING

    @property
    def constraint_name(self) -> str:
        return "date"

    def accepts(self, value: str) -> bool:
        return predicates.is_date(value)


@dataclass(frozen=True, slots=True)
class Url(FormatRule):
    """URL with an allowed scheme; defaults come from settings."""
    key: ClassVar[MessageKey] = MessageKey.URL
    schemes: Sequence[str] | None = None
    require_scheme: bool = False
    require_tld: bool | None = None

    def __post_init__(self):
        schemes = settings.URL_SCHEMES if self.schemes is None else self.schemes
        _require(not isinstance(schemes, str) and len(schemes) > 0, "url",
            "schemes must be a non-empty collection of scheme names", schemes=repr(schemes))
        object.__setattr__(self, "schemes", tuple(s.lower() for s in schemes))
        if self.require_tld is None:
            object.__setattr__(self, "require_tld", settings.URL_REQUIRE_TLD)

    @property
    def constraint_name(self) -> str:
        return f"url[{', '.join(self.schemes)}]"

    def accepts(self, value: str) -> bool:
        return predicates.is_url(value, self.schemes,
            require_scheme=self.require_scheme, require_tld=self.require_tld)


@dataclass(frozen=True, slots=True)
class Ip(FormatRule):
    key: ClassVar[MessageKey] = MessageKey.IP
    version: int | None = None  # 4 or 6, None for both

    def __post_init__(self):
        _require(self.version in (None, 4, 6), "ip", "version must be 4, 6 or None", version=repr(self.version))

    @property
    def constraint_name(self) -> str:
        return f"ip{f'v{self.version}' if self.version else ''}"

    def accepts(self, value: str) -> bool:
        return predicates.is_ip(value, self.version)


@dataclass(frozen=True, slots=True)
class CreditCard(FormatRule):
    key: ClassVar[MessageKey] = MessageKey.CREDIT_CARD

    @property
    def constraint_name(self) -> str:
        return "credit_card"

    def accepts(self, value: str) -> bool:
        return predicates.is_credit_card(value)


# ============================================================================
# Resource Size
# ============================================================================

@dataclass(frozen=True, slots=True)
class File(MessageRule):
    """Maximum size in bytes of a file-like candidate.

    size_of errors (unreadable file, unknown shape) propagate to the caller.
    """
    key: ClassVar[MessageKey] = MessageKey.FILE
    max_size: int
    size_of: SizeAccessor = field(default=file_size, repr=False)

    def __post_init__(self):
        _require(_is_count(self.max_size), "file", "max_size must be a positive integer", max_size=repr(self.max_size))

    @property
    def constraint_name(self) -> str:
        return f"max_size[{self.max_size}]"

    def check(self, candidate: Any) -> str | None:
        if candidate is not None and self.size_of(candidate) > self.max_size:
            return self.fail(str(self.max_size))
        return None


# ============================================================================
# Combinators
# ============================================================================

def rule_name(rule: Rule) -> str:
    return getattr(rule, "constraint_name", None) or getattr(rule, "__name__", "custom")


@dataclass(frozen=True, slots=True)
class Compose(ValidationRule):
    """Run rules in order and report the first failure (short-circuit)."""
    rules: tuple[Rule, ...] = ()

    @property
    def constraint_name(self) -> str:
        return f"all_of[{', '.join(rule_name(r) for r in self.rules)}]"

    def check(self, candidate: Any) -> str | None:
        for rule in self.rules:
            if (message := rule(candidate)) is not None:
                return message
        return None

    def __and__(self, other: Rule) -> Compose: return Compose((*self.rules, other))


@dataclass(frozen=True, slots=True)
class WithMessage(ValidationRule):
    """Wrapper to override the failure message of any rule."""
    rule: Rule
    message: str

    @property
    def constraint_name(self) -> str:
        return rule_name(self.rule)

    def check(self, candidate: Any) -> str | None:
        return None if self.rule(candidate) is None else self.message
