"""Form Validation

Applies one rule per field to a mapping of field values, the way a form
widget validates all of its fields on submit. Invalid fields are reported
in a FormReport, never raised. Two accumulation modes:

- FAIL_FAST: stop at the first invalid field
- COLLECT_ALL: check every field, keeping up to max_errors messages

Report format (to_dict):
{
    "valid": false,
    "mode": "collect_all",
    "error_count": 2,
    "errors": [
        {"field": "email", "constraint": "email", "message": "This field requires a valid email address."},
        {"field": "age", "constraint": ">=18", "message": "Value must be greater than or equal to 18."}
    ]
}
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from fieldrules.config import settings
from fieldrules.logging import form_logger

from .validators import Rule, rule_name

log = form_logger()


class ValidationMode(str, Enum):
    """Validation accumulation strategy."""
    FAIL_FAST = "fail_fast"
    COLLECT_ALL = "collect_all"


@dataclass(frozen=True, slots=True)
class FieldError:
    """Failure of a single field."""
    field: str
    constraint: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "constraint": self.constraint, "message": self.message}


class ErrorAccumulator(ABC):
    """Abstract base for error accumulation strategies."""

    @abstractmethod
    def add_error(self, error: FieldError) -> bool:
        """Add error. Returns True if validation should continue."""

    @abstractmethod
    def get_errors(self) -> list[FieldError]:
        """Get accumulated errors."""

    @property
    @abstractmethod
    def mode(self) -> ValidationMode:
        """Get the accumulation mode."""


@dataclass
class FailFastAccumulator(ErrorAccumulator):
    """Fail-fast accumulator: stops on first error."""
    _error: FieldError | None = None

    @property
    def mode(self) -> ValidationMode: return ValidationMode.FAIL_FAST

    def add_error(self, error: FieldError) -> bool:
        if self._error is None: self._error = error
        return False

    def get_errors(self) -> list[FieldError]: return [self._error] if self._error else []


@dataclass
class CollectAllAccumulator(ErrorAccumulator):
    """Collect-all accumulator: gathers all errors up to max_errors."""
    _errors: list[FieldError] = field(default_factory=list)
    max_errors: int = 50

    @property
    def mode(self) -> ValidationMode: return ValidationMode.COLLECT_ALL

    def add_error(self, error: FieldError) -> bool:
        if len(self._errors) < self.max_errors: self._errors.append(error)
        return len(self._errors) < self.max_errors

    def get_errors(self) -> list[FieldError]: return self._errors.copy()


def create_accumulator(mode: ValidationMode, max_errors: int = 50) -> ErrorAccumulator:
    """Factory for creating accumulators based on mode."""
    return FailFastAccumulator() if mode == ValidationMode.FAIL_FAST else CollectAllAccumulator(max_errors=max_errors)


@dataclass(frozen=True, slots=True)
class FormReport:
    """Outcome of validating a whole form."""
    mode: ValidationMode
    details: tuple[FieldError, ...] = ()

    @property
    def is_valid(self) -> bool: return not self.details

    @property
    def errors(self) -> dict[str, str]:
        """Field name to message, in validation order."""
        return {d.field: d.message for d in self.details}

    @property
    def first_error(self) -> FieldError | None: return self.details[0] if self.details else None

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.is_valid, "mode": self.mode.value, "error_count": len(self.details),
            "errors": [d.to_dict() for d in self.details]}


def validate_form(
    rules: Mapping[str, Rule],
    values: Mapping[str, Any],
    mode: ValidationMode = ValidationMode.COLLECT_ALL,
    max_errors: int | None = None,
) -> FormReport:
    """Validate values[field] with rules[field] for every field in rules.

    Fields missing from values are validated as None. Values without a
    rule are ignored.
    """
    accumulator = create_accumulator(mode, settings.FORM_MAX_ERRORS if max_errors is None else max_errors)
    for name, rule in rules.items():
        if (message := rule(values.get(name))) is None:
            continue
        if not accumulator.add_error(FieldError(field=name, constraint=rule_name(rule), message=message)):
            break

    report = FormReport(mode=accumulator.mode, details=tuple(accumulator.get_errors()))
    log.debug("form_validated", fields=len(rules), error_count=len(report.details), mode=mode.value)
    return report
