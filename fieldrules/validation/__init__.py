"""Composable Field Validation

Small, independent rules combined into a fail-fast pipeline for a single
input value. A rule returns None for an acceptable candidate and the
message to display otherwise.

Key Features:
- Rule constructors for presence, equality, numeric bounds, lengths,
  string formats and file size
- compose() / & for ordered, short-circuit composition
- Explicit candidate shapes (CandidateKind) instead of implicit coercion
- Localized messages through an explicit or context-bound resolver
- Form-level validation with fail-fast or collect-all reporting

Usage:
    from fieldrules.messages import MessageCatalog, use_messages
    from fieldrules.validation import rules

    username = rules.compose([rules.required(), rules.min_length(3), rules.max_length(20)])

    with use_messages(MessageCatalog.load("en")):
        username("ab")  # 'Value must have a length greater than or equal to 3.'
"""
from . import predicates, rules
from .candidate import CandidateKind, SizeAccessor, classify, digit_count, file_size, is_blank, value_length
from .coercion import CoercionRule, StringToInt, StringToNumber, coerce_number
from .form import (
    FieldError,
    FormReport,
    ValidationMode,
    validate_form,
)
from .rules import (
    compose,
    required,
    equal,
    not_equal,
    min,
    max,
    min_length,
    max_length,
    equal_length,
    email,
    match,
    numeric,
    integer,
    date_string,
    url,
    ip,
    credit_card,
    file,
)
from .validators import (
    Compose,
    CreditCard,
    DateString,
    Email,
    Equal,
    EqualLength,
    File,
    FormatRule,
    Integer,
    Ip,
    Match,
    Max,
    MaxLength,
    MessageRule,
    Min,
    MinLength,
    NotEqual,
    Numeric,
    Required,
    Rule,
    Url,
    ValidationRule,
    WithMessage,
    rule_name,
)

__all__ = [
    "predicates",
    "rules",
    # Candidates
    "CandidateKind",
    "SizeAccessor",
    "classify",
    "file_size",
    "is_blank",
    "value_length",
    "digit_count",
    # Coercion
    "CoercionRule",
    "StringToInt",
    "StringToNumber",
    "coerce_number",
    # Forms
    "FieldError",
    "FormReport",
    "ValidationMode",
    "validate_form",
    # Constructors
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
    # Rule types
    "Compose",
    "CreditCard",
    "DateString",
    "Email",
    "Equal",
    "EqualLength",
    "File",
    "FormatRule",
    "Integer",
    "Ip",
    "Match",
    "Max",
    "MaxLength",
    "MessageRule",
    "Min",
    "MinLength",
    "NotEqual",
    "Numeric",
    "Required",
    "Rule",
    "Url",
    "ValidationRule",
    "WithMessage",
    "rule_name",
]
