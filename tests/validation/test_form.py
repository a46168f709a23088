"""Tests for form-level validation."""

import pytest

from fieldrules.validation import (
    FormReport,
    ValidationMode,
    compose,
    email,
    min,
    min_length,
    numeric,
    required,
    validate_form,
)


@pytest.fixture
def signup_rules():
    return {
        "username": compose([required(), min_length(3)]),
        "email": compose([required(), email()]),
        "age": compose([numeric(), min(18)]),
    }


class TestValidateForm:

    def test_valid_form(self, signup_rules):
        report = validate_form(signup_rules, {"username": "ada", "email": "ada@example.com", "age": "36"})
        assert report.is_valid
        assert report.errors == {}
        assert report.first_error is None

    def test_collect_all_reports_every_field(self, signup_rules):
        report = validate_form(signup_rules, {"username": "al", "email": "nope", "age": 12})

        assert not report.is_valid
        assert report.mode is ValidationMode.COLLECT_ALL
        assert report.errors == {
            "username": "Value must have a length greater than or equal to 3.",
            "email": "This field requires a valid email address.",
            "age": "Value must be greater than or equal to 18.",
        }
        assert list(report.errors) == ["username", "email", "age"]

    def test_fail_fast_stops_at_first_invalid_field(self, signup_rules):
        report = validate_form(signup_rules, {"username": "ada", "email": "", "age": 1}, mode=ValidationMode.FAIL_FAST)

        assert report.mode is ValidationMode.FAIL_FAST
        assert report.errors == {"email": "This field cannot be empty."}
        assert report.first_error.field == "email"

    def test_missing_values_are_validated_as_none(self, signup_rules):
        report = validate_form(signup_rules, {})
        assert set(report.errors) == {"username", "email"}

    def test_values_without_rules_are_ignored(self):
        report = validate_form({"a": required()}, {"a": "x", "b": None})
        assert report.is_valid

    def test_max_errors(self, signup_rules):
        report = validate_form(signup_rules, {"age": 1}, max_errors=2)
        assert list(report.errors) == ["username", "email"]

    def test_plain_callables_as_field_rules(self):
        def no_spaces(candidate):
            return "No spaces allowed" if " " in (candidate or "") else None

        report = validate_form({"slug": no_spaces}, {"slug": "a b"})
        assert report.first_error.constraint == "no_spaces"
        assert report.first_error.message == "No spaces allowed"

    def test_to_dict(self, signup_rules):
        report = validate_form(signup_rules, {"username": "ada", "email": "ada@example.com", "age": 17})

        assert report.to_dict() == {
            "valid": False,
            "mode": "collect_all",
            "error_count": 1,
            "errors": [{
                "field": "age",
                "constraint": "all_of[numeric, >=18]",
                "message": "Value must be greater than or equal to 18.",
            }],
        }

    def test_empty_report_is_valid(self):
        assert FormReport(mode=ValidationMode.COLLECT_ALL).is_valid
