"""Tests for rule composition."""

import pytest

from fieldrules.validation import Compose, compose, email, min, min_length, required


def fixed(outcome, calls=None, label=None):
    """Rule with a predetermined outcome that records its calls."""
    def rule(candidate):
        if calls is not None:
            calls.append(label)
        return outcome
    return rule


class TestCompose:
    """Fail-fast sequencing of rules."""

    def test_returns_first_failure(self):
        calls = []
        rule = compose([
            fixed(None, calls, "a"),
            fixed("second", calls, "b"),
            fixed("third", calls, "c"),
        ])

        assert rule("anything") == "second"
        assert calls == ["a", "b"]

    def test_all_passing_returns_none(self):
        rule = compose([fixed(None), fixed(None), fixed(None)])
        assert rule("anything") is None

    def test_empty_sequence_always_passes(self):
        rule = compose([])
        assert rule(None) is None
        assert rule("") is None
        assert rule([1, 2, 3]) is None

    @pytest.mark.parametrize("outcomes, expected", [
        ([None], None),
        (["x"], "x"),
        (["x", "y"], "x"),
        ([None, None, "z"], "z"),
        ([None, "y", None, "w"], "y"),
    ])
    def test_matches_first_non_none(self, outcomes, expected):
        assert compose([fixed(o) for o in outcomes])(0) == expected

    def test_accepts_generator(self):
        rule = compose(fixed(o) for o in [None, "late"])
        assert rule(1) == "late"

    def test_required_first_short_circuits_absent_values(self):
        rule = compose([required(), email()])
        assert rule(None) == "This field cannot be empty."

    def test_order_sets_diagnostic_precedence(self):
        # min_length measures None as 0, so it reports before required here
        rule = compose([min_length(3), required()])
        assert rule(None) == "Value must have a length greater than or equal to 3."

    def test_idempotent(self):
        rule = compose([required(), min_length(3), email()])
        for candidate in [None, "", "ab", "abc", "a@b.com"]:
            assert rule(candidate) == rule(candidate)

    def test_nested_compose(self):
        inner = compose([required(), min(10)])
        outer = compose([inner, fixed("outer")])
        assert outer(None) == "This field cannot be empty."
        assert outer(5) == "Value must be greater than or equal to 10."
        assert outer(50) == "outer"


class TestOperators:
    """& and with_message on rules."""

    def test_and_builds_compose(self):
        rule = required() & min_length(3)
        assert isinstance(rule, Compose)
        assert rule("") == "This field cannot be empty."
        assert rule("ab") == "Value must have a length greater than or equal to 3."
        assert rule("abc") is None

    def test_and_chain_flattens(self):
        rule = required() & min_length(3) & email()
        assert len(rule.rules) == 3
        assert rule("abcd") == "This field requires a valid email address."

    def test_and_accepts_plain_callables(self):
        rule = required() & fixed("custom")
        assert rule("x") == "custom"

    def test_with_message_overrides_failure_only(self):
        rule = min(5).with_message("Too small")
        assert rule(4) == "Too small"
        assert rule(6) is None

    def test_constraint_name(self):
        rule = compose([required(), min(18), min_length(2)])
        assert rule.constraint_name == "all_of[required, >=18, min_length[2]]"
