"""Tests for the ValidationRule base class."""

import re

import pytest
from structlog.testing import capture_logs

from fieldrules.validation.base import ValidationRule
from fieldrules.validation.results import ValidationResult


class PassingRule(ValidationRule):
    """Two conditions that always pass."""

    name = "passing"

    def default_conditions(self):
        return [lambda state: True, lambda state: True]


class FailingRule(ValidationRule):
    """Second condition always fails."""

    name = "failing"

    def default_conditions(self):
        return [lambda state: True, self._fail]

    def _fail(self, state):
        state.add_message("always fails")
        return False


@pytest.fixture
def validation_rule():
    return ValidationRule(
        {
            "firstParamName": "whatever value",
            "secondParamName": {"a": 1001, "b": re.compile(".*guidion")},
        }
    )


class TestConstructor:
    """Tests for ValidationRule construction."""

    def test_stores_parameters(self, validation_rule):
        assert validation_rule.parameters == {
            "firstParamName": "whatever value",
            "secondParamName": {"a": 1001, "b": re.compile(".*guidion")},
        }
        assert validation_rule.params is validation_rule.parameters

    def test_message_starts_empty(self, validation_rule):
        assert validation_rule.get_message() == ""

    def test_keyword_options_are_merged(self):
        rule = ValidationRule({"a": 1, "b": 2}, b=3)
        assert rule.parameters == {"a": 1, "b": 3}

    def test_no_parameters(self):
        rule = ValidationRule()
        assert rule.parameters is None
        assert rule.conditions == []

    def test_condition_lists_are_per_instance(self):
        first = PassingRule()
        second = PassingRule()

        first.add_condition(lambda state: False)

        assert len(first.conditions) == 3
        assert len(second.conditions) == 2


class TestIsValid:
    """Tests for is_valid() and validate()."""

    def test_stores_previous_and_new_values(self, validation_rule):
        validation_rule.is_valid("original value", "new value")
        assert validation_rule.previous_value == "original value"
        assert validation_rule.value == "new value"

    def test_values_default_to_none(self, validation_rule):
        validation_rule.is_valid()
        assert validation_rule.previous_value is None
        assert validation_rule.value is None

    def test_empty_condition_list_is_valid(self, validation_rule):
        for value in [None, 0, "", "text", [1, 2], {"a": 1}]:
            assert validation_rule.is_valid(None, value) is True

    def test_all_conditions_pass(self):
        assert PassingRule().is_valid() is True

    def test_one_condition_fails(self):
        assert FailingRule().is_valid() is False

    def test_only_exact_false_fails(self):
        rule = ValidationRule()
        rule.add_condition(lambda state: None)
        rule.add_condition(lambda state: 0)
        rule.add_condition(lambda state: "")
        assert rule.is_valid(None, "x") is True

    def test_short_circuits_after_failure(self):
        calls = []
        rule = ValidationRule()
        rule.add_condition(lambda state: False)
        rule.add_condition(lambda state: calls.append(state.value) or True)

        assert rule.is_valid(None, "value") is False
        assert calls == []

    def test_conditions_run_in_insertion_order(self):
        calls = []
        rule = ValidationRule()
        rule.add_condition(lambda state: calls.append("first"))
        rule.add_condition(lambda state: calls.append("second"))

        rule.is_valid()

        assert calls == ["first", "second"]

    def test_validate_returns_result(self):
        result = FailingRule().validate(None, "value")
        assert isinstance(result, ValidationResult)
        assert result.failed
        assert result.message == "always fails"
        assert result.validator_name == "failing"

    def test_conditions_see_both_values(self):
        seen = []
        rule = ValidationRule()
        rule.add_condition(lambda state: seen.append((state.previous_value, state.value)))

        rule.is_valid("old", "new")

        assert seen == [("old", "new")]

    def test_condition_exceptions_propagate(self):
        rule = ValidationRule()
        rule.add_condition(lambda state: 1 / 0)

        with pytest.raises(ZeroDivisionError):
            rule.is_valid()


class TestMessages:
    """Tests for message accumulation."""

    def test_add_message(self, validation_rule):
        assert validation_rule.get_message() == ""
        validation_rule.add_message("A new invalid message describing the error")
        assert validation_rule.get_message() == "A new invalid message describing the error"

    def test_add_message_appends(self, validation_rule):
        validation_rule.add_message("first. ")
        validation_rule.add_message("second.")
        assert validation_rule.get_message() == "first. second."

    def test_is_valid_resets_message(self, validation_rule):
        validation_rule.add_message("stale")
        validation_rule.is_valid()
        assert validation_rule.get_message() == ""

    def test_repeated_calls_do_not_accumulate(self):
        rule = FailingRule()

        first = rule.is_valid(None, "value")
        first_message = rule.get_message()
        second = rule.is_valid(None, "value")

        assert first == second
        assert rule.get_message() == first_message == "always fails"

    def test_earlier_results_are_not_mutated(self):
        rule = FailingRule()
        first = rule.validate(None, "value")
        rule.add_message(" extra")

        assert first.message == "always fails"


class TestConditionMutation:
    """Tests for add_condition() and remove_condition()."""

    def test_add_condition(self):
        rule = PassingRule()
        rule.add_condition(lambda state: False)
        assert rule.is_valid() is False

    def test_remove_condition(self):
        rule = FailingRule()
        rule.remove_condition(1)
        assert len(rule.conditions) == 1
        assert rule.is_valid() is True

    def test_remove_missing_condition_raises(self):
        rule = ValidationRule()
        with pytest.raises(IndexError):
            rule.remove_condition(0)


class TestFailureLogging:
    """Tests for RULES_LOG_FAILURES."""

    def test_failures_logged_when_enabled(self, monkeypatch):
        monkeypatch.setenv("RULES_LOG_FAILURES", "true")

        with capture_logs() as logs:
            FailingRule().is_valid(None, "value")

        failures = [log for log in logs if log["event"] == "Validation failed"]
        assert len(failures) == 1
        assert failures[0]["log_level"] == "info"
        assert failures[0]["rule"] == "failing"
        assert failures[0]["reason"] == "always fails"

    def test_failures_not_logged_by_default(self):
        with capture_logs() as logs:
            FailingRule().is_valid(None, "value")

        assert not [log for log in logs if log["event"] == "Validation failed"]
