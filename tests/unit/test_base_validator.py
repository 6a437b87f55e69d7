"""
Unit Tests for BaseValidator.

Test Aspects Covered:
    ✅ Business Logic: Short-circuit rules, continue_(), if_()/guard()
    ✅ Error Handling: Malformed construction raises TechnicalError
    ✅ Edge Cases: Structural equality, falsy-but-present values
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List

import pytest

from checkchain.failure import factory
from checkchain.failure.codes import FailureCode
from checkchain.failure.models import SimpleFailure
from checkchain.failure.technical_error import TechnicalError
from checkchain.validation.base_validator import BaseValidator, Flow
from checkchain.validation.string_validator import StringValidator


def codes(failures: List[SimpleFailure]) -> List[FailureCode]:
    """Helper to list failure codes in order."""
    return [f.code for f in failures]


class TestShortCircuit:
    """Test cases for the STOP/CONTINUE rule."""

    def test_first_failure_stops_chain(self, failures: List[SimpleFailure]) -> None:
        """
        SCENARIO: Two failing checks without continue_()
        EXPECTED: Only the first failure is recorded
        """
        # Act
        StringValidator("name", "", failures).is_not_empty().has_length_between(3, 50)

        # Assert
        assert codes(failures) == [FailureCode.STRING_CANNOT_BE_EMPTY]

    def test_continue_collects_next_failure(self, failures: List[SimpleFailure]) -> None:
        """
        SCENARIO: continue_() between two failing checks
        EXPECTED: Both failures recorded in order
        """
        StringValidator("name", "", failures).is_not_empty().continue_().has_length_between(3, 50)

        assert codes(failures) == [
            FailureCode.STRING_CANNOT_BE_EMPTY,
            FailureCode.STRING_LENGTH_OUT_OF_RANGE,
        ]

    def test_continue_authorizes_exactly_one_check(
        self, failures: List[SimpleFailure]
    ) -> None:
        """
        SCENARIO: One continue_() followed by two more failing checks
        EXPECTED: Only the first of them runs
        """
        (
            StringValidator("name", "", failures)
            .is_not_empty()
            .continue_()
            .has_length_between(3, 5)
            .has_content()
        )

        assert codes(failures) == [
            FailureCode.STRING_CANNOT_BE_EMPTY,
            FailureCode.STRING_LENGTH_OUT_OF_RANGE,
        ]

    def test_passing_checks_keep_chain_running(
        self, failures: List[SimpleFailure]
    ) -> None:
        """
        SCENARIO: Passing checks followed by a failing one
        EXPECTED: The failing check still runs
        """
        (
            StringValidator("code", "abc", failures)
            .has_length_between(1, 5)
            .is_not_empty()
            .matches_pattern(r"^x")
        )

        assert codes(failures) == [FailureCode.STRING_INVALID_FORMAT]

    def test_flow_resets_after_executed_check(self) -> None:
        """Flow returns to STOP once a check executes."""
        validator = StringValidator("name", "ok").continue_()
        assert validator.flow == Flow.CONTINUE

        validator.is_not_empty()

        assert validator.flow == Flow.STOP

    def test_has_failure_tracks_recorded_failures(self) -> None:
        """has_failure becomes True only once a check fails."""
        validator = StringValidator("name", "")
        assert validator.has_failure is False

        validator.is_not_empty()

        assert validator.has_failure is True

    def test_failure_sink_is_shared_across_validators(
        self, failures: List[SimpleFailure]
    ) -> None:
        """Validators given the same list append into it in call order."""
        StringValidator("first", "", failures).is_not_empty()
        StringValidator("second", "  ", failures).has_content()

        assert [f.details["field"] for f in failures] == ["first", "second"]

    def test_default_sink_is_private(self) -> None:
        """Omitting the sink gives each validator its own list."""
        first = StringValidator("name", "").is_not_empty()
        second = StringValidator("name", "ok").is_not_empty()

        assert len(first.failures) == 1
        assert second.failures == []


class TestConditionalExecution:
    """Test cases for if_(), guard(), then() and when()."""

    def test_if_false_suppresses_without_failure(
        self, failures: List[SimpleFailure]
    ) -> None:
        """
        SCENARIO: if_(False) before a failing check
        EXPECTED: The check is skipped and nothing is recorded
        """
        validator = StringValidator("nickname", "", failures).if_(False).is_not_empty()

        assert failures == []
        assert validator.has_failure is False

    def test_if_true_has_no_effect(self, failures: List[SimpleFailure]) -> None:
        StringValidator("nickname", "", failures).if_(True).is_not_empty()

        assert codes(failures) == [FailureCode.STRING_CANNOT_BE_EMPTY]

    def test_continue_overrides_suppression_once(
        self, failures: List[SimpleFailure]
    ) -> None:
        """
        SCENARIO: if_(False), continue_(), then two failing checks
        EXPECTED: Only the first check after continue_() runs
        """
        (
            StringValidator("nickname", "", failures)
            .if_(False)
            .continue_()
            .is_not_empty()
            .has_content()
        )

        assert codes(failures) == [FailureCode.STRING_CANNOT_BE_EMPTY]

    def test_guard_uses_callable(self, failures: List[SimpleFailure]) -> None:
        calls = []

        def predicate() -> bool:
            calls.append(1)
            return False

        StringValidator("nickname", "", failures).guard(predicate).is_not_empty()

        assert calls == [1]
        assert failures == []

    def test_then_runs_on_clean_chain(self) -> None:
        seen = []

        StringValidator("name", "ok").is_not_empty().then(lambda: seen.append("ran"))

        assert seen == ["ran"]

    def test_then_skipped_after_failure(self) -> None:
        seen = []

        StringValidator("name", "").is_not_empty().then(lambda: seen.append("ran"))

        assert seen == []

    def test_then_skipped_after_suppression(self) -> None:
        seen = []

        StringValidator("name", "ok").if_(False).then(lambda: seen.append("ran"))

        assert seen == []

    def test_when_ignores_prior_failures(self) -> None:
        """when() depends on its own condition only."""
        seen = []

        (
            StringValidator("name", "")
            .is_not_empty()
            .when(True, lambda: seen.append("yes"))
            .when(False, lambda: seen.append("no"))
        )

        assert seen == ["yes"]


class TestConstruction:
    """Test cases for validator construction."""

    @pytest.mark.parametrize("field", ["", "   ", None, 42])
    def test_invalid_field_name_raises(self, field: object) -> None:
        """
        SCENARIO: Field name is empty, blank or not a string
        EXPECTED: TechnicalError with VALIDATOR_WITH_INVALID_DATA_STRUCTURE
        """
        with pytest.raises(TechnicalError) as exc_info:
            BaseValidator(field, "value")  # type: ignore[arg-type]

        assert exc_info.value.code == FailureCode.VALIDATOR_WITH_INVALID_DATA_STRUCTURE

    def test_exposes_field_and_value(self) -> None:
        validator = BaseValidator("age", 30)

        assert validator.field == "age"
        assert validator.value == 30
        assert validator.flow == Flow.STOP


class TestIsRequired:
    """Test cases for is_required()."""

    @pytest.mark.parametrize("value", [None, "", "   ", [], {}])
    def test_missing_values_fail(self, value: object) -> None:
        validator = BaseValidator("field", value).is_required()

        assert codes(validator.failures) == [FailureCode.MISSING_REQUIRED_DATA]
        assert validator.failures[0].details == {"field": "field"}

    @pytest.mark.parametrize("value", [0, False, 0.0, "x", [0]])
    def test_falsy_but_present_values_pass(self, value: object) -> None:
        """Zero and False are values, not absence."""
        validator = BaseValidator("field", value).is_required()

        assert validator.failures == []

    def test_custom_failure_factory(self) -> None:
        validator = BaseValidator("owner", None).is_required(
            lambda: factory.resource_not_found("owner")
        )

        assert codes(validator.failures) == [FailureCode.RESOURCE_NOT_FOUND]


class TestIsEqualTo:
    """Test cases for is_equal_to()."""

    @pytest.mark.parametrize(
        "value,target",
        [
            (1, 1.0),
            ("abc", "abc"),
            ([1, [2, 3]], (1, (2, 3))),
            (date(2024, 1, 1), datetime(2024, 1, 1, 0, 0)),
            (None, None),
        ],
    )
    def test_equal_values_pass(self, value: object, target: object) -> None:
        validator = BaseValidator("field", value).is_equal_to(target)

        assert validator.failures == []

    @pytest.mark.parametrize(
        "value,target",
        [
            (True, 1),
            ("1", 1),
            ([1, 2], [1, 2, 3]),
            ({"a": 1}, {"a": 1}),
            (None, 0),
        ],
    )
    def test_unequal_values_fail(self, value: object, target: object) -> None:
        validator = BaseValidator("field", value).is_equal_to(target)

        assert codes(validator.failures) == [FailureCode.VALUES_NOT_EQUAL]

    def test_nan_is_never_equal(self) -> None:
        nan = float("nan")

        validator = BaseValidator("ratio", nan).is_equal_to(nan)

        assert codes(validator.failures) == [FailureCode.VALUES_NOT_EQUAL]

    def test_failure_carries_operands(self) -> None:
        validator = BaseValidator("password_confirmation", "a").is_equal_to("b")

        assert validator.failures[0].details == {
            "field": "password_confirmation",
            "value": "a",
            "target": "b",
        }


class TestIsTrue:
    """Test cases for is_true()."""

    def test_false_expression_records_given_failure(self) -> None:
        validator = BaseValidator("age", 15).is_true(
            15 >= 18, lambda: factory.condition_not_satisfied("age")
        )

        assert codes(validator.failures) == [FailureCode.CONDITION_NOT_SATISFIED]

    def test_true_expression_passes(self) -> None:
        validator = BaseValidator("age", 20).is_true(
            20 >= 18, lambda: factory.condition_not_satisfied("age")
        )

        assert validator.failures == []


class TestOverrides:
    """Test cases for per-check code and detail overrides."""

    def test_code_override_keeps_default_details(self) -> None:
        validator = StringValidator("name", "").is_not_empty(
            code=FailureCode.VALIDATION_ERROR, details={"hint": "required"}
        )

        failure = validator.failures[0]
        assert failure.code == FailureCode.VALIDATION_ERROR
        assert failure.details == {"field": "name", "hint": "required"}

    def test_details_override_existing_keys(self) -> None:
        validator = StringValidator("name", "").is_not_empty(details={"field": "Full name"})

        assert validator.failures[0].code == FailureCode.STRING_CANNOT_BE_EMPTY
        assert validator.failures[0].details == {"field": "Full name"}
