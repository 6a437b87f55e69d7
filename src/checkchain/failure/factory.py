"""
Failure Factory - Constructors for Catalogued Failures.

One function per catalogued code. Most are emitted by the validators;
condition_not_satisfied, resource_not_found and resource_already_exists are
for callers, typically passed to is_true() or is_required(). The keys placed in
``details`` match the placeholders of the code's catalog template, so the
rendered message is fully interpolated.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from checkchain.failure.codes import FailureCode
from checkchain.failure.models import SimpleFailure


def _failure(code: FailureCode, **details: Any) -> SimpleFailure:
    return SimpleFailure(code=code, details=details)


# =============================================================================
# Generic
# =============================================================================


def missing_required_data(field: str) -> SimpleFailure:
    return _failure(FailureCode.MISSING_REQUIRED_DATA, field=field)


def values_not_equal(field: str, value: Any, target: Any) -> SimpleFailure:
    return _failure(FailureCode.VALUES_NOT_EQUAL, field=field, value=value, target=target)


def condition_not_satisfied(field: str) -> SimpleFailure:
    return _failure(FailureCode.CONDITION_NOT_SATISFIED, field=field)


def resource_not_found(resource: str) -> SimpleFailure:
    return _failure(FailureCode.RESOURCE_NOT_FOUND, resource=resource)


def resource_already_exists(resource: str) -> SimpleFailure:
    return _failure(FailureCode.RESOURCE_ALREADY_EXISTS, resource=resource)


# =============================================================================
# Strings
# =============================================================================


def string_cannot_be_empty(field: str) -> SimpleFailure:
    return _failure(FailureCode.STRING_CANNOT_BE_EMPTY, field=field)


def string_cannot_be_blank(field: str) -> SimpleFailure:
    return _failure(FailureCode.STRING_CANNOT_BE_BLANK, field=field)


def string_invalid_format(field: str, value: Optional[str]) -> SimpleFailure:
    return _failure(FailureCode.STRING_INVALID_FORMAT, field=field, value=value)


def string_length_out_of_range(
    field: str, minimum: int, maximum: int, length: int
) -> SimpleFailure:
    return _failure(
        FailureCode.STRING_LENGTH_OUT_OF_RANGE,
        field=field,
        min=minimum,
        max=maximum,
        length=length,
    )


def email_with_invalid_format(field: str, email: Optional[str]) -> SimpleFailure:
    return _failure(FailureCode.EMAIL_WITH_INVALID_FORMAT, field=field, email=email)


def uid_with_invalid_format(field: str, uuid: Optional[str]) -> SimpleFailure:
    return _failure(FailureCode.UID_WITH_INVALID_FORMAT, field=field, uuid=uuid)


def invalid_enum_value(
    field: str, value: Any, allowed_values: Iterable[Any]
) -> SimpleFailure:
    return _failure(
        FailureCode.INVALID_ENUM_VALUE,
        field=field,
        value=value,
        allowed_values=[str(v) for v in allowed_values],
    )


# =============================================================================
# Numbers
# =============================================================================


def value_out_of_range(field: str, value: Any, minimum: Any, maximum: Any) -> SimpleFailure:
    return _failure(
        FailureCode.VALUE_OUT_OF_RANGE, field=field, value=value, min=minimum, max=maximum
    )


def value_greater_than_max(field: str, value: Any, maximum: Any) -> SimpleFailure:
    return _failure(FailureCode.VALUE_GREATER_THAN_MAX, field=field, value=value, max=maximum)


def value_less_than_min(field: str, value: Any, minimum: Any) -> SimpleFailure:
    return _failure(FailureCode.VALUE_LESS_THAN_MIN, field=field, value=value, min=minimum)


def value_not_positive(field: str, value: Any) -> SimpleFailure:
    return _failure(FailureCode.VALUE_NOT_POSITIVE, field=field, value=value)


def value_must_be_negative(field: str, value: Any) -> SimpleFailure:
    return _failure(FailureCode.VALUE_MUST_BE_NEGATIVE, field=field, value=value)


def value_not_integer(field: str, value: Any) -> SimpleFailure:
    return _failure(FailureCode.VALUE_NOT_INTEGER, field=field, value=value)


# =============================================================================
# Dates (ISO-8601 strings, "N/A" for an unreadable date)
# =============================================================================


def date_not_after_limit(field: str, date: str, limit: str) -> SimpleFailure:
    return _failure(FailureCode.DATE_NOT_AFTER_LIMIT, field=field, date=date, limit=limit)


def date_not_before_limit(field: str, date: str, limit: str) -> SimpleFailure:
    return _failure(FailureCode.DATE_NOT_BEFORE_LIMIT, field=field, date=date, limit=limit)


def date_out_of_range(
    field: str, date: str, start_date: str, end_date: str
) -> SimpleFailure:
    return _failure(
        FailureCode.DATE_OUT_OF_RANGE,
        field=field,
        date=date,
        start_date=start_date,
        end_date=end_date,
    )


def date_with_invalid_sequence(field: str, start_date: str, end_date: str) -> SimpleFailure:
    return _failure(
        FailureCode.DATE_WITH_INVALID_SEQUENCE,
        field=field,
        start_date=start_date,
        end_date=end_date,
    )


# =============================================================================
# Collections and objects
# =============================================================================


def array_length_is_out_of_range(
    field: str, minimum: int, maximum: int, count: int
) -> SimpleFailure:
    return _failure(
        FailureCode.ARRAY_LENGTH_IS_OUT_OF_RANGE,
        field=field,
        min=minimum,
        max=maximum,
        count=count,
    )


def content_with_invalid_items(field: str) -> SimpleFailure:
    return _failure(FailureCode.CONTENT_WITH_INVALID_ITEMS, field=field)


def missing_valid_item(field: str) -> SimpleFailure:
    return _failure(FailureCode.MISSING_VALID_ITEM, field=field)


def object_is_empty(field: str) -> SimpleFailure:
    return _failure(FailureCode.OBJECT_IS_EMPTY, field=field)


def object_missing_property(field: str, property: str) -> SimpleFailure:
    return _failure(FailureCode.OBJECT_MISSING_PROPERTY, field=field, property=property)


# =============================================================================
# Technical
# =============================================================================


def validator_with_invalid_data_structure(field: Any) -> SimpleFailure:
    return _failure(FailureCode.VALIDATOR_WITH_INVALID_DATA_STRUCTURE, field=repr(field))


def null_argument(resource: str) -> SimpleFailure:
    return _failure(FailureCode.NULL_ARGUMENT, resource=resource)


def invalid_enum_value_count(field: str, expected: int, count: int, value: Any) -> SimpleFailure:
    return _failure(
        FailureCode.INVALID_ENUM_VALUE_COUNT,
        field=field,
        expected=expected,
        count=count,
        value=value,
    )


def invalid_combine_input(type_name: str) -> SimpleFailure:
    return _failure(FailureCode.INVALID_COMBINE_INPUT, type=type_name)


def empty_failure_result() -> SimpleFailure:
    return _failure(FailureCode.EMPTY_FAILURE_RESULT)
