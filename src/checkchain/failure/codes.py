"""
Failure Codes - Closed Vocabulary of Failure Kinds.

Every code used by the validators and the technical error helpers has a
matching entry in the packaged message catalog
(resources/failure_messages.yaml). scripts/check_catalog.py verifies this.
"""

from __future__ import annotations

from enum import Enum


class FailureCode(str, Enum):
    """Identity tokens for recoverable and technical failures."""

    # Generic
    UNCATALOGUED_ERROR = "UNCATALOGUED_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_REQUIRED_DATA = "MISSING_REQUIRED_DATA"
    VALUES_NOT_EQUAL = "VALUES_NOT_EQUAL"
    CONDITION_NOT_SATISFIED = "CONDITION_NOT_SATISFIED"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    RESOURCE_ALREADY_EXISTS = "RESOURCE_ALREADY_EXISTS"

    # Strings
    STRING_CANNOT_BE_EMPTY = "STRING_CANNOT_BE_EMPTY"
    STRING_CANNOT_BE_BLANK = "STRING_CANNOT_BE_BLANK"
    STRING_INVALID_FORMAT = "STRING_INVALID_FORMAT"
    STRING_LENGTH_OUT_OF_RANGE = "STRING_LENGTH_OUT_OF_RANGE"
    EMAIL_WITH_INVALID_FORMAT = "EMAIL_WITH_INVALID_FORMAT"
    UID_WITH_INVALID_FORMAT = "UID_WITH_INVALID_FORMAT"
    INVALID_ENUM_VALUE = "INVALID_ENUM_VALUE"

    # Numbers
    VALUE_OUT_OF_RANGE = "VALUE_OUT_OF_RANGE"
    VALUE_GREATER_THAN_MAX = "VALUE_GREATER_THAN_MAX"
    VALUE_LESS_THAN_MIN = "VALUE_LESS_THAN_MIN"
    VALUE_NOT_POSITIVE = "VALUE_NOT_POSITIVE"
    VALUE_MUST_BE_NEGATIVE = "VALUE_MUST_BE_NEGATIVE"
    VALUE_NOT_INTEGER = "VALUE_NOT_INTEGER"

    # Dates
    DATE_NOT_AFTER_LIMIT = "DATE_NOT_AFTER_LIMIT"
    DATE_NOT_BEFORE_LIMIT = "DATE_NOT_BEFORE_LIMIT"
    DATE_OUT_OF_RANGE = "DATE_OUT_OF_RANGE"
    DATE_WITH_INVALID_SEQUENCE = "DATE_WITH_INVALID_SEQUENCE"

    # Collections
    ARRAY_LENGTH_IS_OUT_OF_RANGE = "ARRAY_LENGTH_IS_OUT_OF_RANGE"
    CONTENT_WITH_INVALID_ITEMS = "CONTENT_WITH_INVALID_ITEMS"
    MISSING_VALID_ITEM = "MISSING_VALID_ITEM"
    OBJECT_IS_EMPTY = "OBJECT_IS_EMPTY"
    OBJECT_MISSING_PROPERTY = "OBJECT_MISSING_PROPERTY"

    # Technical
    VALIDATOR_WITH_INVALID_DATA_STRUCTURE = "VALIDATOR_WITH_INVALID_DATA_STRUCTURE"
    NULL_ARGUMENT = "NULL_ARGUMENT"
    INVALID_ENUM_VALUE_COUNT = "INVALID_ENUM_VALUE_COUNT"
    INVALID_COMBINE_INPUT = "INVALID_COMBINE_INPUT"
    EMPTY_FAILURE_RESULT = "EMPTY_FAILURE_RESULT"
