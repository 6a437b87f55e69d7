"""
Validation Package - Fluent Field Validation.

This package provides:
    - BaseValidator: Chain engine with STOP/CONTINUE short-circuit control
    - StringValidator, NumberValidator, DateValidator: Scalar validators
    - ArrayValidator, ObjectValidator: Collection validators
    - Helpers: validate_and_collect, ensure_not_null, parse_to_enum, hydrate_enum

Design Principles:
    - One validator instance per named field
    - Failures are appended to a caller-owned list, never raised
    - One failure per field by default; continue_() collects more
"""

from checkchain.validation.base_validator import BaseValidator, Flow
from checkchain.validation.string_validator import StringValidator
from checkchain.validation.number_validator import NumberValidator
from checkchain.validation.date_validator import DateValidator
from checkchain.validation.array_validator import ArrayValidator
from checkchain.validation.object_validator import ObjectValidator
from checkchain.validation.helpers import (
    CaseSensitivity,
    collect_null_fields,
    ensure_not_null,
    hydrate_enum,
    parse_to_enum,
    validate_and_collect,
)

__all__ = [
    "BaseValidator",
    "Flow",
    "StringValidator",
    "NumberValidator",
    "DateValidator",
    "ArrayValidator",
    "ObjectValidator",
    "CaseSensitivity",
    "collect_null_fields",
    "ensure_not_null",
    "hydrate_enum",
    "parse_to_enum",
    "validate_and_collect",
]
