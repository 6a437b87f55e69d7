"""
Validation Helpers - Aggregating Failures Across a Function.

validate_and_collect() lets several independent Result-returning checks
feed one failures list before the caller decides whether to abort:

    failures = []
    name = validate_and_collect(Name.create(raw_name), failures)
    email = validate_and_collect(Email.create(raw_email), failures)
    if failures:
        return failure(failures)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from checkchain.failure import factory
from checkchain.failure.models import SimpleFailure
from checkchain.failure.technical_error import TechnicalError
from checkchain.result.result import Result, failure, success

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


class CaseSensitivity(str, Enum):
    """Comparison mode for parse_to_enum."""

    SENSITIVE = "SENSITIVE"
    INSENSITIVE = "INSENSITIVE"


def validate_and_collect(result: Result[T], failures: List[SimpleFailure]) -> Optional[T]:
    """
    Unwrap a Result, collecting its failures.

    Args:
        result: Result to unwrap
        failures: Caller-owned list; failures are appended in order

    Returns:
        The wrapped value on success, None on failure
    """
    if result.is_invalid():
        failures.extend(result.failures)
        return None
    return result.value


def ensure_not_null(fields: Dict[str, Any]) -> List[SimpleFailure]:
    """One MISSING_REQUIRED_DATA failure per falsy value, in input order."""
    return [
        factory.missing_required_data(name) for name, value in fields.items() if not value
    ]


def collect_null_fields(fields: Dict[str, Any]) -> List[str]:
    """Names whose value is None."""
    return [name for name, value in fields.items() if value is None]


def parse_to_enum(
    field: str,
    value: Optional[str],
    enum_type: Type[E],
    mode: CaseSensitivity = CaseSensitivity.INSENSITIVE,
) -> Result[E]:
    """
    Convert text to an enum member by member value.

    In INSENSITIVE mode both sides are upper-cased before comparing.

    Args:
        field: Field name for the failure details
        value: Text to convert
        enum_type: Target Enum class
        mode: Case handling

    Returns:
        Success(member) or Failure(INVALID_ENUM_VALUE)

    Raises:
        TechnicalError: If enum_type is None
    """
    TechnicalError.validate_required_fields({"enum_type": enum_type})
    allowed = [member.value for member in enum_type]

    if value is None:
        return failure(factory.invalid_enum_value(field, "N/A", allowed))

    def normalize(text: Any) -> str:
        text = str(text)
        return text.upper() if mode == CaseSensitivity.INSENSITIVE else text

    wanted = normalize(value)
    for member in enum_type:
        if normalize(member.value) == wanted:
            return success(member)

    logger.debug(f"'{value}' is not a value of {enum_type.__name__}")
    return failure(factory.invalid_enum_value(field, value, allowed))


def hydrate_enum(value: Mapping[str, Any], enum_type: Type[E]) -> E:
    """
    Convert a single-entry mapping ``{field: text}`` to an enum member.

    Meant for trusted input such as persisted rows, where a value that does
    not parse is a fault in the calling code. Matching is case-insensitive.

    Example:
        >>> hydrate_enum({"status": "active"}, Status)
        <Status.ACTIVE: 'ACTIVE'>

    Raises:
        TechnicalError: If enum_type is None (NULL_ARGUMENT), the mapping
            does not hold exactly one entry (INVALID_ENUM_VALUE_COUNT), or
            the text is not a value of enum_type (INVALID_ENUM_VALUE)
    """
    TechnicalError.validate_required_fields({"enum_type": enum_type})
    entries = list(value.items())

    if len(entries) != 1:
        field = entries[0][0] if entries else "N/A"
        raise TechnicalError(
            factory.invalid_enum_value_count(field, 1, len(entries), [key for key, _ in entries])
        )

    field, text = entries[0]
    result = parse_to_enum(field, text, enum_type, CaseSensitivity.INSENSITIVE)
    if result.is_invalid():
        raise TechnicalError(result.failures[0])
    return result.value
