"""
String Validator.

Emptiness checks look at the trimmed text; length-range checks look at the
raw text. A None value fails every check instead of raising.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, List, Optional, Pattern, Type, Union

from checkchain.failure import factory
from checkchain.failure.codes import FailureCode
from checkchain.failure.models import FailureDetails, SimpleFailure
from checkchain.validation.base_validator import BaseValidator
from checkchain.validation.predicates import (
    is_email,
    is_match,
    is_uuid_v4,
    is_uuid_v7,
)


class StringValidator(BaseValidator[Optional[str]]):
    """Validator for string values."""

    def __init__(
        self,
        field: str,
        value: Optional[str],
        failures: Optional[List[SimpleFailure]] = None,
    ) -> None:
        super().__init__(field, value, failures)

    def _trimmed_length(self) -> int:
        return len(self._value.strip()) if isinstance(self._value, str) else 0

    def _raw_length(self) -> int:
        return len(self._value) if isinstance(self._value, str) else 0

    def is_not_empty(
        self,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "StringValidator":
        """Fail when the trimmed text is empty."""
        return self.validate(
            lambda: self._trimmed_length() == 0,
            self._merge(factory.string_cannot_be_empty(self._field), code, details),
        )

    def has_content(
        self,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "StringValidator":
        """Fail when the text is None or whitespace only."""
        return self.validate(
            lambda: self._trimmed_length() == 0,
            self._merge(factory.string_cannot_be_blank(self._field), code, details),
        )

    def matches_pattern(
        self,
        pattern: Union[str, Pattern[str]],
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "StringValidator":
        """Fail when pattern is not found in the text."""
        return self.validate(
            lambda: not is_match(pattern, self._value),
            self._merge(
                factory.string_invalid_format(self._field, self._value), code, details
            ),
        )

    def is_valid_email(
        self,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "StringValidator":
        return self.validate(
            lambda: not is_email(self._value),
            self._merge(
                factory.email_with_invalid_format(self._field, self._value), code, details
            ),
        )

    def is_valid_uuid_v4(
        self,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "StringValidator":
        """Fail unless the text is a UUID with version digit 4."""
        return self.validate(
            lambda: not is_uuid_v4(self._value),
            self._merge(
                factory.uid_with_invalid_format(self._field, self._value), code, details
            ),
        )

    def is_valid_uuid_v7(
        self,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "StringValidator":
        """Fail unless the text is a UUID with version digit 7."""
        return self.validate(
            lambda: not is_uuid_v7(self._value),
            self._merge(
                factory.uid_with_invalid_format(self._field, self._value), code, details
            ),
        )

    def has_length_between(
        self,
        minimum: int,
        maximum: int,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "StringValidator":
        """Fail unless minimum <= len(text) <= maximum (untrimmed)."""
        length = self._raw_length()
        return self.validate(
            lambda: not (minimum <= length <= maximum),
            self._merge(
                factory.string_length_out_of_range(self._field, minimum, maximum, length),
                code,
                details,
            ),
        )

    def is_in_enum(
        self,
        values: Union[Type[Enum], Iterable[Any]],
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "StringValidator":
        """
        Fail unless the text is one of the allowed values.

        Args:
            values: An Enum class (its member values are used) or an iterable
            code: Optional failure code override
            details: Extra details merged into the failure
        """
        if isinstance(values, type) and issubclass(values, Enum):
            allowed = [member.value for member in values]
        else:
            allowed = list(values)
        return self.validate(
            lambda: self._value not in allowed,
            self._merge(
                factory.invalid_enum_value(self._field, self._value, allowed),
                code,
                details,
            ),
        )

    def starts_with(
        self,
        prefix: str,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "StringValidator":
        return self.validate(
            lambda: not (isinstance(self._value, str) and self._value.startswith(prefix)),
            self._merge(
                factory.string_invalid_format(self._field, self._value),
                code,
                {"prefix": prefix, **(details or {})},
            ),
        )
