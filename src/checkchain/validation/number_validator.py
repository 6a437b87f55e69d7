"""
Number Validator.

All bounds are inclusive except is_positive/is_negative, which are strict,
so zero fails both. A value that is not a number (None, text, bool) or is
NaN fails every comparison.
"""

from __future__ import annotations

import math
from typing import List, Optional, Union

from checkchain.failure import factory
from checkchain.failure.codes import FailureCode
from checkchain.failure.models import FailureDetails, SimpleFailure
from checkchain.validation.base_validator import BaseValidator
from checkchain.validation.predicates import is_number

Number = Union[int, float]


class NumberValidator(BaseValidator[Optional[Number]]):
    """Validator for numeric values."""

    def __init__(
        self,
        field: str,
        value: Optional[Number],
        failures: Optional[List[SimpleFailure]] = None,
    ) -> None:
        super().__init__(field, value, failures)

    def _comparable(self) -> bool:
        return is_number(self._value) and not math.isnan(self._value)

    def is_in_range(
        self,
        minimum: Number,
        maximum: Number,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "NumberValidator":
        """Fail unless minimum <= value <= maximum."""
        return self.validate(
            lambda: not (self._comparable() and minimum <= self._value <= maximum),
            self._merge(
                factory.value_out_of_range(self._field, self._value, minimum, maximum),
                code,
                details,
            ),
        )

    def is_at_most(
        self,
        maximum: Number,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "NumberValidator":
        return self.validate(
            lambda: not (self._comparable() and self._value <= maximum),
            self._merge(
                factory.value_greater_than_max(self._field, self._value, maximum),
                code,
                details,
            ),
        )

    def is_at_least(
        self,
        minimum: Number,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "NumberValidator":
        return self.validate(
            lambda: not (self._comparable() and self._value >= minimum),
            self._merge(
                factory.value_less_than_min(self._field, self._value, minimum),
                code,
                details,
            ),
        )

    def is_positive(
        self,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "NumberValidator":
        """Fail unless value > 0."""
        return self.validate(
            lambda: not (self._comparable() and self._value > 0),
            self._merge(
                factory.value_not_positive(self._field, self._value), code, details
            ),
        )

    def is_negative(
        self,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "NumberValidator":
        """Fail unless value < 0."""
        return self.validate(
            lambda: not (self._comparable() and self._value < 0),
            self._merge(
                factory.value_must_be_negative(self._field, self._value), code, details
            ),
        )

    def is_integer(
        self,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "NumberValidator":
        """Fail unless value is an int or a float with no fractional part."""

        def is_not_integer() -> bool:
            if isinstance(self._value, int) and not isinstance(self._value, bool):
                return False
            return not (isinstance(self._value, float) and self._value.is_integer())

        return self.validate(
            is_not_integer,
            self._merge(
                factory.value_not_integer(self._field, self._value), code, details
            ),
        )
