"""
Date Validator.

Comparisons use millisecond timestamps, so date and datetime values (naive
or aware) can be mixed. A value under test that is not a readable date
fails the comparison rather than raising. Missing limits are a programming
fault and raise TechnicalError immediately.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from checkchain.failure import factory
from checkchain.failure.codes import FailureCode
from checkchain.failure.models import FailureDetails, SimpleFailure
from checkchain.failure.technical_error import TechnicalError
from checkchain.validation.base_validator import BaseValidator
from checkchain.validation.predicates import iso_format, timestamp_ms


class DateValidator(BaseValidator[Optional[date]]):
    """Validator for date and datetime values."""

    def __init__(
        self,
        field: str,
        value: Optional[date],
        failures: Optional[List[SimpleFailure]] = None,
    ) -> None:
        super().__init__(field, value, failures)

    def is_after(
        self,
        limit: date,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "DateValidator":
        """
        Fail unless the date is strictly after limit.

        Raises:
            TechnicalError: If limit is None
        """
        TechnicalError.validate_required_fields({"limit": limit})
        value_ms, limit_ms = timestamp_ms(self._value), timestamp_ms(limit)

        return self.validate(
            lambda: value_ms is None or limit_ms is None or not value_ms > limit_ms,
            self._merge(
                factory.date_not_after_limit(
                    self._field, iso_format(self._value), iso_format(limit)
                ),
                code,
                details,
            ),
        )

    def is_before(
        self,
        limit: date,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "DateValidator":
        """
        Fail unless the date is strictly before limit.

        Raises:
            TechnicalError: If limit is None
        """
        TechnicalError.validate_required_fields({"limit": limit})
        value_ms, limit_ms = timestamp_ms(self._value), timestamp_ms(limit)

        return self.validate(
            lambda: value_ms is None or limit_ms is None or not value_ms < limit_ms,
            self._merge(
                factory.date_not_before_limit(
                    self._field, iso_format(self._value), iso_format(limit)
                ),
                code,
                details,
            ),
        )

    def is_between(
        self,
        start: date,
        end: date,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "DateValidator":
        """
        Fail unless start <= date <= end.

        When start is after end the range itself is invalid and the check
        records DATE_WITH_INVALID_SEQUENCE without looking at the date.

        Raises:
            TechnicalError: If start or end is None
        """
        TechnicalError.validate_required_fields({"start": start, "end": end})
        start_ms, end_ms = timestamp_ms(start), timestamp_ms(end)

        if start_ms is not None and end_ms is not None and start_ms > end_ms:
            return self.validate(
                lambda: True,
                factory.date_with_invalid_sequence(
                    self._field, iso_format(start), iso_format(end)
                ),
            )

        value_ms = timestamp_ms(self._value)

        def is_outside() -> bool:
            if value_ms is None or start_ms is None or end_ms is None:
                return True
            return not (start_ms <= value_ms <= end_ms)

        return self.validate(
            is_outside,
            self._merge(
                factory.date_out_of_range(
                    self._field,
                    iso_format(self._value),
                    iso_format(start),
                    iso_format(end),
                ),
                code,
                details,
            ),
        )
