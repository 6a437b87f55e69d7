"""
Array Validator.

Works on any list or tuple. A None value is treated as an empty sequence.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, TypeVar

from checkchain.failure import factory
from checkchain.failure.codes import FailureCode
from checkchain.failure.models import FailureDetails, SimpleFailure
from checkchain.validation.base_validator import BaseValidator
from checkchain.validation.predicates import is_equal

I = TypeVar("I")


class ArrayValidator(BaseValidator[Optional[Sequence[I]]]):
    """Validator for sequences of items."""

    def __init__(
        self,
        field: str,
        value: Optional[Sequence[I]],
        failures: Optional[List[SimpleFailure]] = None,
    ) -> None:
        super().__init__(field, value, failures)

    @property
    def items(self) -> Sequence[I]:
        return self._value if self._value is not None else ()

    def is_not_empty(
        self,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "ArrayValidator[I]":
        return self.validate(
            lambda: len(self.items) == 0,
            self._merge(factory.missing_required_data(self._field), code, details),
        )

    def has_length_between(
        self,
        minimum: int,
        maximum: int,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "ArrayValidator[I]":
        """Fail unless minimum <= len(items) <= maximum."""
        count = len(self.items)
        return self.validate(
            lambda: not (minimum <= count <= maximum),
            self._merge(
                factory.array_length_is_out_of_range(self._field, minimum, maximum, count),
                code,
                details,
            ),
        )

    def contains(
        self,
        item: I,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "ArrayValidator[I]":
        """Fail unless some element equals item (see predicates.is_equal)."""
        return self.validate(
            lambda: not any(is_equal(element, item) for element in self.items),
            self._merge(
                factory.missing_required_data(self._field),
                code,
                {"item": item, **(details or {})},
            ),
        )

    def every(
        self,
        predicate: Callable[[I], bool],
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "ArrayValidator[I]":
        """Fail unless predicate holds for every element."""
        return self.validate(
            lambda: not all(predicate(element) for element in self.items),
            self._merge(factory.content_with_invalid_items(self._field), code, details),
        )

    def some(
        self,
        predicate: Callable[[I], bool],
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "ArrayValidator[I]":
        """Fail unless predicate holds for at least one element."""
        return self.validate(
            lambda: not any(predicate(element) for element in self.items),
            self._merge(factory.missing_valid_item(self._field), code, details),
        )
