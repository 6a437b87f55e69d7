"""
Result Type - Outcome of a Fallible Operation.

A Result is either Success (wrapping a value) or Failure (wrapping one or
more SimpleFailure). Recoverable failures travel through Result instead of
being raised, so independent checks can be aggregated before the caller
decides whether to abort.

Design Notes:
    - Both variants are frozen dataclasses
    - ``type`` is the discriminant; is_valid()/is_invalid() read it
    - map/flat_map/tap are no-ops on Failure
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    List,
    Mapping,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

from checkchain.failure import factory
from checkchain.failure.models import SimpleFailure
from checkchain.failure.technical_error import TechnicalError

T = TypeVar("T")
U = TypeVar("U")


class ResultType(str, Enum):
    """Discriminant of a Result."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def type(self) -> ResultType:
        return ResultType.SUCCESS

    @property
    def failures(self) -> Tuple[SimpleFailure, ...]:
        return ()

    def is_valid(self) -> bool:
        return True

    def is_invalid(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        """Transform the wrapped value."""
        return Success(fn(self.value))

    def flat_map(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        """Chain an operation that itself returns a Result."""
        return fn(self.value)

    def fold(
        self,
        on_success: Callable[[T], U],
        on_failure: Callable[[Tuple[SimpleFailure, ...]], U],
    ) -> U:
        return on_success(self.value)

    def tap(self, fn: Callable[[T], Any]) -> "Result[T]":
        """Run a side effect with the value and return self."""
        fn(self.value)
        return self


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying one or more failures."""

    failures: Tuple[SimpleFailure, ...]

    def __post_init__(self) -> None:
        if len(self.failures) == 0:
            raise TechnicalError(factory.empty_failure_result())

    @property
    def type(self) -> ResultType:
        return ResultType.FAILURE

    def is_valid(self) -> bool:
        return False

    def is_invalid(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], U]) -> "Result[U]":
        return self

    def flat_map(self, fn: Callable[[Any], "Result[U]"]) -> "Result[U]":
        return self

    def fold(
        self,
        on_success: Callable[[Any], U],
        on_failure: Callable[[Tuple[SimpleFailure, ...]], U],
    ) -> U:
        return on_failure(self.failures)

    def tap(self, fn: Callable[[Any], Any]) -> "Failure":
        return self


Result = Union[Success[T], Failure]


def success(value: T) -> Success[T]:
    """Wrap a value in a Success."""
    return Success(value)


def failure(errors: Union[SimpleFailure, Sequence[SimpleFailure]]) -> Failure:
    """
    Wrap one failure or a sequence of failures in a Failure.

    Raises:
        TechnicalError: If the sequence is empty
    """
    if isinstance(errors, SimpleFailure):
        return Failure((errors,))
    return Failure(tuple(errors))


def combine(
    results: Union[Sequence["Result[Any]"], Mapping[str, "Result[Any]"]],
) -> "Result[Any]":
    """
    Combine several results into one.

    A sequence of results yields Success(list of values); a mapping yields
    Success(dict of values). If any result failed, all failures are
    concatenated in input order into a single Failure.

    Args:
        results: List/tuple or dict of results

    Returns:
        Combined Result

    Raises:
        TechnicalError: If results is neither a sequence nor a mapping
    """
    collected: List[SimpleFailure] = []

    if isinstance(results, Mapping):
        values: Dict[str, Any] = {}
        for key, result in results.items():
            if result.is_invalid():
                collected.extend(result.failures)
            else:
                values[key] = result.value
        return failure(collected) if collected else success(values)

    if isinstance(results, (list, tuple)):
        items: List[Any] = []
        for result in results:
            if result.is_invalid():
                collected.extend(result.failures)
            else:
                items.append(result.value)
        return failure(collected) if collected else success(items)

    raise TechnicalError(factory.invalid_combine_input(type(results).__name__))
