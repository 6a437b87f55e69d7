"""
Base Validator - Chained Checks on One Named Field.

A validator is scoped to exactly one field and appends failures into a
caller-owned list shared by reference across the whole chain. Every leaf
check reports through validate(), which applies the short-circuit rule:

    A check executes unless flow is STOP and the chain already holds a
    failure (or was suppressed by if_/guard). After every executed check
    flow resets to STOP, so continue_() authorizes exactly one more check.

By default only the first failure per field is kept; calling continue_()
between checks collects more than one.

Example:
    >>> failures = []
    >>> (StringValidator("name", "  ", failures)
    ...     .is_not_empty()
    ...     .continue_()
    ...     .has_length_between(3, 50))
    >>> [f.code for f in failures]
    [<FailureCode.STRING_CANNOT_BE_EMPTY: ...>, <FailureCode.STRING_LENGTH_OUT_OF_RANGE: ...>]
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Generic, List, Optional, TypeVar

from checkchain.failure import factory
from checkchain.failure.codes import FailureCode
from checkchain.failure.models import FailureDetails, SimpleFailure
from checkchain.failure.technical_error import TechnicalError
from checkchain.validation.predicates import is_blank, is_equal

logger = logging.getLogger(__name__)

V = TypeVar("V", bound="BaseValidator[Any]")
T = TypeVar("T")

FailureFactory = Callable[[], SimpleFailure]


class Flow(str, Enum):
    """Short-circuit control state of a chain."""

    STOP = "STOP"
    CONTINUE = "CONTINUE"


class BaseValidator(Generic[T]):
    """
    Base class for typed validators.

    Subclasses add domain predicates and report every failing check through
    validate(). Chain methods are annotated with a self-bound TypeVar so a
    subclass's chain keeps its own type.
    """

    def __init__(
        self,
        field: str,
        value: T,
        failures: Optional[List[SimpleFailure]] = None,
    ) -> None:
        """
        Initialize validator for one field.

        Args:
            field: Name of the field under validation
            value: Value under validation
            failures: Caller-owned failure sink (a new list if omitted)

        Raises:
            TechnicalError: If field is not a non-empty string
        """
        if not isinstance(field, str) or len(field.strip()) == 0:
            raise TechnicalError(factory.validator_with_invalid_data_structure(field))
        self._field = field
        self._value = value
        self._failures: List[SimpleFailure] = failures if failures is not None else []
        self._has_failure = False
        self._suppressed = False
        self._flow = Flow.STOP

    # =========================================================================
    # State
    # =========================================================================

    @property
    def field(self) -> str:
        return self._field

    @property
    def value(self) -> T:
        return self._value

    @property
    def failures(self) -> List[SimpleFailure]:
        return self._failures

    @property
    def has_failure(self) -> bool:
        """True once a check in this chain has recorded a failure."""
        return self._has_failure

    @property
    def flow(self) -> Flow:
        return self._flow

    # =========================================================================
    # Flow control
    # =========================================================================

    def if_(self: V, expression: bool) -> V:
        """
        Suppress subsequent checks when expression is false.

        No failure is recorded; the chain just stops evaluating.
        """
        if not expression:
            self._suppress()
        return self

    def guard(self: V, predicate: Callable[[], bool]) -> V:
        """Like if_(), with the condition evaluated from a callable."""
        if not predicate():
            self._suppress()
        return self

    def then(self: V, callback: Callable[[], Any]) -> V:
        """Run callback only if nothing has failed or been suppressed so far."""
        if not self._has_failure and not self._suppressed:
            callback()
        return self

    def when(self: V, condition: bool, callback: Callable[[], Any]) -> V:
        """Run callback if condition is true, regardless of prior failures."""
        if condition:
            callback()
        return self

    def continue_(self: V) -> V:
        """Authorize exactly the next check to run even after a failure."""
        self._flow = Flow.CONTINUE
        return self

    # =========================================================================
    # Baseline checks
    # =========================================================================

    def is_required(self: V, failure: Optional[FailureFactory] = None) -> V:
        """Fail when the value is None, a blank string or an empty collection."""
        return self.validate(
            lambda: is_blank(self._value),
            failure() if failure else factory.missing_required_data(self._field),
        )

    def is_equal_to(
        self: V, target: Any, failure: Optional[FailureFactory] = None
    ) -> V:
        """Fail when the value does not equal target (see predicates.is_equal)."""
        return self.validate(
            lambda: not is_equal(self._value, target),
            failure()
            if failure
            else factory.values_not_equal(self._field, self._value, target),
        )

    def is_true(self: V, expression: bool, failure: FailureFactory) -> V:
        """Fail with the given failure when expression is false."""
        return self.validate(lambda: not expression, failure())

    # =========================================================================
    # Shared primitive
    # =========================================================================

    def validate(
        self: V, predicate: Callable[[], bool], fallback_failure: SimpleFailure
    ) -> V:
        """
        Record fallback_failure if predicate() is true.

        Skipped entirely when flow is STOP and the chain is already failed
        or suppressed. Flow is reset to STOP after every executed check.

        Args:
            predicate: Returns True when the check FAILS
            fallback_failure: Failure appended to the sink on failure

        Returns:
            self for chaining
        """
        if self._flow == Flow.STOP and (self._has_failure or self._suppressed):
            logger.debug(f"Check skipped for field '{self._field}'")
            return self

        if predicate():
            self._has_failure = True
            self._failures.append(fallback_failure)

        self._flow = Flow.STOP
        return self

    def _suppress(self) -> None:
        self._flow = Flow.STOP
        self._suppressed = True

    def _merge(
        self,
        default: SimpleFailure,
        code: Optional[FailureCode],
        details: Optional[FailureDetails],
    ) -> SimpleFailure:
        """Apply a caller's code override and extra details to a default failure."""
        if code is None and not details:
            return default
        return SimpleFailure(
            code=code if code is not None else default.code,
            details={**default.details, **(details or {})},
        )
