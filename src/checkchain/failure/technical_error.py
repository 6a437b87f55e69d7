"""
Technical Error - Contract Violations in Calling Code.

Raised when a component is misused (malformed constructor input, a required
argument that is None). It signals a bug in the caller, not bad user data,
and is not meant to be caught by ordinary control flow. Validation failures
are never raised; they travel as SimpleFailure values.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from checkchain.failure import factory
from checkchain.failure.codes import FailureCode
from checkchain.failure.models import FailureDetails, SimpleFailure

logger = logging.getLogger(__name__)


class TechnicalError(Exception):
    """Raised when a component's usage contract is violated."""

    def __init__(self, failure: SimpleFailure) -> None:
        self.failure = failure
        details = json.dumps(failure.details, default=str, ensure_ascii=False)
        super().__init__(f"{failure.code.value}: {details}")

    @property
    def code(self) -> FailureCode:
        return self.failure.code

    @property
    def details(self) -> FailureDetails:
        return self.failure.details

    @classmethod
    def raise_if(
        cls,
        condition: bool,
        code: FailureCode,
        details: Optional[FailureDetails] = None,
    ) -> None:
        """
        Raise a TechnicalError when condition is true.

        Args:
            condition: Precondition violation flag
            code: Failure code identifying the violation
            details: Optional context

        Raises:
            TechnicalError: If condition is true
        """
        if condition:
            logger.error(f"Technical error raised: {code.value}")
            raise cls(SimpleFailure(code=code, details=details or {}))

    @classmethod
    def validate_required_fields(
        cls,
        fields: Dict[str, Any],
        code: FailureCode = FailureCode.NULL_ARGUMENT,
        details: Optional[FailureDetails] = None,
    ) -> None:
        """
        Raise when any of the named arguments is None.

        Args:
            fields: Argument name -> value
            code: Failure code to raise with
            details: Extra context merged into the failure details

        Raises:
            TechnicalError: If at least one value is None
        """
        null_fields = [name for name, value in fields.items() if value is None]
        if not null_fields:
            return

        failure = factory.null_argument(", ".join(null_fields))
        cls.raise_if(True, code, {**failure.details, **(details or {})})
