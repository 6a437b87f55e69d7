"""
Object Validator.

Works on mappings (keys) and on plain objects (instance attributes).
property() and optional_property() scope nested validation to a property
that must or may be present.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, List, Optional

from checkchain.failure import factory
from checkchain.failure.codes import FailureCode
from checkchain.failure.models import FailureDetails, SimpleFailure
from checkchain.validation.base_validator import BaseValidator

logger = logging.getLogger(__name__)


class ObjectValidator(BaseValidator[Any]):
    """Validator for mappings and attribute-bearing objects."""

    def __init__(
        self,
        field: str,
        value: Any,
        failures: Optional[List[SimpleFailure]] = None,
    ) -> None:
        super().__init__(field, value, failures)

    def _has(self, name: str) -> bool:
        if self._value is None:
            return False
        if isinstance(self._value, Mapping):
            return name in self._value
        return hasattr(self._value, name)

    def _key_count(self) -> int:
        if self._value is None:
            return 0
        if isinstance(self._value, Mapping):
            return len(self._value)
        return len(getattr(self._value, "__dict__", {}))

    def has_property(
        self,
        name: str,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "ObjectValidator":
        return self.validate(
            lambda: not self._has(name),
            self._merge(factory.object_missing_property(self._field, name), code, details),
        )

    def is_not_empty(
        self,
        code: Optional[FailureCode] = None,
        details: Optional[FailureDetails] = None,
    ) -> "ObjectValidator":
        """Fail when the object has no keys (or no instance attributes)."""
        return self.validate(
            lambda: self._key_count() == 0,
            self._merge(factory.object_is_empty(self._field), code, details),
        )

    def property(self, name: str, callback: Callable[[], Any]) -> "ObjectValidator":
        """
        Validate a required property.

        If the property is missing, MISSING_REQUIRED_DATA is recorded
        directly (flow gating does not apply) and callback is skipped.
        Otherwise callback runs.
        """
        if not self._has(name):
            logger.debug(f"Required property '{name}' missing on '{self._field}'")
            self._has_failure = True
            self._failures.append(
                factory.missing_required_data(self._field).with_details(property=name)
            )
            return self

        callback()
        return self

    def optional_property(
        self, name: str, callback: Callable[[], Any]
    ) -> "ObjectValidator":
        """Run callback only if the property is present; never records a failure."""
        if self._has(name):
            callback()
        return self
