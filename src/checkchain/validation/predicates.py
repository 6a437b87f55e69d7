"""
Predicates - Pure Checks Used by the Validators.

Every function returns True when the check passes and False otherwise.
None of them raise for bad data under test; an unreadable value simply
fails the check.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time
from typing import Any, Optional, Pattern, Union

EMAIL_PATTERN = re.compile(r"^[^\s@]+@([a-zA-Z0-9-]+\.)+[a-zA-Z]{2,}$")
UUID_V4_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-4[0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}$"
)
UUID_V7_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-7[0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}$"
)

# Recursion guard for nested sequence comparison
MAX_EQUALITY_DEPTH = 100


def is_number(value: Any) -> bool:
    """True for int/float values (bool excluded), NaN included."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_blank(value: Any) -> bool:
    """
    True for None, whitespace-only strings, and empty sequences or mappings.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return len(value.strip()) == 0
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def is_equal(value: Any, target: Any, _depth: int = 0) -> bool:
    """
    Compare two values.

    Rules:
        - Primitives: strict equality (bool never equals a number, NaN
          equals nothing, itself included)
        - date/datetime: equal timestamps
        - list/tuple: same length and element-wise is_equal
        - Anything else (dicts, objects): identity only
    """
    if isinstance(value, bool) or isinstance(target, bool):
        return isinstance(value, bool) and isinstance(target, bool) and value == target

    # Ahead of the identity shortcut so NaN never equals itself
    if is_number(value) and is_number(target):
        return value == target

    if value is target:
        return True
    if value is None or target is None:
        return False

    if isinstance(value, str) and isinstance(target, str):
        return value == target

    if isinstance(value, (date, datetime)) and isinstance(target, (date, datetime)):
        left, right = timestamp_ms(value), timestamp_ms(target)
        return left is not None and right is not None and left == right

    if isinstance(value, (list, tuple)) and isinstance(target, (list, tuple)):
        if len(value) != len(target):
            return False
        if _depth >= MAX_EQUALITY_DEPTH:
            return False
        return all(
            is_equal(left, right, _depth + 1) for left, right in zip(value, target)
        )

    return False


def is_match(pattern: Union[str, Pattern[str]], value: Optional[str]) -> bool:
    """True when value is a string and pattern is found in it."""
    if not isinstance(value, str):
        return False
    try:
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        return compiled.search(value) is not None
    except re.error:
        return False


def is_email(value: Optional[str]) -> bool:
    return is_match(EMAIL_PATTERN, value)


def is_uuid_v4(value: Optional[str]) -> bool:
    return is_match(UUID_V4_PATTERN, value)


def is_uuid_v7(value: Optional[str]) -> bool:
    return is_match(UUID_V7_PATTERN, value)


def timestamp_ms(value: Any) -> Optional[float]:
    """
    Millisecond timestamp of a date or datetime, None if unreadable.

    Plain dates are taken at midnight. Naive datetimes are interpreted in
    local time, as datetime.timestamp() does.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time.min)
    else:
        return None
    try:
        result = moment.timestamp() * 1000
    except (OverflowError, OSError, ValueError):
        return None
    return None if math.isnan(result) else result


def iso_format(value: Any) -> str:
    """ISO-8601 text of a date/datetime, "N/A" for anything unreadable."""
    if isinstance(value, (date, datetime)) and timestamp_ms(value) is not None:
        return value.isoformat()
    return "N/A"
