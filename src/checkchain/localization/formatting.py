"""
Template Formatting - Placeholder Substitution for Failure Messages.

Templates contain ``{name}`` tokens, optionally typed as ``{name:number}``.
Each token whose name matches a key of the failure details is replaced by
that value's display string. Tokens with no matching detail (or a None
detail) are left verbatim.

Design Notes:
    - Details are a dynamically-typed bag whose shape varies per code, so
      stringification happens here, at render time
    - to_display_string() is total: it never raises, whatever the value
"""

from __future__ import annotations

import json
import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, List, Optional

logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(r"\{(\w+)(?::([\w\s|\[\]]+))?\}")

VALID_TYPES = {
    "string",
    "number",
    "boolean",
    "Date",
    "string[]",
    "number[]",
    "boolean[]",
    "Date[]",
}


@dataclass(frozen=True)
class TemplateVariable:
    """A placeholder found in a template."""

    name: str
    type: str = "string"


def to_display_string(value: Any) -> str:
    """
    Render any detail value as text. Never raises.

    Rules:
        - bool -> "true"/"false"
        - integral float -> no trailing ".0"; NaN -> "NaN"
        - date/datetime -> ISO-8601
        - Enum -> its value
        - list/tuple/set -> items joined by ", "
        - mapping -> JSON
        - anything else -> str(value), or "<TypeName>" if that fails
    """
    try:
        return _display(value)
    except Exception:
        logger.debug(f"Could not stringify detail of type {type(value).__name__}")
        return f"<{type(value).__name__}>"


def _display(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, Enum):
        return _display(value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return str(int(value)) if value.is_integer() else str(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return json.dumps(value, default=str, ensure_ascii=False)
    if isinstance(value, (set, frozenset)):
        return ", ".join(sorted(to_display_string(item) for item in value))
    if isinstance(value, (list, tuple)):
        return ", ".join(to_display_string(item) for item in value)
    return str(value)


def render_template(template: str, details: Optional[Mapping[str, Any]]) -> str:
    """
    Substitute placeholders in template with values from details.

    Args:
        template: Message pattern with {name} or {name:type} tokens
        details: Failure details (None is treated as empty)

    Returns:
        The rendered message
    """
    values = details or {}

    def substitute(match: "re.Match[str]") -> str:
        name = match.group(1)
        if values.get(name) is None:
            return match.group(0)
        return to_display_string(values[name])

    return TOKEN_PATTERN.sub(substitute, template)


def extract_template_variables(template: str) -> List[TemplateVariable]:
    """
    List the distinct placeholders of a template, in order of appearance.

    Unknown type annotations fall back to "string".

    Example:
        >>> extract_template_variables("{field} must be between {min:number} and {max:number}")
        [TemplateVariable(name='field', type='string'), TemplateVariable(name='min', type='number'), ...]
    """
    variables: List[TemplateVariable] = []
    seen = set()
    for match in TOKEN_PATTERN.finditer(template or ""):
        name = match.group(1)
        if name in seen:
            continue
        seen.add(name)
        declared = [t.strip() for t in (match.group(2) or "string").split("|")]
        kept = [t for t in declared if t in VALID_TYPES]
        variables.append(TemplateVariable(name, " | ".join(kept) if kept else "string"))
    return variables
