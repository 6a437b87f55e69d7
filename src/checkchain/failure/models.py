"""
Failure Value Objects.

SimpleFailure is the canonical error-carrying value of the package: a code
plus a bag of contextual details. RichFailure is its presentation-ready form,
produced on demand by the localization engine.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field

from checkchain.failure.codes import FailureCode

# Context for a failure. Shapes vary per code, so values stay dynamically
# typed here and are stringified only when a message is rendered.
FailureDetails = Dict[str, Any]


class SimpleFailure(BaseModel):
    """One recoverable validation or business failure."""

    code: FailureCode = Field(..., description="Failure kind")
    details: FailureDetails = Field(
        default_factory=dict, description="Operands and context for the message"
    )

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def with_details(self, **extra: Any) -> "SimpleFailure":
        """Return a copy with extra details merged over the current ones."""
        return SimpleFailure(code=self.code, details={**self.details, **extra})

    def __str__(self) -> str:
        return f"{self.code.value} {self.details}"


class RichFailure(BaseModel):
    """Localized, display-ready failure."""

    code: str = Field(..., description="Failure code token")
    status: int = Field(..., description="Numeric status (HTTP semantics)")
    title: str = Field(..., description="Short localized summary")
    message: str = Field(..., description="Localized, interpolated message")

    model_config = {"frozen": True}
