"""
Result Package - SUCCESS/FAILURE Outcomes.

Exports the Result union, its two variants and the constructors used to
build and combine them.
"""

from checkchain.result.result import (
    Failure,
    Result,
    ResultType,
    Success,
    combine,
    failure,
    success,
)

__all__ = [
    "Failure",
    "Result",
    "ResultType",
    "Success",
    "combine",
    "failure",
    "success",
]
