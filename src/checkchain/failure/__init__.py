"""
Failure Package - Failure Taxonomy.

This package provides:
    - FailureCode: Closed vocabulary of failure kinds
    - SimpleFailure: Code plus contextual details (a value, never raised)
    - RichFailure: Localized, display-ready failure
    - factory: One constructor function per catalogued code
    - TechnicalError: Exception for contract violations in calling code
"""

from checkchain.failure.codes import FailureCode
from checkchain.failure.models import FailureDetails, RichFailure, SimpleFailure
from checkchain.failure.technical_error import TechnicalError

__all__ = [
    "FailureCode",
    "FailureDetails",
    "RichFailure",
    "SimpleFailure",
    "TechnicalError",
]
