"""
Checkchain - Fluent Field Validation and Localized Failure Messages.

A small engine for validating single named values through chained checks,
collecting recoverable failures as data, and turning those failures into
user-facing, language-specific messages.

Architecture:
    - Failures are values (SimpleFailure), never exceptions
    - Contract violations in calling code raise TechnicalError
    - Result type carries SUCCESS/FAILURE across call boundaries
    - Message copy lives in a YAML catalog, validated with Pydantic

Main Components:
    - failure: Failure codes, SimpleFailure/RichFailure, factory functions
    - result: Result type and combinators
    - validation: Core chain engine and typed validators
    - localization: Message catalog, registry and failure mapper

Example:
    >>> from checkchain.validation import StringValidator
    >>> failures = []
    >>> StringValidator("name", "", failures).is_not_empty()
    >>> failures[0].code
    <FailureCode.STRING_CANNOT_BE_EMPTY: 'STRING_CANNOT_BE_EMPTY'>

"""

import logging

__version__ = "0.4.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Checkchain.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import checkchain
        >>> checkchain.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("checkchain").setLevel(level)
