"""
Test Support - Replacing the Process-Wide Registry.

For tests only. Must not run concurrently with in-flight lookups.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from checkchain.localization import registry as _registry
from checkchain.localization.registry import MessageRegistry


def reset_default_registry() -> None:
    """Drop the default registry; the next access reloads the packaged catalog."""
    _registry._replace_default_registry(None)


@contextmanager
def override_default_registry(replacement: MessageRegistry) -> Iterator[MessageRegistry]:
    """
    Install replacement as the default registry for the duration of the block.

    Example:
        >>> with override_default_registry(MessageRegistry(catalog)):
        ...     default_mapper().to_rich_failure(failure)
    """
    previous = _registry._default_registry
    _registry._replace_default_registry(replacement)
    try:
        yield replacement
    finally:
        _registry._replace_default_registry(previous)
