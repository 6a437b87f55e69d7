"""
Message Registry - Read-Only Code to Template Lookup.

A MessageRegistry wraps one validated MessageCatalog. Lookup of an unknown
code returns the catalog's fallback entry instead of failing. If the
catalog does not define the fallback entry itself, a generic
"uncatalogued error" entry is synthesized.

Usage:
    registry = MessageRegistry(load_catalog("config/messages.yaml"))
    mapper = FailureMapper(registry)

A process-wide default built from the packaged catalog is available via
get_default_registry(); it is loaded lazily on first use and read-only
afterwards. Replacing it is reserved for tests (see localization.testing).
"""

from __future__ import annotations

import logging
from enum import Enum
from threading import Lock
from typing import List, Optional, Union

from checkchain.localization.loader import CatalogLoader
from checkchain.localization.models import (
    CatalogSettings,
    FailureTemplate,
    MessageCatalog,
)

logger = logging.getLogger(__name__)

CodeLike = Union[str, Enum]


def _code_key(code: CodeLike) -> str:
    return code.value if isinstance(code, Enum) else str(code)


class MessageRegistry:
    """Read-only lookup of failure templates by code."""

    def __init__(self, catalog: MessageCatalog) -> None:
        """
        Initialize registry.

        Args:
            catalog: Validated message catalog
        """
        self._catalog = catalog
        self._fallback = catalog.messages.get(
            catalog.settings.fallback_code
        ) or self._generic_fallback(catalog.settings)
        logger.debug(f"MessageRegistry initialized with {len(catalog.messages)} codes")

    @property
    def settings(self) -> CatalogSettings:
        return self._catalog.settings

    @property
    def fallback(self) -> FailureTemplate:
        return self._fallback

    def get(self, code: CodeLike) -> FailureTemplate:
        """
        Get the template entry for a code.

        Args:
            code: Failure code (enum member or its text)

        Returns:
            The code's entry, or the fallback entry if it is not catalogued
        """
        entry = self._catalog.messages.get(_code_key(code))
        if entry is None:
            logger.warning(f"Failure code {_code_key(code)} not catalogued, using fallback")
            return self._fallback
        return entry

    def contains(self, code: CodeLike) -> bool:
        return _code_key(code) in self._catalog.messages

    def codes(self) -> List[str]:
        return sorted(self._catalog.messages)

    @staticmethod
    def _generic_fallback(settings: CatalogSettings) -> FailureTemplate:
        return FailureTemplate(
            status=settings.fallback_status,
            title={"en": "Uncatalogued error", "pt": "Erro não catalogado"},
            template={
                "en": "An uncatalogued error occurred",
                "pt": "Ocorreu um erro não catalogado",
            },
        )


# =============================================================================
# Process-wide default
# =============================================================================

_default_registry: Optional[MessageRegistry] = None
_default_lock = Lock()


def get_default_registry() -> MessageRegistry:
    """
    Get the registry built from the packaged catalog.

    Loaded once, on first access, under a lock.
    """
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = MessageRegistry(CatalogLoader().load_default())
    return _default_registry


def _replace_default_registry(registry: Optional[MessageRegistry]) -> None:
    global _default_registry
    with _default_lock:
        _default_registry = registry
