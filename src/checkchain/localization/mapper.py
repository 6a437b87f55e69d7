"""
Failure Mapper - SimpleFailure to RichFailure.

Resolution order for one failure:
    1. Registry entry for the code, or the fallback entry if uncatalogued
    2. Title and template in the requested language, else the catalog's
       default language, else any language the entry has, else the code
    3. Placeholder substitution from the failure details

The mapper never raises for unknown codes or languages.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, List, Optional, Union

from checkchain.failure.models import RichFailure, SimpleFailure
from checkchain.localization.formatting import render_template
from checkchain.localization.models import SupportedLanguage
from checkchain.localization.registry import MessageRegistry, get_default_registry

logger = logging.getLogger(__name__)

LanguageLike = Union[SupportedLanguage, str]


class FailureMapper:
    """Converts failures into localized, display-ready records."""

    def __init__(self, registry: MessageRegistry) -> None:
        """
        Initialize mapper.

        Args:
            registry: Message registry to resolve templates from
        """
        self._registry = registry

    @property
    def registry(self) -> MessageRegistry:
        return self._registry

    def to_rich_failure(
        self,
        failure: SimpleFailure,
        language: Optional[LanguageLike] = None,
    ) -> RichFailure:
        """
        Convert one failure.

        Args:
            failure: Failure to convert
            language: Requested language (catalog's preferred one if omitted)

        Returns:
            RichFailure with localized title and interpolated message
        """
        settings = self._registry.settings
        requested = self._language_key(language) or settings.preferred_language
        code = failure.code.value if isinstance(failure.code, Enum) else str(failure.code)

        entry = self._registry.get(code)
        title = entry.title_for(requested, settings.default_language)
        template = entry.template_for(requested, settings.default_language)

        if requested not in entry.title or requested not in entry.template:
            logger.debug(
                f"{code}: no '{requested}' text, falling back to '{settings.default_language}'"
            )

        return RichFailure(
            code=code,
            status=entry.status,
            title=title if title is not None else code,
            message=render_template(template if template is not None else code, failure.details),
        )

    def to_rich_failures(
        self,
        failures: Iterable[SimpleFailure],
        language: Optional[LanguageLike] = None,
    ) -> List[RichFailure]:
        """Convert a list of failures under one requested language, in order."""
        return [self.to_rich_failure(failure, language) for failure in failures]

    @staticmethod
    def _language_key(language: Optional[LanguageLike]) -> Optional[str]:
        if language is None:
            return None
        key = language.value if isinstance(language, Enum) else str(language)
        return key.strip().lower() or None


def default_mapper() -> FailureMapper:
    """Mapper around the process-wide default registry."""
    return FailureMapper(get_default_registry())
