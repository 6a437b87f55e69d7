"""
Catalog Models - Pydantic Models for the Message Catalog.

The catalog is validated once at load time. Lookups afterwards never fail.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator


class SupportedLanguage(str, Enum):
    """Languages shipped in the packaged catalog."""

    PT = "pt"
    EN = "en"


class CatalogSettings(BaseModel):
    """Fallback behaviour of the catalog."""

    preferred_language: str = Field(
        default=SupportedLanguage.PT.value,
        description="Language used when a caller does not ask for one",
    )
    default_language: str = Field(
        default=SupportedLanguage.EN.value,
        description="Per-entry fallback when the requested language is missing",
    )
    fallback_code: str = Field(
        default="UNCATALOGUED_ERROR",
        description="Entry returned for codes absent from the catalog",
    )
    fallback_status: int = Field(default=500, ge=100, le=599)


class FailureTemplate(BaseModel):
    """Per-code presentation entry."""

    status: int = Field(..., ge=100, le=599)
    title: Dict[str, str] = Field(default_factory=dict)
    template: Dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def title_for(self, language: str, default_language: str) -> Optional[str]:
        """Title in language, else default_language, else any, else None."""
        return _pick(self.title, language, default_language)

    def template_for(self, language: str, default_language: str) -> Optional[str]:
        """Template in language, else default_language, else any, else None."""
        return _pick(self.template, language, default_language)


class MessageCatalog(BaseModel):
    """Root catalog object."""

    version: str = "1.0"
    settings: CatalogSettings = Field(default_factory=CatalogSettings)
    messages: Dict[str, FailureTemplate] = Field(default_factory=dict)

    @field_validator("messages", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return {} if value is None else value


def _pick(texts: Dict[str, str], language: str, default_language: str) -> Optional[str]:
    for candidate in (language, default_language):
        text = texts.get(candidate)
        if text:
            return text
    for text in texts.values():
        if text:
            return text
    return None
