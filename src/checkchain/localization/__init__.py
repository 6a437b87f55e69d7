"""
Localization Package - Failure Messages per Language.

This package handles turning SimpleFailure values into user-facing text:
    - Pydantic models for the message catalog
    - YAML loader with overlay support
    - MessageRegistry with fallback entry for uncatalogued codes
    - FailureMapper with per-entry language fallback and placeholder rendering

Catalog Structure:
    - settings: preferred/default language, fallback code and status
    - messages: CODE -> {status, title: {lang: text}, template: {lang: text}}

Design Principles:
    - Validate on load (fail fast at startup)
    - Never raise at lookup time (degrade to documented fallbacks)
    - Registry is injected; the process-wide default is a convenience
"""

from checkchain.localization.models import (
    CatalogSettings,
    FailureTemplate,
    MessageCatalog,
    SupportedLanguage,
)
from checkchain.localization.loader import CatalogLoader, load_catalog
from checkchain.localization.registry import MessageRegistry, get_default_registry
from checkchain.localization.formatting import (
    TemplateVariable,
    extract_template_variables,
    render_template,
    to_display_string,
)
from checkchain.localization.mapper import FailureMapper, default_mapper
from checkchain.localization.catalog_check import CatalogIssue, find_catalog_issues

__all__ = [
    "CatalogSettings",
    "FailureTemplate",
    "MessageCatalog",
    "SupportedLanguage",
    "CatalogLoader",
    "load_catalog",
    "MessageRegistry",
    "get_default_registry",
    "TemplateVariable",
    "extract_template_variables",
    "render_template",
    "to_display_string",
    "FailureMapper",
    "default_mapper",
    "CatalogIssue",
    "find_catalog_issues",
]
