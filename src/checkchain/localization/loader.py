"""
Catalog Loader - YAML Loading with Validation.

Loads the message catalog from YAML files and validates it with Pydantic.
An application can layer its own overlay file over the packaged catalog to
override copy or add codes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from checkchain.localization.formatting import extract_template_variables
from checkchain.localization.models import MessageCatalog

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = (
    Path(__file__).resolve().parent.parent / "resources" / "failure_messages.yaml"
)


class CatalogLoader:
    """Loads and validates message catalogs from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize catalog loader.

        Args:
            base_path: Base path for relative catalog paths
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        catalog_path: Union[str, Path],
        overlay: Optional[Union[str, Path]] = None,
    ) -> MessageCatalog:
        """
        Load a catalog from a YAML file.

        Args:
            catalog_path: Path to YAML catalog file
            overlay: Optional YAML file layered over the catalog

        Returns:
            Validated MessageCatalog

        Raises:
            FileNotFoundError: If a catalog file doesn't exist
            ValidationError: If the catalog structure is invalid
        """
        path = self._resolve_path(catalog_path)
        catalog_dict = self._load_yaml(path)

        if overlay:
            overlay_dict = self._load_yaml(self._resolve_path(overlay))
            catalog_dict = self._merge_catalogs(catalog_dict, overlay_dict)

        catalog = MessageCatalog.model_validate(catalog_dict)
        logger.info(f"Loaded message catalog {path.name} ({len(catalog.messages)} codes)")
        return catalog

    def load_default(self, overlay: Optional[Union[str, Path]] = None) -> MessageCatalog:
        """Load the catalog shipped with the package."""
        return self.load(DEFAULT_CATALOG_PATH, overlay)

    def load_from_dict(self, catalog_dict: Dict[str, Any]) -> MessageCatalog:
        """
        Load a catalog from a dictionary.

        Args:
            catalog_dict: Catalog as dictionary

        Returns:
            Validated MessageCatalog
        """
        return MessageCatalog.model_validate(catalog_dict)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve catalog path relative to base path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML file."""
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _merge_catalogs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        Layer an overlay catalog over a base one.

        Rules:
            - version: replaced
            - settings: merged key by key
            - messages: unknown codes are added whole; for known codes the
              status is replaced and title/template are merged per language
            - any other top-level key is ignored with a warning
        """
        result = dict(base)
        for key, value in overlay.items():
            if key == "version":
                result[key] = value
            elif key == "settings":
                result[key] = {**(base.get("settings") or {}), **(value or {})}
            elif key == "messages":
                result[key] = self._merge_messages(base.get("messages") or {}, value or {})
            else:
                logger.warning(f"Ignoring unknown overlay section '{key}'")
        return result

    def _merge_messages(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        result = dict(base)
        for code, entry in overlay.items():
            if code not in base or not isinstance(entry, dict):
                result[code] = entry
                continue

            merged = dict(base[code])
            for field, value in entry.items():
                if field in ("title", "template") and isinstance(value, dict):
                    merged[field] = {**(merged.get(field) or {}), **value}
                else:
                    merged[field] = value

            templates = entry.get("template")
            if isinstance(templates, dict):
                self._check_overlay_placeholders(code, base[code], templates)
            result[code] = merged
        return result

    @staticmethod
    def _check_overlay_placeholders(
        code: str,
        base_entry: Dict[str, Any],
        templates: Dict[str, str],
    ) -> None:
        """Warn when an overriding template changes the placeholders of its entry."""
        base_templates = base_entry.get("template") or {}
        if not isinstance(base_templates, dict) or not base_templates:
            return
        for language, template in templates.items():
            reference = base_templates.get(language) or next(iter(base_templates.values()))
            expected = {v.name for v in extract_template_variables(reference)}
            found = {v.name for v in extract_template_variables(template)}
            if expected != found:
                logger.warning(
                    f"Overlay template {code}/{language} uses placeholders "
                    f"{sorted(found)}, base entry uses {sorted(expected)}"
                )


def load_catalog(
    catalog_path: Optional[Union[str, Path]] = None,
    overlay: Optional[Union[str, Path]] = None,
    base_path: Optional[Path] = None,
) -> MessageCatalog:
    """
    Convenience function to load a catalog.

    Args:
        catalog_path: Path to YAML catalog (packaged catalog if omitted)
        overlay: Optional overlay file
        base_path: Base path for resolving relative paths

    Returns:
        Validated MessageCatalog
    """
    loader = CatalogLoader(base_path=base_path)
    if catalog_path is None:
        return loader.load_default(overlay)
    return loader.load(catalog_path, overlay)
