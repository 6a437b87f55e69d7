"""
Unit Tests for CatalogLoader.

Test Aspects Covered:
    ✅ Business Logic: Catalog loading, defaults, per-section overlay merging
    ✅ Error Handling: Invalid status, missing files, overlay warnings
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from checkchain.failure import factory
from checkchain.failure.codes import FailureCode
from checkchain.localization.loader import CatalogLoader, load_catalog
from checkchain.localization.mapper import FailureMapper
from checkchain.localization.models import MessageCatalog
from checkchain.localization.registry import MessageRegistry


class TestCatalogLoader:
    """Test cases for CatalogLoader."""

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """
        SCENARIO: Valid YAML catalog file
        EXPECTED: MessageCatalog object created
        """
        # Arrange
        catalog_content = """
version: "2.0"
settings:
  preferred_language: en
messages:
  RESOURCE_NOT_FOUND:
    status: 404
    title:
      en: Not found
    template:
      en: "{resource} was not found"
"""
        catalog_file = tmp_path / "messages.yaml"
        catalog_file.write_text(catalog_content, encoding="utf-8")

        loader = CatalogLoader(base_path=tmp_path)

        # Act
        catalog = loader.load("messages.yaml")

        # Assert
        assert isinstance(catalog, MessageCatalog)
        assert catalog.version == "2.0"
        assert catalog.settings.preferred_language == "en"
        assert catalog.messages["RESOURCE_NOT_FOUND"].status == 404

    def test_applies_defaults(self) -> None:
        """
        SCENARIO: Minimal catalog dictionary
        EXPECTED: Default settings applied
        """
        catalog = CatalogLoader().load_from_dict({"version": "1.0", "messages": None})

        assert catalog.messages == {}
        assert catalog.settings.preferred_language == "pt"
        assert catalog.settings.default_language == "en"
        assert catalog.settings.fallback_code == "UNCATALOGUED_ERROR"
        assert catalog.settings.fallback_status == 500

    def test_validates_invalid_status(self, tmp_path: Path) -> None:
        """
        SCENARIO: Entry with a status outside 100-599
        EXPECTED: ValidationError raised
        """
        catalog_file = tmp_path / "bad.yaml"
        catalog_file.write_text(
            "messages:\n  X:\n    status: 42\n    title: {en: x}\n    template: {en: x}\n",
            encoding="utf-8",
        )

        with pytest.raises(ValidationError):
            CatalogLoader().load(catalog_file)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            CatalogLoader(base_path=tmp_path).load("nope.yaml")

    def test_empty_file_gives_empty_catalog(self, tmp_path: Path) -> None:
        catalog_file = tmp_path / "empty.yaml"
        catalog_file.write_text("", encoding="utf-8")

        assert CatalogLoader().load(catalog_file).messages == {}

    def test_overlay_merges_deeply(self, sample_catalog_path: Path, tmp_path: Path) -> None:
        """
        SCENARIO: Overlay overrides one language of one entry and adds a code
        EXPECTED: Other languages and entries are kept
        """
        # Arrange
        overlay_file = tmp_path / "overlay.yaml"
        overlay_file.write_text(
            """
messages:
  STRING_CANNOT_BE_EMPTY:
    title:
      en: Required
  RESOURCE_NOT_FOUND:
    status: 404
    title:
      en: Not found
    template:
      en: "{resource} not found"
""",
            encoding="utf-8",
        )

        # Act
        catalog = CatalogLoader().load(sample_catalog_path, overlay=overlay_file)

        # Assert
        entry = catalog.messages["STRING_CANNOT_BE_EMPTY"]
        assert entry.title == {"pt": "Texto vazio", "en": "Required"}
        assert entry.status == 400
        assert "RESOURCE_NOT_FOUND" in catalog.messages
        assert "VALIDATION_ERROR" in catalog.messages

    def test_overlay_replaces_status_and_keeps_templates(
        self, sample_catalog_path: Path, tmp_path: Path
    ) -> None:
        overlay_file = tmp_path / "overlay.yaml"
        overlay_file.write_text(
            "messages:\n  STRING_CANNOT_BE_EMPTY:\n    status: 422\n",
            encoding="utf-8",
        )

        entry = CatalogLoader().load(sample_catalog_path, overlay=overlay_file).messages[
            "STRING_CANNOT_BE_EMPTY"
        ]

        assert entry.status == 422
        assert entry.template == {
            "pt": "O campo {field:string} não pode estar vazio.",
            "en": "The field {field:string} cannot be empty.",
        }

    def test_overlay_merges_settings_key_by_key(
        self, sample_catalog_path: Path, tmp_path: Path
    ) -> None:
        overlay_file = tmp_path / "overlay.yaml"
        overlay_file.write_text("settings:\n  preferred_language: en\n", encoding="utf-8")

        settings = CatalogLoader().load(sample_catalog_path, overlay=overlay_file).settings

        assert settings.preferred_language == "en"
        assert settings.default_language == "en"
        assert settings.fallback_code == "UNCATALOGUED_ERROR"

    def test_overlay_ignores_unknown_sections(
        self,
        sample_catalog_path: Path,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """
        SCENARIO: Overlay carries a section the catalog does not define
        EXPECTED: Section dropped with a warning, catalog still loads
        """
        overlay_file = tmp_path / "overlay.yaml"
        overlay_file.write_text("mesages:\n  X: {}\n", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="checkchain.localization.loader"):
            catalog = CatalogLoader().load(sample_catalog_path, overlay=overlay_file)

        assert "X" not in catalog.messages
        assert "mesages" in caplog.text

    def test_overlay_placeholder_drift_is_reported(
        self,
        sample_catalog_path: Path,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """
        SCENARIO: Overlay template drops the {field} placeholder of its entry
        EXPECTED: Template applied, warning names the code and language
        """
        overlay_file = tmp_path / "overlay.yaml"
        overlay_file.write_text(
            "messages:\n  STRING_CANNOT_BE_EMPTY:\n    template:\n      en: Cannot be empty.\n",
            encoding="utf-8",
        )

        with caplog.at_level(logging.WARNING, logger="checkchain.localization.loader"):
            catalog = CatalogLoader().load(sample_catalog_path, overlay=overlay_file)

        assert catalog.messages["STRING_CANNOT_BE_EMPTY"].template["en"] == "Cannot be empty."
        assert "STRING_CANNOT_BE_EMPTY/en" in caplog.text

    def test_overlay_with_same_placeholders_is_silent(
        self,
        sample_catalog_path: Path,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        overlay_file = tmp_path / "overlay.yaml"
        overlay_file.write_text(
            "messages:\n  STRING_CANNOT_BE_EMPTY:\n    template:\n      en: Fill in {field}.\n",
            encoding="utf-8",
        )

        with caplog.at_level(logging.WARNING, logger="checkchain.localization.loader"):
            CatalogLoader().load(sample_catalog_path, overlay=overlay_file)

        assert [r for r in caplog.records if r.levelno >= logging.WARNING] == []


class TestPackagedCatalog:
    """The catalog shipped with the package."""

    def test_load_catalog_defaults_to_packaged(self) -> None:
        catalog = load_catalog()

        assert catalog.settings.preferred_language == "pt"
        assert catalog.messages[FailureCode.UNCATALOGUED_ERROR.value].status == 500

    def test_every_code_has_an_entry(self) -> None:
        catalog = load_catalog()

        assert {code.value for code in FailureCode} <= set(catalog.messages)

    def test_status_groups(self) -> None:
        messages = load_catalog().messages

        assert messages["RESOURCE_NOT_FOUND"].status == 404
        assert messages["RESOURCE_ALREADY_EXISTS"].status == 409
        assert messages["STRING_CANNOT_BE_EMPTY"].status == 400
        assert messages["NULL_ARGUMENT"].status == 500

    def test_templates_with_colons_load_intact(self) -> None:
        """
        SCENARIO: Packaged templates contain ": " inside the text
        EXPECTED: File parses and the full sentences survive
        """
        messages = CatalogLoader().load_default().messages

        assert messages["NULL_ARGUMENT"].template == {
            "pt": "Argumento obrigatório ausente: {resource:string}.",
            "en": "Missing required argument: {resource:string}.",
        }
        assert messages["INVALID_ENUM_VALUE"].template["en"] == (
            "The value {value} is not allowed for {field:string}. "
            "Allowed values: {allowed_values:string[]}."
        )

    def test_packaged_enum_message_renders(self) -> None:
        mapper = FailureMapper(MessageRegistry(load_catalog()))

        rich = mapper.to_rich_failure(
            factory.invalid_enum_value("status", "X", ["ACTIVE", "INACTIVE"]), "en"
        )

        assert rich.message == (
            "The value X is not allowed for status. Allowed values: ACTIVE, INACTIVE."
        )
