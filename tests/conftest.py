"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from checkchain.failure.models import SimpleFailure
from checkchain.localization.loader import CatalogLoader
from checkchain.localization.mapper import FailureMapper
from checkchain.localization.models import MessageCatalog
from checkchain.localization.registry import MessageRegistry
from checkchain.localization.testing import reset_default_registry


@pytest.fixture(autouse=True)
def fresh_default_registry():
    """Ensure no test sees a default registry installed by another."""
    reset_default_registry()
    yield
    reset_default_registry()


@pytest.fixture
def failures() -> List[SimpleFailure]:
    """Empty failure sink shared by the validators of one test."""
    return []


@pytest.fixture
def sample_catalog_path() -> Path:
    """Path to the sample message catalog."""
    return Path(__file__).parent / "fixtures" / "sample_messages.yaml"


@pytest.fixture
def sample_catalog(sample_catalog_path: Path) -> MessageCatalog:
    """Load the sample message catalog."""
    return CatalogLoader().load(sample_catalog_path)


@pytest.fixture
def sample_registry(sample_catalog: MessageCatalog) -> MessageRegistry:
    """Registry over the sample catalog."""
    return MessageRegistry(sample_catalog)


@pytest.fixture
def sample_mapper(sample_registry: MessageRegistry) -> FailureMapper:
    """Mapper over the sample catalog."""
    return FailureMapper(sample_registry)


@pytest.fixture
def packaged_mapper() -> FailureMapper:
    """Mapper over the catalog shipped with the package."""
    return FailureMapper(MessageRegistry(CatalogLoader().load_default()))
