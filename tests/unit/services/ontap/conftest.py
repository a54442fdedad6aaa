"""Shared fixtures for ONTAP service tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from storage_operations_manager.integrations.ontap.models.cluster import VersionInfo


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a mock ONTAP REST client."""
    return MagicMock()


@pytest.fixture
def version_9_11() -> VersionInfo:
    return VersionInfo(generation=9, major=11, minor=1)


@pytest.fixture
def version_9_8() -> VersionInfo:
    return VersionInfo(generation=9, major=8, minor=0)
