"""Shared fixtures for CLI command tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from storage_operations_manager.integrations.ontap.models.cluster import VersionInfo


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock OntapSession on a 9.11.1 cluster."""
    session = MagicMock()
    session.version = VersionInfo(generation=9, major=11, minor=1)
    return session
