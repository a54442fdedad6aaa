"""Unit tests for VolumeSnapshotManager."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from storage_operations_manager.integrations.ontap.exceptions import (
    OntapAmbiguousResultError,
    OntapAPIError,
    OntapEmptyResponseError,
    OntapTransportError,
    OntapValidationError,
)
from storage_operations_manager.integrations.ontap.models.cluster import VersionInfo
from storage_operations_manager.integrations.ontap.models.snapshot import (
    VolumeSnapshotBody,
    VolumeSnapshotUpdate,
)
from storage_operations_manager.integrations.ontap.response import OntapResponse
from storage_operations_manager.services.ontap.snapshot_manager import VolumeSnapshotManager

VOLUME_UUID = "b1c9c0a4-41c6-11ee-8e2c-005056bb6b4c"
SNAPSHOTS_API = f"storage/volumes/{VOLUME_UUID}/snapshots"

SNAPSHOT = {
    "uuid": "s1",
    "name": "daily.2024-06-01_0010",
    "create_time": "2024-06-01T00:10:00+00:00",
    "snapmirror_label": "daily",
    "size": 8192,
    "volume": {"name": "vol1", "uuid": VOLUME_UUID},
}


def _reply(body: Any, status: int = 200) -> tuple[int, OntapResponse]:
    return status, OntapResponse.from_body(body)


def _records(*records: dict[str, Any]) -> dict[str, Any]:
    return {"records": list(records), "num_records": len(records)}


@pytest.fixture
def manager(mock_client: MagicMock) -> VolumeSnapshotManager:
    return VolumeSnapshotManager(mock_client)


@pytest.mark.unit
class TestGetSnapshot:
    """Tests for VolumeSnapshotManager.get."""

    def test_get_by_name(
        self,
        manager: VolumeSnapshotManager,
        mock_client: MagicMock,
        version_9_8: VersionInfo,
    ) -> None:
        mock_client.get_nil_or_one_record.return_value = _reply(_records(SNAPSHOT))

        snapshot = manager.get(SNAPSHOT["name"], VOLUME_UUID, version=version_9_8)

        assert snapshot is not None
        assert snapshot.snapmirror_label == "daily"
        api, query = mock_client.get_nil_or_one_record.call_args.args
        assert api == SNAPSHOTS_API
        assert query.get("name") == [SNAPSHOT["name"]]

    def test_size_projected_from_9_12(
        self, manager: VolumeSnapshotManager, mock_client: MagicMock
    ) -> None:
        mock_client.get_nil_or_one_record.return_value = _reply(_records())

        manager.get("hourly", VOLUME_UUID, version=VersionInfo(generation=9, major=12))

        _, query = mock_client.get_nil_or_one_record.call_args.args
        assert "size" in query.projection

    def test_size_not_projected_before_9_12(
        self,
        manager: VolumeSnapshotManager,
        mock_client: MagicMock,
        version_9_11: VersionInfo,
    ) -> None:
        mock_client.get_nil_or_one_record.return_value = _reply(_records())

        manager.get("hourly", VOLUME_UUID, version=version_9_11)

        _, query = mock_client.get_nil_or_one_record.call_args.args
        assert "size" not in query.projection

    def test_absent(self, manager: VolumeSnapshotManager, mock_client: MagicMock) -> None:
        mock_client.get_nil_or_one_record.return_value = _reply(_records())

        assert manager.get("hourly", VOLUME_UUID) is None

    def test_duplicate_names_are_ambiguous(
        self, manager: VolumeSnapshotManager, mock_client: MagicMock
    ) -> None:
        mock_client.get_nil_or_one_record.return_value = _reply(
            _records(SNAPSHOT, {**SNAPSHOT, "uuid": "s2"})
        )

        with pytest.raises(OntapAmbiguousResultError):
            manager.get(SNAPSHOT["name"], VOLUME_UUID)

    def test_missing_name(self, manager: VolumeSnapshotManager, mock_client: MagicMock) -> None:
        with pytest.raises(OntapValidationError) as exc_info:
            manager.get(None, VOLUME_UUID)

        assert exc_info.value.detail == "Snapshot name is null"
        mock_client.get_nil_or_one_record.assert_not_called()

    def test_missing_volume_uuid(
        self, manager: VolumeSnapshotManager, mock_client: MagicMock
    ) -> None:
        with pytest.raises(OntapValidationError) as exc_info:
            manager.get("hourly", None)

        assert exc_info.value.detail == "Volume UUID is null"
        mock_client.get_nil_or_one_record.assert_not_called()


@pytest.mark.unit
class TestListSnapshots:
    """Tests for VolumeSnapshotManager.list."""

    def test_list_all(self, manager: VolumeSnapshotManager, mock_client: MagicMock) -> None:
        mock_client.get_zero_or_more_records.return_value = _reply(
            _records(SNAPSHOT, {**SNAPSHOT, "uuid": "s2", "name": "weekly"})
        )

        snapshots = manager.list(VOLUME_UUID)

        assert [s.name for s in snapshots] == [SNAPSHOT["name"], "weekly"]
        _, query = mock_client.get_zero_or_more_records.call_args.args
        assert query.get("name") is None

    def test_list_by_names(self, manager: VolumeSnapshotManager, mock_client: MagicMock) -> None:
        mock_client.get_zero_or_more_records.return_value = _reply(_records())

        assert manager.list(VOLUME_UUID, ["daily", "weekly"]) == []

        _, query = mock_client.get_zero_or_more_records.call_args.args
        assert query.to_params()["name"] == "daily|weekly"

    def test_transport_failure(
        self, manager: VolumeSnapshotManager, mock_client: MagicMock
    ) -> None:
        mock_client.get_zero_or_more_records.side_effect = OntapAPIError(
            "Internal error", status_code=500
        )

        with pytest.raises(OntapTransportError) as exc_info:
            manager.list(VOLUME_UUID)

        assert exc_info.value.summary == f"error reading /{SNAPSHOTS_API}"


@pytest.mark.unit
class TestWriteSnapshot:
    """Tests for create, update and delete."""

    def test_create(self, manager: VolumeSnapshotManager, mock_client: MagicMock) -> None:
        mock_client.call_create_method.return_value = _reply(_records(SNAPSHOT), status=201)

        snapshot = manager.create(VOLUME_UUID, VolumeSnapshotBody(name=SNAPSHOT["name"]))

        assert snapshot.uuid == "s1"
        api, _, payload = mock_client.call_create_method.call_args.args
        assert api == SNAPSHOTS_API
        assert payload == {"name": SNAPSHOT["name"]}

    def test_create_without_records(
        self, manager: VolumeSnapshotManager, mock_client: MagicMock
    ) -> None:
        mock_client.call_create_method.return_value = _reply({"job": {"uuid": "j1"}}, status=202)

        with pytest.raises(OntapEmptyResponseError):
            manager.create(VOLUME_UUID, VolumeSnapshotBody(name="hourly"))

    def test_update(self, manager: VolumeSnapshotManager, mock_client: MagicMock) -> None:
        manager.update(VOLUME_UUID, "s1", VolumeSnapshotUpdate(comment="keep"))

        mock_client.call_update_method.assert_called_once_with(
            f"{SNAPSHOTS_API}/s1", None, {"comment": "keep"}
        )

    def test_update_requires_uuid(
        self, manager: VolumeSnapshotManager, mock_client: MagicMock
    ) -> None:
        with pytest.raises(OntapValidationError):
            manager.update(VOLUME_UUID, None, VolumeSnapshotUpdate(comment="keep"))

        mock_client.call_update_method.assert_not_called()

    def test_update_failure(self, manager: VolumeSnapshotManager, mock_client: MagicMock) -> None:
        mock_client.call_update_method.side_effect = OntapAPIError("busy", status_code=409)

        with pytest.raises(OntapTransportError) as exc_info:
            manager.update(VOLUME_UUID, "s1", VolumeSnapshotUpdate(comment="keep"))

        assert exc_info.value.summary == f"error updating /{SNAPSHOTS_API}/s1"
        assert exc_info.value.status_code == 409

    def test_delete(self, manager: VolumeSnapshotManager, mock_client: MagicMock) -> None:
        manager.delete(VOLUME_UUID, "s1")

        mock_client.call_delete_method.assert_called_once_with(f"{SNAPSHOTS_API}/s1")

    def test_delete_requires_volume(
        self, manager: VolumeSnapshotManager, mock_client: MagicMock
    ) -> None:
        with pytest.raises(OntapValidationError):
            manager.delete(None, "s1")

        mock_client.call_delete_method.assert_not_called()
