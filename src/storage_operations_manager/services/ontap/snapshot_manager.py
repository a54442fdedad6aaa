"""Snapshot manager for ONTAP volume snapshots."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storage_operations_manager.integrations.ontap.models.snapshot import (
    VolumeSnapshot,
    VolumeSnapshotBody,
    VolumeSnapshotUpdate,
)
from storage_operations_manager.services.ontap.base import BaseRecordManager, require
from storage_operations_manager.services.ontap.versioning import since

if TYPE_CHECKING:
    from storage_operations_manager.integrations.ontap.models.cluster import VersionInfo


class VolumeSnapshotManager(BaseRecordManager[VolumeSnapshot]):
    """Manager for snapshots of one volume.

    Snapshots live under their volume, so every operation takes the volume
    UUID that scopes the collection path.
    """

    _api = "storage/volumes/{volume_uuid}/snapshots"
    _record_name = "volume snapshot"
    _model_class = VolumeSnapshot
    _base_fields = (
        "name",
        "create_time",
        "expiry_time",
        "comment",
        "snapmirror_label",
        "state",
        "volume",
    )
    _field_rules = (since(9, 12, "size"),)

    def _collection(self, volume_uuid: str | None) -> str:
        require(volume_uuid, "error reading snapshot", "Volume UUID is null")
        return self.api_path(volume_uuid=str(volume_uuid))

    def get(
        self,
        name: str | None,
        volume_uuid: str | None,
        *,
        version: VersionInfo | None = None,
    ) -> VolumeSnapshot | None:
        """Get a snapshot by name.

        Returns:
            The snapshot, or None if the volume has no snapshot by that name.

        Raises:
            OntapValidationError: If the name or volume UUID is missing.
        """
        require(name, "error reading snapshot", "Snapshot name is null")
        api = self._collection(volume_uuid)
        return self._get_one(api, self.build_query({"name": name}, version))

    def list(
        self,
        volume_uuid: str | None,
        names: list[str] | None = None,
        *,
        version: VersionInfo | None = None,
    ) -> list[VolumeSnapshot]:
        """List snapshots of a volume, optionally only those with the given names."""
        api = self._collection(volume_uuid)
        identity = {"name": list(names) if names else None}
        return self._get_many(api, self.build_query(identity, version))

    def create(self, volume_uuid: str | None, body: VolumeSnapshotBody) -> VolumeSnapshot:
        """Create a snapshot and return it as stored by the cluster."""
        return self._create(self._collection(volume_uuid), body)

    def update(
        self,
        volume_uuid: str | None,
        uuid: str | None,
        body: VolumeSnapshotUpdate,
    ) -> None:
        """Modify a snapshot in place (rename, comment, expiry, label)."""
        self._update(self._collection(volume_uuid), uuid, body)

    def delete(self, volume_uuid: str | None, uuid: str | None) -> None:
        """Delete a snapshot by UUID."""
        self._delete(self._collection(volume_uuid), uuid)
