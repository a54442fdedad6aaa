"""Pydantic models for ONTAP volume snapshots."""

from __future__ import annotations

from pydantic import Field

from storage_operations_manager.integrations.ontap.models.base import (
    OntapRecordBase,
    VolumeReference,
)


class VolumeSnapshot(OntapRecordBase):
    """Snapshot copy of a volume, from ``GET /storage/volumes/{uuid}/snapshots``.

    Attributes:
        uuid: Snapshot UUID.
        name: Snapshot name, unique within its volume.
        create_time: Creation timestamp (ISO 8601).
        expiry_time: Time after which the snapshot may be deleted.
        comment: Free-form comment.
        size: Space used by the snapshot, in bytes (9.12 and later).
        snapmirror_label: Label used by SnapMirror retention policies.
        state: ``valid``, ``invalid`` or ``partial``.
        volume: Owning volume.
    """

    uuid: str | None = None
    name: str
    create_time: str | None = None
    expiry_time: str | None = None
    comment: str | None = None
    size: float | None = None
    snapmirror_label: str | None = None
    state: str | None = None
    volume: VolumeReference | None = None


class VolumeSnapshotBody(OntapRecordBase):
    """Request body for creating a snapshot."""

    name: str
    comment: str | None = None
    expiry_time: str | None = None
    snapmirror_label: str | None = None


class VolumeSnapshotUpdate(OntapRecordBase):
    """Request body for ``PATCH`` on a snapshot. Only set fields are sent."""

    name: str | None = Field(default=None, description="New snapshot name")
    comment: str | None = None
    expiry_time: str | None = None
    snapmirror_label: str | None = None
