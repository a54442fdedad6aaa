"""ONTAP record models."""

from storage_operations_manager.integrations.ontap.models.base import (
    OntapRecordBase,
    SvmReference,
    VolumeReference,
)
from storage_operations_manager.integrations.ontap.models.cluster import ClusterInfo, VersionInfo
from storage_operations_manager.integrations.ontap.models.route import (
    IPRoute,
    IPRouteBody,
    IPRouteDestination,
)
from storage_operations_manager.integrations.ontap.models.snapshot import (
    VolumeSnapshot,
    VolumeSnapshotBody,
    VolumeSnapshotUpdate,
)

__all__ = [
    "ClusterInfo",
    "IPRoute",
    "IPRouteBody",
    "IPRouteDestination",
    "OntapRecordBase",
    "SvmReference",
    "VersionInfo",
    "VolumeReference",
    "VolumeSnapshot",
    "VolumeSnapshotBody",
    "VolumeSnapshotUpdate",
]
