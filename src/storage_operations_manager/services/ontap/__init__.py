"""ONTAP service layer - record managers built on the REST client.

Managers translate domain operations (get a route by destination, create a
snapshot, delete by UUID) into REST calls and typed records.
"""

from storage_operations_manager.services.ontap.base import BaseRecordManager
from storage_operations_manager.services.ontap.cluster_manager import ClusterManager
from storage_operations_manager.services.ontap.diagnostics import Diagnostic, Diagnostics
from storage_operations_manager.services.ontap.route_manager import IPRouteManager
from storage_operations_manager.services.ontap.session import OntapSession
from storage_operations_manager.services.ontap.snapshot_manager import VolumeSnapshotManager
from storage_operations_manager.services.ontap.versioning import FieldRule, resolve_fields

__all__ = [
    "BaseRecordManager",
    "ClusterManager",
    "Diagnostic",
    "Diagnostics",
    "FieldRule",
    "IPRouteManager",
    "OntapSession",
    "VolumeSnapshotManager",
    "resolve_fields",
]
