"""Per-connection session tying a REST client to its resource managers."""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING, Any

import structlog

from storage_operations_manager.integrations.ontap.client import OntapRestClient
from storage_operations_manager.services.ontap.cluster_manager import ClusterManager
from storage_operations_manager.services.ontap.route_manager import IPRouteManager
from storage_operations_manager.services.ontap.snapshot_manager import VolumeSnapshotManager

if TYPE_CHECKING:
    from storage_operations_manager.integrations.ontap.config import ConnectionProfile
    from storage_operations_manager.integrations.ontap.models.cluster import VersionInfo

logger = structlog.get_logger()


class OntapSession:
    """One logical session against a cluster.

    The cluster version is fetched on first use and then reused, read-only,
    by every operation of the session.

    Example:
        >>> with OntapSession.from_profile(profile) as session:
        ...     route = session.routes.get("10.0.0.0", version=session.version)
    """

    def __init__(self, client: OntapRestClient) -> None:
        self.client = client
        self.cluster = ClusterManager(client)
        self.routes = IPRouteManager(client)
        self.snapshots = VolumeSnapshotManager(client)

    @classmethod
    def from_profile(cls, profile: ConnectionProfile) -> OntapSession:
        logger.debug("opening_session", profile=profile.name)
        return cls(OntapRestClient(profile.connection, profile.auth))

    @cached_property
    def version(self) -> VersionInfo:
        version = self.cluster.get_version()
        logger.info("cluster_version", version=str(version))
        return version

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> OntapSession:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
