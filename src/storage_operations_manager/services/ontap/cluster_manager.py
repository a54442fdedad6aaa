"""Cluster manager: identity and software version of the cluster."""

from __future__ import annotations

from storage_operations_manager.integrations.ontap.exceptions import OntapEmptyResponseError
from storage_operations_manager.integrations.ontap.models.cluster import ClusterInfo, VersionInfo
from storage_operations_manager.services.ontap.base import BaseRecordManager


class ClusterManager(BaseRecordManager[ClusterInfo]):
    """Reads the ``/cluster`` singleton."""

    _api = "cluster"
    _record_name = "cluster"
    _model_class = ClusterInfo
    _base_fields = ("name", "uuid", "version")

    def get_cluster(self) -> ClusterInfo:
        """Return the cluster record.

        Raises:
            OntapEmptyResponseError: If the cluster answered without a record.
        """
        cluster = self._get_one(self._api, self.build_query({}))
        if cluster is None:
            raise OntapEmptyResponseError(
                "error reading /cluster info",
                "GET /cluster returned no record",
                endpoint="/cluster",
            )
        return cluster

    def get_version(self) -> VersionInfo:
        return self.get_cluster().version
