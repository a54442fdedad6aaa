"""Route manager for ONTAP network IP routes.

This module provides the IPRouteManager class for reading, creating and
deleting routes through ``/network/ip/routes``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from storage_operations_manager.integrations.ontap.models.route import IPRoute, IPRouteBody
from storage_operations_manager.services.ontap.base import BaseRecordManager, require
from storage_operations_manager.services.ontap.versioning import FieldRule, when

if TYPE_CHECKING:
    from storage_operations_manager.integrations.ontap.models.cluster import VersionInfo


class IPRouteManager(BaseRecordManager[IPRoute]):
    """Manager for ONTAP network routes.

    A route is looked up by destination address, either cluster wide or
    within one SVM. ``metric`` is only projected on 9.11 and later.

    Example:
        >>> manager = IPRouteManager(client)
        >>> route = manager.get("10.0.0.0", version=session.version)
        >>> if route is None:
        ...     route = manager.create(IPRouteBody.build("10.0.0.0", "24", gateway="10.0.0.1"))
    """

    _api = "network/ip/routes"
    _record_name = "ip route"
    _model_class = IPRoute
    _base_fields = ("destination", "svm.name", "gateway", "scope")
    _field_rules = (FieldRule("metric", when(generation=("==", 9), major=(">", 10))),)
    _filter_keys = {
        "destination": "destination.address",
        "svm_name": "svm.name",
    }

    def get(
        self,
        destination: str | None,
        svm_name: str | None = None,
        *,
        version: VersionInfo | None = None,
    ) -> IPRoute | None:
        """Get the route to ``destination``.

        Args:
            destination: Destination address of the route.
            svm_name: Owning SVM; without one the lookup is cluster scoped.
            version: Cluster version, used to pick the projected fields.

        Returns:
            The route, or None if no route matches.

        Raises:
            OntapValidationError: If no destination was given.
            OntapAmbiguousResultError: If more than one route matches.
        """
        require(
            destination,
            "error reading /network/ip/routes info",
            "route destination address is required",
        )
        identity = {
            "destination": destination,
            "svm_name": svm_name or None,
            "scope": "svm" if svm_name else "cluster",
        }
        return self._get_one(self._api, self.build_query(identity, version))

    def create(self, body: IPRouteBody) -> IPRoute:
        """Create a route and return it as stored by the cluster.

        Raises:
            OntapEmptyResponseError: If the cluster reports success but
                returns no record.
        """
        return self._create(self._api, body)

    def delete(self, uuid: str | None) -> None:
        """Delete a route by UUID.

        Raises:
            OntapValidationError: If ``uuid`` is missing.
        """
        self._delete(self._api, uuid)
