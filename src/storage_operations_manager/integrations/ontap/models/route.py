"""Pydantic models for ONTAP network IP routes.

A route maps a destination subnet to a gateway, either cluster wide or within
a single SVM.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from storage_operations_manager.integrations.ontap.models.base import (
    OntapRecordBase,
    SvmReference,
)

RouteScope = Literal["cluster", "svm"]


class IPRouteDestination(BaseModel):
    """Destination subnet of a route.

    Attributes:
        address: IPv4 or IPv6 address.
        netmask: Prefix length (``24``) or IPv4 mask (``255.255.255.0``).
    """

    model_config = ConfigDict(extra="ignore", strict=True, str_strip_whitespace=True)

    address: str
    netmask: str


class IPRoute(OntapRecordBase):
    """ONTAP network route as returned by ``GET /network/ip/routes``.

    Attributes:
        uuid: Route UUID.
        destination: Destination subnet (always present on a route).
        gateway: Next-hop gateway address.
        metric: Preference between routes to the same destination; only
            reported by 9.11 and later.
        svm: Owning SVM, absent for cluster-scoped routes.
        scope: ``cluster`` or ``svm``.
    """

    uuid: str | None = Field(default=None, description="Route UUID")
    destination: IPRouteDestination
    gateway: str | None = None
    metric: int | None = None
    svm: SvmReference | None = None
    scope: RouteScope | None = None

    @property
    def svm_name(self) -> str | None:
        return self.svm.name if self.svm else None


class IPRouteBody(OntapRecordBase):
    """Request body for ``POST /network/ip/routes``."""

    destination: IPRouteDestination
    svm: SvmReference | None = None
    gateway: str | None = None
    metric: int | None = None

    @classmethod
    def build(
        cls,
        address: str,
        netmask: str,
        *,
        svm_name: str | None = None,
        gateway: str | None = None,
        metric: int | None = None,
    ) -> IPRouteBody:
        """Build a body from flat arguments, omitting what was not given."""
        return cls(
            destination=IPRouteDestination(address=address, netmask=netmask),
            svm=SvmReference(name=svm_name) if svm_name else None,
            gateway=gateway,
            metric=metric,
        )
