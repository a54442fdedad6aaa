"""Base record manager for ONTAP resources.

Every ONTAP resource kind is read, created, updated and deleted the same way:
build a query from domain identifiers, project the fields the cluster version
supports, call the transport, resolve the cardinality of what came back and
decode it. ``BaseRecordManager`` implements that once; a resource kind only
declares its API path, filter names, field rules and record model.
"""

from __future__ import annotations

from abc import ABC
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

import structlog

from storage_operations_manager.integrations.ontap.exceptions import (
    OntapAPIError,
    OntapTransportError,
    OntapValidationError,
)
from storage_operations_manager.integrations.ontap.models.base import OntapRecordBase
from storage_operations_manager.integrations.ontap.query import Query
from storage_operations_manager.services.ontap.cardinality import (
    display_path,
    first_created_record,
    resolve_many,
    resolve_nil_or_one,
)
from storage_operations_manager.services.ontap.decoding import decode_record, encode_body
from storage_operations_manager.services.ontap.versioning import FieldRule, resolve_fields

if TYPE_CHECKING:
    from storage_operations_manager.integrations.ontap.client import OntapRestClient
    from storage_operations_manager.integrations.ontap.models.cluster import VersionInfo

logger = structlog.get_logger()

T = TypeVar("T", bound=OntapRecordBase)

_ACTIONS = {
    "GET": "reading",
    "POST": "creating",
    "PATCH": "updating",
    "DELETE": "deleting",
}


def require(value: Any, summary: str, detail: str) -> None:
    """Raise OntapValidationError when a required argument is missing or blank."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise OntapValidationError(summary, detail)


class BaseRecordManager(ABC, Generic[T]):
    """Abstract base class for ONTAP resource managers.

    Type Parameters:
        T: The Pydantic record model for this resource kind.

    Class Attributes:
        _api: Collection path, e.g. ``network/ip/routes``. May contain
            ``{placeholders}`` filled by the subclass via ``api_path``.
        _record_name: Human-readable resource name for logs and errors.
        _model_class: Record model used to decode responses.
        _base_fields: Projection requested on every read.
        _field_rules: Version-gated additions to the projection.
        _filter_keys: Maps domain identifier names to API filter names.

    Example:
        >>> class IPRouteManager(BaseRecordManager[IPRoute]):
        ...     _api = "network/ip/routes"
        ...     _record_name = "ip route"
        ...     _model_class = IPRoute
        ...     _base_fields = ("destination", "svm.name", "gateway", "scope")
        ...     _field_rules = (FieldRule("metric", when(generation=("==", 9), major=(">", 10))),)
    """

    _api: ClassVar[str] = ""
    _record_name: ClassVar[str] = ""
    _model_class: type[T]
    _base_fields: ClassVar[tuple[str, ...]] = ()
    _field_rules: ClassVar[tuple[FieldRule, ...]] = ()
    _filter_keys: ClassVar[Mapping[str, str]] = {}

    def __init__(self, client: OntapRestClient) -> None:
        self._client = client
        self._log = logger.bind(resource=self._record_name)

    def api_path(self, **path_params: str) -> str:
        """Fill the collection path's placeholders."""
        return self._api.format(**path_params)

    def fields_for(self, version: VersionInfo | None) -> list[str]:
        """Projection for a cluster running ``version``."""
        return resolve_fields(self._base_fields, version, self._field_rules)

    def build_query(
        self,
        identity: Mapping[str, Any],
        version: VersionInfo | None = None,
        *,
        project: bool = True,
    ) -> Query:
        """Translate domain identifiers into filters plus a projection.

        ``None`` identifiers are skipped; list or tuple values become
        multi-valued filters.
        """
        query = Query()
        for name, value in identity.items():
            if value is None:
                continue
            key = self._filter_keys.get(name, name)
            if isinstance(value, (list, tuple)):
                for item in value:
                    query.add(key, item)
            else:
                query.set(key, value)
        if project:
            query.fields(self.fields_for(version))
        return query

    def _transport_error(self, method: str, api: str, error: OntapAPIError) -> OntapTransportError:
        path = display_path(api)
        return OntapTransportError(
            f"error {_ACTIONS[method]} {path}",
            f"error on {method} {path}: {error}, statusCode {error.status_code}",
            status_code=error.status_code,
            endpoint=path,
        )

    def _get_one(self, api: str, query: Query) -> T | None:
        """Zero-or-one read. Absence is returned as None, never raised."""
        self._log.debug("getting_record", api=api, params=query.to_params())
        try:
            status, response = self._client.get_nil_or_one_record(api, query)
        except OntapAPIError as e:
            raise self._transport_error("GET", api, e) from e

        raw = resolve_nil_or_one(response, api, status)
        if raw is None:
            self._log.debug("record_absent", api=api)
            return None

        record = decode_record(self._model_class, raw, method="GET", api=api, status=status)
        self._log.debug("got_record", api=api, uuid=getattr(record, "uuid", None))
        return record

    def _get_many(self, api: str, query: Query) -> list[T]:
        self._log.debug("listing_records", api=api, params=query.to_params())
        try:
            status, response = self._client.get_zero_or_more_records(api, query)
        except OntapAPIError as e:
            raise self._transport_error("GET", api, e) from e

        records = [
            decode_record(self._model_class, raw, method="GET", api=api, status=status)
            for raw in resolve_many(response, api, status)
        ]
        self._log.debug("listed_records", api=api, count=len(records))
        return records

    def _create(self, api: str, body: OntapRecordBase) -> T:
        """POST ``body`` asking the cluster to echo the created record."""
        payload = encode_body(body, method="POST", api=api)
        query = Query()
        query.add("return_records", "true")

        self._log.info("creating_record", api=api, body=payload)
        try:
            status, response = self._client.call_create_method(api, query, payload)
        except OntapAPIError as e:
            raise self._transport_error("POST", api, e) from e

        raw = first_created_record(response, api, status)
        created = decode_record(self._model_class, raw, method="POST", api=api, status=status)
        self._log.info("created_record", api=api, uuid=getattr(created, "uuid", None))
        return created

    def _update(self, api: str, uuid: str | None, body: OntapRecordBase) -> None:
        """PATCH a record. Success carries no records."""
        require(
            uuid,
            f"{self._record_name} UUID is null",
            f"cannot update {self._record_name}: UUID is required",
        )
        target = f"{api}/{uuid}"
        payload = encode_body(body, method="PATCH", api=target)

        self._log.info("updating_record", api=target, body=payload)
        try:
            self._client.call_update_method(target, None, payload)
        except OntapAPIError as e:
            raise self._transport_error("PATCH", target, e) from e
        self._log.info("updated_record", api=target)

    def _delete(self, api: str, uuid: str | None) -> None:
        """DELETE a record by UUID; a missing UUID fails before any call."""
        require(
            uuid,
            f"{self._record_name} UUID is null",
            f"cannot delete {self._record_name}: UUID is required",
        )
        target = f"{api}/{uuid}"

        self._log.info("deleting_record", api=target)
        try:
            self._client.call_delete_method(target)
        except OntapAPIError as e:
            raise self._transport_error("DELETE", target, e) from e
        self._log.info("deleted_record", api=target)
