"""ONTAP integration - REST client, query builder, records and errors."""

from storage_operations_manager.integrations.ontap.client import OntapRestClient
from storage_operations_manager.integrations.ontap.config import (
    ConnectionProfile,
    OntapAuthConfig,
    OntapConnectionConfig,
)
from storage_operations_manager.integrations.ontap.exceptions import (
    OntapAmbiguousResultError,
    OntapAPIError,
    OntapAuthError,
    OntapConnectionError,
    OntapDecodeError,
    OntapEmptyResponseError,
    OntapNotFoundError,
    OntapOperationError,
    OntapRequestError,
    OntapTransportError,
    OntapValidationError,
)
from storage_operations_manager.integrations.ontap.query import Query
from storage_operations_manager.integrations.ontap.response import OntapResponse

__all__ = [
    "ConnectionProfile",
    "OntapAPIError",
    "OntapAmbiguousResultError",
    "OntapAuthConfig",
    "OntapAuthError",
    "OntapConnectionConfig",
    "OntapConnectionError",
    "OntapDecodeError",
    "OntapEmptyResponseError",
    "OntapNotFoundError",
    "OntapOperationError",
    "OntapRequestError",
    "OntapResponse",
    "OntapRestClient",
    "OntapTransportError",
    "OntapValidationError",
    "Query",
]
