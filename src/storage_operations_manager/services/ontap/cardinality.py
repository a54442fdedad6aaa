"""Cardinality resolution for ONTAP responses.

Reads keyed to a single logical entity must yield zero or one record; creates
with ``return_records=true`` must yield at least one. Anything else becomes a
classified error instead of a silent pick.
"""

from __future__ import annotations

from typing import Any

from storage_operations_manager.integrations.ontap.exceptions import (
    OntapAmbiguousResultError,
    OntapEmptyResponseError,
    OntapTransportError,
)
from storage_operations_manager.integrations.ontap.response import OntapResponse

# Longest raw payload excerpt carried in an error detail
MAX_EXCERPT = 500


def excerpt(payload: Any, limit: int = MAX_EXCERPT) -> str:
    """Render a raw payload for an error detail, truncated to ``limit`` characters."""
    text = repr(payload)
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... ({len(text) - limit} more characters)"


def display_path(api: str) -> str:
    """Render an API path the way error summaries show it, e.g. ``/network/ip/routes``."""
    return f"/{api.strip('/')}"


def _check_envelope(response: OntapResponse, method: str, api: str, status: int) -> None:
    path = display_path(api)
    if response.malformed:
        raise OntapTransportError(
            f"malformed response from {method} {path}",
            f"error on {method} {path}: unexpected envelope, statusCode {status}, "
            f"response {excerpt(response.raw)}",
            status_code=status,
            endpoint=path,
        )


def resolve_nil_or_one(response: OntapResponse, api: str, status: int) -> dict[str, Any] | None:
    """Return the single record of a read, or None when nothing matched.

    Raises:
        OntapTransportError: The envelope could not be interpreted.
        OntapEmptyResponseError: The cluster sent no body at all.
        OntapAmbiguousResultError: More than one record matched.
    """
    path = display_path(api)
    _check_envelope(response, "GET", api, status)
    if response.kind == "none":
        raise OntapEmptyResponseError(
            f"no response for GET {path}",
            f"error on GET {path}: empty body, statusCode {status}",
            status_code=status,
            endpoint=path,
        )
    if response.num_records == 0:
        return None
    if response.num_records > 1:
        raise OntapAmbiguousResultError(
            f"more than one record returned for GET {path}",
            f"error on GET {path}: expected at most one record, got {response.num_records}, "
            f"statusCode {status}, response {excerpt(response.raw)}",
            num_records=response.num_records,
            status_code=status,
            endpoint=path,
        )
    return response.records[0]


def resolve_many(response: OntapResponse, api: str, status: int) -> list[dict[str, Any]]:
    """Return every record of a collection read; an empty body means no records."""
    _check_envelope(response, "GET", api, status)
    return list(response.records)


def first_created_record(response: OntapResponse, api: str, status: int) -> dict[str, Any]:
    """Return the authoritative record echoed by a create.

    Raises:
        OntapTransportError: The envelope could not be interpreted.
        OntapEmptyResponseError: The cluster reported success without records.
    """
    path = display_path(api)
    _check_envelope(response, "POST", api, status)
    if response.num_records == 0:
        raise OntapEmptyResponseError(
            f"no record returned by POST {path}",
            f"error on POST {path}: success reported but no records returned, "
            f"statusCode {status}, response {excerpt(response.raw)}",
            status_code=status,
            endpoint=path,
        )
    return response.records[0]
