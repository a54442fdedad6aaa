"""Decode raw ONTAP records into typed models and encode write bodies."""

from __future__ import annotations

from typing import Any, TypeVar

import pydantic

from storage_operations_manager.integrations.ontap.exceptions import (
    OntapDecodeError,
    OntapValidationError,
)
from storage_operations_manager.integrations.ontap.models.base import OntapRecordBase
from storage_operations_manager.services.ontap.cardinality import display_path, excerpt

T = TypeVar("T", bound=pydantic.BaseModel)


def decode_record(
    model_class: type[T],
    raw: Any,
    *,
    method: str,
    api: str,
    status: int | None = None,
) -> T:
    """Map a raw record onto ``model_class`` or fail as a whole.

    Raises:
        OntapDecodeError: A field has the wrong type, or a required value or
            nested object is missing.
    """
    path = display_path(api)
    try:
        return model_class.model_validate(raw)
    except pydantic.ValidationError as e:
        raise OntapDecodeError(
            f"failed to decode response from {method} {path}",
            f"error: {_describe(e)}, statusCode {status}, response {excerpt(raw)}",
            raw_record=raw,
            cause=e,
            status_code=status,
            endpoint=path,
        ) from e


def encode_body(body: OntapRecordBase, *, method: str, api: str) -> dict[str, Any]:
    """Render a write body, surfacing encode failures as validation errors."""
    path = display_path(api)
    try:
        return body.to_body()
    except ValueError as e:
        raise OntapValidationError(
            f"error encoding {path} body",
            f"error on encoding {method} {path} body: {e}, body: {body!r}",
            endpoint=path,
        ) from e


def _describe(error: pydantic.ValidationError) -> str:
    """One line per failing location, e.g. ``destination: Field required``."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<record>"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)
