"""Base models for ONTAP records.

Every ONTAP record decodes from the nested JSON the REST API returns. Records
ignore keys they do not map (``_links``, fields added by newer releases), but
a value of the wrong type or a missing required sub-object fails validation.
Validation is strict: ``"20"`` is not an int and ``true`` is not a metric.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class OntapRecordBase(BaseModel):
    """Base class for typed ONTAP records and request bodies."""

    model_config = ConfigDict(
        extra="ignore",
        strict=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    # Fields assigned by the cluster, never sent in a write body
    _read_only_fields: ClassVar[frozenset[str]] = frozenset({"uuid"})

    def to_raw(self) -> dict[str, Any]:
        """Render the record in the API's nested JSON shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_body(self) -> dict[str, Any]:
        """Render a write body, dropping read-only and unset fields."""
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            exclude=set(self._read_only_fields),
        )


class SvmReference(BaseModel):
    """Reference to the SVM (virtual server) owning a record."""

    model_config = ConfigDict(extra="ignore", strict=True)

    name: str | None = None
    uuid: str | None = None


class VolumeReference(BaseModel):
    """Reference to a volume."""

    model_config = ConfigDict(extra="ignore", strict=True)

    name: str | None = None
    uuid: str | None = Field(default=None, description="Volume UUID")
