"""Pydantic models for the ONTAP cluster record and its version."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from storage_operations_manager.integrations.ontap.models.base import OntapRecordBase


class VersionInfo(BaseModel):
    """Cluster software version, e.g. 9.11.1 is (generation=9, major=11, minor=1).

    Instances are immutable; a session fetches one and shares it.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    generation: int
    major: int
    minor: int = 0
    full: str | None = None

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.generation, self.major, self.minor)

    def at_least(self, generation: int, major: int, minor: int = 0) -> bool:
        return self.as_tuple() >= (generation, major, minor)

    def __str__(self) -> str:
        return f"{self.generation}.{self.major}.{self.minor}"


class ClusterInfo(OntapRecordBase):
    """The subset of ``GET /cluster`` this package relies on."""

    name: str | None = None
    uuid: str | None = None
    version: VersionInfo
