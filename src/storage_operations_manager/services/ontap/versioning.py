"""Version-gated field projection.

ONTAP releases add fields to a resource without removing older ones, so each
record kind declares its base projection plus a table of
``FieldRule(predicate, field)`` entries. ``resolve_fields`` unions the fields
of every rule that holds for the cluster's version.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Literal

from storage_operations_manager.integrations.ontap.models.cluster import VersionInfo

VersionPart = Literal["generation", "major", "minor"]
Comparison = Literal["==", "!=", ">", ">=", "<", "<="]

_OPERATORS: dict[str, Callable[[int, int], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    ">": operator.gt,
    ">=": operator.ge,
    "<": operator.lt,
    "<=": operator.le,
}


@dataclass(frozen=True)
class VersionCondition:
    """One numeric comparison against a part of the version, e.g. ``major > 10``."""

    part: VersionPart
    op: Comparison
    value: int

    def __post_init__(self) -> None:
        if self.op not in _OPERATORS:
            raise ValueError(f"Unsupported comparison: {self.op}")
        if self.part not in ("generation", "major", "minor"):
            raise ValueError(f"Unknown version part: {self.part}")

    def matches(self, version: VersionInfo) -> bool:
        return _OPERATORS[self.op](getattr(version, self.part), self.value)

    def __str__(self) -> str:
        return f"{self.part} {self.op} {self.value}"


@dataclass(frozen=True)
class FieldRule:
    """Adds ``field`` to a projection when every condition holds (logical AND)."""

    field: str
    conditions: tuple[VersionCondition, ...]

    def applies_to(self, version: VersionInfo) -> bool:
        return all(condition.matches(version) for condition in self.conditions)

    def __str__(self) -> str:
        return f"{self.field} if {' and '.join(map(str, self.conditions))}"


def when(**comparisons: tuple[Comparison, int]) -> tuple[VersionCondition, ...]:
    """Build conditions from keyword comparisons.

    Example:
        >>> FieldRule("metric", when(generation=("==", 9), major=(">", 10)))
    """
    return tuple(
        VersionCondition(part, op, value)  # type: ignore[arg-type]
        for part, (op, value) in comparisons.items()
    )


def since(generation: int, major: int, field: str) -> FieldRule:
    """Rule for a field introduced in release ``generation.major``.

    Example:
        >>> since(9, 12, "size")  # generation == 9 and major >= 12
    """
    return FieldRule(field, when(generation=("==", generation), major=(">=", major)))


def resolve_fields(
    base_fields: Iterable[str],
    version: VersionInfo | None,
    rules: Sequence[FieldRule] = (),
) -> list[str]:
    """Return ``base_fields`` plus every field whose rule holds for ``version``.

    The result keeps first-occurrence order and holds each field once. With no
    known version only the base fields are returned.
    """
    fields = list(base_fields)
    if version is not None:
        fields.extend(rule.field for rule in rules if rule.applies_to(version))
    return list(dict.fromkeys(fields))
