"""Diagnostics adapter between classified errors and the calling layer.

Operations raise :class:`OntapOperationError`; the layer that presents
results (the CLI, or any orchestration tool) reports them through a
:class:`Diagnostics` collector, which keeps them in order, logs them, and
renders them in whatever form the caller needs.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

import structlog

from storage_operations_manager.integrations.ontap.exceptions import (
    OntapAmbiguousResultError,
    OntapDecodeError,
    OntapEmptyResponseError,
    OntapOperationError,
    OntapTransportError,
    OntapValidationError,
)

logger = structlog.get_logger()


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A reportable (summary, detail) pair."""

    summary: str
    detail: str
    severity: Severity = Severity.ERROR
    kind: str = "error"

    def to_dict(self) -> dict[str, Any]:
        return {
            "severity": str(self.severity),
            "kind": self.kind,
            "summary": self.summary,
            "detail": self.detail,
        }


_KINDS: tuple[tuple[type[OntapOperationError], str], ...] = (
    (OntapTransportError, "transport"),
    (OntapEmptyResponseError, "empty_response"),
    (OntapAmbiguousResultError, "ambiguous_result"),
    (OntapDecodeError, "decode"),
    (OntapValidationError, "validation"),
)


def error_kind(error: OntapOperationError) -> str:
    """Stable kind name for an error class."""
    for error_class, kind in _KINDS:
        if isinstance(error, error_class):
            return kind
    return "error"


@dataclass
class Diagnostics:
    """Ordered collection of reported diagnostics."""

    context: dict[str, Any] = field(default_factory=dict)
    _items: list[Diagnostic] = field(default_factory=list, init=False, repr=False)

    def report(self, error: OntapOperationError) -> Diagnostic:
        """Record a classified operation error."""
        diagnostic = Diagnostic(error.summary, error.detail, kind=error_kind(error))
        return self._append(diagnostic)

    def add_error(self, summary: str, detail: str) -> Diagnostic:
        """Record an error raised by the calling layer itself."""
        return self._append(Diagnostic(summary, detail))

    def add_warning(self, summary: str, detail: str) -> Diagnostic:
        return self._append(Diagnostic(summary, detail, severity=Severity.WARNING, kind="warning"))

    def _append(self, diagnostic: Diagnostic) -> Diagnostic:
        self._items.append(diagnostic)
        log = logger.bind(**self.context)
        if diagnostic.severity is Severity.ERROR:
            log.error(diagnostic.summary, detail=diagnostic.detail, kind=diagnostic.kind)
        else:
            log.warning(diagnostic.summary, detail=diagnostic.detail, kind=diagnostic.kind)
        return diagnostic

    def has_error(self) -> bool:
        return any(d.severity is Severity.ERROR for d in self._items)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self._items if d.severity is Severity.ERROR]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
