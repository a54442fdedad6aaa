"""Response envelope for ONTAP REST calls.

ONTAP answers collection reads and ``return_records=true`` writes with
``{"num_records": n, "records": [...]}``, reads of a single resource path with
the bare record, and some writes with no body at all. ``OntapResponse`` keeps
the shape it saw so callers can decide what the cardinality means.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

EnvelopeKind = Literal["none", "single", "collection"]


@dataclass(frozen=True)
class OntapResponse:
    """Records returned by one call, plus how they were shaped on the wire.

    Attributes:
        kind: ``none`` for an empty body, ``single`` for a bare record,
            ``collection`` for a ``records`` list.
        records: Raw records, in response order.
        malformed: True when the body could not be read as an envelope; the
            offending body is kept in ``raw``.
        raw: The body exactly as parsed.
    """

    kind: EnvelopeKind = "none"
    records: list[dict[str, Any]] = field(default_factory=list)
    malformed: bool = False
    raw: Any = None

    @property
    def num_records(self) -> int:
        return len(self.records)

    @classmethod
    def from_body(cls, body: Any) -> OntapResponse:
        """Classify a parsed JSON body."""
        if body is None or body == {} or body == "":
            return cls(kind="none", raw=body)
        if not isinstance(body, dict):
            return cls(kind="none", malformed=True, raw=body)
        if "records" in body:
            records = body["records"]
            if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
                return cls(kind="collection", malformed=True, raw=body)
            return cls(kind="collection", records=list(records), raw=body)
        if "num_records" in body and set(body) <= {"num_records", "_links"}:
            # Collection answered without a records key
            return cls(kind="collection", malformed=body["num_records"] != 0, raw=body)
        if set(body) <= {"job", "_links"}:
            # Accepted asynchronous write
            return cls(kind="none", raw=body)
        return cls(kind="single", records=[body], raw=body)
