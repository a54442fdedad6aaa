"""Unit tests for the diagnostics adapter."""

from __future__ import annotations

import pytest

from storage_operations_manager.integrations.ontap.exceptions import (
    OntapAmbiguousResultError,
    OntapDecodeError,
    OntapEmptyResponseError,
    OntapOperationError,
    OntapTransportError,
    OntapValidationError,
)
from storage_operations_manager.services.ontap.diagnostics import (
    Diagnostics,
    Severity,
    error_kind,
)


@pytest.mark.unit
class TestErrorKind:
    """Tests for error_kind."""

    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (OntapTransportError("s", "d"), "transport"),
            (OntapEmptyResponseError("s", "d"), "empty_response"),
            (OntapAmbiguousResultError("s", "d", num_records=2), "ambiguous_result"),
            (OntapDecodeError("s", "d"), "decode"),
            (OntapValidationError("s", "d"), "validation"),
            (OntapOperationError("s", "d"), "error"),
        ],
    )
    def test_kinds(self, error: OntapOperationError, kind: str) -> None:
        assert error_kind(error) == kind


@pytest.mark.unit
class TestDiagnostics:
    """Tests for Diagnostics."""

    def test_report_keeps_summary_and_detail(self) -> None:
        diagnostics = Diagnostics(context={"resource": "ip route"})

        diagnostic = diagnostics.report(
            OntapTransportError("error reading /network/ip/routes", "statusCode 500")
        )

        assert diagnostic.summary == "error reading /network/ip/routes"
        assert diagnostic.detail == "statusCode 500"
        assert diagnostic.kind == "transport"
        assert diagnostics.has_error()
        assert len(diagnostics) == 1

    def test_warnings_are_not_errors(self) -> None:
        diagnostics = Diagnostics()

        diagnostics.add_warning("metric ignored", "cluster is older than 9.11")

        assert not diagnostics.has_error()
        assert diagnostics.errors == []
        assert next(iter(diagnostics)).severity is Severity.WARNING

    def test_order_preserved(self) -> None:
        diagnostics = Diagnostics()

        diagnostics.add_error("first", "a")
        diagnostics.add_warning("second", "b")
        diagnostics.add_error("third", "c")

        assert [d.summary for d in diagnostics] == ["first", "second", "third"]
        assert [d.summary for d in diagnostics.errors] == ["first", "third"]

    def test_to_dict(self) -> None:
        diagnostic = Diagnostics().add_error("No snapshot found", "snapshot hourly not found.")

        assert diagnostic.to_dict() == {
            "severity": "error",
            "kind": "error",
            "summary": "No snapshot found",
            "detail": "snapshot hourly not found.",
        }
