"""ONTAP REST API exceptions.

Two families live here. ``OntapAPIError`` and its subclasses are raised by the
HTTP transport. ``OntapOperationError`` and its subclasses are the classified
errors raised by resource operations; each carries a stable ``summary`` and a
``detail`` string with enough context to diagnose a failure without repeating
the request.
"""

from __future__ import annotations

from typing import Any


class OntapAPIError(Exception):
    """Base exception for ONTAP REST transport errors.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code returned by the cluster (if any).
        response_body: Raw response body (if available).
        endpoint: The API endpoint that was called.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: dict[str, Any] | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_body = response_body
        self.endpoint = endpoint

    def __str__(self) -> str:
        parts = [self.message]
        if self.status_code:
            parts.append(f"(status: {self.status_code})")
        if self.endpoint:
            parts.append(f"[endpoint: {self.endpoint}]")
        return " ".join(parts)


class OntapConnectionError(OntapAPIError):
    """Raised when the cluster cannot be reached (network errors, timeouts)."""

    def __init__(
        self,
        message: str = "Failed to connect to ONTAP cluster",
        endpoint: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message=message, endpoint=endpoint)
        self.original_error = original_error


class OntapAuthError(OntapAPIError):
    """Raised on 401/403 responses."""

    def __init__(
        self,
        message: str = "Authentication to ONTAP cluster failed",
        status_code: int | None = 401,
        response_body: dict[str, Any] | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            response_body=response_body,
            endpoint=endpoint,
        )


class OntapNotFoundError(OntapAPIError):
    """Raised on 404 responses (unknown path or UUID)."""

    def __init__(
        self,
        message: str = "ONTAP resource not found",
        response_body: dict[str, Any] | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=404,
            response_body=response_body,
            endpoint=endpoint,
        )


class OntapRequestError(OntapAPIError):
    """Raised when the cluster rejects a request (400).

    Attributes:
        error_code: ONTAP error code from the ``error.code`` response field.
        target: Offending field name from ``error.target``, if reported.
    """

    def __init__(
        self,
        message: str = "Invalid request",
        error_code: str | None = None,
        target: str | None = None,
        response_body: dict[str, Any] | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            response_body=response_body,
            endpoint=endpoint,
        )
        self.error_code = error_code
        self.target = target


# =============================================================================
# Classified operation errors
# =============================================================================


class OntapOperationError(Exception):
    """Base class for classified resource-operation failures.

    Attributes:
        summary: Stable, human-scannable description of the failure kind.
        detail: Diagnostic context (status code, path, raw payload excerpt).
        status_code: HTTP status code involved, if any.
        endpoint: API path involved, if any.
    """

    def __init__(
        self,
        summary: str,
        detail: str,
        status_code: int | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(summary)
        self.summary = summary
        self.detail = detail
        self.status_code = status_code
        self.endpoint = endpoint

    def __str__(self) -> str:
        return f"{self.summary}: {self.detail}"


class OntapTransportError(OntapOperationError):
    """The transport call failed or returned a non-success status."""


class OntapEmptyResponseError(OntapOperationError):
    """The call succeeded but the body carried no record where one was required."""


class OntapAmbiguousResultError(OntapOperationError):
    """A zero-or-one read matched more than one record.

    Attributes:
        num_records: How many records the cluster returned.
    """

    def __init__(
        self,
        summary: str,
        detail: str,
        num_records: int,
        status_code: int | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(summary, detail, status_code=status_code, endpoint=endpoint)
        self.num_records = num_records


class OntapDecodeError(OntapOperationError):
    """A raw record could not be mapped into its typed model.

    Attributes:
        raw_record: The offending record as received.
        cause: The underlying conversion failure.
    """

    def __init__(
        self,
        summary: str,
        detail: str,
        raw_record: Any = None,
        cause: Exception | None = None,
        status_code: int | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(summary, detail, status_code=status_code, endpoint=endpoint)
        self.raw_record = raw_record
        self.cause = cause


class OntapValidationError(OntapOperationError):
    """The caller supplied an insufficient identifier or argument."""
