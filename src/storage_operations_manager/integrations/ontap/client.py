"""ONTAP REST API HTTP client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import structlog
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from storage_operations_manager.integrations.ontap.exceptions import (
    OntapAPIError,
    OntapAuthError,
    OntapConnectionError,
    OntapNotFoundError,
    OntapRequestError,
)
from storage_operations_manager.integrations.ontap.query import Query
from storage_operations_manager.integrations.ontap.response import OntapResponse

if TYPE_CHECKING:
    from storage_operations_manager.integrations.ontap.config import (
        OntapAuthConfig,
        OntapConnectionConfig,
    )

logger = structlog.get_logger()


def _error_fields(body: Any) -> tuple[str | None, str | None, str | None]:
    """Pull ``(message, code, target)`` out of an ONTAP error body."""
    if not isinstance(body, dict):
        return None, None, None
    error = body.get("error")
    if not isinstance(error, dict):
        return body.get("message"), None, None
    return error.get("message"), error.get("code"), error.get("target")


class OntapRestClient:
    """HTTP client for the ONTAP REST API.

    Exposes the small capability the resource managers consume: a
    zero-or-one read, a multi-record read, create, update and delete, each
    taking an API path and a :class:`Query`. Connection failures are retried
    with exponential backoff; everything else surfaces immediately as an
    :class:`OntapAPIError`.

    Example:
        ```python
        from storage_operations_manager.integrations.ontap import OntapRestClient, Query
        from storage_operations_manager.integrations.ontap.config import (
            OntapAuthConfig,
            OntapConnectionConfig,
        )

        connection = OntapConnectionConfig(hostname="cluster1.example.com")
        auth = OntapAuthConfig(username="admin", password="secret")

        with OntapRestClient(connection, auth) as client:
            query = Query().fields(["version"])
            status, response = client.get_nil_or_one_record("cluster", query)
        ```
    """

    def __init__(
        self,
        connection_config: OntapConnectionConfig,
        auth_config: OntapAuthConfig | None = None,
    ) -> None:
        self.connection_config = connection_config
        self.auth_config = auth_config
        self._retries = connection_config.retries

        client_kwargs: dict[str, Any] = {
            "base_url": connection_config.base_url,
            "timeout": httpx.Timeout(connection_config.timeout),
            "verify": connection_config.verify_ssl,
            "headers": {"Accept": "application/hal+json"},
        }
        if auth_config:
            client_kwargs["auth"] = httpx.BasicAuth(
                auth_config.username,
                auth_config.password.get_secret_value(),
            )

        self._client = httpx.Client(**client_kwargs)

        logger.info(
            "ONTAP REST client initialized",
            base_url=connection_config.base_url,
            username=auth_config.username if auth_config else None,
        )

    def _make_retry_decorator(self) -> Any:
        """Create a retry decorator based on configuration."""
        return retry(
            retry=retry_if_exception_type(OntapConnectionError),
            stop=stop_after_attempt(self._retries),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            reraise=True,
        )

    def _handle_response(self, response: httpx.Response, endpoint: str) -> Any:
        """Return the parsed body of a successful response or raise.

        Raises:
            OntapAuthError: 401/403.
            OntapNotFoundError: 404.
            OntapRequestError: 400.
            OntapAPIError: Any other non-success status.
        """
        try:
            body = response.json() if response.content else {}
        except ValueError:
            body = response.text

        if response.is_success:
            return body

        status = response.status_code
        message, code, target = _error_fields(body)
        error_body = body if isinstance(body, dict) else {"raw": body}

        if status in (401, 403):
            raise OntapAuthError(
                message=message or "Authentication failed",
                status_code=status,
                response_body=error_body,
                endpoint=endpoint,
            )
        if status == 404:
            raise OntapNotFoundError(
                message=message or "Resource not found",
                response_body=error_body,
                endpoint=endpoint,
            )
        if status == 400:
            raise OntapRequestError(
                message=message or "Invalid request",
                error_code=code,
                target=target,
                response_body=error_body,
                endpoint=endpoint,
            )
        raise OntapAPIError(
            message=message or f"ONTAP API error: {status}",
            status_code=status,
            response_body=error_body,
            endpoint=endpoint,
        )

    def _request(
        self,
        method: str,
        endpoint: str,
        query: Query | None = None,
        body: dict[str, Any] | None = None,
    ) -> tuple[int, Any]:
        """Send one request and return ``(status_code, parsed body)``.

        Raises:
            OntapConnectionError: If the cluster cannot be reached or the exchange
                fails in transit.
            OntapAPIError: If the cluster answers with an error status.
        """
        url = f"/{endpoint.strip('/')}"
        log = logger.bind(method=method, endpoint=url)

        kwargs: dict[str, Any] = {}
        if query:
            kwargs["params"] = query.to_params()
        if body is not None:
            kwargs["json"] = body

        try:
            log.debug("ONTAP API request", params=kwargs.get("params"))
            response = self._client.request(method, url, **kwargs)
            log.debug("ONTAP API response", status=response.status_code)
            return response.status_code, self._handle_response(response, url)
        except httpx.ConnectError as e:
            log.error("ONTAP connection error", error=str(e))
            raise OntapConnectionError(
                message=f"Failed to connect to ONTAP cluster: {e}",
                endpoint=url,
                original_error=e,
            ) from e
        except httpx.TimeoutException as e:
            log.error("ONTAP request timeout", error=str(e))
            raise OntapConnectionError(
                message=f"ONTAP request timed out: {e}",
                endpoint=url,
                original_error=e,
            ) from e
        except httpx.TransportError as e:
            log.error("ONTAP transport error", error=str(e), error_type=type(e).__name__)
            raise OntapConnectionError(
                message=f"ONTAP transport error: {e}",
                endpoint=url,
                original_error=e,
            ) from e

    def _call(
        self,
        method: str,
        endpoint: str,
        query: Query | None = None,
        body: dict[str, Any] | None = None,
    ) -> tuple[int, Any]:
        retry_decorator = self._make_retry_decorator()
        status, parsed = retry_decorator(self._request)(method, endpoint, query, body)
        return status, parsed

    def get_nil_or_one_record(
        self,
        endpoint: str,
        query: Query | None = None,
    ) -> tuple[int, OntapResponse]:
        """GET a path expected to match at most one record.

        The envelope is returned as received; deciding what zero or several
        records mean is left to the caller.
        """
        status, parsed = self._call("GET", endpoint, query)
        return status, OntapResponse.from_body(parsed)

    def get_zero_or_more_records(
        self,
        endpoint: str,
        query: Query | None = None,
    ) -> tuple[int, OntapResponse]:
        """GET a collection."""
        status, parsed = self._call("GET", endpoint, query)
        return status, OntapResponse.from_body(parsed)

    def call_create_method(
        self,
        endpoint: str,
        query: Query | None,
        body: dict[str, Any],
    ) -> tuple[int, OntapResponse]:
        """POST a new record."""
        status, parsed = self._call("POST", endpoint, query, body)
        return status, OntapResponse.from_body(parsed)

    def call_update_method(
        self,
        endpoint: str,
        query: Query | None,
        body: dict[str, Any],
    ) -> int:
        """PATCH an existing record; the body of the answer is ignored."""
        status, _ = self._call("PATCH", endpoint, query, body)
        return status

    def call_delete_method(
        self,
        endpoint: str,
        query: Query | None = None,
        body: dict[str, Any] | None = None,
    ) -> int:
        """DELETE a record."""
        status, _ = self._call("DELETE", endpoint, query, body)
        return status

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._client.close()
        logger.debug("ONTAP client closed")

    def __enter__(self) -> OntapRestClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def check_connection(self) -> bool:
        """Return True if ``GET /cluster`` answers successfully."""
        try:
            self._call("GET", "cluster", Query().fields(["name"]))
            return True
        except OntapAPIError:
            return False
