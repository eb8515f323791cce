"""
HTTP Transport for ghstatus.

Executes a single HTTP exchange and returns the raw status, headers and body.
HTTP error statuses are returned to the caller; only failures to complete the
exchange (connection errors, timeouts) are raised, as TransportError.
No retry, backoff or caching happens here.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Protocol

import httpx

from ghstatus.exceptions import TransportError
from ghstatus.logging import log_http_request, log_http_response


@dataclass(frozen=True)
class TransportResponse:
    """Result of one HTTP exchange."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None


class Transport(Protocol):
    """The HTTP execution collaborator used by the API client."""

    def execute(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> TransportResponse:
        """
        Send one request.

        Args:
            method: HTTP method (GET, POST, ...)
            url: Absolute request URL
            headers: Request headers
            body: Encoded request body, if any

        Returns:
            TransportResponse with status code, headers and body

        Raises:
            TransportError: If the exchange could not be completed
        """
        ...


class HTTPTransport:
    """
    httpx-backed Transport.

    Handles:
    - Connection pooling through a shared httpx.Client
    - Request timeouts
    - Mapping httpx request failures to TransportError
    """

    DEFAULT_TIMEOUT = 30.0
    DEFAULT_USER_AGENT = "ghstatus"

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        verify: bool = True,
        user_agent: str = DEFAULT_USER_AGENT,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            timeout: Request timeout in seconds
            verify: Verify TLS certificates (GitHub Enterprise installs may use private CAs)
            user_agent: User-Agent sent with every request (GitHub rejects requests without one)
            client: Pre-configured httpx.Client to use instead of creating one
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self._client = client or httpx.Client(
            timeout=timeout, verify=verify, follow_redirects=True
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def execute(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> TransportResponse:
        headers = {"User-Agent": self.user_agent, **headers}
        log_http_request(method, url, headers)
        started = time.monotonic()

        try:
            response = self._client.request(method, url, headers=headers, content=body)
        except httpx.TimeoutException as e:
            raise TransportError("TIMEOUT", f"{method} {url} timed out: {e}") from e
        except httpx.RequestError as e:
            raise TransportError("CONNECTION_ERROR", f"{method} {url} failed: {e}") from e

        elapsed_ms = (time.monotonic() - started) * 1000
        log_http_response(response.status_code, url, response.content, elapsed_ms)

        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )
