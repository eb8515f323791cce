"""
Request plumbing shared by the resource clients.

Builds URLs from the configured endpoint, signs every request with the
configured credentials, encodes and decodes JSON, and turns error statuses
into typed exceptions.
"""

import json
from typing import Any
from urllib.parse import quote

from ghstatus.credentials import Credentials, sign_request
from ghstatus.exceptions import (
    AuthenticationError,
    AuthorizationError,
    GitHubIOError,
    MalformedInputError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    TransportError,
)
from ghstatus.logging import get_logger
from ghstatus.transport import Transport, TransportResponse

API_VERSION = "2022-11-28"

logger = get_logger()


def quote_segment(value: str, name: str) -> str:
    """
    Validate and URL-quote one path segment.

    Raises:
        MalformedInputError: If value is not a non-empty string
    """
    if not isinstance(value, str) or not value.strip():
        raise MalformedInputError(f"{name} must be a non-empty string, got {value!r}")
    return quote(value, safe="")


def malformed_response(detail: str, request_id: str | None = None) -> TransportError:
    """
    Build (and log) the error for a success response with an unusable body.

    A success status with a body the client cannot interpret is a failure;
    no partial result is returned.
    """
    error = TransportError("MALFORMED_RESPONSE", detail, request_id)
    logger.warning("Malformed response: %s", detail)
    return error


class Requester:
    """Executes JSON requests against the commit status API."""

    def __init__(self, credentials: Credentials, transport: Transport) -> None:
        """
        Initialize the requester.

        Args:
            credentials: Validated credentials (see GitHubApiFactory)
            transport: Transport used for every request
        """
        self.credentials = credentials
        self.transport = transport
        self.base_url = credentials.endpoint.rstrip("/")

    def request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Make a request and return the decoded JSON object.

        Args:
            method: HTTP method
            path: API path starting with "/" (segments already quoted)
            body: JSON request body

        Returns:
            Parsed JSON object

        Raises:
            GitHubIOError: On transport failures, error statuses and success
                responses whose body is not a JSON object
        """
        url = f"{self.base_url}{path}"
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
        }
        headers.update(sign_request(self.credentials.auth))

        payload: bytes | None = None
        if body is not None:
            headers["Content-Type"] = "application/json"
            payload = json.dumps(body).encode("utf-8")

        try:
            response = self.transport.execute(method, url, headers, payload)
        except GitHubIOError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise

        if not 200 <= response.status_code < 300:
            error = parse_error_response(response)
            logger.warning("%s %s failed: %s", method, path, error)
            raise error

        return _decode(response)


def _decode(response: TransportResponse) -> dict[str, Any]:
    request_id = response.header("X-GitHub-Request-Id")
    if not response.body:
        raise malformed_response(
            f"Response with status {response.status_code} has an empty body", request_id
        )
    try:
        data = json.loads(response.body)
    except ValueError as e:
        raise malformed_response(
            f"Response with status {response.status_code} is not valid JSON: {e}",
            request_id,
        ) from e
    if not isinstance(data, dict):
        raise malformed_response(
            f"Expected a JSON object, got {type(data).__name__}", request_id
        )
    return data


def parse_error_response(response: TransportResponse) -> GitHubIOError:
    """
    Parse an error response into a typed exception.

    Args:
        response: Response with an error status

    Returns:
        Appropriate GitHubIOError subclass
    """
    try:
        data = json.loads(response.body) if response.body else {}
    except ValueError:
        data = {}
    if not isinstance(data, dict):
        data = {}

    status_code = response.status_code
    message = data.get("message") or f"HTTP {status_code}"
    request_id = response.header("X-GitHub-Request-Id")

    if status_code == 401:
        return AuthenticationError("UNAUTHORIZED", message, request_id)
    elif status_code == 403 and response.header("X-RateLimit-Remaining") == "0":
        return RateLimitedError("RATE_LIMITED", message, _reset_at(response), request_id)
    elif status_code == 403:
        return AuthorizationError("FORBIDDEN", message, request_id)
    elif status_code == 404:
        return NotFoundError("NOT_FOUND", message, request_id)
    elif status_code == 422:
        # Unknown SHAs are reported as validation failures
        return NotFoundError("UNPROCESSABLE", message, request_id)
    elif status_code == 429:
        return RateLimitedError("RATE_LIMITED", message, _reset_at(response), request_id)
    elif status_code >= 500:
        return ServerError("SERVER_ERROR", message, request_id)
    else:
        return TransportError("UNEXPECTED_STATUS", message, request_id)


def _reset_at(response: TransportResponse) -> int | None:
    value = response.header("X-RateLimit-Reset")
    try:
        return int(value) if value is not None else None
    except ValueError:
        return None
