"""
Tests for the httpx-backed HTTP transport.

Feature: ghstatus
"""

from unittest.mock import patch

import httpx
import pytest

from ghstatus.exceptions import GitHubIOError, TransportError
from ghstatus.transport import HTTPTransport, TransportResponse


def make_transport(handler) -> HTTPTransport:
    return HTTPTransport(client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_execute_returns_status_headers_and_body() -> None:
    seen: dict[str, httpx.Request] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["request"] = request
        return httpx.Response(
            201,
            headers={"X-GitHub-Request-Id": "ABC"},
            content=b'{"state": "pending"}',
        )

    with make_transport(handler) as transport:
        response = transport.execute(
            "POST",
            "https://api.github.com/repos/o/r/statuses/abc",
            {"Authorization": "Bearer t", "Content-Type": "application/json"},
            b'{"state": "pending"}',
        )

    assert response.status_code == 201
    assert response.header("x-github-request-id") == "ABC"
    assert response.body == b'{"state": "pending"}'

    request = seen["request"]
    assert request.method == "POST"
    assert str(request.url) == "https://api.github.com/repos/o/r/statuses/abc"
    assert request.headers["Authorization"] == "Bearer t"
    assert request.content == b'{"state": "pending"}'


def test_user_agent_sent_with_every_request() -> None:
    agents: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        agents.append(request.headers["User-Agent"])
        return httpx.Response(200, content=b"{}")

    client = httpx.Client(transport=httpx.MockTransport(handler))
    with HTTPTransport(user_agent="teamcity-ci/2024.1", client=client) as transport:
        transport.execute("GET", "https://api.github.com/x", {})
    with make_transport(handler) as transport:
        transport.execute("GET", "https://api.github.com/x", {})

    assert agents == ["teamcity-ci/2024.1", HTTPTransport.DEFAULT_USER_AGENT]


@pytest.mark.parametrize("status_code", [401, 403, 404, 422, 500, 503])
def test_error_statuses_are_returned_not_raised(status_code: int) -> None:
    transport = make_transport(lambda request: httpx.Response(status_code, json={"message": "nope"}))

    response = transport.execute("GET", "https://api.github.com/x", {})

    assert response.status_code == status_code


def test_timeout_becomes_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    transport = make_transport(handler)

    with pytest.raises(TransportError) as exc_info:
        transport.execute("GET", "https://api.github.com/x", {})

    assert exc_info.value.code == "TIMEOUT"
    assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)


def test_connection_failure_becomes_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = make_transport(handler)

    with pytest.raises(TransportError) as exc_info:
        transport.execute("GET", "https://api.github.com/x", {})

    assert exc_info.value.code == "CONNECTION_ERROR"
    # Transport failures are IO failures for callers
    assert isinstance(exc_info.value, GitHubIOError)
    assert isinstance(exc_info.value, OSError)


def test_no_retry_on_failure() -> None:
    transport = HTTPTransport()
    request = httpx.Request("GET", "https://api.github.com/x")

    with patch.object(
        transport._client, "request", side_effect=httpx.ConnectError("refused", request=request)
    ) as mock_request:
        with pytest.raises(TransportError):
            transport.execute("GET", "https://api.github.com/x", {})

    assert mock_request.call_count == 1
    transport.close()


def test_default_timeout() -> None:
    transport = HTTPTransport()

    assert transport.timeout == HTTPTransport.DEFAULT_TIMEOUT
    assert transport._client.timeout.read == HTTPTransport.DEFAULT_TIMEOUT
    transport.close()


def test_response_header_lookup_is_case_insensitive() -> None:
    response = TransportResponse(200, {"X-RateLimit-Remaining": "0"}, b"")

    assert response.header("x-ratelimit-remaining") == "0"
    assert response.header("Retry-After") is None
