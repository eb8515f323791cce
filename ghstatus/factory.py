"""
Client factory.

Validates credentials and binds them, together with a transport, into a
GitHubApi.
"""

import httpx

from ghstatus.api import GitHubApi
from ghstatus.credentials import BasicAuth, Credentials, TokenAuth
from ghstatus.exceptions import ConfigurationError
from ghstatus.transport import HTTPTransport, Transport


def _is_blank(value: object) -> bool:
    if isinstance(value, bytes):
        return not value.strip()
    return not isinstance(value, str) or not value.strip()


def validate_credentials(credentials: Credentials) -> None:
    """
    Check that credentials name an http(s) endpoint and exactly one auth method.

    Raises:
        ConfigurationError: If the credentials are unusable
    """
    if not isinstance(credentials, Credentials):
        raise ConfigurationError(
            f"Expected Credentials, got {type(credentials).__name__}"
        )

    if _is_blank(credentials.endpoint):
        raise ConfigurationError("Endpoint URL must not be empty")
    try:
        url = httpx.URL(credentials.endpoint)
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"Invalid endpoint URL: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(
            f"Endpoint must be an absolute http(s) URL, got {credentials.endpoint!r}"
        )

    auth = credentials.auth
    if isinstance(auth, BasicAuth):
        if not isinstance(auth.username, str) or _is_blank(auth.username) or _is_blank(auth.secret):
            raise ConfigurationError("Basic authentication needs a username and a password")
    elif isinstance(auth, TokenAuth):
        if _is_blank(auth.secret):
            raise ConfigurationError("Token authentication needs a non-empty token")
        if not auth.secret.isascii():
            raise ConfigurationError("Tokens must be ASCII")
    else:
        raise ConfigurationError(
            "Exactly one authentication method (BasicAuth or TokenAuth) is required, "
            f"got {type(auth).__name__}"
        )


class GitHubApiFactory:
    """Creates GitHubApi instances from credentials and a transport."""

    def create(self, credentials: Credentials, transport: Transport) -> GitHubApi:
        """
        Create an API client.

        Args:
            credentials: Endpoint, repository and authentication method
            transport: Transport executing the HTTP requests

        Returns:
            Configured GitHubApi

        Raises:
            ConfigurationError: If the credentials are invalid
        """
        validate_credentials(credentials)
        return GitHubApi(credentials, transport)

    def from_env(self, transport: Transport | None = None) -> GitHubApi:
        """
        Create an API client from environment variables (see Credentials.from_env).

        Args:
            transport: Transport to use (default: a new HTTPTransport)

        Raises:
            ConfigurationError: If required environment variables are missing or
                invalid. No transport is opened in that case.
        """
        credentials = Credentials.from_env()
        validate_credentials(credentials)
        return GitHubApi(credentials, transport or HTTPTransport())
