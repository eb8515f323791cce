"""
Credentials for the commit status API.

Authentication is a tagged variant: either ``BasicAuth`` (username and
secret) or ``TokenAuth`` (personal access token). ``sign_request`` turns
either one into an ``Authorization`` header.
"""

import base64
import os
from dataclasses import dataclass, field

from ghstatus.exceptions import ConfigurationError

DEFAULT_ENDPOINT = "https://api.github.com"


def _as_bytes(secret: str | bytes) -> bytes:
    return secret if isinstance(secret, bytes) else secret.encode("utf-8")


@dataclass(frozen=True)
class BasicAuth:
    """HTTP Basic authentication with a username and password."""

    username: str
    secret: str | bytes = field(repr=False)


@dataclass(frozen=True)
class TokenAuth:
    """Personal access token authentication."""

    secret: str | bytes = field(repr=False)


AuthMethod = BasicAuth | TokenAuth


@dataclass(frozen=True)
class Credentials:
    """Endpoint, repository coordinates and authentication method."""

    endpoint: str
    owner: str
    repository: str
    auth: AuthMethod

    @classmethod
    def from_env(cls) -> "Credentials":
        """
        Create credentials from environment variables.

        Environment variables:
            GITHUB_API_URL: Base URL for API (optional, default: https://api.github.com)
            GITHUB_OWNER: Repository owner (optional, default: GITHUB_USERNAME)
            GITHUB_REPOSITORY: Repository name, or ``owner/name`` (required)
            GITHUB_TOKEN: Personal access token
            GITHUB_USERNAME, GITHUB_PASSWORD: Basic authentication

        Exactly one of GITHUB_TOKEN or GITHUB_USERNAME/GITHUB_PASSWORD must be set.

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        endpoint = os.environ.get("GITHUB_API_URL", DEFAULT_ENDPOINT)
        token = os.environ.get("GITHUB_TOKEN")
        username = os.environ.get("GITHUB_USERNAME")
        password = os.environ.get("GITHUB_PASSWORD")
        repository = os.environ.get("GITHUB_REPOSITORY", "")
        owner = os.environ.get("GITHUB_OWNER") or username or ""

        # GitHub Actions exports GITHUB_REPOSITORY as owner/name
        if "/" in repository:
            owner, repository = repository.split("/", 1)

        if not repository:
            raise ConfigurationError("GITHUB_REPOSITORY environment variable not set")
        if not owner:
            raise ConfigurationError(
                "GITHUB_OWNER environment variable not set"
            )

        if token and (username or password):
            raise ConfigurationError(
                "Set either GITHUB_TOKEN or GITHUB_USERNAME/GITHUB_PASSWORD, not both"
            )

        auth: AuthMethod
        if token:
            auth = TokenAuth(secret=token)
        elif username and password:
            auth = BasicAuth(username=username, secret=password)
        else:
            raise ConfigurationError(
                "No authentication configured. Set GITHUB_TOKEN or "
                "GITHUB_USERNAME and GITHUB_PASSWORD"
            )

        return cls(endpoint=endpoint, owner=owner, repository=repository, auth=auth)


def sign_request(auth: AuthMethod) -> dict[str, str]:
    """
    Build the authentication headers for one request.

    Args:
        auth: BasicAuth or TokenAuth

    Returns:
        Headers dict containing ``Authorization``

    Raises:
        ConfigurationError: If auth is not a supported method, or a token is
            not ASCII
    """
    if isinstance(auth, TokenAuth):
        try:
            token = _as_bytes(auth.secret).decode("ascii")
        except UnicodeError as e:
            raise ConfigurationError("Tokens must be ASCII") from e
        return {"Authorization": f"Bearer {token}"}
    if isinstance(auth, BasicAuth):
        # Passwords are opaque bytes; only the base64 form reaches the header
        raw = auth.username.encode("utf-8") + b":" + _as_bytes(auth.secret)
        return {"Authorization": f"Basic {base64.b64encode(raw).decode('ascii')}"}
    raise ConfigurationError(
        f"Unsupported authentication method: {type(auth).__name__}"
    )
