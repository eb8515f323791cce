"""ghstatus - commit status and pull request ref client for CI servers."""

from ghstatus.api import GitHubApi
from ghstatus.credentials import (
    DEFAULT_ENDPOINT,
    AuthMethod,
    BasicAuth,
    Credentials,
    TokenAuth,
    sign_request,
)
from ghstatus.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    GitHubError,
    GitHubIOError,
    MalformedInputError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    TransportError,
)
from ghstatus.factory import GitHubApiFactory
from ghstatus.logging import configure_logging, get_logger
from ghstatus.refs import is_pull_request_merge_branch, parse_pull_request_ref
from ghstatus.transport import HTTPTransport, Transport, TransportResponse
from ghstatus.types import (
    ChangeState,
    CombinedStatus,
    CommitStatus,
    PullRequestRef,
    StatusReport,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main client
    "GitHubApi",
    "GitHubApiFactory",
    # Credentials
    "Credentials",
    "AuthMethod",
    "BasicAuth",
    "TokenAuth",
    "DEFAULT_ENDPOINT",
    "sign_request",
    # Exceptions
    "GitHubError",
    "GitHubIOError",
    "ConfigurationError",
    "MalformedInputError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "TransportError",
    "ServerError",
    "RateLimitedError",
    # Types
    "ChangeState",
    "StatusReport",
    "CommitStatus",
    "CombinedStatus",
    "PullRequestRef",
    # Refs
    "is_pull_request_merge_branch",
    "parse_pull_request_ref",
    # Transport
    "Transport",
    "TransportResponse",
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
