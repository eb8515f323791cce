"""ghstatus exception classes."""


class GitHubError(Exception):
    """Base exception for all ghstatus errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(GitHubError):
    """Raised when credentials or client configuration are invalid."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class MalformedInputError(GitHubError, ValueError):
    """Raised when caller input has the wrong shape. Never sent over the wire."""

    def __init__(self, message: str) -> None:
        super().__init__("MALFORMED_INPUT", message)


class GitHubIOError(GitHubError, OSError):
    """Base for every failure that involved talking to the remote service."""

    pass


class AuthenticationError(GitHubIOError):
    """Raised when the service rejects the credentials (401)."""

    pass


class AuthorizationError(AuthenticationError):
    """Raised when the credentials lack access to the resource (403)."""

    pass


class NotFoundError(GitHubIOError):
    """Raised when a pull request, commit or merge preview does not exist."""

    pass


class TransportError(GitHubIOError):
    """Raised on connectivity errors, timeouts and unexpected statuses."""

    pass


class ServerError(TransportError):
    """Raised on server errors (5xx)."""

    pass


class RateLimitedError(TransportError):
    """Raised when the service refuses the request because of rate limiting."""

    def __init__(
        self,
        code: str,
        message: str,
        reset_at: int | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.reset_at = reset_at
