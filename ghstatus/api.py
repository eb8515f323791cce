"""
ghstatus API client.

Provides the five operations a CI server needs from the hosting service:
resolving pull request refs, reading and posting commit statuses, and
walking commit parents.
"""

from typing import Any

from ghstatus.clients import CommitsClient, PullsClient, StatusesClient
from ghstatus.credentials import Credentials
from ghstatus.logging import get_logger
from ghstatus.refs import is_pull_request_merge_branch
from ghstatus.requester import Requester
from ghstatus.transport import Transport
from ghstatus.types.statuses import (
    DEFAULT_CONTEXT,
    ChangeState,
    CombinedStatus,
    CommitStatus,
    StatusReport,
)

logger = get_logger()


class GitHubApi:
    """
    Client for the commit status and ref resolution API.

    Create instances through ``GitHubApiFactory.create`` so credentials are
    validated. The client keeps no state between calls and may be shared
    between threads.

    Example:
        ```python
        from ghstatus import ChangeState, Credentials, GitHubApiFactory, HTTPTransport, TokenAuth

        credentials = Credentials(
            endpoint="https://api.github.com",
            owner="octocat",
            repository="hello-world",
            auth=TokenAuth("ghp_..."),
        )
        api = GitHubApiFactory().create(credentials, HTTPTransport())

        sha = api.find_pull_request_commit("octocat", "hello-world", "refs/pull/1/merge")
        api.set_change_status(
            "octocat", "hello-world", sha,
            ChangeState.Pending, "https://ci.example.com/build/1", "Build queued",
        )
        ```
    """

    def __init__(self, credentials: Credentials, transport: Transport) -> None:
        self.credentials = credentials
        self._requester = Requester(credentials, transport)

        self.pulls = PullsClient(self._requester)
        self.statuses = StatusesClient(self._requester)
        self.commits = CommitsClient(self._requester)

    @property
    def transport(self) -> Transport:
        """Get the underlying transport (for advanced use cases)."""
        return self._requester.transport

    def find_pull_request_commit(self, owner: str, repo: str, ref: str) -> str:
        """
        Resolve ``refs/pull/<n>/merge`` or ``refs/pull/<n>/head`` to a commit SHA.

        Raises:
            MalformedInputError: If ref is not a pull request ref
            NotFoundError: If the pull request or merge preview does not exist
            TransportError: On connectivity failures and unexpected statuses
        """
        logger.debug("Resolving %s in %s/%s", ref, owner, repo)
        return self.pulls.find_commit(owner, repo, ref)

    def read_change_status(self, owner: str, repo: str, commit: str) -> CombinedStatus:
        """
        Read the combined status of a commit.

        Raises:
            NotFoundError: If the commit is unknown
            TransportError: On connectivity failures and unexpected statuses
        """
        logger.debug("Reading status of %s in %s/%s", commit, owner, repo)
        return self.statuses.get_combined(owner, repo, commit)

    def set_change_status(
        self,
        owner: str,
        repo: str,
        commit: str,
        state: ChangeState | str,
        target_url: str | None,
        description: str,
        context: str = DEFAULT_CONTEXT,
    ) -> CommitStatus:
        """
        Post a new status for a commit.

        The description is sent as given; the service may truncate or reject
        long values.

        Args:
            owner: Repository owner
            repo: Repository name
            commit: Commit SHA
            state: ChangeState or its wire value
            target_url: Link to the build, optional
            description: Free text description
            context: Label distinguishing this status from other systems' statuses

        Returns:
            The CommitStatus the service recorded

        Raises:
            AuthenticationError: If the credentials are rejected
            NotFoundError: If the commit does not exist
            TransportError: On connectivity failures and unexpected statuses
        """
        report = StatusReport(
            state=ChangeState.parse(state),
            description=description,
            target_url=target_url,
            context=context,
        )
        logger.debug(
            "Setting status %s (%s) on %s in %s/%s",
            report.state.value, context, commit, owner, repo,
        )
        return self.statuses.create(owner, repo, commit, report)

    def is_pull_request_merge_branch(self, ref: Any) -> bool:
        """Return True iff ref is ``refs/pull/<n>/merge``. No I/O, never raises."""
        return is_pull_request_merge_branch(ref)

    def get_commit_parents(self, owner: str, repo: str, commit: str) -> list[str]:
        """
        List the parents of a commit in service-reported order.

        Raises:
            NotFoundError: If the commit is unknown
            TransportError: On connectivity failures and unexpected statuses
        """
        logger.debug("Reading parents of %s in %s/%s", commit, owner, repo)
        return self.commits.get_parents(owner, repo, commit)
