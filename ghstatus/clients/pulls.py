"""Pull requests resource client."""

from typing import TYPE_CHECKING, Any

from ghstatus.exceptions import NotFoundError
from ghstatus.logging import get_logger
from ghstatus.refs import parse_pull_request_ref
from ghstatus.requester import malformed_response, quote_segment
from ghstatus.types.pulls import PullRequestRef

if TYPE_CHECKING:
    from ghstatus.requester import Requester

logger = get_logger()


class PullsClient:
    """Client for resolving pull request refs."""

    def __init__(self, requester: "Requester") -> None:
        """
        Initialize the pulls client.

        Args:
            requester: Requester for making API calls
        """
        self.requester = requester

    def get(self, owner: str, repo: str, number: int) -> dict[str, Any]:
        """
        Get the raw pull request resource.

        Raises:
            NotFoundError: If the pull request does not exist
        """
        path = (
            f"/repos/{quote_segment(owner, 'owner')}/{quote_segment(repo, 'repo')}"
            f"/pulls/{number}"
        )
        return self.requester.request("GET", path)

    def find_commit(self, owner: str, repo: str, ref: str) -> str:
        """
        Resolve a pull request ref to a commit SHA.

        ``refs/pull/<n>/head`` resolves to the head commit and
        ``refs/pull/<n>/merge`` to the merge-preview commit.

        Args:
            owner: Repository owner
            repo: Repository name
            ref: Pull request ref

        Returns:
            The commit SHA

        Raises:
            MalformedInputError: If ref is not a pull request ref
            NotFoundError: If the pull request or the requested commit does not exist
        """
        pr_ref = parse_pull_request_ref(ref)
        data = self.get(owner, repo, pr_ref.number)
        return _select_commit(pr_ref, data)


def _select_commit(pr_ref: PullRequestRef, data: dict[str, Any]) -> str:
    if pr_ref.is_merge:
        if data.get("state") == "closed":
            raise _unavailable(
                "MERGE_PREVIEW_UNAVAILABLE",
                f"Pull request #{pr_ref.number} is closed; no merge preview is computed",
            )
        sha = data.get("merge_commit_sha")
        if sha is None:
            raise _unavailable(
                "MERGE_PREVIEW_UNAVAILABLE",
                f"Merge preview of pull request #{pr_ref.number} is not available",
            )
    else:
        head = data.get("head")
        if head is None or (isinstance(head, dict) and head.get("sha") is None):
            raise _unavailable(
                "HEAD_UNAVAILABLE",
                f"Pull request #{pr_ref.number} has no head commit",
            )
        if not isinstance(head, dict):
            raise malformed_response(f"Pull request #{pr_ref.number} has an invalid head: {head!r}")
        sha = head["sha"]

    if not isinstance(sha, str) or not sha:
        raise malformed_response(f"Pull request #{pr_ref.number} has an invalid commit: {sha!r}")
    return sha


def _unavailable(code: str, message: str) -> NotFoundError:
    logger.warning(message)
    return NotFoundError(code, message)
