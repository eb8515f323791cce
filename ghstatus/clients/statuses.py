"""Commit statuses resource client."""

from datetime import datetime
from typing import TYPE_CHECKING, Any

from ghstatus.exceptions import MalformedInputError
from ghstatus.requester import malformed_response, quote_segment
from ghstatus.types.statuses import (
    ChangeState,
    CombinedStatus,
    CommitStatus,
    StatusReport,
)

if TYPE_CHECKING:
    from ghstatus.requester import Requester


def _parse_timestamp(value: Any) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError) as e:
        raise malformed_response(f"Invalid timestamp: {value!r}") from e


def _parse_status(data: Any) -> CommitStatus:
    if not isinstance(data, dict):
        raise malformed_response(f"Status entry is not an object: {data!r}")
    try:
        state = ChangeState.parse(data.get("state"))
    except MalformedInputError as e:
        raise malformed_response(f"Status entry has no valid state: {data!r}") from e
    return CommitStatus(
        state=state,
        context=data.get("context") or "default",
        description=data.get("description"),
        target_url=data.get("target_url"),
        created_at=_parse_timestamp(data.get("created_at")),
    )


def _parse_combined(data: dict[str, Any], commit: str) -> CombinedStatus:
    sha = data.get("sha", commit)
    state = data.get("state")
    total_count = data.get("total_count", 0)
    statuses = data.get("statuses", [])
    if (
        not isinstance(sha, str)
        or not isinstance(state, str)
        or not isinstance(total_count, int)
        or not isinstance(statuses, list)
    ):
        raise malformed_response(f"Combined status has an unexpected shape: {data!r}")
    return CombinedStatus(
        sha=sha,
        state=state,
        total_count=total_count,
        statuses=[_parse_status(s) for s in statuses],
        raw=data,
    )


class StatusesClient:
    """Client for reading and posting commit statuses."""

    def __init__(self, requester: "Requester") -> None:
        """
        Initialize the statuses client.

        Args:
            requester: Requester for making API calls
        """
        self.requester = requester

    def get_combined(self, owner: str, repo: str, commit: str) -> CombinedStatus:
        """
        Get the combined status of a commit.

        Raises:
            NotFoundError: If the commit is unknown
            TransportError: If the response is not a combined status
        """
        path = (
            f"/repos/{quote_segment(owner, 'owner')}/{quote_segment(repo, 'repo')}"
            f"/commits/{quote_segment(commit, 'commit')}/status"
        )
        data = self.requester.request("GET", path)
        return _parse_combined(data, commit)

    def create(self, owner: str, repo: str, commit: str, report: StatusReport) -> CommitStatus:
        """
        Post a status for a commit. Every call appends to the commit's status history.

        Raises:
            AuthenticationError: If the credentials are rejected
            NotFoundError: If the commit does not exist
        """
        path = (
            f"/repos/{quote_segment(owner, 'owner')}/{quote_segment(repo, 'repo')}"
            f"/statuses/{quote_segment(commit, 'commit')}"
        )
        data = self.requester.request("POST", path, body=report.to_payload())
        return _parse_status(data)
