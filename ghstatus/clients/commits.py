"""Git commits resource client."""

from typing import TYPE_CHECKING, Any

from ghstatus.requester import malformed_response, quote_segment

if TYPE_CHECKING:
    from ghstatus.requester import Requester


def _parent_shas(data: dict[str, Any]) -> list[str]:
    parents = data.get("parents")
    if not isinstance(parents, list):
        raise malformed_response(f"Commit has no parents list: {parents!r}")

    shas = []
    for parent in parents:
        sha = parent.get("sha") if isinstance(parent, dict) else None
        if not isinstance(sha, str) or not sha:
            raise malformed_response(f"Parent entry has no sha: {parent!r}")
        shas.append(sha)
    return shas


class CommitsClient:
    """Client for git commit objects."""

    def __init__(self, requester: "Requester") -> None:
        self.requester = requester

    def get_parents(self, owner: str, repo: str, commit: str) -> list[str]:
        """
        List a commit's parent SHAs in the order the service reports them.

        Returns an empty list for a root commit.

        Raises:
            NotFoundError: If the commit is unknown
            TransportError: If the commit object has no usable parents list
        """
        path = (
            f"/repos/{quote_segment(owner, 'owner')}/{quote_segment(repo, 'repo')}"
            f"/git/commits/{quote_segment(commit, 'commit')}"
        )
        return _parent_shas(self.requester.request("GET", path))
