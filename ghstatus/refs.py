"""
Pull request ref naming conventions.

The hosting service publishes two refs per pull request:
``refs/pull/<n>/head`` points at the pull request's head commit and
``refs/pull/<n>/merge`` at the synthetic merge-preview commit.
"""

import re

from ghstatus.exceptions import MalformedInputError
from ghstatus.types.pulls import HEAD_KIND, MERGE_KIND, PullRequestRef

_PULL_REQUEST_REF = re.compile(r"/?refs/pull/([1-9][0-9]*)/(merge|head)")


def parse_pull_request_ref(ref: str) -> PullRequestRef:
    """
    Parse a pull request ref.

    Args:
        ref: Ref name such as ``refs/pull/42/merge``

    Returns:
        PullRequestRef with the pull request number and ref kind

    Raises:
        MalformedInputError: If ref does not name a pull request head or merge ref
    """
    match = _PULL_REQUEST_REF.fullmatch(ref) if isinstance(ref, str) else None
    if match is None:
        raise MalformedInputError(
            f"Not a pull request ref: {ref!r}. "
            f"Expected refs/pull/<number>/{MERGE_KIND} or refs/pull/<number>/{HEAD_KIND}"
        )
    return PullRequestRef(number=int(match.group(1)), kind=match.group(2))


def is_pull_request_merge_branch(ref: object) -> bool:
    """Return True iff ref is a ``refs/pull/<number>/merge`` ref. Never raises."""
    try:
        return parse_pull_request_ref(ref).is_merge  # type: ignore[arg-type]
    except MalformedInputError:
        return False
