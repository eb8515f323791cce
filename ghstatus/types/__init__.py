"""ghstatus type definitions.

This module exports all data model types used by the client.
"""

from ghstatus.types.pulls import HEAD_KIND, MERGE_KIND, PullRequestRef
from ghstatus.types.statuses import (
    DEFAULT_CONTEXT,
    ChangeState,
    CombinedStatus,
    CommitStatus,
    StatusReport,
)

__all__ = [
    # Status types
    "ChangeState",
    "StatusReport",
    "CommitStatus",
    "CombinedStatus",
    "DEFAULT_CONTEXT",
    # Pull request types
    "PullRequestRef",
    "MERGE_KIND",
    "HEAD_KIND",
]
