"""Commit status data models."""

import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from ghstatus.exceptions import MalformedInputError

DEFAULT_CONTEXT = "continuous-integration"


class ChangeState(str, Enum):
    """Status values accepted by the commit status API."""

    Pending = "pending"
    Success = "success"
    Error = "error"
    Failure = "failure"

    @classmethod
    def parse(cls, value: "ChangeState | str") -> "ChangeState":
        """
        Coerce a wire value (or an existing member) into a ChangeState.

        Raises:
            MalformedInputError: If the value is not one of the four states
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            legal = ", ".join(s.value for s in cls)
            raise MalformedInputError(
                f"Invalid change state: {value!r}. Must be one of: {legal}"
            ) from None


@dataclass(frozen=True)
class StatusReport:
    """A status entry to be posted for a commit."""

    state: ChangeState
    description: str
    target_url: str | None = None
    context: str = DEFAULT_CONTEXT

    def to_payload(self) -> dict[str, str]:
        payload = {
            "state": self.state.value,
            "description": self.description,
            "context": self.context,
        }
        if self.target_url:
            payload["target_url"] = self.target_url
        return payload


@dataclass(frozen=True)
class CommitStatus:
    """One entry of a commit's status history."""

    state: ChangeState
    context: str
    description: str | None
    target_url: str | None
    created_at: datetime | None


@dataclass(frozen=True)
class CombinedStatus:
    """Combined status of a commit: the latest entry per context plus an overall state."""

    sha: str
    state: str  # overall state; "pending" when no status was posted yet
    total_count: int
    statuses: list[CommitStatus] = field(default_factory=list)
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def render(self) -> str:
        """Pretty-print the payload the service returned."""
        return json.dumps(self.raw, indent=2, sort_keys=True)

    def __str__(self) -> str:
        return self.render()
