"""Pull request reference models."""

from dataclasses import dataclass

MERGE_KIND = "merge"
HEAD_KIND = "head"


@dataclass(frozen=True)
class PullRequestRef:
    """A parsed ``refs/pull/<number>/<kind>`` reference."""

    number: int
    kind: str  # "merge" or "head"

    @property
    def is_merge(self) -> bool:
        return self.kind == MERGE_KIND

    def __str__(self) -> str:
        return f"refs/pull/{self.number}/{self.kind}"
