"""ghstatus resource clients."""

from ghstatus.clients.commits import CommitsClient
from ghstatus.clients.pulls import PullsClient
from ghstatus.clients.statuses import StatusesClient

__all__ = [
    "CommitsClient",
    "PullsClient",
    "StatusesClient",
]
