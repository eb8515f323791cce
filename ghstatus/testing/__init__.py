"""ghstatus testing utilities.

Provides an in-memory fake of the remote service and fixtures for testing
applications that use ghstatus.
"""

from ghstatus.testing.fake import FakeCall, FakeGitHubService, FakeRepository
from ghstatus.testing.fixtures import (
    create_fixture_credentials,
    create_fixture_service,
)

__all__ = [
    # Fake service
    "FakeGitHubService",
    "FakeRepository",
    "FakeCall",
    # Helper functions
    "create_fixture_service",
    "create_fixture_credentials",
]
