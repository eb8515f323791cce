"""
Pytest fixtures for testing code that uses ghstatus.

The fixture repository mirrors the scenario a CI server relies on: an open
pull request #1 whose merge preview equals its head (no conflicts), a closed
pull request #2, a root commit and a merge commit with two parents.
"""

from typing import Generator

import pytest

from ghstatus.api import GitHubApi
from ghstatus.credentials import Credentials, TokenAuth
from ghstatus.factory import GitHubApiFactory
from ghstatus.testing.fake import FakeGitHubService

FIXTURE_ENDPOINT = "https://api.github.test"
FIXTURE_OWNER = "octocat"
FIXTURE_REPO = "hello-world"
FIXTURE_TOKEN = "test-token"

ROOT_COMMIT = "1a410efbd13591db07496601ebc7a059dd55cfe9"
FEATURE_COMMIT = "9fceb02d0ae598e95dc970b74767f19372d61af8"
PR_COMMIT = "4e86fc6dcef23c733f36bc8bbf35fb292edc9cdb"
MERGE_COMMIT = "7638417db6d59f3c431d3e1f261cc637155684cd"
CLOSED_PR_COMMIT = "553c2077f0edc3d5dc5d17262f6aa498e69d6f8e"


def create_fixture_service() -> FakeGitHubService:
    """Build a FakeGitHubService seeded with the fixture repository."""
    service = FakeGitHubService(valid_auth=TokenAuth(FIXTURE_TOKEN))
    service.add_commit(FIXTURE_OWNER, FIXTURE_REPO, ROOT_COMMIT)
    service.add_commit(FIXTURE_OWNER, FIXTURE_REPO, FEATURE_COMMIT, [ROOT_COMMIT])
    service.add_commit(FIXTURE_OWNER, FIXTURE_REPO, PR_COMMIT, [ROOT_COMMIT])
    service.add_commit(
        FIXTURE_OWNER, FIXTURE_REPO, MERGE_COMMIT, [PR_COMMIT, FEATURE_COMMIT]
    )
    service.add_commit(FIXTURE_OWNER, FIXTURE_REPO, CLOSED_PR_COMMIT, [ROOT_COMMIT])

    service.add_pull_request(
        FIXTURE_OWNER, FIXTURE_REPO, 1, head_sha=PR_COMMIT, merge_commit_sha=PR_COMMIT
    )
    service.add_pull_request(
        FIXTURE_OWNER,
        FIXTURE_REPO,
        2,
        head_sha=CLOSED_PR_COMMIT,
        merge_commit_sha=CLOSED_PR_COMMIT,
        state="closed",
    )
    return service


def create_fixture_credentials(token: str = FIXTURE_TOKEN) -> Credentials:
    """Build credentials for the fixture repository."""
    return Credentials(
        endpoint=FIXTURE_ENDPOINT,
        owner=FIXTURE_OWNER,
        repository=FIXTURE_REPO,
        auth=TokenAuth(token),
    )


@pytest.fixture
def fake_service() -> Generator[FakeGitHubService, None, None]:
    """
    Provide a FakeGitHubService seeded with the fixture repository.

    Example:
        ```python
        def test_my_feature(fake_service, github_api):
            fake_service.queue_error(status_code=503, message="Unavailable")
            with pytest.raises(ServerError):
                github_api.get_commit_parents("octocat", "hello-world", ROOT_COMMIT)
        ```
    """
    service = create_fixture_service()
    yield service
    service.reset()


@pytest.fixture
def fixture_credentials() -> Credentials:
    """Provide token credentials accepted by fake_service."""
    return create_fixture_credentials()


@pytest.fixture
def github_api(fake_service: FakeGitHubService, fixture_credentials: Credentials) -> GitHubApi:
    """Provide a GitHubApi wired to fake_service."""
    return GitHubApiFactory().create(fixture_credentials, fake_service)
