"""Shared fixtures: the fake service seeded with the fixture repository."""

from ghstatus.testing.fixtures import (  # noqa: F401
    fake_service,
    fixture_credentials,
    github_api,
)
