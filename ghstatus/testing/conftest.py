"""
Pytest plugin for ghstatus testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["ghstatus.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from ghstatus.testing.fixtures import (
    fake_service,
    fixture_credentials,
    github_api,
)

__all__ = [
    "fake_service",
    "fixture_credentials",
    "github_api",
]
