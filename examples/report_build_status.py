#!/usr/bin/env python3
"""
ghstatus example - report a build status for a pull request.

This example shows what a CI server does when a build of a pull request ref
starts and finishes:
1. Resolve the ref to a commit
2. Post a pending status
3. Post the final status
4. Read the combined status back

Configure through GITHUB_REPOSITORY and GITHUB_TOKEN (see Credentials.from_env).
Run with: python examples/report_build_status.py refs/pull/1/merge
"""

import logging
import sys

from ghstatus import (
    AuthenticationError,
    ChangeState,
    GitHubApiFactory,
    GitHubError,
    HTTPTransport,
    configure_logging,
)


def main() -> int:
    ref = sys.argv[1] if len(sys.argv) > 1 else "refs/pull/1/merge"
    build_url = "https://ci.example.com/build/1"

    configure_logging(level=logging.INFO)

    with HTTPTransport(timeout=10.0) as transport:
        try:
            api = GitHubApiFactory().from_env(transport=transport)
        except GitHubError as e:
            print(f"Configuration problem: {e}")
            return 2

        owner = api.credentials.owner
        repo = api.credentials.repository

        try:
            # Step 1: Resolve the ref
            sha = api.find_pull_request_commit(owner, repo, ref)
            kind = "merge preview" if api.is_pull_request_merge_branch(ref) else "head"
            print(f"1. {ref} -> {sha} ({kind})")

            # Step 2: Build started
            api.set_change_status(owner, repo, sha, ChangeState.Pending, build_url, "Build started")
            print("2. Posted pending status")

            # Step 3: Build finished
            api.set_change_status(owner, repo, sha, ChangeState.Success, build_url, "Build passed")
            print("3. Posted success status")

            # Step 4: Read back
            status = api.read_change_status(owner, repo, sha)
            print(f"4. Combined state: {status.state}")
            print(f"   Parents: {api.get_commit_parents(owner, repo, sha)}")
        except AuthenticationError as e:
            print(f"Credentials rejected: {e}")
            return 1
        except GitHubError as e:
            print(f"Request failed: {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
