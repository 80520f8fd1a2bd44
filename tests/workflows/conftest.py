"""Shared fixtures for the push-pr, worktree and submodule tests."""

import os
import sys
import tempfile

import pytest
from git import Repo

# Ensure tests/workflows/ is on sys.path so test files can import the
# fakes unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_git_repository import FakeGitRepository  # noqa: E402, F401
from fake_github_client import FakeGitHubClient  # noqa: E402, F401


def init_repo(path, branch="main"):
    """Initialize a repository at ``path`` with one commit on ``branch``."""
    repo = Repo.init(path)
    repo.config_writer().set_value("user", "email", "test@test.com").release()
    repo.config_writer().set_value("user", "name", "Test").release()
    repo.git.symbolic_ref("HEAD", f"refs/heads/{branch}")

    readme = os.path.join(path, "README.md")
    with open(readme, "w") as f:
        f.write("# Test Repo")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")
    return repo


@pytest.fixture
def git_repo_with_commit():
    """Create a temporary git repository on 'main' with an initial commit.

    The repository lives one level below the temp dir so sibling worktrees
    are cleaned up with it.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        repo_dir = os.path.join(os.path.realpath(tmpdir), "project")
        os.makedirs(repo_dir)
        repo = init_repo(repo_dir)
        yield repo_dir, repo
