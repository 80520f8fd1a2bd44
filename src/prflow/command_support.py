"""Helpers shared by the prflow Click commands: repository lookup and failure reporting."""

import sys
from contextlib import contextmanager

from git.exc import GitCommandError

from prflow import console
from prflow.config import load_config
from prflow.vcs.git_repository import GitRepository


def open_repository(directory):
    """Open the git repository for ``--dir``, exiting with an error if there is none."""
    if directory != ".":
        console.notice(f"Changing to directory: {directory}")
    try:
        return GitRepository.open(directory)
    except (NotADirectoryError, RuntimeError) as e:
        console.error(str(e))
        sys.exit(1)


def load_repo_config(git_repo):
    try:
        return load_config(git_repo.working_tree_dir)
    except ValueError as e:
        console.error(f"Invalid configuration: {e}")
        sys.exit(1)


def describe_git_error(e: GitCommandError) -> str:
    stderr = (e.stderr or "").strip()
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip().strip("'")
    command = e.command
    if isinstance(command, (list, tuple)):
        command = " ".join(str(part) for part in command)
    return f"'{command}' failed: {stderr}" if stderr else f"'{command}' failed with status {e.status}"


@contextmanager
def exit_on_failure():
    """Turn git and gh failures into an ``Error:`` line and exit status 1."""
    try:
        yield
    except GitCommandError as e:
        console.error(describe_git_error(e))
        sys.exit(1)
    except RuntimeError as e:
        console.error(str(e))
        sys.exit(1)
