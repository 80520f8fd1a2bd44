"""GitRepository: wraps GitPython Repo for branch, commit, worktree and submodule operations.

Provides an injectable interface for Git operations, enabling
FakeGitRepository in tests without unittest.mock.patch.
"""

import os
import subprocess
import sys

from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError

# Runs inside every submodule; a submodule without main/master or a failing
# pull must not stop the others.
SUBMODULE_PULL_SCRIPT = (
    "git checkout main 2>/dev/null || git checkout master 2>/dev/null || true; "
    "git pull || true"
)


class GitRepository:
    """Wraps a GitPython Repo with the operations the prflow commands need.

    Args:
        repo: A GitPython Repo instance.
    """

    def __init__(self, repo):
        self._repo = repo

    @classmethod
    def open(cls, directory):
        """Open the repository containing ``directory``.

        Raises:
            NotADirectoryError: If ``directory`` does not exist.
            RuntimeError: If ``directory`` is not inside a git work tree.
        """
        if not os.path.isdir(directory):
            raise NotADirectoryError(f"Cannot cd to {directory}")
        try:
            repo = Repo(directory, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError):
            raise RuntimeError("Not in a git repository")
        if repo.bare or repo.working_tree_dir is None:
            raise RuntimeError("Not in a git repository")
        return cls(repo)

    @property
    def working_tree_dir(self):
        return self._repo.working_tree_dir

    @property
    def repo_name(self):
        return os.path.basename(self._repo.working_tree_dir)

    @property
    def current_branch(self):
        """Name of the checked-out branch, or "" on a detached HEAD."""
        return self._repo.git.branch("--show-current").strip()

    def has_changes(self):
        """Return True if tracked files have staged or unstaged changes.

        Untracked files are ignored.
        """
        return self._repo.is_dirty(index=True, working_tree=True, untracked_files=False)

    def is_clean(self):
        """Return True if ``git status --porcelain`` would print nothing."""
        return not self._repo.is_dirty(index=True, working_tree=True, untracked_files=True)

    def branch_exists(self, branch_name):
        return branch_name in [head.name for head in self._repo.heads]

    def create_branch(self, branch_name):
        """Create ``branch_name`` from HEAD and check it out."""
        self._repo.git.checkout("-b", branch_name)

    def checkout(self, branch_name):
        self._repo.git.checkout(branch_name)

    def commit_all(self, message):
        """Stage everything under the work tree and commit it.

        Goes through the git CLI rather than the index API so commit hooks run.
        """
        self._repo.git.add(".")
        self._repo.git.commit("-m", message)

    def push(self, branch_name):
        """Push ``branch_name`` to origin and set it as upstream.

        Returns:
            True if push succeeded, False otherwise.
        """
        result = subprocess.run(
            ["git", "push", "--set-upstream", "origin", branch_name],
            capture_output=True,
            text=True,
            cwd=self.working_tree_dir,
        )
        if result.returncode != 0:
            print(f"Error pushing branch: {result.stderr}", file=sys.stderr)
            return False
        return True

    def pull(self):
        self._repo.git.pull()

    def add_worktree(self, worktree_path, branch_name, new_branch):
        """Add a worktree at ``worktree_path`` checked out on ``branch_name``.

        Args:
            worktree_path: Directory for the new worktree. Must not exist.
            branch_name: Branch to check out in the worktree.
            new_branch: When True, create ``branch_name`` from HEAD.
        """
        if new_branch:
            self._repo.git.worktree("add", "-b", branch_name, worktree_path)
        else:
            self._repo.git.worktree("add", worktree_path, branch_name)

    def update_submodules(self):
        """Initialize and sync all submodules, recursively, to their recorded commits."""
        self._repo.git.submodule("update", "--init", "--recursive")

    def pull_submodules(self):
        """Check out main (or master) in every submodule and pull the latest commits."""
        return self._repo.git.submodule("foreach", "--recursive", SUBMODULE_PULL_SCRIPT)

    def submodule_status(self):
        return self._repo.git.submodule("status", "--recursive")
