"""Worktree workflow: create a sibling worktree on a generated branch for parallel work."""

import os
import sys

from prflow import console
from prflow.slug import WORKTREE_FALLBACK, generate_branch_name, short_name
from prflow.worktree_cmd.agent_launcher import agent_available
from prflow.worktree_cmd.worktree_opts import WorktreeOpts


def worktree_path_for(repo_root, suffix):
    """Return the worktree directory for a repo root and suffix.

    The worktree is placed alongside the repo root directory:
        /path/to/repo -> /path/to/repo-<suffix>
    """
    parent_dir = os.path.dirname(repo_root)
    basename = os.path.basename(repo_root)
    return os.path.join(parent_dir, f"{basename}-{suffix}")


def worktree_suffix(description, branch, short_path):
    """Directory suffix: the full branch name, or a few words of the description."""
    if not short_path:
        return branch
    return short_name(description) or WORKTREE_FALLBACK


def _check_preconditions(opts, git_repo, config):
    current = git_repo.current_branch
    if current not in config.worktree_bases:
        allowed = " or ".join(f"'{name}'" for name in config.worktree_bases)
        console.error(f"Must be on {allowed} branch. Currently on '{current}'.")
        sys.exit(1)

    if not git_repo.is_clean():
        console.error("Working tree has uncommitted changes.")
        console.hint("Please commit or stash your changes before creating a worktree.")
        sys.exit(1)

    if not opts.no_agent and not agent_available(config.agent_command):
        console.error(f"'{config.agent_command}' command not found.")
        if config.agent_command == "claude":
            console.hint("Install Claude Code: npm install -g @anthropic-ai/claude-code")
        sys.exit(1)


def _resolve_description(opts, prompt_fn):
    description = opts.description
    if not description:
        description = (prompt_fn("Enter branch description") or "").strip()
    if not description:
        console.error("Branch description is required.")
        sys.exit(1)
    return description


def create_worktree(opts: WorktreeOpts, git_repo, config, prompt_fn, now=None):
    """Create a worktree on a new (or existing) generated branch.

    Args:
        opts: Command options.
        git_repo: GitRepository (or FakeGitRepository) for the main checkout.
        config: PrflowConfig with the allowed base branches and agent command.
        prompt_fn: Callable(prompt) -> str used when no description was given.
        now: Optional datetime for the branch timestamp.

    Returns:
        (branch_name, worktree_path) tuple.
    """
    console.highlight(f"Repository: {git_repo.repo_name}")

    _check_preconditions(opts, git_repo, config)
    description = _resolve_description(opts, prompt_fn)

    branch = generate_branch_name(description, fallback=WORKTREE_FALLBACK, now=now)
    suffix = worktree_suffix(description, branch, opts.short_path)
    worktree_path = worktree_path_for(git_repo.working_tree_dir, suffix)

    if os.path.exists(worktree_path):
        console.error(f"Worktree path already exists: {worktree_path}")
        console.hint("Remove it or choose a different description.")
        sys.exit(1)

    console.progress("Creating worktree...")
    console.labelled("Branch:", branch)
    console.labelled("Path:  ", worktree_path)

    if git_repo.branch_exists(branch):
        console.notice(f"Branch '{branch}' already exists, using it...")
        git_repo.add_worktree(worktree_path, branch, new_branch=False)
    else:
        git_repo.add_worktree(worktree_path, branch, new_branch=True)

    console.progress("Worktree created successfully!")
    console.labelled("Path:", worktree_path)
    return branch, worktree_path
