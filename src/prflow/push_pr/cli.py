"""Click command for the push-pr workflow."""

import click

from prflow.command_support import exit_on_failure, load_repo_config, open_repository
from prflow.push_pr.push_opts import DEFAULT_MESSAGE, PushPrOpts
from prflow.push_pr.push_pr import push_pr
from prflow.vcs.github_client import GitHubClient


@click.command("push-pr")
@click.argument("message", required=False)
@click.option("--dir", "directory", default=".", help="Run in this directory (e.g. a submodule).")
@click.option("--base", "base_branch", default=None, help="Base branch for the PR (default: main).")
@click.option("--wait", is_flag=True, help="Poll the PR until it has merged before returning.")
@click.option("--dry-run", is_flag=True, help="Show the branch that would be created and stop.")
def push_pr_cmd(message, directory, base_branch, wait, dry_run):
    """Commit all changes on a new branch, push it, open a PR and enable auto-merge.

    The branch name is generated from MESSAGE, e.g. 2026jan12-16-43-fix-auth-bug.
    """
    opts = PushPrOpts(
        message=message or DEFAULT_MESSAGE,
        directory=directory,
        base_branch=base_branch,
        wait=wait,
        dry_run=dry_run,
    )
    git_repo = open_repository(opts.directory)
    config = load_repo_config(git_repo)
    gh_client = GitHubClient(cwd=git_repo.working_tree_dir)
    with exit_on_failure():
        push_pr(opts, git_repo, gh_client, config)
