"""Click command for the worktree workflow."""

import click

from prflow import console
from prflow.command_support import exit_on_failure, load_repo_config, open_repository
from prflow.worktree_cmd.agent_launcher import launch_agent
from prflow.worktree_cmd.worktree import create_worktree
from prflow.worktree_cmd.worktree_opts import WorktreeOpts


def _prompt_description(prompt):
    return click.prompt(prompt, default="", show_default=False)


@click.command("worktree")
@click.argument("description", required=False)
@click.option("--dir", "directory", default=".", help="Run in this directory instead of the current one.")
@click.option("--no-agent", "--no-claude", "no_agent", is_flag=True,
              help="Only create the worktree, don't launch the coding agent.")
@click.option("--short-path", is_flag=True,
              help="Name the worktree directory after a few description words instead of the full branch.")
def worktree_cmd(description, directory, no_agent, short_path):
    """Create a git worktree on a generated branch and launch the coding agent in it.

    \b
    Examples:
      prflow worktree "fix auth bug"
      prflow worktree --dir /path/to/repo "add new feature"
      prflow worktree --no-agent "refactor database"
    """
    opts = WorktreeOpts(
        description=description,
        directory=directory,
        no_agent=no_agent,
        short_path=short_path,
    )
    git_repo = open_repository(opts.directory)
    config = load_repo_config(git_repo)
    with exit_on_failure():
        _, worktree_path = create_worktree(opts, git_repo, config, _prompt_description)

    if opts.no_agent:
        console.progress("Done. To enter the worktree:")
        click.echo(f"  cd {worktree_path}")
        return
    launch_agent(worktree_path, config.agent_command, config.agent_args)
