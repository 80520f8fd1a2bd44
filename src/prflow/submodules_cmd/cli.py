"""Click command for syncing submodules."""

import click

from prflow.command_support import exit_on_failure, open_repository
from prflow.submodules_cmd.submodules import update_submodules


@click.command("update-submodules")
@click.option("--dir", "directory", default=".", help="Repository to update (default: current directory).")
@click.option("--pull", is_flag=True,
              help="Also pull latest commits for each submodule (default: sync to recorded commits).")
def update_submodules_cmd(directory, pull):
    """Update all git submodules, including nested ones."""
    git_repo = open_repository(directory)
    with exit_on_failure():
        update_submodules(git_repo, pull=pull)
