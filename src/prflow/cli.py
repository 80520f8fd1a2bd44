"""Top-level Click group for the prflow CLI."""

import click

from prflow.name_cmd import name_group
from prflow.push_pr.cli import push_pr_cmd
from prflow.submodules_cmd.cli import update_submodules_cmd
from prflow.worktree_cmd.cli import worktree_cmd


@click.group()
def main():
    """prflow - pull request and worktree helpers for git/GitHub workflows."""


main.add_command(push_pr_cmd)
main.add_command(worktree_cmd)
main.add_command(update_submodules_cmd)
main.add_command(name_group)
