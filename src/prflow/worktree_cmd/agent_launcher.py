"""Hand the terminal over to the coding agent inside a worktree."""

import os
import shutil
import sys

from prflow import console


def agent_available(command):
    return shutil.which(command) is not None


def launch_agent(worktree_path, command, args, chdir=None, execvp=None):
    """Replace the current process with ``command`` running in ``worktree_path``.

    Does not return on success.

    Args:
        worktree_path: Directory the agent starts in.
        command: Agent executable, looked up on PATH.
        args: Extra arguments passed to the agent.
        chdir: Directory-change function, defaults to os.chdir.
        execvp: Process-replacement function, defaults to os.execvp.
    """
    chdir = chdir or os.chdir
    execvp = execvp or os.execvp
    console.progress(f"Launching {command}...")
    chdir(worktree_path)
    try:
        execvp(command, [command, *args])
    except OSError as e:
        console.error(f"Could not start '{command}': {e}")
        sys.exit(1)
