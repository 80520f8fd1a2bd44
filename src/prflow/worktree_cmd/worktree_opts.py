"""Options dataclass for the worktree command."""

from dataclasses import dataclass


@dataclass
class WorktreeOpts:
    """All options for the worktree command."""

    description: str | None = None
    directory: str = "."
    no_agent: bool = False
    short_path: bool = False
