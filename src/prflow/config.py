"""prflow configuration: defaults plus an optional ``.prflow`` file at the repo root.

The file uses one ``key: value`` pair per line, for example::

    base_branch: develop
    worktree_bases: develop, main
    agent_command: claude
    agent_args: --dangerously-skip-permissions
    merge_method: rebase
    merge_timeout: 900
"""

import os
from dataclasses import dataclass
from typing import Tuple

from prflow import console

CONFIG_FILENAME = ".prflow"

MERGE_METHODS = ("merge", "squash", "rebase")


@dataclass(frozen=True)
class PrflowConfig:
    """Settings shared by the push-pr and worktree commands."""

    base_branch: str = "main"
    worktree_bases: Tuple[str, ...] = ("main", "master")
    agent_command: str = "claude"
    agent_args: Tuple[str, ...] = ("--dangerously-skip-permissions",)
    merge_method: str = "squash"
    delete_branch: bool = True
    merge_timeout: int = 600
    merge_poll_interval: int = 10


def _parse_bool(key, value):
    lowered = value.lower()
    if lowered in ("true", "yes", "1"):
        return True
    if lowered in ("false", "no", "0"):
        return False
    raise ValueError(f"{key}: expected true or false, got '{value}'")


def _parse_positive_int(key, value):
    try:
        number = int(value)
    except ValueError:
        raise ValueError(f"{key}: expected an integer, got '{value}'")
    if number <= 0:
        raise ValueError(f"{key}: must be positive, got {number}")
    return number


def _parse_merge_method(key, value):
    if value not in MERGE_METHODS:
        raise ValueError(f"{key}: expected one of {', '.join(MERGE_METHODS)}, got '{value}'")
    return value


def _parse_name_list(key, value):
    names = tuple(part.strip() for part in value.split(",") if part.strip())
    if not names:
        raise ValueError(f"{key}: at least one branch name is required")
    return names


_PARSERS = {
    "base_branch": lambda key, value: value,
    "worktree_bases": _parse_name_list,
    "agent_command": lambda key, value: value,
    "agent_args": lambda key, value: tuple(value.split()),
    "merge_method": _parse_merge_method,
    "delete_branch": _parse_bool,
    "merge_timeout": _parse_positive_int,
    "merge_poll_interval": _parse_positive_int,
}


def parse_config(text: str, source: str = "") -> PrflowConfig:
    """Parse ``key: value`` lines into a PrflowConfig.

    Blank lines and ``#`` comments are skipped. Unknown keys produce a
    warning and are ignored.

    Raises:
        ValueError: If a line has no ``:`` or a value is invalid. The message
            starts with ``<source>:<line>:``.
    """
    where = source or CONFIG_FILENAME
    values = {}
    for lineno, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if ":" not in line:
            raise ValueError(f"{where}:{lineno}: expected 'key: value'")
        key, value = (part.strip() for part in line.split(":", 1))
        parser = _PARSERS.get(key)
        if parser is None:
            console.notice(f"Ignoring unknown setting '{key}' in {where}")
            continue
        try:
            values[key] = parser(key, value)
        except ValueError as e:
            raise ValueError(f"{where}:{lineno}: {e}")
    return PrflowConfig(**values)


def load_config(repo_root: str) -> PrflowConfig:
    """Load ``.prflow`` from the repository root, or return defaults if absent."""
    path = os.path.join(repo_root, CONFIG_FILENAME)
    if not os.path.isfile(path):
        return PrflowConfig()
    with open(path, encoding="utf-8") as f:
        return parse_config(f.read(), source=path)
