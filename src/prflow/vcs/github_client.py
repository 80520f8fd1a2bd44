"""GitHubClient: wraps all `gh` CLI calls for pull request operations."""

import json
import subprocess
import time
from typing import Optional

COMPLETED_PR_STATES = ("MERGED", "CLOSED")


def parse_pr_number(url: str) -> int:
    """Extract the PR number from a URL like https://github.com/owner/repo/pull/55."""
    try:
        return int(url.strip().rstrip("/").split("/")[-1])
    except (ValueError, IndexError):
        raise RuntimeError(f"Could not parse PR number from: {url}")


class GitHubClient:
    """Wraps GitHub CLI (gh) calls for PR operations.

    All subprocess calls go through _run_gh() for consistency.

    Args:
        cwd: Directory the gh commands run in, so gh resolves the right repository.
    """

    def __init__(self, cwd: Optional[str] = None):
        self._cwd = cwd

    def _run_gh(self, args, **kwargs):
        return subprocess.run(
            args,
            capture_output=True,
            text=True,
            cwd=self._cwd,
            **kwargs,
        )

    def create_pr(self, title: str, body: str, base: str, head: Optional[str] = None) -> int:
        args = ["gh", "pr", "create", "--title", title, "--body", body, "--base", base]
        if head:
            args.extend(["--head", head])
        result = self._run_gh(args)
        if result.returncode != 0:
            raise RuntimeError(f"PR creation failed: {result.stderr}")
        return parse_pr_number(result.stdout)

    def enable_auto_merge(
        self, pr_number: int, method: str = "squash", delete_branch: bool = True,
    ) -> None:
        args = ["gh", "pr", "merge", str(pr_number), "--auto", f"--{method}"]
        if delete_branch:
            args.append("--delete-branch")
        result = self._run_gh(args)
        if result.returncode != 0:
            raise RuntimeError(f"Enabling auto-merge failed: {result.stderr}")

    def get_pr_state(self, pr_number: int) -> str:
        result = self._run_gh(
            ["gh", "pr", "view", str(pr_number), "--json", "state"]
        )
        if result.returncode != 0:
            return ""
        data = json.loads(result.stdout)
        return data.get("state", "")

    def get_pr_url(self, pr_number: int) -> str:
        result = self._run_gh(
            ["gh", "pr", "view", str(pr_number), "--json", "url", "--jq", ".url"]
        )
        if result.returncode != 0:
            return ""
        return result.stdout.strip()

    def wait_for_merge(
        self, pr_number: int, timeout_seconds: int = 600, poll_interval: int = 10,
    ) -> str:
        """Poll the PR until it is merged or closed.

        Returns:
            The last observed state. "MERGED" or "CLOSED" when the PR
            completed, anything else when the timeout elapsed first.
        """
        start_time = time.time()
        last_state = None
        while True:
            state = self.get_pr_state(pr_number)
            if state in COMPLETED_PR_STATES:
                return state
            if state != last_state:
                print(f"  PR #{pr_number} is {state or 'unknown'}, waiting for merge...")
                last_state = state
            if time.time() - start_time >= timeout_seconds:
                print(f"Timeout waiting for PR #{pr_number} to merge after {timeout_seconds}s")
                return state
            time.sleep(poll_interval)
