"""Options dataclass for the push-pr command."""

from dataclasses import dataclass

DEFAULT_MESSAGE = "Quick update"


@dataclass
class PushPrOpts:
    """All options for the push-pr command."""

    message: str = DEFAULT_MESSAGE
    directory: str = "."
    base_branch: str | None = None
    wait: bool = False
    dry_run: bool = False

    @property
    def title(self) -> str:
        """First line of the commit message, used as the PR title."""
        lines = self.message.strip().splitlines()
        return lines[0].strip() if lines else DEFAULT_MESSAGE

    @property
    def message_body(self) -> str:
        """Commit message lines after the first, used in the PR body."""
        lines = self.message.strip().splitlines()
        return "\n".join(lines[1:]).strip()
