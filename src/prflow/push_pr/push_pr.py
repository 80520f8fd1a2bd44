"""push-pr workflow: branch, commit, push, open a PR and enable auto-merge."""

import sys

from prflow import console
from prflow.push_pr.push_opts import PushPrOpts
from prflow.slug import DEFAULT_FALLBACK, generate_branch_name
from prflow.templates.template_renderer import render_template


def render_pr_body(opts: PushPrOpts, branch: str, base_branch: str) -> str:
    return render_template(
        "pr_body.j2",
        branch=branch,
        base_branch=base_branch,
        message_body=opts.message_body,
    )


def ensure_on_base_branch(git_repo, base_branch):
    current = git_repo.current_branch
    if current != base_branch:
        console.error(f"Must be on '{base_branch}' branch. Currently on '{current}'.")
        sys.exit(1)


def push_pr(opts: PushPrOpts, git_repo, gh_client, config, now=None):
    """Commit all tracked changes on a new branch and open an auto-merging PR.

    Args:
        opts: Command options.
        git_repo: GitRepository (or FakeGitRepository) positioned on the base branch.
        gh_client: GitHubClient (or FakeGitHubClient).
        config: PrflowConfig supplying base branch and merge settings.
        now: Optional datetime for the branch timestamp.

    Returns:
        The PR number, or None when nothing was pushed (no changes or dry run).
    """
    base_branch = opts.base_branch or config.base_branch
    console.notice(f"Working in: {git_repo.repo_name}")

    ensure_on_base_branch(git_repo, base_branch)

    if not git_repo.has_changes():
        console.notice("No changes to commit. Exiting.")
        return None

    branch = generate_branch_name(opts.message, fallback=DEFAULT_FALLBACK, now=now)

    if opts.dry_run:
        print(f"Branch: {branch}")
        print(f"Message: {opts.message}")
        print(f"Base: {base_branch}")
        return None

    console.progress(f"Creating branch: {branch}")
    git_repo.create_branch(branch)

    console.progress("Staging all changes and committing...")
    git_repo.commit_all(opts.message)

    console.progress("Pushing to origin...")
    if not git_repo.push(branch):
        console.error(f"Could not push {branch} to origin")
        sys.exit(1)

    console.progress("Creating PR...")
    pr_number = gh_client.create_pr(
        opts.title, render_pr_body(opts, branch, base_branch), base_branch, head=branch,
    )
    pr_url = gh_client.get_pr_url(pr_number)
    if pr_url:
        console.highlight(f"  {pr_url}")

    console.progress("Enabling auto-merge...")
    gh_client.enable_auto_merge(
        pr_number, method=config.merge_method, delete_branch=config.delete_branch,
    )

    if opts.wait:
        wait_until_merged(gh_client, pr_number, config)

    console.progress(f"Returning to {base_branch}...")
    git_repo.checkout(base_branch)
    git_repo.pull()

    if opts.wait:
        console.progress(f"Done! Changes merged to {base_branch}.")
    else:
        console.progress(f"Done! PR #{pr_number} will merge into {base_branch} once checks pass.")
    return pr_number


def wait_until_merged(gh_client, pr_number, config):
    console.progress(f"Waiting for PR #{pr_number} to merge...")
    state = gh_client.wait_for_merge(
        pr_number,
        timeout_seconds=config.merge_timeout,
        poll_interval=config.merge_poll_interval,
    )
    if state == "MERGED":
        return
    if state == "CLOSED":
        console.error(f"PR #{pr_number} was closed without merging.")
    else:
        console.error(f"PR #{pr_number} did not merge within {config.merge_timeout}s.")
        console.hint("Auto-merge is still enabled; it will merge once checks pass.")
    sys.exit(1)
