"""CLI integration tests for prflow push-pr."""

import os
import re

import pytest
from click.testing import CliRunner
from git import Repo

from fake_github_client import FakeGitHubClient
from prflow.cli import main


@pytest.fixture
def repo_with_origin(git_repo_with_commit):
    """A repository on main whose origin is a local bare repository."""
    repo_dir, repo = git_repo_with_commit
    origin_dir = repo_dir + "-origin.git"
    Repo.init(origin_dir, bare=True)
    repo.create_remote("origin", origin_dir)
    repo.git.push("-u", "origin", "main")
    return repo_dir, repo, origin_dir


def _invoke(args, fake_gh=None):
    fake_gh = fake_gh or FakeGitHubClient()
    with pytest.MonkeyPatch.context() as mp:
        mp.setattr("prflow.push_pr.cli.GitHubClient", lambda cwd=None: fake_gh)
        result = CliRunner().invoke(main, ["push-pr"] + args)
    return result, fake_gh


@pytest.mark.unit
class TestPushPrCommandRegistered:

    def test_listed_in_main_help(self):
        result = CliRunner().invoke(main, ["--help"])
        assert "push-pr" in result.output

    def test_help_lists_options(self):
        result = CliRunner().invoke(main, ["push-pr", "--help"])
        assert result.exit_code == 0
        for option in ("--dir", "--base", "--wait", "--dry-run"):
            assert option in result.output


@pytest.mark.integration
class TestPushPrCommand:

    def test_full_flow_against_local_origin(self, repo_with_origin):
        repo_dir, repo, origin_dir = repo_with_origin
        with open(os.path.join(repo_dir, "README.md"), "w") as f:
            f.write("changed")

        result, fake_gh = _invoke(["--dir", repo_dir, "Fix the README typo"])

        assert result.exit_code == 0, result.output
        pr = fake_gh.created_prs[0]
        assert re.match(r"^\d{4}[a-z]{3}\d{2}-\d{2}-\d{2}-fix-readme-typo$", pr["head"])
        assert pr["title"] == "Fix the README typo"
        assert pr["base"] == "main"
        assert pr["head"] in [h.name for h in Repo(origin_dir).heads]
        assert repo.active_branch.name == "main"
        assert fake_gh.auto_merges == [(100, "squash", True)]

    def test_no_changes_exits_zero(self, repo_with_origin):
        repo_dir, _, _ = repo_with_origin
        result, fake_gh = _invoke(["--dir", repo_dir, "Nothing"])
        assert result.exit_code == 0
        assert "No changes to commit" in result.output
        assert fake_gh.calls == []

    def test_default_message(self, repo_with_origin):
        repo_dir, repo, _ = repo_with_origin
        with open(os.path.join(repo_dir, "README.md"), "w") as f:
            f.write("changed")
        result, fake_gh = _invoke(["--dir", repo_dir])
        assert result.exit_code == 0, result.output
        assert fake_gh.created_prs[0]["title"] == "Quick update"
        assert fake_gh.created_prs[0]["head"].endswith("-quick-update")

    def test_config_file_sets_merge_method(self, repo_with_origin):
        repo_dir, repo, _ = repo_with_origin
        with open(os.path.join(repo_dir, ".prflow"), "w") as f:
            f.write("merge_method: rebase\ndelete_branch: false\n")
        with open(os.path.join(repo_dir, "README.md"), "w") as f:
            f.write("changed")
        result, fake_gh = _invoke(["--dir", repo_dir, "Add config"])
        assert result.exit_code == 0, result.output
        assert fake_gh.auto_merges == [(100, "rebase", False)]

    def test_wrong_branch_fails(self, repo_with_origin):
        repo_dir, repo, _ = repo_with_origin
        repo.git.checkout("-b", "feature")
        result, _ = _invoke(["--dir", repo_dir, "Fix"])
        assert result.exit_code == 1
        assert "Must be on 'main' branch" in result.output

    def test_not_a_repository_fails(self, tmp_path):
        result, _ = _invoke(["--dir", str(tmp_path), "Fix"])
        assert result.exit_code == 1
        assert "Not in a git repository" in result.output

    def test_missing_directory_fails(self, tmp_path):
        result, _ = _invoke(["--dir", str(tmp_path / "nope"), "Fix"])
        assert result.exit_code == 1
        assert "Cannot cd to" in result.output

    def test_gh_failure_is_reported(self, repo_with_origin):
        repo_dir, _, _ = repo_with_origin
        with open(os.path.join(repo_dir, "README.md"), "w") as f:
            f.write("changed")

        class FailingGitHubClient(FakeGitHubClient):
            def create_pr(self, title, body, base, head=None):
                raise RuntimeError("PR creation failed: not authenticated")

        result, _ = _invoke(["--dir", repo_dir, "Fix"], fake_gh=FailingGitHubClient())
        assert result.exit_code == 1
        assert "Error: PR creation failed: not authenticated" in result.output

    def test_invalid_config_fails(self, repo_with_origin):
        repo_dir, _, _ = repo_with_origin
        with open(os.path.join(repo_dir, ".prflow"), "w") as f:
            f.write("merge_timeout: soon\n")
        result, _ = _invoke(["--dir", repo_dir, "Fix"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert ".prflow:1: merge_timeout" in result.output
