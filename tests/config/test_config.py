"""Tests for the .prflow configuration file."""

import pytest

from prflow.config import PrflowConfig, load_config, parse_config


@pytest.mark.unit
class TestDefaults:

    def test_defaults_match_main_branch_workflow(self):
        config = PrflowConfig()
        assert config.base_branch == "main"
        assert config.worktree_bases == ("main", "master")
        assert config.agent_command == "claude"
        assert config.agent_args == ("--dangerously-skip-permissions",)
        assert config.merge_method == "squash"
        assert config.delete_branch is True

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(str(tmp_path)) == PrflowConfig()


@pytest.mark.unit
class TestParseConfig:

    def test_parses_all_keys(self):
        config = parse_config(
            "base_branch: develop\n"
            "worktree_bases: develop, main\n"
            "agent_command: aider\n"
            "agent_args: --yes --no-git\n"
            "merge_method: rebase\n"
            "delete_branch: no\n"
            "merge_timeout: 900\n"
            "merge_poll_interval: 5\n"
        )
        assert config.base_branch == "develop"
        assert config.worktree_bases == ("develop", "main")
        assert config.agent_command == "aider"
        assert config.agent_args == ("--yes", "--no-git")
        assert config.merge_method == "rebase"
        assert config.delete_branch is False
        assert config.merge_timeout == 900
        assert config.merge_poll_interval == 5

    def test_skips_comments_and_blank_lines(self):
        assert parse_config("# settings\n\nbase_branch: trunk\n").base_branch == "trunk"

    def test_empty_agent_args(self):
        assert parse_config("agent_args:\n").agent_args == ()

    def test_unknown_key_warns(self, capsys):
        config = parse_config("colour: blue\n")
        assert config == PrflowConfig()
        assert "Ignoring unknown setting 'colour'" in capsys.readouterr().out

    @pytest.mark.parametrize("text, message", [
        ("merge_method: octopus\n", "merge_method"),
        ("merge_timeout: soon\n", "expected an integer"),
        ("merge_poll_interval: 0\n", "must be positive"),
        ("delete_branch: maybe\n", "expected true or false"),
        ("worktree_bases: , ,\n", "at least one branch"),
        ("just some text\n", "expected 'key: value'"),
    ])
    def test_invalid_values_raise(self, text, message):
        with pytest.raises(ValueError, match=message):
            parse_config(text)

    def test_load_config_reads_file(self, tmp_path):
        (tmp_path / ".prflow").write_text("base_branch: release\n")
        config = load_config(str(tmp_path))
        assert config.base_branch == "release"

    def test_load_config_errors_name_file_and_line(self, tmp_path):
        path = tmp_path / ".prflow"
        path.write_text("base_branch: release\nmerge_timeout: soon\n")
        with pytest.raises(ValueError) as exc_info:
            load_config(str(tmp_path))
        assert str(exc_info.value).startswith(f"{path}:2: merge_timeout:")

    def test_parse_errors_default_to_config_filename(self):
        with pytest.raises(ValueError, match=r"^\.prflow:1: delete_branch"):
            parse_config("delete_branch: maybe\n")

