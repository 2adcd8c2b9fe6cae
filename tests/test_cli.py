"""Tests for gittr.cli module."""

import yaml
from typer.testing import CliRunner

from gittr.catalog import FetchError
from gittr.cli import app
from gittr.config import ConfigWriteError
from gittr.git import GitError
from gittr.prompts import PromptCancelled


runner = CliRunner()


class TestRootCommand:
    """Tests for the root callback."""

    def test_version_flag(self, config_dir):
        """Test --version prints name and version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert result.output.startswith("gittr - ")

    def test_no_command_shows_help(self, config_dir):
        """Test that running bare gittr shows the commands."""
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "reconfig" in result.output
        assert "search" in result.output

    def test_version_command(self, config_dir):
        """Test the version subcommand."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "gittr - " in result.output

    def test_version_command_does_not_touch_config(self, config_dir, mocker):
        """Test that version neither writes preferences nor fails on an unwritable config."""
        mocker.patch("gittr.cli.commands.Gittr", side_effect=ConfigWriteError("read-only"))

        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert result.output.startswith("gittr - ")
        assert not (config_dir / "config.yaml").exists()


class TestReconfigCommand:
    """Tests for gittr reconfig."""

    def test_saves_answers(self, config_dir):
        """Test answering all four questions."""
        result = runner.invoke(app, ["reconfig"], input="n\n2\ny\nn\n")

        assert result.exit_code == 0
        assert "Preferences saved" in result.output
        content = yaml.safe_load((config_dir / "config.yaml").read_text())
        assert content == {
            "add_all_files": False,
            "emoji_format": "unicode",
            "sign_commit": True,
            "udacity_style_commit": False,
        }

    def test_accepts_defaults(self, config_dir):
        """Test that pressing enter keeps the defaults."""
        result = runner.invoke(app, ["reconfig"], input="\n\n\n\n")

        assert result.exit_code == 0
        content = yaml.safe_load((config_dir / "config.yaml").read_text())
        assert content["emoji_format"] == "markdown"
        assert content["udacity_style_commit"] is True

    def test_abort_leaves_preferences(self, config_dir):
        """Test that running out of input writes nothing new."""
        runner.invoke(app, ["list"])
        before = (config_dir / "config.yaml").read_text()

        result = runner.invoke(app, ["reconfig"], input="n\n2\n")

        assert result.exit_code == 1
        assert "Aborted" in result.output
        assert (config_dir / "config.yaml").read_text() == before

    def test_write_error(self, config_dir, mocker):
        """Test that an unwritable config is reported."""
        mocker.patch("gittr.cli.commands.Gittr", side_effect=ConfigWriteError("read-only"))

        result = runner.invoke(app, ["reconfig"])

        assert result.exit_code == 1
        assert "Error saving configuration" in result.output


class TestSearchCommand:
    """Tests for gittr search."""

    def test_prints_selection(self, config_dir, mocker):
        """Test that the chosen emoji is printed."""
        mocker.patch("gittr.prompts.selector.toolkit_prompt", return_value="tada")

        result = runner.invoke(app, ["search"])

        assert result.exit_code == 0
        assert "Emoji: :tada:" in result.output

    def test_no_match(self, config_dir, mocker):
        """Test that an unmatched search exits with an error."""
        mocker.patch("gittr.prompts.selector.toolkit_prompt", return_value="qwertyuiop")

        result = runner.invoke(app, ["search"])

        assert result.exit_code == 1
        assert "No emoji matches" in result.output


class TestListCommand:
    """Tests for gittr list."""

    def test_lists_bundled_catalog(self, config_dir):
        """Test that the bundled emojis are listed."""
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert ":tada:" in result.output
        assert "emoji(s) available." in result.output


class TestUpdateCommand:
    """Tests for gittr update."""

    def test_reports_count(self, config_dir, mocker, sample_emojis):
        """Test a successful update."""
        mocker.patch("gittr.catalog.provider.EmojiCatalog.get", return_value=sample_emojis)

        result = runner.invoke(app, ["update"])

        assert result.exit_code == 0
        assert "3 emoji(s)" in result.output

    def test_fetch_error_warns(self, config_dir, mocker):
        """Test that a failed update warns and keeps the current list."""
        mocker.patch("gittr.cli.commands.Gittr.update", side_effect=FetchError("offline"))

        result = runner.invoke(app, ["update"])

        assert result.exit_code == 1
        assert "Warning: offline" in result.output
        assert "Keeping the current list" in result.output


class TestCommitCommand:
    """Tests for gittr commit."""

    def test_commits(self, config_dir, mocker, temp_dir):
        """Test the full commit flow with mocked git."""
        mocker.patch("gittr.prompts.commit.get_repo_root", return_value=temp_dir)
        mocker.patch("gittr.prompts.selector.toolkit_prompt", return_value="bug")
        mock_stage = mocker.patch("gittr.prompts.commit.stage_all")
        mock_commit = mocker.patch("gittr.prompts.commit.git_commit", return_value="[main 1a2b3c] fix: :bug: Fix crash")

        result = runner.invoke(app, ["commit"], input="2\nfix crash\ny\n")

        assert result.exit_code == 0
        mock_stage.assert_called_once()
        mock_commit.assert_called_once_with("fix: :bug: Fix crash", sign=False)
        assert "[main 1a2b3c]" in result.output

    def test_git_error(self, config_dir, mocker):
        """Test that git failures are reported."""
        mocker.patch("gittr.cli.commands.Gittr.commit", side_effect=GitError("not a repo"))

        result = runner.invoke(app, ["commit"])

        assert result.exit_code == 1
        assert "Git error: not a repo" in result.output

    def test_cancelled(self, config_dir, mocker):
        """Test that a cancelled commit exits with an error."""
        mocker.patch("gittr.cli.commands.Gittr.commit", side_effect=PromptCancelled("Commit cancelled."))

        result = runner.invoke(app, ["commit"])

        assert result.exit_code == 1
        assert "Commit cancelled." in result.output


class TestConfigShowCommand:
    """Tests for gittr config show."""

    def test_no_config(self, config_dir):
        """Test message when nothing has been saved."""
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "gittr reconfig" in result.output

    def test_shows_values(self, config_dir):
        """Test that stored values are listed."""
        runner.invoke(app, ["list"])

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "add_all_files: True" in result.output
        assert "emoji_format: markdown" in result.output

    def test_path(self, config_dir):
        """Test printing the config file path."""
        result = runner.invoke(app, ["config", "path"])

        assert result.exit_code == 0
        assert "config.yaml" in result.output
