"""Tests for the journal CLI."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from gitjournal.cli import HELP_MESSAGE, main
from gitjournal.config import RuntimeConfig, Settings
from gitjournal.errors import CommandFailedError, ConfigError, EditorLaunchError

URL = "git@example.com:me/journal.git"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config(tmp_path):
    return RuntimeConfig(tmp_path, URL, "07-03-2024")


@pytest.fixture(autouse=True)
def resolved(config):
    with patch("gitjournal.cli.load_settings", return_value=Settings()), \
         patch("gitjournal.cli.resolve_config", return_value=config) as mock_resolve:
        yield mock_resolve


class TestDispatch:
    def test_no_command_prints_help(self, runner, resolved):
        result = runner.invoke(main, [])

        assert result.exit_code == 0
        assert result.output.strip() == HELP_MESSAGE
        resolved.assert_called_once()

    @pytest.mark.parametrize(
        "args",
        [
            ["frobnicate", "extra", "--flag"],
            ["-x"],
            ["--nope"],
            ["-x", "save"],
        ],
    )
    def test_unknown_command_is_silent(self, runner, resolved, args):
        result = runner.invoke(main, args)

        assert result.exit_code == 0
        assert result.output == ""
        resolved.assert_called_once()

    def test_bootstrap_failure_exits_with_error(self, runner, resolved):
        resolved.side_effect = ConfigError("HOME is not set")

        result = runner.invoke(main, ["save"])

        assert result.exit_code == 1
        assert "Error: HOME is not set" in result.output


class TestWrite:
    @patch("gitjournal.cli.write_entry")
    def test_passes_editor(self, mock_write, runner, config):
        result = runner.invoke(main, ["write", "vim"])

        assert result.exit_code == 0
        mock_write.assert_called_once_with(config, "vim")

    @patch("gitjournal.cli.write_entry")
    def test_ignores_trailing_tokens(self, mock_write, runner, config):
        result = runner.invoke(main, ["write", "vim", "extra", "--flag"])

        assert result.exit_code == 0
        mock_write.assert_called_once_with(config, "vim")

    @patch("gitjournal.cli.write_entry")
    def test_falls_back_to_environment_editor(self, mock_write, runner, config, monkeypatch):
        monkeypatch.delenv("VISUAL", raising=False)
        monkeypatch.setenv("EDITOR", "nano")

        result = runner.invoke(main, ["write"])

        assert result.exit_code == 0
        mock_write.assert_called_once_with(config, "nano")

    @patch("gitjournal.cli.write_entry")
    def test_launch_failure_is_fatal(self, mock_write, runner):
        mock_write.side_effect = EditorLaunchError("vmi")

        result = runner.invoke(main, ["write", "vmi"])

        assert result.exit_code == 1
        assert 'Failed running text editor "vmi"' in result.output


class TestSave:
    @patch("gitjournal.cli.save_journal")
    def test_prints_done(self, mock_save, runner, config):
        result = runner.invoke(main, ["save"])

        assert result.exit_code == 0
        assert result.output == "Done.\n"
        mock_save.assert_called_once_with(config)

    @patch("gitjournal.cli.save_journal")
    def test_ignores_trailing_tokens(self, mock_save, runner, config):
        result = runner.invoke(main, ["save", "extra", "-m", "msg"])

        assert result.exit_code == 0
        assert result.output == "Done.\n"
        mock_save.assert_called_once_with(config)

    @patch("gitjournal.cli.save_journal")
    def test_failure_is_reported(self, mock_save, runner):
        mock_save.side_effect = CommandFailedError("git", ["commit", "-m", "x"], 1)

        result = runner.invoke(main, ["save"])

        assert result.exit_code == 1
        assert "Done." not in result.output
        assert "exited with status 1" in result.output


class TestSync:
    @patch("gitjournal.cli.sync_journal")
    def test_prints_done(self, mock_sync, runner, config):
        result = runner.invoke(main, ["sync"])

        assert result.exit_code == 0
        assert result.output == "Done.\n"
        mock_sync.assert_called_once_with(config)

    @patch("gitjournal.cli.sync_journal")
    def test_ignores_trailing_tokens(self, mock_sync, runner, config):
        result = runner.invoke(main, ["sync", "extra"])

        assert result.exit_code == 0
        assert result.output == "Done.\n"
        mock_sync.assert_called_once_with(config)


class TestOptions:
    def test_help_does_not_bootstrap(self, runner, resolved):
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "write" in result.output
        resolved.assert_not_called()

    def test_version(self, runner, resolved):
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output
        resolved.assert_not_called()
