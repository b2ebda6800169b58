"""Tests for the command-line entry point."""

import os
from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from mcp_tracker import main


def test_main_exits_when_configuration_missing():
    runner = CliRunner()
    with (
        patch.dict(os.environ, {}, clear=True),
        patch("mcp_tracker.setup_logger"),
        patch("mcp_tracker.load_dotenv"),
        patch("mcp_tracker.server.run_server", new_callable=AsyncMock) as mock_run,
    ):
        result = runner.invoke(main, [])

    assert result.exit_code == 1
    mock_run.assert_not_called()


def test_main_runs_server_with_cli_overrides():
    runner = CliRunner()
    with (
        patch.dict(os.environ, {}, clear=True),
        patch("mcp_tracker.setup_logger"),
        patch("mcp_tracker.load_dotenv"),
        patch("mcp_tracker.server.run_server", new_callable=AsyncMock) as mock_run,
    ):
        result = runner.invoke(
            main,
            [
                "--jira-url",
                "https://jira.example.com",
                "--jira-personal-token",
                "secret",
                "--transport",
                "sse",
                "--port",
                "9000",
                "--read-only",
                "--no-jira-ssl-verify",
            ],
        )

        assert os.environ["JIRA_BASE_URL"] == "https://jira.example.com"
        assert os.environ["PAT"] == "secret"
        assert os.environ["READ_ONLY_MODE"] == "true"
        assert os.environ["JIRA_SSL_VERIFY"] == "false"

    assert result.exit_code == 0, result.output
    mock_run.assert_awaited_once_with(transport="sse", port=9000)


def test_main_loads_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("JIRA_BASE_URL=https://jira.example.com\nPAT=secret\n")
    runner = CliRunner()
    with (
        patch.dict(os.environ, {}, clear=True),
        patch("mcp_tracker.setup_logger"),
        patch("mcp_tracker.server.run_server", new_callable=AsyncMock) as mock_run,
    ):
        result = runner.invoke(main, ["--env-file", str(env_file)])

    assert result.exit_code == 0, result.output
    mock_run.assert_awaited_once_with(transport="stdio", port=8000)
