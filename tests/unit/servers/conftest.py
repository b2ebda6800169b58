"""Fixtures for the MCP-facing layer."""

from unittest.mock import MagicMock

import pytest

from mcp_tracker.jira import JiraConfig, JiraFetcher


@pytest.fixture
def mock_jira_fetcher():
    """A JiraFetcher double; every method is a MagicMock with the real signature."""
    return MagicMock(spec=JiraFetcher)


@pytest.fixture
def jira_config():
    return JiraConfig(url="https://jira.example.com/", personal_token="token")
