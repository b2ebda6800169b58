"""
Test fixtures for Jira unit tests.

The atlassian client is replaced by a MagicMock whose `request` returns
real `requests.Response` objects, so the status handling of JiraClient
runs for real.
"""

from unittest.mock import MagicMock

import pytest

from mcp_tracker.jira import JiraFetcher
from mcp_tracker.jira.config import JiraConfig
from tests.utils.factories import make_response


@pytest.fixture
def jira_config_factory():
    """
    Factory for creating JiraConfig instances with customizable options.

    Example:
        def test_config(jira_config_factory):
            config = jira_config_factory(url="https://jira.other.com")
    """

    def _create_config(**overrides):
        defaults = {
            "url": "https://jira.example.com",
            "personal_token": "test-personal-token",
        }
        return JiraConfig(**{**defaults, **overrides})

    return _create_config


@pytest.fixture
def mock_config(jira_config_factory):
    """Create a standard JiraConfig instance."""
    return jira_config_factory()


@pytest.fixture
def mock_atlassian_jira():
    """
    Mock of the atlassian Jira client.

    Answers every request with an empty 204 unless a test configures
    `request.return_value` or `request.side_effect`.
    """
    mock_jira = MagicMock()
    mock_jira.request.return_value = make_response(204)
    return mock_jira


@pytest.fixture
def jira_fetcher(mock_config, mock_atlassian_jira):
    """Create a JiraFetcher with the atlassian client mocked out."""
    fetcher = JiraFetcher(config=mock_config)
    fetcher.jira = mock_atlassian_jira
    return fetcher
