"""Helpers for inspecting calls made to the mocked atlassian client."""

from typing import Any
from unittest.mock import MagicMock


def sent_request(mock_jira: MagicMock, index: int = -1) -> dict[str, Any]:
    """Return the keyword arguments of one recorded `request` call."""
    return mock_jira.request.call_args_list[index].kwargs


def sent_paths(mock_jira: MagicMock) -> list[tuple[str, str]]:
    """Return (method, path) of every recorded `request` call, in order."""
    return [
        (call.kwargs["method"], call.kwargs["path"])
        for call in mock_jira.request.call_args_list
    ]
