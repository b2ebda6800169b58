"""Test data factories for creating consistent test objects."""

import json
from typing import Any

from requests import Response


def deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Merge overrides into base, recursing into nested dictionaries."""
    result = base.copy()
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def make_response(
    status_code: int = 200, payload: Any = None, text: str | None = None
) -> Response:
    """Build a real Response with the given status and JSON (or raw text) body."""
    if text is None:
        text = "" if payload is None else json.dumps(payload)
    response = Response()
    response.status_code = status_code
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


class JiraIssueFactory:
    """Factory for creating Jira issue test data."""

    @staticmethod
    def create(key: str = "TEST-123", **overrides: Any) -> dict[str, Any]:
        """Create a Jira Server issue with default values."""
        defaults = {
            "id": "12345",
            "key": key,
            "self": f"https://jira.example.com/rest/api/2/issue/{key}",
            "fields": {
                "summary": "Test Issue Summary",
                "description": "Test issue description",
                "status": {"name": "Open", "id": "1"},
                "issuetype": {"name": "Task", "id": "10001"},
                "priority": {"name": "Medium", "id": "3"},
                "project": {"key": key.split("-")[0], "name": "Test Project"},
                "assignee": {
                    "name": "jdoe",
                    "displayName": "John Doe",
                    "emailAddress": "jdoe@example.com",
                },
                "created": "2024-01-01T12:00:00.000+0000",
                "updated": "2024-01-02T12:00:00.000+0000",
            },
        }
        return deep_merge(defaults, overrides)


class JiraProjectFactory:
    """Factory for creating Jira project test data."""

    @staticmethod
    def create(key: str = "TEST", **overrides: Any) -> dict[str, Any]:
        defaults = {
            "id": "10000",
            "key": key,
            "name": f"{key} Project",
            "projectTypeKey": "software",
            "self": f"https://jira.example.com/rest/api/2/project/{key}",
        }
        return deep_merge(defaults, overrides)
