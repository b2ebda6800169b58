"""Module for Jira issue operations."""

import logging
from typing import Any

from ..models.jira import JiraIssue
from .client import JiraClient
from .utils import build_issue_fields

logger = logging.getLogger("mcp-tracker.jira")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def get_issue(self, issue_key: str, expand: list[str] | None = None) -> JiraIssue:
        """
        Get a Jira issue by key.

        Args:
            issue_key: The issue key (e.g. PROJ-123)
            expand: Optional expansions, sent comma-joined

        Returns:
            JiraIssue model with the issue data

        Raises:
            TrackerApiError: If Jira rejects the request
        """
        params = {"expand": ",".join(expand)} if expand else None
        data = self._request("GET", f"/issue/{issue_key}", params=params)
        return JiraIssue.from_api_response(data)

    def create_issue(
        self,
        project_key: str,
        summary: str,
        issue_type: str,
        description: str | None = None,
        priority: str | None = None,
        assignee: str | None = None,
        labels: list[str] | None = None,
    ) -> JiraIssue:
        """
        Create a new issue from named parameters.

        Parameters that are absent or empty are left out of the payload.

        Args:
            project_key: The key of the project
            summary: Issue summary
            issue_type: Issue type name (Bug, Task, Story, ...)
            description: Issue description
            priority: Priority name
            assignee: Assignee username
            labels: Labels

        Returns:
            The created issue as returned by Jira (id, key, self)
        """
        fields = build_issue_fields(
            {
                "project": {"key": project_key},
                "summary": summary,
                "issuetype": {"name": issue_type},
            },
            description=description,
            priority=priority,
            assignee=assignee,
            labels=labels,
        )
        return self.create_issue_raw(fields)

    def create_issue_raw(self, fields: dict[str, Any]) -> JiraIssue:
        """
        Create a new issue from a pre-built fields map.

        Args:
            fields: The complete `fields` map

        Returns:
            The created issue as returned by Jira (id, key, self)
        """
        data = self._request("POST", "/issue", data={"fields": fields})
        issue = JiraIssue.from_api_response(data)
        logger.info(f"Created issue {issue.key}")
        return issue

    def update_issue(
        self,
        issue_key: str,
        summary: str | None = None,
        description: str | None = None,
        priority: str | None = None,
        assignee: str | None = None,
        labels: list[str] | None = None,
    ) -> None:
        """
        Update an issue, sending only the given fields.

        Args:
            issue_key: The issue key
            summary: New summary
            description: New description
            priority: New priority name
            assignee: New assignee username
            labels: New labels
        """
        fields = build_issue_fields(
            summary=summary,
            description=description,
            priority=priority,
            assignee=assignee,
            labels=labels,
        )
        self.update_issue_raw(issue_key, fields)

    def update_issue_raw(self, issue_key: str, fields: dict[str, Any]) -> None:
        """
        Update an issue with a pre-built fields map.

        Args:
            issue_key: The issue key
            fields: The fields to change; anything absent is left untouched
        """
        self._request("PUT", f"/issue/{issue_key}", data={"fields": fields})
        logger.info(f"Updated issue {issue_key}")

    def delete_issue(self, issue_key: str) -> None:
        """Delete an issue."""
        self._request("DELETE", f"/issue/{issue_key}")
        logger.info(f"Deleted issue {issue_key}")

    def assign_issue(self, issue_key: str, assignee: str | None) -> None:
        """
        Assign an issue, or unassign it when assignee is None.

        The body always carries the `name` key; None goes out as JSON null.

        Args:
            issue_key: The issue key
            assignee: Username, or None to unassign
        """
        self._request("PUT", f"/issue/{issue_key}/assignee", data={"name": assignee})

    def get_edit_meta(self, issue_key: str) -> dict[str, Any]:
        """
        Get the editable fields and allowed values of an existing issue.

        Args:
            issue_key: The issue key

        Returns:
            The raw editmeta response
        """
        return self._request("GET", f"/issue/{issue_key}/editmeta")
