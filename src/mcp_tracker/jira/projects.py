"""Module for Jira project operations."""

import logging

from ..models.jira import (
    JiraComponent,
    JiraIssueType,
    JiraProject,
    JiraVersion,
)
from .client import JiraClient

logger = logging.getLogger("mcp-tracker.jira")


class ProjectsMixin(JiraClient):
    """Mixin for Jira project operations."""

    def get_projects(self) -> list[JiraProject]:
        """
        Get all projects visible to the current user.

        Returns:
            List of projects
        """
        data = self._request("GET", "/project")
        return [JiraProject.from_api_response(item) for item in data or []]

    def get_project(self, project_key: str) -> JiraProject:
        """
        Get one project by key.

        Args:
            project_key: The project key

        Returns:
            The project
        """
        data = self._request("GET", f"/project/{project_key}")
        return JiraProject.from_api_response(data)

    def get_project_versions(self, project_key: str) -> list[JiraVersion]:
        """Get all versions of a project (valid fixVersions/affects values)."""
        data = self._request("GET", f"/project/{project_key}/versions")
        return [JiraVersion.from_api_response(item) for item in data or []]

    def get_project_components(self, project_key: str) -> list[JiraComponent]:
        """Get all components of a project."""
        data = self._request("GET", f"/project/{project_key}/components")
        return [JiraComponent.from_api_response(item) for item in data or []]

    def get_issue_types_for_project(self, project_key: str) -> list[JiraIssueType]:
        """
        Get the issue types configured for a project.

        Args:
            project_key: The project key

        Returns:
            The project's issue types; empty when Jira omits them
        """
        data = self._request("GET", f"/project/{project_key}")
        issue_types = data.get("issueTypes") if isinstance(data, dict) else None
        return [JiraIssueType.from_api_response(item) for item in issue_types or []]
