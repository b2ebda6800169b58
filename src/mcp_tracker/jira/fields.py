"""Module for Jira field, priority and status lookups."""

from ..models.jira import JiraField, JiraPriority, JiraStatus
from .client import JiraClient


class FieldsMixin(JiraClient):
    """Mixin for Jira field definitions and global lookups."""

    def get_fields(self) -> list[JiraField]:
        """
        Get all field definitions, system and custom.

        Returns:
            Field definitions with id, name, custom flag and schema
        """
        data = self._request("GET", "/field")
        return [JiraField.from_api_response(item) for item in data or []]

    def get_priorities(self) -> list[JiraPriority]:
        """Get all issue priorities."""
        data = self._request("GET", "/priority")
        return [JiraPriority.from_api_response(item) for item in data or []]

    def get_statuses(self) -> list[JiraStatus]:
        """Get all issue statuses."""
        data = self._request("GET", "/status")
        return [JiraStatus.from_api_response(item) for item in data or []]
