"""Jira watcher management."""

import logging

from .client import JiraClient

logger = logging.getLogger("mcp-tracker.jira")


class WatchersMixin(JiraClient):
    """Mixin for Jira watcher operations."""

    def add_watcher(self, issue_key: str, username: str) -> None:
        """
        Add a watcher to a Jira issue.

        The body is the bare username as a JSON string.

        Args:
            issue_key: The key of the issue (e.g., 'PROJ-123')
            username: The username to add as a watcher
        """
        self._request("POST", f"/issue/{issue_key}/watchers", data=username)
        logger.info(f"Added watcher {username} to {issue_key}")

    def remove_watcher(self, issue_key: str, username: str) -> None:
        """
        Remove a watcher from a Jira issue.

        Args:
            issue_key: The key of the issue (e.g., 'PROJ-123')
            username: The username to remove
        """
        self._request(
            "DELETE", f"/issue/{issue_key}/watchers", params={"username": username}
        )
        logger.info(f"Removed watcher {username} from {issue_key}")
