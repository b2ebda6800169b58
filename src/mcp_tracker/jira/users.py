"""Module for Jira user operations."""

from ..models.jira import JiraUser
from .client import JiraClient


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    def search_users(self, query: str) -> list[JiraUser]:
        """
        Search users by username, name or email.

        Args:
            query: The search string

        Returns:
            Matching users
        """
        data = self._request("GET", "/user/search", params={"username": query})
        return [JiraUser.from_api_response(item) for item in data or []]

    def get_current_user(self) -> JiraUser:
        """Get the user the token belongs to."""
        data = self._request("GET", "/myself")
        return JiraUser.from_api_response(data)
