"""Module for Jira transition operations."""

import logging
from typing import Any

from ..models.jira import JiraTransitionList
from .client import JiraClient

logger = logging.getLogger("mcp-tracker.jira")


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    def get_transitions(self, issue_key: str) -> JiraTransitionList:
        """
        Get the transitions available from the issue's current status.

        Args:
            issue_key: The issue key

        Returns:
            The transitions envelope
        """
        data = self._request("GET", f"/issue/{issue_key}/transitions")
        return JiraTransitionList.from_api_response(data)

    def transition_issue(
        self, issue_key: str, transition_id: str, comment: str | None = None
    ) -> None:
        """
        Move an issue through a workflow transition.

        Args:
            issue_key: The issue key
            transition_id: Id of one of the available transitions
            comment: Optional comment added as part of the transition
        """
        body: dict[str, Any] = {"transition": {"id": transition_id}}
        if comment:
            body["update"] = {"comment": [{"add": {"body": comment}}]}

        self._request("POST", f"/issue/{issue_key}/transitions", data=body)
        logger.info(f"Transitioned issue {issue_key} with transition {transition_id}")
