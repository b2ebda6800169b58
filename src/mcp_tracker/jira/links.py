"""Module for Jira issue link operations."""

import logging

from ..models.jira import JiraIssueLinkTypeList
from .client import JiraClient

logger = logging.getLogger("mcp-tracker.jira")


class LinksMixin(JiraClient):
    """Mixin for Jira issue link operations."""

    def link_issues(self, inward_issue: str, outward_issue: str, link_type: str) -> None:
        """
        Link two issues.

        The link type is sent by name; Jira resolves it.

        Args:
            inward_issue: Key of the inward issue
            outward_issue: Key of the outward issue
            link_type: Link type name (e.g. "Blocks", "Relates")
        """
        body = {
            "type": {"name": link_type},
            "inwardIssue": {"key": inward_issue},
            "outwardIssue": {"key": outward_issue},
        }
        self._request("POST", "/issueLink", data=body)
        logger.info(f"Linked {inward_issue} and {outward_issue} with type {link_type}")

    def get_issue_link_types(self) -> JiraIssueLinkTypeList:
        """Get all available issue link types."""
        data = self._request("GET", "/issueLinkType")
        return JiraIssueLinkTypeList.from_api_response(data)
