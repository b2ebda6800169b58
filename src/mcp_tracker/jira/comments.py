"""Module for Jira comment operations."""

import logging

from ..models.jira import JiraComment, JiraCommentPage
from .client import JiraClient

logger = logging.getLogger("mcp-tracker.jira")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    def get_comments(self, issue_key: str) -> JiraCommentPage:
        """
        Get the comments of an issue.

        Args:
            issue_key: The issue key

        Returns:
            The comment page as returned by Jira
        """
        data = self._request("GET", f"/issue/{issue_key}/comment")
        return JiraCommentPage.from_api_response(data)

    def add_comment(self, issue_key: str, body: str) -> JiraComment:
        """
        Add a comment to an issue.

        Args:
            issue_key: The issue key
            body: Comment text (wiki markup)

        Returns:
            The created comment
        """
        data = self._request("POST", f"/issue/{issue_key}/comment", data={"body": body})
        return JiraComment.from_api_response(data)

    def update_comment(self, issue_key: str, comment_id: str, body: str) -> JiraComment:
        """
        Replace the body of an existing comment.

        Args:
            issue_key: The issue key
            comment_id: The comment id
            body: New comment text

        Returns:
            The updated comment
        """
        data = self._request(
            "PUT", f"/issue/{issue_key}/comment/{comment_id}", data={"body": body}
        )
        return JiraComment.from_api_response(data)

    def delete_comment(self, issue_key: str, comment_id: str) -> None:
        """Delete a comment from an issue."""
        self._request("DELETE", f"/issue/{issue_key}/comment/{comment_id}")
        logger.info(f"Deleted comment {comment_id} from {issue_key}")
