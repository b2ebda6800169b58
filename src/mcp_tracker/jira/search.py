"""Module for Jira search operations."""

import logging

from ..models.jira import JiraSearchResult
from .client import JiraClient
from .constants import DEFAULT_SEARCH_FIELDS, DEFAULT_SEARCH_MAX_RESULTS

logger = logging.getLogger("mcp-tracker.jira")


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(
        self,
        jql: str,
        start_at: int = 0,
        max_results: int = DEFAULT_SEARCH_MAX_RESULTS,
        fields: list[str] | None = None,
    ) -> JiraSearchResult:
        """
        Search for issues using JQL.

        One POST is sent; no further pages are fetched.

        Args:
            jql: JQL query string, passed through as-is
            start_at: Index of the first result
            max_results: Page size
            fields: Fields to return; a fixed default set when not given

        Returns:
            JiraSearchResult with the page of issues and the total count
        """
        body = {
            "jql": jql,
            "startAt": start_at,
            "maxResults": max_results,
            "fields": fields if fields else DEFAULT_SEARCH_FIELDS,
        }
        data = self._request("POST", "/search", data=body)
        result = JiraSearchResult.from_api_response(data)
        logger.debug(
            f"Search returned {len(result.issues)} of {result.total} issues for JQL: {jql}"
        )
        return result
