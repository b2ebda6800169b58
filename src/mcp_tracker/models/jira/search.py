"""
Jira search result models.
"""

from pydantic import Field

from ..base import ApiModel
from .issue import JiraIssue


class JiraSearchResult(ApiModel):
    """One page of a JQL search."""

    start_at: int = Field(default=0, alias="startAt")
    max_results: int = Field(default=0, alias="maxResults")
    total: int = 0
    issues: list[JiraIssue] = Field(default_factory=list)
