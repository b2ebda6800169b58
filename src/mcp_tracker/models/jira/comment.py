"""
Jira comment models.
"""

from pydantic import Field

from ..base import ApiModel
from .common import JiraUser


class JiraComment(ApiModel):
    """
    Model representing a Jira issue comment.

    Server/Data Center bodies are plain wiki-markup strings.
    """

    id: str | None = None
    body: str | None = None
    author: JiraUser | None = None
    created: str | None = None
    updated: str | None = None


class JiraCommentPage(ApiModel):
    """The paged comment list returned for an issue."""

    comments: list[JiraComment] = Field(default_factory=list)
    total: int | None = None
    start_at: int | None = Field(default=None, alias="startAt")
    max_results: int | None = Field(default=None, alias="maxResults")
