"""
Jira workflow transition models.
"""

from pydantic import Field

from ..base import ApiModel
from .common import JiraStatus


class JiraTransition(ApiModel):
    """A transition available from the issue's current status."""

    id: str | None = None
    name: str | None = None
    to: JiraStatus | None = None


class JiraTransitionList(ApiModel):
    """The transitions envelope returned for an issue."""

    transitions: list[JiraTransition] = Field(default_factory=list)
