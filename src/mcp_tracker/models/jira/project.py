"""
Jira project models.
"""

from pydantic import Field

from ..base import ApiModel
from .common import JiraIssueType, JiraUser


class JiraVersion(ApiModel):
    """A project version, used for fixVersions and affects versions."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    released: bool | None = None
    archived: bool | None = None


class JiraComponent(ApiModel):
    """A project component."""

    id: str | None = None
    name: str | None = None
    description: str | None = None


class JiraProject(ApiModel):
    """A Jira project."""

    id: str | None = None
    key: str | None = None
    name: str | None = None
    project_type_key: str | None = Field(default=None, alias="projectTypeKey")
    lead: JiraUser | None = None
    issue_types: list[JiraIssueType] | None = Field(default=None, alias="issueTypes")
