"""
Common Jira entity models.

Small reference objects embedded in issues, projects and comments.
"""

from pydantic import Field

from ..base import ApiModel


class JiraUser(ApiModel):
    """A Jira Server/Data Center user; addressed by `name` (the username)."""

    key: str | None = None
    name: str | None = None
    email_address: str | None = Field(default=None, alias="emailAddress")
    display_name: str | None = Field(default=None, alias="displayName")
    active: bool | None = None
    self_url: str | None = Field(default=None, alias="self")


class JiraStatus(ApiModel):
    """An issue status."""

    id: str | None = None
    name: str | None = None
    description: str | None = None


class JiraPriority(ApiModel):
    """An issue priority."""

    id: str | None = None
    name: str | None = None


class JiraIssueType(ApiModel):
    """An issue type (Bug, Task, Story, ...)."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    subtask: bool | None = None


class JiraProjectRef(ApiModel):
    """The project reference embedded in an issue."""

    id: str | None = None
    key: str | None = None
    name: str | None = None
