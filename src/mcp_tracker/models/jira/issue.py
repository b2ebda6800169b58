"""
Jira issue models.

An issue has a fixed core of well-known fields; everything else a project
defines (customfield_*, timetracking, ...) is kept as extra attributes of
JiraIssueFields and reachable through `custom_fields`.
"""

from typing import Any

from pydantic import Field

from ..base import ApiModel
from .common import JiraIssueType, JiraPriority, JiraProjectRef, JiraStatus, JiraUser
from .project import JiraComponent, JiraVersion


class JiraIssueFields(ApiModel):
    """The `fields` object of an issue."""

    summary: str | None = None
    description: str | None = None
    status: JiraStatus | None = None
    priority: JiraPriority | None = None
    assignee: JiraUser | None = None
    reporter: JiraUser | None = None
    created: str | None = None
    updated: str | None = None
    issuetype: JiraIssueType | None = None
    project: JiraProjectRef | None = None
    labels: list[str] | None = None
    components: list[JiraComponent] | None = None
    fix_versions: list[JiraVersion] | None = Field(default=None, alias="fixVersions")

    @property
    def custom_fields(self) -> dict[str, Any]:
        """Fields outside the typed core, keyed by field id."""
        return dict(self.model_extra or {})


class JiraIssue(ApiModel):
    """An issue, always identified by its key."""

    id: str | None = None
    key: str | None = None
    self_url: str | None = Field(default=None, alias="self")
    fields: JiraIssueFields | None = None
