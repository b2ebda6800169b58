"""Input models for the Jira tools.

Each tool argument object is validated by one of these models before any
request reaches Jira; the JSON schema advertised for a tool is generated
from the same model, so the two cannot drift apart. Field aliases are the
camelCase argument names clients send.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ToolInput(BaseModel):
    """Base for tool arguments: strict JSON types, camelCase names."""

    model_config = ConfigDict(populate_by_name=True, strict=True)


class EmptyInput(ToolInput):
    """Arguments of tools that take none."""


class IssueKeyInput(ToolInput):
    issue_key: str = Field(alias="issueKey", description="The Jira issue key")


class ProjectKeyInput(ToolInput):
    project_key: str = Field(alias="projectKey", description="The project key")


class GetIssueInput(ToolInput):
    issue_key: str = Field(
        alias="issueKey", description="The Jira issue key (e.g., PROJ-123)"
    )
    expand: list[str] | None = Field(default=None, description="Fields to expand")


class SearchIssuesInput(ToolInput):
    jql: str = Field(description="JQL query string")
    start_at: int = Field(default=0, alias="startAt", description="Starting index")
    max_results: int = Field(
        default=50, alias="maxResults", description="Maximum results to return"
    )
    fields: list[str] | None = Field(default=None, description="Fields to include")


class CreateIssueInput(ToolInput):
    project_key: str = Field(alias="projectKey", description="Project key")
    summary: str = Field(description="Issue summary")
    issue_type: str = Field(
        alias="issueType", description="Issue type (e.g., Bug, Task, Story)"
    )
    description: str | None = Field(default=None, description="Issue description")
    priority: str | None = Field(default=None, description="Priority name")
    assignee: str | None = Field(default=None, description="Assignee username")
    labels: list[str] | None = Field(default=None, description="Labels")


class UpdateIssueInput(ToolInput):
    issue_key: str = Field(alias="issueKey", description="The Jira issue key")
    summary: str | None = Field(default=None, description="New summary")
    description: str | None = Field(default=None, description="New description")
    priority: str | None = Field(default=None, description="New priority name")
    assignee: str | None = Field(default=None, description="New assignee username")
    labels: list[str] | None = Field(default=None, description="New labels")


class DeleteIssueInput(ToolInput):
    issue_key: str = Field(alias="issueKey", description="The Jira issue key to delete")


class AssignIssueInput(ToolInput):
    issue_key: str = Field(alias="issueKey", description="The Jira issue key")
    # Required, but null is a valid value meaning "unassign".
    assignee: str | None = Field(description="Username to assign (null to unassign)")


class AddCommentInput(ToolInput):
    issue_key: str = Field(alias="issueKey", description="The Jira issue key")
    body: str = Field(description="Comment body")


class UpdateCommentInput(ToolInput):
    issue_key: str = Field(alias="issueKey", description="The Jira issue key")
    comment_id: str = Field(alias="commentId", description="The comment ID")
    body: str = Field(description="New comment body")


class DeleteCommentInput(ToolInput):
    issue_key: str = Field(alias="issueKey", description="The Jira issue key")
    comment_id: str = Field(alias="commentId", description="The comment ID")


class TransitionIssueInput(ToolInput):
    issue_key: str = Field(alias="issueKey", description="The Jira issue key")
    transition_id: str = Field(alias="transitionId", description="Transition ID")
    comment: str | None = Field(default=None, description="Optional comment")


class SearchUsersInput(ToolInput):
    query: str = Field(description="Username search query")


class LinkIssuesInput(ToolInput):
    inward_issue: str = Field(alias="inwardIssue", description="Inward issue key")
    outward_issue: str = Field(alias="outwardIssue", description="Outward issue key")
    link_type: str = Field(
        alias="linkType", description="Link type name (e.g., 'Blocks', 'Relates')"
    )


class WatcherInput(ToolInput):
    issue_key: str = Field(alias="issueKey", description="The Jira issue key")
    username: str = Field(description="Username of the watcher")


class GetCreateMetaInput(ToolInput):
    project_key: str = Field(
        alias="projectKey", description="Project key to get metadata for"
    )
    issue_type: str | None = Field(
        default=None,
        alias="issueType",
        description="Issue type name to filter (e.g., Bug, Task, Story)",
    )


class GetEditMetaInput(ToolInput):
    issue_key: str = Field(
        alias="issueKey", description="The Jira issue key to get edit metadata for"
    )


class GetProjectVersionsInput(ToolInput):
    project_key: str = Field(
        alias="projectKey", description="Project key to get versions for"
    )


class GetProjectComponentsInput(ToolInput):
    project_key: str = Field(
        alias="projectKey", description="Project key to get components for"
    )


class GetFieldOptionsInput(ToolInput):
    project_key: str = Field(alias="projectKey", description="Project key")
    issue_type: str = Field(alias="issueType", description="Issue type name")
    field_key: str = Field(
        alias="fieldKey",
        description="Field key (e.g., 'fixVersions', 'components', 'customfield_10001')",
    )


class CreateIssueAdvancedInput(CreateIssueInput):
    reporter: str | None = Field(default=None, description="Reporter username")
    components: list[str] | None = Field(default=None, description="Component names")
    fix_versions: list[str] | None = Field(
        default=None, alias="fixVersions", description="Fix version names"
    )
    affects_versions: list[str] | None = Field(
        default=None, alias="affectsVersions", description="Affects version names"
    )
    custom_fields: dict[str, Any] | None = Field(
        default=None,
        alias="customFields",
        description='Custom fields as key-value pairs (e.g., {"customfield_10001": "value"})',
    )


class UpdateIssueAdvancedInput(UpdateIssueInput):
    components: list[str] | None = Field(default=None, description="Component names")
    fix_versions: list[str] | None = Field(
        default=None, alias="fixVersions", description="Fix version names"
    )
    affects_versions: list[str] | None = Field(
        default=None, alias="affectsVersions", description="Affects version names"
    )
    custom_fields: dict[str, Any] | None = Field(
        default=None,
        alias="customFields",
        description="Custom fields as key-value pairs",
    )
