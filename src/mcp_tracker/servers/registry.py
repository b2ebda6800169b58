"""Tool registry: name, description, input model and handler for every tool."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mcp.types import Tool
from pydantic import BaseModel

from . import handlers, schemas


@dataclass(frozen=True)
class ToolDefinition:
    """One tool exposed to MCP clients."""

    name: str
    description: str
    input_model: type[BaseModel]
    handler: Callable[[Any, Any], Any]
    mutates: bool = False

    def to_tool(self) -> Tool:
        """Build the MCP tool description, with the JSON schema of the input model."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_model.model_json_schema(by_alias=True),
        )


TOOL_DEFINITIONS: list[ToolDefinition] = [
    ToolDefinition(
        name="jira_get_issue",
        description="Get details of a Jira issue by its key",
        input_model=schemas.GetIssueInput,
        handler=handlers.get_issue,
    ),
    ToolDefinition(
        name="jira_search_issues",
        description="Search for Jira issues using JQL",
        input_model=schemas.SearchIssuesInput,
        handler=handlers.search_issues,
    ),
    ToolDefinition(
        name="jira_create_issue",
        description="Create a new Jira issue",
        input_model=schemas.CreateIssueInput,
        handler=handlers.create_issue,
        mutates=True,
    ),
    ToolDefinition(
        name="jira_update_issue",
        description="Update an existing Jira issue",
        input_model=schemas.UpdateIssueInput,
        handler=handlers.update_issue,
        mutates=True,
    ),
    ToolDefinition(
        name="jira_delete_issue",
        description="Delete a Jira issue",
        input_model=schemas.DeleteIssueInput,
        handler=handlers.delete_issue,
        mutates=True,
    ),
    ToolDefinition(
        name="jira_assign_issue",
        description="Assign or unassign a Jira issue",
        input_model=schemas.AssignIssueInput,
        handler=handlers.assign_issue,
        mutates=True,
    ),
    ToolDefinition(
        name="jira_get_comments",
        description="Get comments on a Jira issue",
        input_model=schemas.IssueKeyInput,
        handler=handlers.get_comments,
    ),
    ToolDefinition(
        name="jira_add_comment",
        description="Add a comment to a Jira issue",
        input_model=schemas.AddCommentInput,
        handler=handlers.add_comment,
        mutates=True,
    ),
    ToolDefinition(
        name="jira_update_comment",
        description="Replace the body of an existing comment on a Jira issue",
        input_model=schemas.UpdateCommentInput,
        handler=handlers.update_comment,
        mutates=True,
    ),
    ToolDefinition(
        name="jira_delete_comment",
        description="Delete a comment from a Jira issue",
        input_model=schemas.DeleteCommentInput,
        handler=handlers.delete_comment,
        mutates=True,
    ),
    ToolDefinition(
        name="jira_get_transitions",
        description="Get available transitions for a Jira issue",
        input_model=schemas.IssueKeyInput,
        handler=handlers.get_transitions,
    ),
    ToolDefinition(
        name="jira_transition_issue",
        description="Transition a Jira issue to a new status",
        input_model=schemas.TransitionIssueInput,
        handler=handlers.transition_issue,
        mutates=True,
    ),
    ToolDefinition(
        name="jira_get_projects",
        description="Get all Jira projects",
        input_model=schemas.EmptyInput,
        handler=handlers.get_projects,
    ),
    ToolDefinition(
        name="jira_get_project",
        description="Get details of a specific Jira project",
        input_model=schemas.ProjectKeyInput,
        handler=handlers.get_project,
    ),
    ToolDefinition(
        name="jira_search_users",
        description="Search for Jira users",
        input_model=schemas.SearchUsersInput,
        handler=handlers.search_users,
    ),
    ToolDefinition(
        name="jira_get_current_user",
        description="Get the current authenticated user",
        input_model=schemas.EmptyInput,
        handler=handlers.get_current_user,
    ),
    ToolDefinition(
        name="jira_link_issues",
        description="Link two Jira issues",
        input_model=schemas.LinkIssuesInput,
        handler=handlers.link_issues,
        mutates=True,
    ),
    ToolDefinition(
        name="jira_add_watcher",
        description="Add a watcher to a Jira issue",
        input_model=schemas.WatcherInput,
        handler=handlers.add_watcher,
        mutates=True,
    ),
    ToolDefinition(
        name="jira_remove_watcher",
        description="Remove a watcher from a Jira issue",
        input_model=schemas.WatcherInput,
        handler=handlers.remove_watcher,
        mutates=True,
    ),
    ToolDefinition(
        name="jira_get_priorities",
        description="Get all available priorities",
        input_model=schemas.EmptyInput,
        handler=handlers.get_priorities,
    ),
    ToolDefinition(
        name="jira_get_statuses",
        description="Get all available statuses",
        input_model=schemas.EmptyInput,
        handler=handlers.get_statuses,
    ),
    ToolDefinition(
        name="jira_get_create_meta",
        description=(
            "Get metadata for creating issues - shows required fields and allowed "
            "values (dropdown options) for a project and issue type. IMPORTANT: Call "
            "this before creating an issue to know what fields are required and what "
            "values are allowed."
        ),
        input_model=schemas.GetCreateMetaInput,
        handler=handlers.get_create_meta,
    ),
    ToolDefinition(
        name="jira_get_edit_meta",
        description=(
            "Get metadata for editing an issue - shows editable fields and allowed "
            "values for an existing issue"
        ),
        input_model=schemas.GetEditMetaInput,
        handler=handlers.get_edit_meta,
    ),
    ToolDefinition(
        name="jira_get_project_versions",
        description=(
            "Get all versions for a project - use this to find valid values for "
            "fixVersions and affectsVersions fields"
        ),
        input_model=schemas.GetProjectVersionsInput,
        handler=handlers.get_project_versions,
    ),
    ToolDefinition(
        name="jira_get_project_components",
        description=(
            "Get all components for a project - use this to find valid values for "
            "the components field"
        ),
        input_model=schemas.GetProjectComponentsInput,
        handler=handlers.get_project_components,
    ),
    ToolDefinition(
        name="jira_get_fields",
        description=(
            "Get all available fields including custom fields - shows field IDs, "
            "names, and types"
        ),
        input_model=schemas.EmptyInput,
        handler=handlers.get_fields,
    ),
    ToolDefinition(
        name="jira_get_field_options",
        description=(
            "Get allowed values/options for a specific field in a project and issue "
            "type context"
        ),
        input_model=schemas.GetFieldOptionsInput,
        handler=handlers.get_field_options,
    ),
    ToolDefinition(
        name="jira_get_issue_link_types",
        description="Get all available issue link types",
        input_model=schemas.EmptyInput,
        handler=handlers.get_issue_link_types,
    ),
    ToolDefinition(
        name="jira_create_issue_advanced",
        description=(
            "Create a new Jira issue with full field support including fixVersions, "
            "components, and custom fields. Use jira_get_create_meta first to "
            "discover required fields and allowed values."
        ),
        input_model=schemas.CreateIssueAdvancedInput,
        handler=handlers.create_issue_advanced,
        mutates=True,
    ),
    ToolDefinition(
        name="jira_update_issue_advanced",
        description=(
            "Update a Jira issue with full field support including fixVersions, "
            "components, and custom fields. Use jira_get_edit_meta first to discover "
            "editable fields and allowed values."
        ),
        input_model=schemas.UpdateIssueAdvancedInput,
        handler=handlers.update_issue_advanced,
        mutates=True,
    ),
]

TOOL_REGISTRY: dict[str, ToolDefinition] = {d.name: d for d in TOOL_DEFINITIONS}


def get_tool_definition(name: str) -> ToolDefinition | None:
    """Look up a tool by name."""
    return TOOL_REGISTRY.get(name)


def list_tool_definitions(read_only: bool = False) -> list[Tool]:
    """
    Build the MCP tool list.

    Args:
        read_only: Hide tools that modify Jira

    Returns:
        Tools in registration order
    """
    return [
        definition.to_tool()
        for definition in TOOL_DEFINITIONS
        if not (read_only and definition.mutates)
    ]
