"""Read-only resources: listing and reading `tracker://` URIs."""

import asyncio
import logging
import re
from typing import Any

from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_REQUEST, ErrorData, Resource
from pydantic import AnyUrl

from ..jira import JiraConfig, JiraFetcher
from ..jira.constants import MY_ISSUES_JQL, MY_ISSUES_LIMIT, RESOURCE_PROJECT_LIMIT
from ..logging_config import log_operation
from .dispatcher import format_json

logger = logging.getLogger("mcp-tracker.server")

SCHEME = "tracker://"
MIME_TYPE = "application/json"
PROJECT_URI_PATTERN = re.compile(r"^tracker://project/([A-Z0-9]+)$")


def _resource(path: str, name: str, description: str) -> Resource:
    return Resource(
        uri=AnyUrl(f"{SCHEME}{path}"),
        name=name,
        description=description,
        mimeType=MIME_TYPE,
    )


def config_resource(description: str) -> Resource:
    return _resource("config", "Jira Configuration", description)


async def list_resources(jira: JiraFetcher) -> list[Resource]:
    """
    Enumerate the available resources.

    Looks up the projects and the current user; if either lookup fails the
    listing falls back to the static configuration resource alone.

    Args:
        jira: The Jira client

    Returns:
        Resource descriptors, static ones first, then one per project
        (first projects only), then the current user's issues
    """
    try:
        projects, current_user = await asyncio.gather(
            asyncio.to_thread(jira.get_projects),
            asyncio.to_thread(jira.get_current_user),
        )
    except Exception as e:  # noqa: BLE001 - listing degrades instead of failing
        logger.warning(f"Resource enumeration degraded to config only: {e}")
        return [config_resource("Current Jira server configuration")]

    resources = [
        config_resource("Current Jira server configuration and connection info"),
        _resource("current-user", "Current User", "Currently authenticated Jira user"),
        _resource("priorities", "Priorities", "All available issue priorities"),
        _resource("statuses", "Statuses", "All available issue statuses"),
        _resource("fields", "Fields", "All available fields including custom fields"),
        _resource("link-types", "Issue Link Types", "All available issue link types"),
        _resource(
            "projects", "All Projects", f"List of all {len(projects)} Jira projects"
        ),
    ]
    resources.extend(
        _resource(
            f"project/{project.key}",
            f"Project: {project.key}",
            f"{project.name} - versions, components, and issue types",
        )
        for project in projects[:RESOURCE_PROJECT_LIMIT]
    )
    resources.append(
        _resource(
            "my-issues", "My Issues", f"Issues assigned to {current_user.display_name}"
        )
    )
    return resources


async def _read_project_bundle(jira: JiraFetcher, project_key: str) -> dict[str, Any]:
    project, versions, components, issue_types = await asyncio.gather(
        asyncio.to_thread(jira.get_project, project_key),
        asyncio.to_thread(jira.get_project_versions, project_key),
        asyncio.to_thread(jira.get_project_components, project_key),
        asyncio.to_thread(jira.get_create_meta_issue_types, project_key),
    )
    return {
        "key": project.key,
        "name": project.name,
        "lead": project.lead.to_simplified_dict() if project.lead else None,
        "versions": [
            {"name": v.name, "released": v.released, "archived": v.archived}
            for v in versions
        ],
        "components": [
            {"name": c.name, "description": c.description} for c in components
        ],
        "issueTypes": [
            {"id": t.id, "name": t.name, "subtask": t.subtask} for t in issue_types
        ],
    }


async def _read_content(jira: JiraFetcher, config: JiraConfig, uri: str) -> Any:
    if uri == f"{SCHEME}config":
        return {
            "baseUrl": config.url,
            "serverInfo": "Self-hosted Jira Server",
            "authenticated": True,
        }
    if uri == f"{SCHEME}current-user":
        return await asyncio.to_thread(jira.get_current_user)
    if uri == f"{SCHEME}priorities":
        return await asyncio.to_thread(jira.get_priorities)
    if uri == f"{SCHEME}statuses":
        return await asyncio.to_thread(jira.get_statuses)
    if uri == f"{SCHEME}fields":
        fields = await asyncio.to_thread(jira.get_fields)
        return {
            "system": [f for f in fields if not f.custom],
            "custom": [f for f in fields if f.custom],
        }
    if uri == f"{SCHEME}link-types":
        return await asyncio.to_thread(jira.get_issue_link_types)
    if uri == f"{SCHEME}projects":
        projects = await asyncio.to_thread(jira.get_projects)
        return [
            {"key": p.key, "name": p.name, "projectTypeKey": p.project_type_key}
            for p in projects
        ]
    if uri == f"{SCHEME}my-issues":
        result = await asyncio.to_thread(
            jira.search_issues, MY_ISSUES_JQL, 0, MY_ISSUES_LIMIT
        )
        issues = []
        for issue in result.issues:
            fields = issue.fields
            issues.append(
                {
                    "key": issue.key,
                    "summary": fields.summary if fields else None,
                    "status": fields.status.name if fields and fields.status else None,
                    "priority": (
                        fields.priority.name if fields and fields.priority else None
                    ),
                    "updated": fields.updated if fields else None,
                }
            )
        return {"total": result.total, "issues": issues}

    match = PROJECT_URI_PATTERN.match(uri)
    if match:
        return await _read_project_bundle(jira, match.group(1))

    raise McpError(ErrorData(code=INVALID_REQUEST, message=f"Unknown resource: {uri}"))


async def read_resource(
    jira: JiraFetcher, config: JiraConfig, uri: AnyUrl | str
) -> list[ReadResourceContents]:
    """
    Read one resource as pretty-printed JSON.

    Args:
        jira: The Jira client
        config: The Jira configuration (for tracker://config)
        uri: The resource URI

    Returns:
        A single JSON content item

    Raises:
        McpError: INVALID_REQUEST for an unknown URI, INTERNAL_ERROR for
            any failure while reading a known one
    """
    uri_str = str(uri)
    try:
        with log_operation(logger, "read_resource", uri=uri_str):
            content = await _read_content(jira, config, uri_str)
    except McpError:
        raise
    except Exception as e:
        raise McpError(
            ErrorData(
                code=INTERNAL_ERROR, message=f"Error reading resource {uri_str}: {e}"
            )
        ) from e

    return [ReadResourceContents(content=format_json(content), mime_type=MIME_TYPE)]
