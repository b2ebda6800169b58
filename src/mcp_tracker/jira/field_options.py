"""Module for Jira create metadata and field options."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from ..models.jira import CreateMeta, CreateMetaField, CreateMetaIssueType, JiraIssueType
from .client import JiraClient
from .constants import CREATEMETA_MAX_RESULTS, CREATEMETA_MAX_WORKERS

logger = logging.getLogger("mcp-tracker.jira")


class FieldOptionsMixin(JiraClient):
    """Mixin for create metadata: creatable issue types, their fields and options."""

    def get_create_meta_issue_types(self, project_key: str) -> list[JiraIssueType]:
        """
        Get the issue types that can be created in a project.

        Args:
            project_key: The project key

        Returns:
            The creatable issue types
        """
        data = self._request("GET", f"/issue/createmeta/{project_key}/issuetypes")
        values = data.get("values", []) if isinstance(data, dict) else []
        return [JiraIssueType.from_api_response(item) for item in values]

    def get_create_meta_fields(
        self, project_key: str, issue_type_id: str
    ) -> list[dict[str, Any]]:
        """
        Get the create-screen fields of one issue type, with allowed values.

        Args:
            project_key: The project key
            issue_type_id: The issue type id

        Returns:
            The raw field descriptions
        """
        data = self._request(
            "GET",
            f"/issue/createmeta/{project_key}/issuetypes/{issue_type_id}",
            params={"maxResults": CREATEMETA_MAX_RESULTS},
        )
        return data.get("values", []) if isinstance(data, dict) else []

    def get_create_meta(
        self, project_key: str, issue_type_name: str | None = None
    ) -> CreateMeta:
        """
        Get what is needed to create issues in a project.

        Lists the creatable issue types, keeps the one(s) whose name matches
        issue_type_name case-insensitively (all of them when no name is
        given), then fetches the fields of every remaining type concurrently.

        Args:
            project_key: The project key
            issue_type_name: Optional issue type name filter

        Returns:
            CreateMeta with one entry per issue type, in Jira's order
        """
        issue_types = self.get_create_meta_issue_types(project_key)
        if issue_type_name:
            wanted = issue_type_name.lower()
            issue_types = [
                t for t in issue_types if (t.name or "").lower() == wanted
            ]

        if not issue_types:
            logger.debug(
                f"No creatable issue types in {project_key} match {issue_type_name!r}"
            )
            return CreateMeta(project_key=project_key, issue_types=[])

        def fetch_fields(issue_type: JiraIssueType) -> CreateMetaIssueType:
            raw_fields = self.get_create_meta_fields(project_key, issue_type.id or "")
            return CreateMetaIssueType(
                id=issue_type.id,
                name=issue_type.name,
                fields=[CreateMetaField.from_field_meta(f) for f in raw_fields],
            )

        workers = min(CREATEMETA_MAX_WORKERS, len(issue_types))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            entries = list(executor.map(fetch_fields, issue_types))

        return CreateMeta(project_key=project_key, issue_types=entries)

    def get_field_options(
        self, project_key: str, issue_type_name: str, field_key: str
    ) -> list[Any]:
        """
        Get the allowed values of one field.

        Only the first issue type matching issue_type_name is considered.

        Args:
            project_key: The project key
            issue_type_name: Issue type name
            field_key: Field id (e.g. 'components', 'customfield_10001')

        Returns:
            The allowed values; empty when no issue type or field matches
            or when the field is free-form
        """
        meta = self.get_create_meta(project_key, issue_type_name)
        if not meta.issue_types:
            return []

        for field in meta.issue_types[0].fields:
            if field.field_id == field_key:
                return field.allowed_values or []
        return []
