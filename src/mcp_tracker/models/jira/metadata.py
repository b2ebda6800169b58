"""
Jira metadata models: fields, link types and create metadata.
"""

from typing import Any

from pydantic import Field

from ..base import ApiModel


class JiraField(ApiModel):
    """A field definition from /field."""

    id: str | None = None
    name: str | None = None
    custom: bool = False
    field_schema: dict[str, Any] | None = Field(default=None, alias="schema")


class JiraIssueLinkType(ApiModel):
    """An issue link type, referenced by name when linking."""

    id: str | None = None
    name: str | None = None
    inward: str | None = None
    outward: str | None = None


class JiraIssueLinkTypeList(ApiModel):
    """The envelope returned by /issueLinkType."""

    issue_link_types: list[JiraIssueLinkType] = Field(
        default_factory=list, alias="issueLinkTypes"
    )


class CreateMetaField(ApiModel):
    """
    One field of an issue type's create screen.

    `allowed_values` is None when the field is free-form, which is what
    `has_allowed_values` reports.
    """

    field_id: str | None = Field(default=None, alias="fieldId")
    name: str | None = None
    required: bool = False
    has_allowed_values: bool = Field(default=False, alias="hasAllowedValues")
    allowed_values: list[Any] | None = Field(
        default=None, alias="allowedValues"
    )

    @classmethod
    def from_field_meta(cls, data: dict[str, Any]) -> "CreateMetaField":
        """Build the summary entry from a raw createmeta field description."""
        allowed_values = data.get("allowedValues")
        values: dict[str, Any] = {
            "fieldId": data.get("fieldId"),
            "name": data.get("name"),
            "required": bool(data.get("required", False)),
            "hasAllowedValues": allowed_values is not None,
        }
        if allowed_values is not None:
            values["allowedValues"] = allowed_values
        return cls.model_validate(values)


class CreateMetaIssueType(ApiModel):
    """An issue type with the fields needed to create it."""

    id: str | None = None
    name: str | None = None
    fields: list[CreateMetaField] = Field(default_factory=list)


class CreateMeta(ApiModel):
    """Create metadata for one project."""

    project_key: str = Field(alias="projectKey")
    issue_types: list[CreateMetaIssueType] = Field(
        default_factory=list, alias="issueTypes"
    )
