"""Utility functions for building Jira issue payloads."""

from collections.abc import Iterable, Mapping
from typing import Any


def name_refs(names: Iterable[str]) -> list[dict[str, str]]:
    """Turn plain names into Jira `{"name": ...}` reference objects.

    Args:
        names: Component or version names

    Returns:
        A list of reference objects, in input order
    """
    return [{"name": name} for name in names]


def build_issue_fields(
    base: Mapping[str, Any] | None = None,
    *,
    summary: str | None = None,
    description: str | None = None,
    priority: str | None = None,
    assignee: str | None = None,
    reporter: str | None = None,
    labels: list[str] | None = None,
    components: list[str] | None = None,
    fix_versions: list[str] | None = None,
    affects_versions: list[str] | None = None,
    custom_fields: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Assemble an issue `fields` map for create or update.

    The map is merged in three steps, each later step overwriting keys of
    the earlier ones:

    1. named fields; scalars are only set when truthy, so an empty string
       never clears a field, while lists are set whenever given (even empty)
    2. name lists turned into reference objects (`components`,
       `fixVersions`, and `versions` for affects versions)
    3. the raw `custom_fields` overlay, copied over everything else

    Args:
        base: Fields to start from (e.g. project and issue type on create)
        summary: Issue summary
        description: Issue description
        priority: Priority name
        assignee: Assignee username
        reporter: Reporter username
        labels: Labels
        components: Component names
        fix_versions: Fix version names
        affects_versions: Affects version names
        custom_fields: Raw field map keyed by field id

    Returns:
        The assembled fields map
    """
    fields: dict[str, Any] = dict(base or {})

    if summary:
        fields["summary"] = summary
    if description:
        fields["description"] = description
    if priority:
        fields["priority"] = {"name": priority}
    if assignee:
        fields["assignee"] = {"name": assignee}
    if reporter:
        fields["reporter"] = {"name": reporter}
    if labels is not None:
        fields["labels"] = list(labels)

    if components is not None:
        fields["components"] = name_refs(components)
    if fix_versions is not None:
        fields["fixVersions"] = name_refs(fix_versions)
    if affects_versions is not None:
        fields["versions"] = name_refs(affects_versions)

    if custom_fields:
        fields.update(custom_fields)

    return fields
