"""Tests for issue field assembly."""

from mcp_tracker.jira.utils import build_issue_fields, name_refs


def test_name_refs():
    assert name_refs(["A", "B"]) == [{"name": "A"}, {"name": "B"}]


def test_build_issue_fields_empty():
    assert build_issue_fields() == {}


def test_build_issue_fields_named_and_references():
    fields = build_issue_fields(
        summary="S",
        description="D",
        priority="High",
        assignee="jdoe",
        reporter="boss",
        labels=["x"],
        components=["API"],
        fix_versions=["1.0"],
        affects_versions=["0.9"],
    )

    assert fields == {
        "summary": "S",
        "description": "D",
        "priority": {"name": "High"},
        "assignee": {"name": "jdoe"},
        "reporter": {"name": "boss"},
        "labels": ["x"],
        "components": [{"name": "API"}],
        "fixVersions": [{"name": "1.0"}],
        "versions": [{"name": "0.9"}],
    }


def test_build_issue_fields_falsy_scalars_omitted():
    assert build_issue_fields(summary="", priority="", assignee=None) == {}


def test_build_issue_fields_empty_lists_are_sent():
    fields = build_issue_fields(labels=[], components=[])

    assert fields == {"labels": [], "components": []}


def test_custom_fields_overlay_wins():
    """The overlay replaces a structured field with the same key."""
    fields = build_issue_fields(
        components=["A"],
        custom_fields={"components": [{"id": "10200"}], "customfield_1": "x"},
    )

    assert fields["components"] == [{"id": "10200"}]
    assert fields["customfield_1"] == "x"


def test_base_is_not_mutated():
    base = {"project": {"key": "P"}}

    fields = build_issue_fields(base, summary="S")

    assert base == {"project": {"key": "P"}}
    assert fields == {"project": {"key": "P"}, "summary": "S"}
