"""Tests for the Jira issues mixin."""

import pytest

from mcp_tracker.exceptions import TrackerApiError
from mcp_tracker.models.jira import JiraIssue
from tests.utils.factories import JiraIssueFactory, make_response
from tests.utils.mocks import sent_request


class TestIssuesMixin:
    """Tests for IssuesMixin."""

    def test_get_issue(self, jira_fetcher):
        """The returned issue carries the requested key."""
        jira_fetcher.jira.request.return_value = make_response(
            200, JiraIssueFactory.create("PROJ-7")
        )

        issue = jira_fetcher.get_issue("PROJ-7")

        assert isinstance(issue, JiraIssue)
        assert issue.key == "PROJ-7"
        assert issue.fields.summary == "Test Issue Summary"
        request = sent_request(jira_fetcher.jira)
        assert request["method"] == "GET"
        assert request["path"] == "rest/api/2/issue/PROJ-7"
        assert request["params"] is None

    def test_get_issue_with_expand(self, jira_fetcher):
        jira_fetcher.jira.request.return_value = make_response(
            200, JiraIssueFactory.create("PROJ-7")
        )

        jira_fetcher.get_issue("PROJ-7", expand=["renderedFields", "changelog"])

        assert sent_request(jira_fetcher.jira)["params"] == {
            "expand": "renderedFields,changelog"
        }

    def test_get_issue_keeps_custom_fields(self, jira_fetcher):
        jira_fetcher.jira.request.return_value = make_response(
            200,
            JiraIssueFactory.create(
                "PROJ-7", fields={"customfield_10010": {"value": "Team A"}}
            ),
        )

        issue = jira_fetcher.get_issue("PROJ-7")

        assert issue.fields.custom_fields == {"customfield_10010": {"value": "Team A"}}
        dumped = issue.to_simplified_dict()
        assert dumped["fields"]["customfield_10010"] == {"value": "Team A"}
        assert dumped["self"].endswith("/issue/PROJ-7")

    def test_get_issue_not_found(self, jira_fetcher):
        jira_fetcher.jira.request.return_value = make_response(
            404, text='{"errorMessages":["Issue Does Not Exist"],"errors":{}}'
        )

        with pytest.raises(TrackerApiError, match="Jira API error \\(404\\)"):
            jira_fetcher.get_issue("NOPE-1")

    def test_create_issue_minimal_payload(self, jira_fetcher):
        """Absent optional parameters are not sent, not even as null."""
        jira_fetcher.jira.request.return_value = make_response(
            201, {"id": "10001", "key": "PROJ-8", "self": "https://x/issue/10001"}
        )

        issue = jira_fetcher.create_issue("PROJ", "A summary", "Bug")

        assert issue.key == "PROJ-8"
        request = sent_request(jira_fetcher.jira)
        assert request["method"] == "POST"
        assert request["path"] == "rest/api/2/issue"
        assert request["data"] == {
            "fields": {
                "project": {"key": "PROJ"},
                "summary": "A summary",
                "issuetype": {"name": "Bug"},
            }
        }

    def test_create_issue_full_payload(self, jira_fetcher):
        jira_fetcher.jira.request.return_value = make_response(201, {"key": "PROJ-9"})

        jira_fetcher.create_issue(
            "PROJ",
            "A summary",
            "Task",
            description="Details",
            priority="High",
            assignee="jdoe",
            labels=["backend"],
        )

        assert sent_request(jira_fetcher.jira)["data"]["fields"] == {
            "project": {"key": "PROJ"},
            "summary": "A summary",
            "issuetype": {"name": "Task"},
            "description": "Details",
            "priority": {"name": "High"},
            "assignee": {"name": "jdoe"},
            "labels": ["backend"],
        }

    def test_create_then_get_round_trip(self, jira_fetcher):
        """An issue created with S/P/T reads back with the same values."""
        jira_fetcher.jira.request.side_effect = [
            make_response(201, {"id": "10002", "key": "DEMO-1"}),
            make_response(
                200,
                JiraIssueFactory.create(
                    "DEMO-1",
                    fields={
                        "summary": "Round trip",
                        "project": {"key": "DEMO"},
                        "issuetype": {"name": "Story"},
                    },
                ),
            ),
        ]

        created = jira_fetcher.create_issue("DEMO", "Round trip", "Story")
        fetched = jira_fetcher.get_issue(created.key)

        assert fetched.key == "DEMO-1"
        assert fetched.fields.summary == "Round trip"
        assert fetched.fields.project.key == "DEMO"
        assert fetched.fields.issuetype.name == "Story"

    def test_update_issue_only_summary(self, jira_fetcher):
        """Updating only the summary sends no other field key."""
        jira_fetcher.update_issue("PROJ-1", summary="New title")

        request = sent_request(jira_fetcher.jira)
        assert request["method"] == "PUT"
        assert request["path"] == "rest/api/2/issue/PROJ-1"
        assert request["data"] == {"fields": {"summary": "New title"}}

    def test_update_issue_empty_strings_are_omitted(self, jira_fetcher):
        jira_fetcher.update_issue("PROJ-1", summary="Title", priority="", assignee="")

        assert sent_request(jira_fetcher.jira)["data"] == {
            "fields": {"summary": "Title"}
        }

    def test_update_issue_raw(self, jira_fetcher):
        fields = {"customfield_10001": 5, "labels": []}

        jira_fetcher.update_issue_raw("PROJ-1", fields)

        assert sent_request(jira_fetcher.jira)["data"] == {"fields": fields}

    def test_delete_issue(self, jira_fetcher):
        assert jira_fetcher.delete_issue("PROJ-1") is None

        request = sent_request(jira_fetcher.jira)
        assert request["method"] == "DELETE"
        assert request["path"] == "rest/api/2/issue/PROJ-1"
        assert request["data"] is None

    def test_assign_issue(self, jira_fetcher):
        jira_fetcher.assign_issue("PROJ-1", "jdoe")

        request = sent_request(jira_fetcher.jira)
        assert request["method"] == "PUT"
        assert request["path"] == "rest/api/2/issue/PROJ-1/assignee"
        assert request["data"] == {"name": "jdoe"}

    def test_unassign_sends_literal_null(self, jira_fetcher):
        """Unassigning keeps the name key with a None (JSON null) value."""
        jira_fetcher.assign_issue("PROJ-1", None)

        data = sent_request(jira_fetcher.jira)["data"]
        assert "name" in data
        assert data["name"] is None

    def test_get_edit_meta(self, jira_fetcher):
        meta = {"fields": {"summary": {"required": True, "name": "Summary"}}}
        jira_fetcher.jira.request.return_value = make_response(200, meta)

        assert jira_fetcher.get_edit_meta("PROJ-1") == meta
        assert sent_request(jira_fetcher.jira)["path"] == (
            "rest/api/2/issue/PROJ-1/editmeta"
        )
