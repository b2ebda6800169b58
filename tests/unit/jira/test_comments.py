"""Tests for the Jira comments mixin."""

from tests.utils.factories import make_response
from tests.utils.mocks import sent_request

COMMENT = {
    "id": "100",
    "body": "Looks good",
    "author": {"name": "jdoe", "displayName": "John Doe"},
    "created": "2024-01-01T12:00:00.000+0000",
    "updated": "2024-01-01T12:00:00.000+0000",
}


class TestCommentsMixin:
    """Tests for CommentsMixin."""

    def test_get_comments(self, jira_fetcher):
        jira_fetcher.jira.request.return_value = make_response(
            200, {"startAt": 0, "maxResults": 1, "total": 1, "comments": [COMMENT]}
        )

        page = jira_fetcher.get_comments("PROJ-1")

        assert page.total == 1
        assert page.comments[0].body == "Looks good"
        assert page.comments[0].author.display_name == "John Doe"
        request = sent_request(jira_fetcher.jira)
        assert request["method"] == "GET"
        assert request["path"] == "rest/api/2/issue/PROJ-1/comment"

    def test_add_comment(self, jira_fetcher):
        jira_fetcher.jira.request.return_value = make_response(201, COMMENT)

        comment = jira_fetcher.add_comment("PROJ-1", "Looks good")

        assert comment.id == "100"
        request = sent_request(jira_fetcher.jira)
        assert request["method"] == "POST"
        assert request["data"] == {"body": "Looks good"}

    def test_update_comment(self, jira_fetcher):
        jira_fetcher.jira.request.return_value = make_response(
            200, {**COMMENT, "body": "Edited"}
        )

        comment = jira_fetcher.update_comment("PROJ-1", "100", "Edited")

        assert comment.body == "Edited"
        request = sent_request(jira_fetcher.jira)
        assert request["method"] == "PUT"
        assert request["path"] == "rest/api/2/issue/PROJ-1/comment/100"
        assert request["data"] == {"body": "Edited"}

    def test_delete_comment(self, jira_fetcher):
        jira_fetcher.delete_comment("PROJ-1", "100")

        request = sent_request(jira_fetcher.jira)
        assert request["method"] == "DELETE"
        assert request["path"] == "rest/api/2/issue/PROJ-1/comment/100"
