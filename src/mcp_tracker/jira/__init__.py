"""Jira API module for mcp_tracker.

This module provides the Jira Server/Data Center client, composed of one
mixin per area of the REST v2 API.
"""

from .client import JiraClient
from .comments import CommentsMixin
from .config import JiraConfig
from .field_options import FieldOptionsMixin
from .fields import FieldsMixin
from .issues import IssuesMixin
from .links import LinksMixin
from .projects import ProjectsMixin
from .search import SearchMixin
from .transitions import TransitionsMixin
from .users import UsersMixin
from .watchers import WatchersMixin


class JiraFetcher(
    IssuesMixin,
    SearchMixin,
    ProjectsMixin,
    CommentsMixin,
    TransitionsMixin,
    UsersMixin,
    WatchersMixin,
    LinksMixin,
    FieldsMixin,
    FieldOptionsMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    The instance holds only configuration and the HTTP session, so one
    fetcher can serve concurrent calls.
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient"]
