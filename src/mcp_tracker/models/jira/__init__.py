"""
Jira data models.
"""

from .comment import JiraComment, JiraCommentPage
from .common import JiraIssueType, JiraPriority, JiraProjectRef, JiraStatus, JiraUser
from .issue import JiraIssue, JiraIssueFields
from .metadata import (
    CreateMeta,
    CreateMetaField,
    CreateMetaIssueType,
    JiraField,
    JiraIssueLinkType,
    JiraIssueLinkTypeList,
)
from .project import JiraComponent, JiraProject, JiraVersion
from .search import JiraSearchResult
from .workflow import JiraTransition, JiraTransitionList

__all__ = [
    "CreateMeta",
    "CreateMetaField",
    "CreateMetaIssueType",
    "JiraComment",
    "JiraCommentPage",
    "JiraComponent",
    "JiraField",
    "JiraIssue",
    "JiraIssueFields",
    "JiraIssueLinkType",
    "JiraIssueLinkTypeList",
    "JiraIssueType",
    "JiraPriority",
    "JiraProject",
    "JiraProjectRef",
    "JiraSearchResult",
    "JiraStatus",
    "JiraTransition",
    "JiraTransitionList",
    "JiraUser",
    "JiraVersion",
]
