"""
Pydantic models for the Jira Server/Data Center REST API.
"""

from .base import ApiModel
from .jira import (
    CreateMeta,
    CreateMetaField,
    CreateMetaIssueType,
    JiraComment,
    JiraCommentPage,
    JiraComponent,
    JiraField,
    JiraIssue,
    JiraIssueFields,
    JiraIssueLinkType,
    JiraIssueLinkTypeList,
    JiraIssueType,
    JiraPriority,
    JiraProject,
    JiraProjectRef,
    JiraSearchResult,
    JiraStatus,
    JiraTransition,
    JiraTransitionList,
    JiraUser,
    JiraVersion,
)

__all__ = [
    "ApiModel",
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
