"""Constants used by the Jira client."""

API_PATH_PREFIX = "rest/api/2"

# Fields requested by search when the caller gives none.
DEFAULT_SEARCH_FIELDS = [
    "summary",
    "status",
    "assignee",
    "reporter",
    "priority",
    "created",
    "updated",
    "issuetype",
    "project",
    "description",
    "labels",
    "components",
]

DEFAULT_SEARCH_MAX_RESULTS = 50

CREATEMETA_MAX_RESULTS = 100
CREATEMETA_MAX_WORKERS = 8

MY_ISSUES_JQL = "assignee = currentUser() ORDER BY updated DESC"
MY_ISSUES_LIMIT = 50

# Per-project resources are only listed for the first projects.
RESOURCE_PROJECT_LIMIT = 20
