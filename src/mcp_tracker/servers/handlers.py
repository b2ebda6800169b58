"""Tool handlers: map validated arguments onto JiraFetcher calls.

Handlers run synchronously in a worker thread. Data tools return a model
(or list of models) that the dispatcher serializes to JSON; action tools
return a short confirmation naming the affected entity.
"""

from typing import Any

from ..jira import JiraFetcher
from ..jira.utils import build_issue_fields
from . import schemas


def get_issue(jira: JiraFetcher, args: schemas.GetIssueInput) -> Any:
    return jira.get_issue(args.issue_key, expand=args.expand)


def search_issues(jira: JiraFetcher, args: schemas.SearchIssuesInput) -> Any:
    return jira.search_issues(
        args.jql,
        start_at=args.start_at,
        max_results=args.max_results,
        fields=args.fields,
    )


def create_issue(jira: JiraFetcher, args: schemas.CreateIssueInput) -> Any:
    return jira.create_issue(
        project_key=args.project_key,
        summary=args.summary,
        issue_type=args.issue_type,
        description=args.description,
        priority=args.priority,
        assignee=args.assignee,
        labels=args.labels,
    )


def update_issue(jira: JiraFetcher, args: schemas.UpdateIssueInput) -> str:
    jira.update_issue(
        args.issue_key,
        summary=args.summary,
        description=args.description,
        priority=args.priority,
        assignee=args.assignee,
        labels=args.labels,
    )
    return f"Issue {args.issue_key} updated successfully"


def delete_issue(jira: JiraFetcher, args: schemas.DeleteIssueInput) -> str:
    jira.delete_issue(args.issue_key)
    return f"Issue {args.issue_key} deleted successfully"


def assign_issue(jira: JiraFetcher, args: schemas.AssignIssueInput) -> str:
    jira.assign_issue(args.issue_key, args.assignee)
    if args.assignee:
        return f"Issue {args.issue_key} assigned to {args.assignee}"
    return f"Issue {args.issue_key} unassigned"


def get_comments(jira: JiraFetcher, args: schemas.IssueKeyInput) -> Any:
    return jira.get_comments(args.issue_key)


def add_comment(jira: JiraFetcher, args: schemas.AddCommentInput) -> Any:
    return jira.add_comment(args.issue_key, args.body)


def update_comment(jira: JiraFetcher, args: schemas.UpdateCommentInput) -> Any:
    return jira.update_comment(args.issue_key, args.comment_id, args.body)


def delete_comment(jira: JiraFetcher, args: schemas.DeleteCommentInput) -> str:
    jira.delete_comment(args.issue_key, args.comment_id)
    return f"Comment {args.comment_id} deleted from {args.issue_key}"


def get_transitions(jira: JiraFetcher, args: schemas.IssueKeyInput) -> Any:
    return jira.get_transitions(args.issue_key)


def transition_issue(jira: JiraFetcher, args: schemas.TransitionIssueInput) -> str:
    jira.transition_issue(args.issue_key, args.transition_id, comment=args.comment)
    return f"Issue {args.issue_key} transitioned successfully"


def get_projects(jira: JiraFetcher, args: schemas.EmptyInput) -> Any:
    return jira.get_projects()


def get_project(jira: JiraFetcher, args: schemas.ProjectKeyInput) -> Any:
    return jira.get_project(args.project_key)


def search_users(jira: JiraFetcher, args: schemas.SearchUsersInput) -> Any:
    return jira.search_users(args.query)


def get_current_user(jira: JiraFetcher, args: schemas.EmptyInput) -> Any:
    return jira.get_current_user()


def link_issues(jira: JiraFetcher, args: schemas.LinkIssuesInput) -> str:
    jira.link_issues(args.inward_issue, args.outward_issue, args.link_type)
    return (
        f"Issues {args.inward_issue} and {args.outward_issue} "
        f'linked with type "{args.link_type}"'
    )


def add_watcher(jira: JiraFetcher, args: schemas.WatcherInput) -> str:
    jira.add_watcher(args.issue_key, args.username)
    return f"Added {args.username} as watcher to {args.issue_key}"


def remove_watcher(jira: JiraFetcher, args: schemas.WatcherInput) -> str:
    jira.remove_watcher(args.issue_key, args.username)
    return f"Removed {args.username} as watcher from {args.issue_key}"


def get_priorities(jira: JiraFetcher, args: schemas.EmptyInput) -> Any:
    return jira.get_priorities()


def get_statuses(jira: JiraFetcher, args: schemas.EmptyInput) -> Any:
    return jira.get_statuses()


def get_create_meta(jira: JiraFetcher, args: schemas.GetCreateMetaInput) -> Any:
    return jira.get_create_meta(args.project_key, args.issue_type)


def get_edit_meta(jira: JiraFetcher, args: schemas.GetEditMetaInput) -> Any:
    return jira.get_edit_meta(args.issue_key)


def get_project_versions(
    jira: JiraFetcher, args: schemas.GetProjectVersionsInput
) -> Any:
    return jira.get_project_versions(args.project_key)


def get_project_components(
    jira: JiraFetcher, args: schemas.GetProjectComponentsInput
) -> Any:
    return jira.get_project_components(args.project_key)


def get_fields(jira: JiraFetcher, args: schemas.EmptyInput) -> Any:
    return jira.get_fields()


def get_field_options(jira: JiraFetcher, args: schemas.GetFieldOptionsInput) -> Any:
    return jira.get_field_options(args.project_key, args.issue_type, args.field_key)


def get_issue_link_types(jira: JiraFetcher, args: schemas.EmptyInput) -> Any:
    return jira.get_issue_link_types()


def create_issue_advanced(
    jira: JiraFetcher, args: schemas.CreateIssueAdvancedInput
) -> Any:
    fields = build_issue_fields(
        {
            "project": {"key": args.project_key},
            "summary": args.summary,
            "issuetype": {"name": args.issue_type},
        },
        description=args.description,
        priority=args.priority,
        assignee=args.assignee,
        reporter=args.reporter,
        labels=args.labels,
        components=args.components,
        fix_versions=args.fix_versions,
        affects_versions=args.affects_versions,
        custom_fields=args.custom_fields,
    )
    return jira.create_issue_raw(fields)


def update_issue_advanced(
    jira: JiraFetcher, args: schemas.UpdateIssueAdvancedInput
) -> str:
    fields = build_issue_fields(
        summary=args.summary,
        description=args.description,
        priority=args.priority,
        assignee=args.assignee,
        labels=args.labels,
        components=args.components,
        fix_versions=args.fix_versions,
        affects_versions=args.affects_versions,
        custom_fields=args.custom_fields,
    )
    jira.update_issue_raw(args.issue_key, fields)
    return f"Issue {args.issue_key} updated successfully"
