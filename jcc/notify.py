"""Branch → issue key → comment: the whole notification flow."""

import re
from collections.abc import Iterable

from jcc.jira import JiraClient, build_comment
from jcc.models import Delivered, Rejected, Report, RunContext, TransportFailure
from jcc.settings import JccSettings

ISSUE_KEY_RE = re.compile(r"[A-Z]+-[0-9]+")


def extract_issue_key(branch: str) -> str | None:
    """Return the leftmost issue key in branch, or None.

    feature/ABC-123-fix → ABC-123
    main                → None
    """
    match = ISSUE_KEY_RE.search(branch)
    return match.group(0) if match else None


def should_skip(labels: Iterable[str], skip_label: str) -> bool:
    # Case-sensitive exact match; an empty skip label never matches
    if not skip_label:
        return False
    return any(label == skip_label for label in labels)


def pick_message(settings: JccSettings) -> str:
    return settings.success if settings.status == "success" else settings.failed


async def notify(settings: JccSettings, context: RunContext, client: JiraClient | None = None) -> Report:
    """Post at most one status comment and report what happened.

    A branch without an issue key and a matching skip label both end the run
    without a request and are not failures.
    """
    issue_key = extract_issue_key(context.branch)
    if not issue_key:
        return Report(
            outcome="skipped_no_key",
            detail=f"Cannot extract JIRA issue key from branch: {context.branch}",
        )

    if should_skip(context.labels, settings.label):
        return Report(
            outcome="skipped_label",
            detail=f"Skipping step due to label: {settings.label}",
            issue_key=issue_key,
        )

    client = client or JiraClient(settings)
    result = await client.add_comment(issue_key, build_comment(pick_message(settings)))

    match result:
        case Delivered():
            return Report(outcome="delivered", detail=f"Successfully commented on {issue_key}", issue_key=issue_key)
        case Rejected(status_code=code, body=body):
            detail = f"Failed to comment on issue {issue_key}: {code} {body}"
        case TransportFailure(message=message):
            detail = f"Request error: {message}"
    return Report(outcome="failed", detail=detail, issue_key=issue_key)
