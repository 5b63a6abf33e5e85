"""Dry-run wrapper for Beads gateway operations."""

import dataclasses

from gastown.gateway.beads.abc import BeadsGateway
from gastown.gateway.beads.types import BeadsIssue
from gastown.non_ideal_state import IssueNotFound


class DryRunBeadsGateway(BeadsGateway):
    """Dry-run wrapper that delegates read-only operations.

    Read operations are delegated to the wrapped implementation.
    Write operations return what would have been written without executing.
    """

    def __init__(self, wrapped: BeadsGateway) -> None:
        """Initialize dry-run wrapper with a real implementation.

        Args:
            wrapped: The real BeadsGateway implementation to wrap.
        """
        self._wrapped = wrapped

    def list_issues(
        self,
        *,
        labels: list[str] | None,
        status: str | None,
        limit: int | None,
    ) -> list[BeadsIssue]:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.list_issues(labels=labels, status=status, limit=limit)

    def get_issue(self, issue_id: str) -> BeadsIssue | None:
        return self._wrapped.get_issue(issue_id)

    def create_issue(
        self,
        *,
        title: str,
        labels: list[str] | None,
        description: str | None,
        assignee: str | None,
        ephemeral: bool,
    ) -> BeadsIssue:
        """Return a placeholder BeadsIssue without executing anything."""
        return BeadsIssue(
            id="gt-dry-run",
            title=title,
            description=description if description is not None else "",
            status="open",
            labels=tuple(labels) if labels else (),
            assignee=assignee,
            notes="",
            created_at="dry-run",
            updated_at="dry-run",
            ephemeral=ephemeral,
        )

    def update_issue(
        self,
        issue_id: str,
        *,
        status: str | None,
        assignee: str | None,
    ) -> BeadsIssue | IssueNotFound:
        """Return the issue as it would look after the update, without writing."""
        issue = self._wrapped.get_issue(issue_id)
        if issue is None:
            return IssueNotFound(issue_id=issue_id)
        return dataclasses.replace(
            issue,
            status=status if status is not None else issue.status,
            assignee=assignee if assignee is not None else issue.assignee,
        )

    def set_ephemeral(self, issue_id: str, ephemeral: bool) -> BeadsIssue | IssueNotFound:
        issue = self._wrapped.get_issue(issue_id)
        if issue is None:
            return IssueNotFound(issue_id=issue_id)
        return dataclasses.replace(issue, ephemeral=ephemeral)

    def export_issues(self) -> list[BeadsIssue]:
        return self._wrapped.export_issues()

    def sync(self) -> int:
        """Report how many records would be written, without writing."""
        return len(self._wrapped.export_issues())
