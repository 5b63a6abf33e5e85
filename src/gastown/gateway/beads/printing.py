"""Verbose wrapper for Beads gateway operations."""

from gastown.gateway.beads.abc import BeadsGateway
from gastown.gateway.beads.types import BeadsIssue
from gastown.non_ideal_state import IssueNotFound
from gastown.output import user_output


class PrintingBeadsGateway(BeadsGateway):
    """Verbose wrapper that prints mutations and delegates reads silently.

    Read operations are delegated silently to the wrapped implementation.
    Write operations print the action, then delegate.
    """

    def __init__(self, wrapped: BeadsGateway) -> None:
        """Initialize printing wrapper with a real implementation.

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
        """Delegate read operation silently to wrapped implementation."""
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
        kind = "wisp" if ephemeral else "issue"
        user_output(f"bd create ({kind}): {title}")
        return self._wrapped.create_issue(
            title=title,
            labels=labels,
            description=description,
            assignee=assignee,
            ephemeral=ephemeral,
        )

    def update_issue(
        self,
        issue_id: str,
        *,
        status: str | None,
        assignee: str | None,
    ) -> BeadsIssue | IssueNotFound:
        user_output(f"bd update {issue_id} status={status} assignee={assignee}")
        return self._wrapped.update_issue(issue_id, status=status, assignee=assignee)

    def set_ephemeral(self, issue_id: str, ephemeral: bool) -> BeadsIssue | IssueNotFound:
        user_output(f"bd update {issue_id} ephemeral={str(ephemeral).lower()}")
        return self._wrapped.set_ephemeral(issue_id, ephemeral)

    def export_issues(self) -> list[BeadsIssue]:
        return self._wrapped.export_issues()

    def sync(self) -> int:
        user_output("bd sync")
        return self._wrapped.sync()
