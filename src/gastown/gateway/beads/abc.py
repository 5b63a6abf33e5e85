"""Abstract interface for Beads issue operations."""

from abc import ABC, abstractmethod

from gastown.gateway.beads.types import BeadsIssue
from gastown.non_ideal_state import IssueNotFound


class BeadsGateway(ABC):
    """Abstract interface for Beads issue operations.

    All implementations (real, fake, dry_run, printing) must implement this interface.

    The store holds durable and ephemeral issues side by side. Reads return
    both; only export_issues() and sync() apply the ephemeral filter.
    """

    @abstractmethod
    def list_issues(
        self,
        *,
        labels: list[str] | None,
        status: str | None,
        limit: int | None,
    ) -> list[BeadsIssue]:
        """Query issues by criteria.

        Args:
            labels: Filter by labels (all labels must match)
            status: Filter by status (open, in_progress, blocked, deferred, closed)
            limit: Maximum number of issues to return (None = no limit)

        Returns:
            List of BeadsIssue matching the criteria, in store order
        """
        ...

    @abstractmethod
    def get_issue(self, issue_id: str) -> BeadsIssue | None:
        """Look up a single issue.

        Returns:
            The issue, or None if no issue has this id
        """
        ...

    @abstractmethod
    def create_issue(
        self,
        *,
        title: str,
        labels: list[str] | None,
        description: str | None,
        assignee: str | None,
        ephemeral: bool,
    ) -> BeadsIssue:
        """Create a new open issue and append it to the store.

        Args:
            title: Issue title
            labels: Labels to attach (None = no labels)
            description: Body content (None = empty)
            assignee: Agent the issue is assigned to (None = unassigned)
            ephemeral: Flag the issue as a wisp at creation time

        Returns:
            The created BeadsIssue
        """
        ...

    @abstractmethod
    def update_issue(
        self,
        issue_id: str,
        *,
        status: str | None,
        assignee: str | None,
    ) -> BeadsIssue | IssueNotFound:
        """Update status and/or assignee. None leaves a field unchanged.

        Returns:
            The updated issue, or IssueNotFound
        """
        ...

    @abstractmethod
    def set_ephemeral(self, issue_id: str, ephemeral: bool) -> BeadsIssue | IssueNotFound:
        """Set or clear the ephemeral flag on an existing issue.

        Returns:
            The updated issue, or IssueNotFound
        """
        ...

    @abstractmethod
    def export_issues(self) -> list[BeadsIssue]:
        """Return the issues destined for the synced log.

        Returns:
            Durable issues only, in store order
        """
        ...

    @abstractmethod
    def sync(self) -> int:
        """Write the export stream to the synced log.

        Returns:
            Number of records written
        """
        ...
