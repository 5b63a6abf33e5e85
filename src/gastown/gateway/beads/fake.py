"""In-memory fake implementation of Beads gateway for testing."""

import dataclasses
import uuid

from gastown.gateway.beads.abc import BeadsGateway
from gastown.gateway.beads.export import filter_durable, serialize_export
from gastown.gateway.beads.types import BeadsIssue
from gastown.gateway.time.abc import Time
from gastown.non_ideal_state import IssueNotFound


class FakeBeadsGateway(BeadsGateway):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    """

    def __init__(
        self,
        *,
        time: Time,
        issues: list[BeadsIssue] | None,
        issue_prefix: str = "gt",
    ) -> None:
        """Create FakeBeadsGateway with pre-configured state.

        Args:
            time: Time abstraction for deterministic timestamps.
            issues: List of BeadsIssue to seed the store with.
            issue_prefix: Prefix for generated issue ids.
        """
        self._time = time
        self._issues: list[BeadsIssue] = list(issues) if issues is not None else []
        self._issue_prefix = issue_prefix
        self._synced: list[str] = []

    @property
    def issues(self) -> list[BeadsIssue]:
        """All issues in store order. This property is for test assertions only."""
        return list(self._issues)

    @property
    def synced(self) -> list[str]:
        """Serialized export written by each sync() call, oldest first.

        This property is for test assertions only.
        """
        return list(self._synced)

    def list_issues(
        self,
        *,
        labels: list[str] | None,
        status: str | None,
        limit: int | None,
    ) -> list[BeadsIssue]:
        """Query issues from in-memory storage.

        Filters issues by labels (AND logic) and status.
        """
        issues = list(self._issues)

        # Filter by labels (AND logic - issue must have ALL specified labels)
        if labels:
            label_set = set(labels)
            issues = [issue for issue in issues if label_set.issubset(set(issue.labels))]

        if status is not None:
            issues = [issue for issue in issues if issue.status == status]

        if limit is not None:
            issues = issues[:limit]

        return issues

    def get_issue(self, issue_id: str) -> BeadsIssue | None:
        for issue in self._issues:
            if issue.id == issue_id:
                return issue
        return None

    def create_issue(
        self,
        *,
        title: str,
        labels: list[str] | None,
        description: str | None,
        assignee: str | None,
        ephemeral: bool,
    ) -> BeadsIssue:
        """Create a new issue in in-memory storage.

        Generates a fake ID, uses injected Time for timestamps,
        and appends to internal issues list.
        """
        issue_id = f"{self._issue_prefix}-{uuid.uuid4().hex[:5]}"
        timestamp = self._time.now().isoformat()

        issue = BeadsIssue(
            id=issue_id,
            title=title,
            description=description if description is not None else "",
            status="open",
            labels=tuple(labels) if labels else (),
            assignee=assignee,
            notes="",
            created_at=timestamp,
            updated_at=timestamp,
            ephemeral=ephemeral,
        )

        self._issues.append(issue)
        return issue

    def update_issue(
        self,
        issue_id: str,
        *,
        status: str | None,
        assignee: str | None,
    ) -> BeadsIssue | IssueNotFound:
        changes: dict[str, object] = {}
        if status is not None:
            changes["status"] = status
        if assignee is not None:
            changes["assignee"] = assignee
        return self._replace(issue_id, changes)

    def set_ephemeral(self, issue_id: str, ephemeral: bool) -> BeadsIssue | IssueNotFound:
        return self._replace(issue_id, {"ephemeral": ephemeral})

    def export_issues(self) -> list[BeadsIssue]:
        return filter_durable(self._issues)

    def sync(self) -> int:
        exported = self.export_issues()
        self._synced.append(serialize_export(exported))
        return len(exported)

    def _replace(self, issue_id: str, changes: dict[str, object]) -> BeadsIssue | IssueNotFound:
        for index, issue in enumerate(self._issues):
            if issue.id == issue_id:
                updated = dataclasses.replace(
                    issue, **changes, updated_at=self._time.now().isoformat()
                )
                self._issues[index] = updated
                return updated
        return IssueNotFound(issue_id=issue_id)
