"""Data types for Beads issue operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BeadsIssue:
    """Issue record from the local beads store.

    Attributes:
        id: Prefixed hash ID (e.g., "gt-a1b2c")
        title: Issue title
        description: Body content
        status: Issue status (open, in_progress, blocked, deferred, closed)
        labels: Tuple of label strings (immutable for frozen dataclass)
        assignee: Single assignee, None if unassigned
        notes: Free-form text
        created_at: ISO format timestamp
        updated_at: ISO format timestamp
        ephemeral: Wisp flag. Ephemeral issues live only in the local store and
            are never written to the synced log.
    """

    id: str
    title: str
    description: str
    status: str
    labels: tuple[str, ...]
    assignee: str | None
    notes: str
    created_at: str
    updated_at: str
    ephemeral: bool = False


def is_ephemeral(issue: BeadsIssue) -> bool:
    """Return whether the issue is a wisp and must stay out of exports."""
    return issue.ephemeral


def issue_to_dict(issue: BeadsIssue) -> dict[str, object]:
    """Convert an issue to its JSON record form."""
    return {
        "id": issue.id,
        "title": issue.title,
        "description": issue.description,
        "status": issue.status,
        "labels": list(issue.labels),
        "assignee": issue.assignee,
        "notes": issue.notes,
        "created_at": issue.created_at,
        "updated_at": issue.updated_at,
        "ephemeral": issue.ephemeral,
    }


def issue_from_dict(item: dict) -> BeadsIssue:
    """Build an issue from its JSON record form.

    Records written before the ephemeral flag existed have no "ephemeral" key
    and are durable.
    """
    return BeadsIssue(
        id=item["id"],
        title=item["title"],
        description=item.get("description", ""),
        status=item["status"],
        labels=tuple(item.get("labels", [])),
        assignee=item.get("assignee"),
        notes=item.get("notes", ""),
        created_at=item["created_at"],
        updated_at=item["updated_at"],
        ephemeral=bool(item.get("ephemeral", False)),
    )
