"""Export filter for the synced issue log.

Ephemerality is a property of the record, not of where it lives: every issue
sits in one local store and the export path drops the ones flagged ephemeral.
A consumer that only reads the export stream never observes a wisp.
"""

import json
from collections.abc import Iterable

from gastown.gateway.beads.types import BeadsIssue, is_ephemeral, issue_to_dict


def filter_durable(issues: Iterable[BeadsIssue]) -> list[BeadsIssue]:
    """Keep only durable issues, preserving store order."""
    return [issue for issue in issues if not is_ephemeral(issue)]


def export_record(issue: BeadsIssue) -> dict[str, object]:
    """Build the exported JSON record for a durable issue.

    The ephemeral key is dropped because exported records are always durable.
    """
    record = issue_to_dict(issue)
    del record["ephemeral"]
    return record


def serialize_export(issues: Iterable[BeadsIssue]) -> str:
    """Serialize issues as deterministic JSONL for the synced log.

    Ephemeral issues are filtered out here as well, so a caller cannot leak a
    wisp by passing an unfiltered sequence.

    Returns:
        One JSON object per line with sorted keys and a trailing newline,
        or an empty string when there is nothing to export.
    """
    lines = [
        json.dumps(export_record(issue), sort_keys=True, ensure_ascii=False)
        for issue in filter_durable(issues)
    ]
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
