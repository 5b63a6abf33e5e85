"""Production implementation of the Beads gateway backed by JSONL files."""

import dataclasses
import fcntl
import json
import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from gastown.gateway.beads.abc import BeadsGateway
from gastown.gateway.beads.export import filter_durable, serialize_export
from gastown.gateway.beads.types import BeadsIssue, issue_from_dict, issue_to_dict
from gastown.gateway.time.abc import Time
from gastown.non_ideal_state import IssueNotFound
from gastown.path_utils import write_text_atomic

logger = logging.getLogger(__name__)

LOCAL_STORE_FILENAME = "local.jsonl"
SYNCED_LOG_FILENAME = "issues.jsonl"
LOCK_FILENAME = "local.jsonl.lock"


class RealBeadsGateway(BeadsGateway):
    """Production implementation over the files in a .beads/ directory.

    local.jsonl holds every issue, durable and ephemeral, one JSON object per
    line in insertion order. It is local-only. issues.jsonl is the synced log
    and only ever receives the filtered export.

    Every mutation rewrites local.jsonl via write-temp-then-rename while
    holding an exclusive lock on local.jsonl.lock, so concurrent writers
    (dispatcher mail, an agent accepting work) never drop each other's changes.
    """

    def __init__(self, *, beads_dir: Path, time: Time, issue_prefix: str) -> None:
        """Initialize RealBeadsGateway.

        Args:
            beads_dir: Directory holding the store files (usually <town>/.beads).
            time: Time abstraction for created_at/updated_at timestamps.
            issue_prefix: Prefix for generated ids (e.g. "gt" -> "gt-a1b2c").
        """
        self._beads_dir = beads_dir
        self._time = time
        self._issue_prefix = issue_prefix

    @property
    def local_store_path(self) -> Path:
        return self._beads_dir / LOCAL_STORE_FILENAME

    @property
    def synced_log_path(self) -> Path:
        return self._beads_dir / SYNCED_LOG_FILENAME

    @property
    def lock_path(self) -> Path:
        return self._beads_dir / LOCK_FILENAME

    def list_issues(
        self,
        *,
        labels: list[str] | None,
        status: str | None,
        limit: int | None,
    ) -> list[BeadsIssue]:
        issues = self._load()

        if labels:
            label_set = set(labels)
            issues = [issue for issue in issues if label_set.issubset(set(issue.labels))]

        if status is not None:
            issues = [issue for issue in issues if issue.status == status]

        if limit is not None:
            issues = issues[:limit]

        return issues

    def get_issue(self, issue_id: str) -> BeadsIssue | None:
        for issue in self._load():
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
        with self._store_lock():
            issues = self._load()
            existing_ids = {issue.id for issue in issues}
            issue_id = self._generate_id(existing_ids)
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
            issues.append(issue)
            self._save(issues)
        logger.debug("created issue %s (ephemeral=%s)", issue_id, ephemeral)
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
        return filter_durable(self._load())

    def sync(self) -> int:
        exported = self.export_issues()
        write_text_atomic(self.synced_log_path, serialize_export(exported))
        logger.debug("wrote %d records to %s", len(exported), self.synced_log_path)
        return len(exported)

    def _replace(self, issue_id: str, changes: dict[str, object]) -> BeadsIssue | IssueNotFound:
        with self._store_lock():
            issues = self._load()
            for index, issue in enumerate(issues):
                if issue.id != issue_id:
                    continue
                updated = dataclasses.replace(
                    issue, **changes, updated_at=self._time.now().isoformat()
                )
                issues[index] = updated
                self._save(issues)
                return updated
        return IssueNotFound(issue_id=issue_id)

    @contextmanager
    def _store_lock(self) -> Iterator[None]:
        """Hold an exclusive fcntl lock across a read-modify-write of local.jsonl."""
        self._beads_dir.mkdir(parents=True, exist_ok=True)
        # Append mode so opening never truncates a lock file another writer holds
        with open(self.lock_path, "a") as lock_fd:
            fcntl.flock(lock_fd.fileno(), fcntl.LOCK_EX)
            try:
                yield
            finally:
                fcntl.flock(lock_fd.fileno(), fcntl.LOCK_UN)

    def _generate_id(self, existing_ids: set[str]) -> str:
        while True:
            candidate = f"{self._issue_prefix}-{uuid.uuid4().hex[:5]}"
            if candidate not in existing_ids:
                return candidate

    def _load(self) -> list[BeadsIssue]:
        path = self.local_store_path
        if not path.exists():
            return []

        issues: list[BeadsIssue] = []
        for line_number, line in enumerate(path.read_text(encoding="utf-8").splitlines(), 1):
            if not line.strip():
                continue
            try:
                item = json.loads(line)
                issues.append(issue_from_dict(item))
            except (json.JSONDecodeError, KeyError, TypeError) as e:
                msg = f"Malformed issue record in {path} line {line_number}: {e}"
                raise RuntimeError(msg) from e
        return issues

    def _save(self, issues: list[BeadsIssue]) -> None:
        content = "".join(
            json.dumps(issue_to_dict(issue), sort_keys=True, ensure_ascii=False) + "\n"
            for issue in issues
        )
        write_text_atomic(self.local_store_path, content)
