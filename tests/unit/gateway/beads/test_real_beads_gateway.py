"""Tests for RealBeadsGateway over JSONL files in a temp directory."""

import json
from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime
from pathlib import Path

import pytest

from gastown.gateway.beads.real import RealBeadsGateway
from gastown.gateway.time.fake import FakeTime
from gastown.non_ideal_state import IssueNotFound
from tests.test_utils.gastown_builders import make_issue, seed_local_store


def _gateway(beads_dir: Path, time: FakeTime | None = None) -> RealBeadsGateway:
    return RealBeadsGateway(
        beads_dir=beads_dir,
        time=time if time is not None else FakeTime(),
        issue_prefix="gt",
    )


def test_list_issues_empty_when_store_missing(tmp_path: Path) -> None:
    gateway = _gateway(tmp_path / ".beads")

    assert gateway.list_issues(labels=None, status=None, limit=None) == []


def test_create_issue_persists_across_instances(tmp_path: Path) -> None:
    beads_dir = tmp_path / ".beads"

    # Act
    created = _gateway(beads_dir).create_issue(
        title="Fix the widget",
        labels=["bug"],
        description="Widget is broken",
        assignee="nux",
        ephemeral=False,
    )

    # Assert: a fresh gateway sees the same record
    loaded = _gateway(beads_dir).get_issue(created.id)
    assert loaded == created
    assert created.id.startswith("gt-")
    assert created.status == "open"
    assert created.labels == ("bug",)
    assert created.created_at == "2025-01-15T14:30:00+00:00"


def test_create_issue_preserves_insertion_order(tmp_path: Path) -> None:
    gateway = _gateway(tmp_path / ".beads")
    ids = [
        gateway.create_issue(
            title=f"Issue {i}", labels=None, description=None, assignee=None, ephemeral=False
        ).id
        for i in range(4)
    ]

    issues = gateway.list_issues(labels=None, status=None, limit=None)

    assert [issue.id for issue in issues] == ids


def test_list_issues_includes_ephemeral_locally(tmp_path: Path) -> None:
    """Wisps are queryable from the local store for as long as they exist."""
    gateway = _gateway(tmp_path / ".beads")
    wisp = gateway.create_issue(
        title="patrol trace", labels=None, description=None, assignee=None, ephemeral=True
    )

    issues = gateway.list_issues(labels=None, status=None, limit=None)

    assert issues == [wisp]
    assert wisp.ephemeral is True


def test_list_issues_filters(tmp_path: Path) -> None:
    beads_dir = tmp_path / ".beads"
    seed_local_store(
        beads_dir,
        [
            make_issue("gt-1", labels=("bug",), status="open"),
            make_issue("gt-2", labels=("bug",), status="closed"),
            make_issue("gt-3", labels=("feature",), status="open"),
            make_issue("gt-4", labels=("bug", "urgent"), status="open"),
        ],
    )
    gateway = _gateway(beads_dir)

    bugs_open = gateway.list_issues(labels=["bug"], status="open", limit=None)
    limited = gateway.list_issues(labels=None, status=None, limit=2)

    assert [issue.id for issue in bugs_open] == ["gt-1", "gt-4"]
    assert [issue.id for issue in limited] == ["gt-1", "gt-2"]


def test_get_issue_not_found_returns_none(tmp_path: Path) -> None:
    assert _gateway(tmp_path / ".beads").get_issue("gt-missing") is None


def test_set_ephemeral_round_trip(tmp_path: Path) -> None:
    beads_dir = tmp_path / ".beads"
    seed_local_store(beads_dir, [make_issue("gt-1")])
    gateway = _gateway(beads_dir)

    flagged = gateway.set_ephemeral("gt-1", True)
    assert not isinstance(flagged, IssueNotFound)
    assert flagged.ephemeral is True
    assert gateway.get_issue("gt-1") == flagged

    cleared = gateway.set_ephemeral("gt-1", False)
    assert not isinstance(cleared, IssueNotFound)
    assert cleared.ephemeral is False


def test_set_ephemeral_missing_issue(tmp_path: Path) -> None:
    result = _gateway(tmp_path / ".beads").set_ephemeral("gt-missing", True)

    assert result == IssueNotFound(issue_id="gt-missing")


def test_update_issue_sets_status_and_assignee(tmp_path: Path) -> None:
    beads_dir = tmp_path / ".beads"
    seed_local_store(beads_dir, [make_issue("gt-1")])
    later = datetime(2025, 1, 16, 9, 0, 0, tzinfo=UTC)
    time = FakeTime()
    gateway = _gateway(beads_dir, time)
    time.advance(later)

    result = gateway.update_issue("gt-1", status="in_progress", assignee="nux")

    assert not isinstance(result, IssueNotFound)
    assert result.status == "in_progress"
    assert result.assignee == "nux"
    assert result.updated_at == later.isoformat()
    assert gateway.get_issue("gt-1") == result


def test_update_issue_none_leaves_fields_unchanged(tmp_path: Path) -> None:
    beads_dir = tmp_path / ".beads"
    seed_local_store(beads_dir, [make_issue("gt-1", status="blocked", assignee="joe")])
    gateway = _gateway(beads_dir)

    result = gateway.update_issue("gt-1", status=None, assignee=None)

    assert not isinstance(result, IssueNotFound)
    assert result.status == "blocked"
    assert result.assignee == "joe"


def test_export_excludes_ephemeral_after_flag_set(tmp_path: Path) -> None:
    beads_dir = tmp_path / ".beads"
    seed_local_store(beads_dir, [make_issue("gt-1"), make_issue("gt-2"), make_issue("gt-3")])
    gateway = _gateway(beads_dir)

    gateway.set_ephemeral("gt-2", True)

    assert [issue.id for issue in gateway.export_issues()] == ["gt-1", "gt-3"]


def test_sync_writes_only_durable_records(tmp_path: Path) -> None:
    beads_dir = tmp_path / ".beads"
    seed_local_store(beads_dir, [make_issue("gt-1"), make_issue("gt-w", ephemeral=True)])
    gateway = _gateway(beads_dir)

    count = gateway.sync()

    assert count == 1
    records = [json.loads(line) for line in gateway.synced_log_path.read_text().splitlines()]
    assert [record["id"] for record in records] == ["gt-1"]
    assert all("ephemeral" not in record for record in records)


def test_sync_twice_is_byte_identical(tmp_path: Path) -> None:
    beads_dir = tmp_path / ".beads"
    seed_local_store(
        beads_dir, [make_issue("gt-1"), make_issue("gt-w", ephemeral=True), make_issue("gt-2")]
    )
    gateway = _gateway(beads_dir)

    gateway.sync()
    first = gateway.synced_log_path.read_bytes()
    gateway.sync()
    second = gateway.synced_log_path.read_bytes()

    assert first == second


def test_sync_leaves_no_temp_files(tmp_path: Path) -> None:
    beads_dir = tmp_path / ".beads"
    seed_local_store(beads_dir, [make_issue("gt-1")])

    _gateway(beads_dir).sync()

    assert sorted(path.name for path in beads_dir.iterdir()) == ["issues.jsonl", "local.jsonl"]


def test_records_without_ephemeral_key_are_durable(tmp_path: Path) -> None:
    """Stores written before the flag existed load as durable issues."""
    beads_dir = tmp_path / ".beads"
    beads_dir.mkdir()
    record = {
        "id": "gt-old",
        "title": "Old issue",
        "status": "open",
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-01T00:00:00+00:00",
    }
    (beads_dir / "local.jsonl").write_text(json.dumps(record) + "\n", encoding="utf-8")

    issue = _gateway(beads_dir).get_issue("gt-old")

    assert issue is not None
    assert issue.ephemeral is False
    assert issue.labels == ()


def test_malformed_local_store_raises(tmp_path: Path) -> None:
    beads_dir = tmp_path / ".beads"
    beads_dir.mkdir()
    (beads_dir / "local.jsonl").write_text("{not json\n", encoding="utf-8")

    with pytest.raises(RuntimeError, match="line 1"):
        _gateway(beads_dir).list_issues(labels=None, status=None, limit=None)


def test_concurrent_creates_are_all_kept(tmp_path: Path) -> None:
    beads_dir = tmp_path / ".beads"
    writers = 4
    per_writer = 40

    def create_many(writer: int) -> None:
        # Separate instances, as separate agent processes would have
        gateway = _gateway(beads_dir)
        for n in range(per_writer):
            gateway.create_issue(
                title=f"mail {writer}-{n}",
                labels=["gt:message"],
                description=None,
                assignee="nux",
                ephemeral=True,
            )

    # Act
    with ThreadPoolExecutor(max_workers=writers) as executor:
        list(executor.map(create_many, range(writers)))

    # Assert
    issues = _gateway(beads_dir).list_issues(labels=None, status=None, limit=None)
    assert len(issues) == writers * per_writer
    assert len({issue.id for issue in issues}) == writers * per_writer


def test_accept_survives_concurrent_mail(tmp_path: Path) -> None:
    beads_dir = tmp_path / ".beads"
    seed_local_store(beads_dir, [make_issue("gt-abc")])

    def send_mail_burst() -> None:
        gateway = _gateway(beads_dir)
        for n in range(50):
            gateway.create_issue(
                title=f"LIFECYCLE: patrol {n}",
                labels=["gt:message"],
                description=None,
                assignee="deacon",
                ephemeral=True,
            )

    def accept() -> None:
        gateway = _gateway(beads_dir)
        for _ in range(50):
            gateway.update_issue("gt-abc", status="in_progress", assignee="nux")

    # Act
    with ThreadPoolExecutor(max_workers=2) as executor:
        futures = [executor.submit(send_mail_burst), executor.submit(accept)]
        for future in futures:
            future.result()

    # Assert
    gateway = _gateway(beads_dir)
    accepted = gateway.get_issue("gt-abc")
    assert accepted is not None
    assert accepted.status == "in_progress"
    assert accepted.assignee == "nux"
    assert len(gateway.list_issues(labels=["gt:message"], status=None, limit=None)) == 50


def test_mutations_leave_lock_file_beside_store(tmp_path: Path) -> None:
    gateway = _gateway(tmp_path / ".beads")

    gateway.create_issue(
        title="x", labels=None, description=None, assignee=None, ephemeral=False
    )

    assert gateway.lock_path == tmp_path / ".beads" / "local.jsonl.lock"
    assert gateway.lock_path.exists()
