"""Tests for the ephemeral export filter."""

import json

from gastown.gateway.beads.export import export_record, filter_durable, serialize_export
from gastown.gateway.beads.types import is_ephemeral
from tests.test_utils.gastown_builders import make_issue


def test_is_ephemeral_reads_flag() -> None:
    assert is_ephemeral(make_issue("gt-1", ephemeral=True)) is True
    assert is_ephemeral(make_issue("gt-2")) is False


def test_filter_durable_drops_ephemeral_issues() -> None:
    issues = [
        make_issue("gt-1"),
        make_issue("gt-2", ephemeral=True),
        make_issue("gt-3"),
    ]

    result = filter_durable(issues)

    assert [issue.id for issue in result] == ["gt-1", "gt-3"]


def test_filter_durable_preserves_store_order() -> None:
    """The filter only removes; it never sorts by id."""
    issues = [make_issue("gt-z"), make_issue("gt-a"), make_issue("gt-m", ephemeral=True)]

    result = filter_durable(issues)

    assert [issue.id for issue in result] == ["gt-z", "gt-a"]


def test_filter_durable_all_ephemeral_returns_empty() -> None:
    issues = [make_issue("gt-1", ephemeral=True), make_issue("gt-2", ephemeral=True)]

    assert filter_durable(issues) == []


def test_export_record_omits_ephemeral_key() -> None:
    record = export_record(make_issue("gt-1", labels=("bug",)))

    assert "ephemeral" not in record
    assert record["id"] == "gt-1"
    assert record["labels"] == ["bug"]


def test_serialize_export_is_jsonl_with_sorted_keys() -> None:
    output = serialize_export([make_issue("gt-1"), make_issue("gt-2")])

    lines = output.splitlines()
    assert len(lines) == 2
    assert output.endswith("\n")
    first = json.loads(lines[0])
    assert first["id"] == "gt-1"
    assert list(first) == sorted(first)


def test_serialize_export_filters_unfiltered_input() -> None:
    """A caller passing the whole store still cannot leak a wisp."""
    output = serialize_export([make_issue("gt-1"), make_issue("gt-wisp", ephemeral=True)])

    assert "gt-wisp" not in output
    assert "gt-1" in output


def test_serialize_export_empty_is_empty_string() -> None:
    assert serialize_export([]) == ""


def test_serialize_export_is_deterministic() -> None:
    issues = [make_issue("gt-1", labels=("b", "a")), make_issue("gt-2", assignee="nux")]

    assert serialize_export(issues) == serialize_export(issues)
