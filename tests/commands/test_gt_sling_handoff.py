"""Tests for gt sling and gt handoff."""

from click.testing import CliRunner

from gastown.cli.cli import cli
from gastown.core.context import GtContext
from gastown.gateway.beads.fake import FakeBeadsGateway
from gastown.gateway.hooks.dry_run import DryRunHookStore
from gastown.gateway.hooks.fake import FakeHookStore
from gastown.gateway.hooks.types import ConflictPolicy
from gastown.gateway.time.fake import FakeTime
from tests.test_utils.gastown_builders import make_hook


def test_sling_attaches_work_and_notifies() -> None:
    hooks = FakeHookStore()
    beads = FakeBeadsGateway(time=FakeTime(), issues=None)
    ctx = GtContext.for_test(hooks=hooks, beads=beads)

    result = CliRunner().invoke(cli, ["sling", "gt-abc", "nux", "--from", "deacon"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Slung gt-abc to nux" in result.output
    hook = hooks.read_hook("nux")
    assert hook is not None
    assert hook.bead_id == "gt-abc"
    assert hook.created_by == "deacon"
    assert len(beads.issues) == 1
    assert beads.issues[0].ephemeral is True


def test_sling_defaults_slinger_to_operator() -> None:
    hooks = FakeHookStore()
    ctx = GtContext.for_test(hooks=hooks)

    result = CliRunner().invoke(cli, ["sling", "gt-abc", "nux", "--no-notify"], obj=ctx)

    assert result.exit_code == 0, result.output
    hook = hooks.read_hook("nux")
    assert hook is not None
    assert hook.created_by == "operator"
    assert "Notified" not in result.output


def test_sling_conflict_exits_nonzero() -> None:
    hooks = FakeHookStore(hooks={"nux": make_hook("gt-first")})
    ctx = GtContext.for_test(hooks=hooks)

    result = CliRunner().invoke(cli, ["sling", "gt-second", "nux"], obj=ctx)

    assert result.exit_code == 1
    assert "already has pending work" in result.output
    assert "gt-first" in result.output
    pending = hooks.read_hook("nux")
    assert pending is not None
    assert pending.bead_id == "gt-first"


def test_sling_overwrite_warns() -> None:
    hooks = FakeHookStore(
        hooks={"nux": make_hook("gt-first")}, conflict_policy=ConflictPolicy.OVERWRITE
    )
    ctx = GtContext.for_test(hooks=hooks)

    result = CliRunner().invoke(cli, ["sling", "gt-second", "nux"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "superseded pending work gt-first" in result.output


def test_handoff_uses_env_agent() -> None:
    hooks = FakeHookStore()
    ctx = GtContext.for_test(hooks=hooks)

    result = CliRunner().invoke(
        cli, ["handoff", "gt-abc"], obj=ctx, env={"GT_AGENT": "crew/joe"}
    )

    assert result.exit_code == 0, result.output
    assert "Handed off gt-abc" in result.output
    hook = hooks.read_hook("crew/joe")
    assert hook is not None
    assert hook.subject == "Handoff: gt-abc"


def test_handoff_without_agent_identity_fails() -> None:
    result = CliRunner().invoke(cli, ["handoff", "gt-abc"], obj=GtContext.for_test())

    assert result.exit_code == 1
    assert "No agent identity" in result.output


def test_dry_run_sling_onto_corrupted_hook_reports_conflict() -> None:
    fake = FakeHookStore(raw_slots={"nux": "{broken"})
    hooks = DryRunHookStore(fake, conflict_policy=ConflictPolicy.REJECT)
    ctx = GtContext.for_test(hooks=hooks, dry_run=True)

    result = CliRunner().invoke(cli, ["sling", "gt-abc", "nux"], obj=ctx)

    assert result.exit_code == 1
    assert "already has pending work" in result.output
    assert fake.created == []
