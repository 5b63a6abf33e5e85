"""Tests for gt prime."""

from click.testing import CliRunner

from gastown.cli.cli import cli
from gastown.core.context import GtContext
from gastown.gateway.beads.fake import FakeBeadsGateway
from gastown.gateway.hooks.fake import FakeHookStore
from gastown.gateway.time.fake import FakeTime
from tests.test_utils.gastown_builders import make_hook, make_issue


def test_prime_resumes_and_burns() -> None:
    hooks = FakeHookStore(hooks={"nux": make_hook("gt-abc", context="start here")})
    beads = FakeBeadsGateway(time=FakeTime(), issues=[make_issue("gt-abc", title="Widget")])
    ctx = GtContext.for_test(hooks=hooks, beads=beads)

    result = CliRunner().invoke(cli, ["prime", "--agent", "nux"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Resumed gt-abc: Widget" in result.output
    assert "Context: start here" in result.output
    assert hooks.read_hook("nux") is None


def test_prime_with_empty_hook_succeeds() -> None:
    result = CliRunner().invoke(cli, ["prime", "--agent", "nux"], obj=GtContext.for_test())

    assert result.exit_code == 0
    assert "No work on hook" in result.output


def test_prime_missing_bead_exits_nonzero_and_keeps_hook() -> None:
    hooks = FakeHookStore(hooks={"nux": make_hook("gt-gone")})

    result = CliRunner().invoke(
        cli, ["prime", "--agent", "nux"], obj=GtContext.for_test(hooks=hooks)
    )

    assert result.exit_code == 1
    assert "gt-gone" in result.output
    assert hooks.read_hook("nux") is not None


def test_prime_corrupted_hook_halts() -> None:
    hooks = FakeHookStore(raw_slots={"nux": '{"type": "mystery"}'})

    result = CliRunner().invoke(
        cli, ["prime", "--agent", "nux"], obj=GtContext.for_test(hooks=hooks)
    )

    assert result.exit_code == 1
    assert "Automatic resume halted" in result.output
    assert "gt hook burn --agent nux" in result.output
    assert hooks.burned == []
