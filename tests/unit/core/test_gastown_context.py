"""Tests for GtContext wiring."""

from pathlib import Path

import pytest

from gastown.core.context import GtContext, create_context
from gastown.gateway.beads.dry_run import DryRunBeadsGateway
from gastown.gateway.beads.fake import FakeBeadsGateway
from gastown.gateway.beads.printing import PrintingBeadsGateway
from gastown.gateway.beads.real import RealBeadsGateway
from gastown.gateway.hooks.dry_run import DryRunHookStore
from gastown.gateway.hooks.fake import FakeHookStore
from gastown.gateway.hooks.real import RealHookStore


def test_for_test_uses_fakes() -> None:
    ctx = GtContext.for_test()

    assert isinstance(ctx.beads, FakeBeadsGateway)
    assert isinstance(ctx.hooks, FakeHookStore)
    assert ctx.cwd == Path("/test/town")
    assert ctx.config.root == Path("/test/town")


def test_create_context_finds_town_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".beads").mkdir()
    nested = tmp_path / "rig" / "polecats"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    ctx = create_context(dry_run=False)

    assert isinstance(ctx.beads, RealBeadsGateway)
    assert isinstance(ctx.hooks, RealHookStore)
    assert ctx.config.root == tmp_path.resolve()
    assert ctx.hooks.hook_dir == tmp_path.resolve() / ".beads"


def test_create_context_dry_run_wraps_gateways(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)

    ctx = create_context(dry_run=True)

    assert isinstance(ctx.beads, DryRunBeadsGateway)
    assert isinstance(ctx.hooks, DryRunHookStore)
    assert ctx.dry_run is True


def test_create_context_verbose_prints_beads(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)

    ctx = create_context(dry_run=False, verbose=True)

    assert isinstance(ctx.beads, PrintingBeadsGateway)
