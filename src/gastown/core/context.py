"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from gastown.core.config import GastownConfig, load_config
from gastown.gateway.beads.abc import BeadsGateway
from gastown.gateway.beads.dry_run import DryRunBeadsGateway
from gastown.gateway.beads.printing import PrintingBeadsGateway
from gastown.gateway.beads.real import RealBeadsGateway
from gastown.gateway.hooks.abc import HookStore
from gastown.gateway.hooks.dry_run import DryRunHookStore
from gastown.gateway.hooks.real import RealHookStore
from gastown.gateway.time.abc import Time
from gastown.gateway.time.real import RealTime
from gastown.path_utils import find_town_root


@dataclass(frozen=True)
class GtContext:
    """Immutable context holding all dependencies for gt operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    beads: BeadsGateway
    hooks: HookStore
    time: Time
    cwd: Path  # Current working directory at CLI invocation
    config: GastownConfig
    dry_run: bool

    @staticmethod
    def for_test(
        *,
        beads: BeadsGateway | None = None,
        hooks: HookStore | None = None,
        time: Time | None = None,
        cwd: Path | None = None,
        config: GastownConfig | None = None,
        dry_run: bool = False,
    ) -> "GtContext":
        """Create a context wired with fakes unless overridden.

        cwd defaults to Path("/test/town") so tests never touch the real
        working directory by accident.
        """
        from gastown.gateway.beads.fake import FakeBeadsGateway
        from gastown.gateway.hooks.fake import FakeHookStore
        from gastown.gateway.time.fake import FakeTime

        resolved_time = time if time is not None else FakeTime()
        resolved_cwd = cwd if cwd is not None else Path("/test/town")
        return GtContext(
            beads=beads if beads is not None else FakeBeadsGateway(time=resolved_time, issues=None),
            hooks=hooks if hooks is not None else FakeHookStore(),
            time=resolved_time,
            cwd=resolved_cwd,
            config=config if config is not None else GastownConfig.defaults(resolved_cwd),
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool, verbose: bool = False) -> GtContext:
    """Create production context with real gateways.

    The town root is the nearest ancestor of the cwd holding .gastown/ or
    .beads/; outside a town the cwd itself is used.

    Args:
        dry_run: Wrap mutating gateways so nothing is written
        verbose: Print each issue store mutation before performing it
    """
    cwd = Path.cwd()
    root = find_town_root(cwd)
    config = load_config(root if root is not None else cwd)
    time = RealTime()

    beads: BeadsGateway = RealBeadsGateway(
        beads_dir=config.beads_dir, time=time, issue_prefix=config.issue_prefix
    )
    hooks: HookStore = RealHookStore(
        hook_dir=config.hook_dir, conflict_policy=config.conflict_policy
    )

    if dry_run:
        beads = DryRunBeadsGateway(beads)
        hooks = DryRunHookStore(hooks, conflict_policy=config.conflict_policy)
    elif verbose:
        beads = PrintingBeadsGateway(beads)

    return GtContext(
        beads=beads,
        hooks=hooks,
        time=time,
        cwd=cwd,
        config=config,
        dry_run=dry_run,
    )
