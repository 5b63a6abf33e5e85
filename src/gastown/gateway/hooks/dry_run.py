"""Dry-run wrapper for hook store operations."""

from gastown.gateway.hooks.abc import HookStore
from gastown.gateway.hooks.types import (
    ConflictPolicy,
    HookAlreadyPending,
    HookCorruptedError,
    HookCreated,
    SlungWork,
)
from gastown.output import user_output


class DryRunHookStore(HookStore):
    """Dry-run wrapper that delegates reads and reports writes without executing.

    create_hook still consults the wrapped store so a dry run reports the same
    conflict a real run would hit. A corrupted slot counts as occupied, as it
    does for the real store.
    """

    def __init__(self, wrapped: HookStore, *, conflict_policy: ConflictPolicy) -> None:
        """Initialize dry-run wrapper with a real implementation.

        Args:
            wrapped: The real HookStore implementation to wrap.
            conflict_policy: Policy of the wrapped store, used to predict conflicts.
        """
        self._wrapped = wrapped
        self._conflict_policy = conflict_policy

    def create_hook(self, agent: str, hook: SlungWork) -> HookCreated | HookAlreadyPending:
        try:
            pending = self._wrapped.read_hook(agent)
        except HookCorruptedError:
            if self._conflict_policy == ConflictPolicy.REJECT:
                return HookAlreadyPending(agent=agent, pending_bead_id=None)
            user_output(
                f"[DRY RUN] Would attach {hook.bead_id} to hook of {agent}, "
                "replacing a corrupted hook"
            )
            return HookCreated(agent=agent, superseded=None)

        if pending is not None and self._conflict_policy == ConflictPolicy.REJECT:
            return HookAlreadyPending(agent=agent, pending_bead_id=pending.bead_id)

        user_output(f"[DRY RUN] Would attach {hook.bead_id} to hook of {agent}")
        superseded = pending.bead_id if pending is not None else None
        return HookCreated(agent=agent, superseded=superseded)

    def read_hook(self, agent: str) -> SlungWork | None:
        return self._wrapped.read_hook(agent)

    def burn_hook(self, agent: str) -> bool:
        try:
            pending = self._wrapped.read_hook(agent)
        except HookCorruptedError:
            user_output(f"[DRY RUN] Would burn corrupted hook of {agent}")
            return True
        if pending is None:
            return False
        user_output(f"[DRY RUN] Would burn hook of {agent} ({pending.bead_id})")
        return True

    def list_pending_agents(self) -> list[str]:
        return self._wrapped.list_pending_agents()
