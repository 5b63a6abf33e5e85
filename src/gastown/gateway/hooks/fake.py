"""In-memory fake implementation of the hook store for testing."""

from gastown.gateway.hooks.abc import HookStore
from gastown.gateway.hooks.types import (
    ConflictPolicy,
    HookAlreadyPending,
    HookCorruptedError,
    HookCreated,
    SlungWork,
    parse_hook,
    serialize_hook,
)


class FakeHookStore(HookStore):
    """In-memory fake that stores serialized payloads.

    Payloads are kept as text so reads go through parse_hook exactly like the
    real store, and tests can seed corrupted slots via raw_slots.

    This class has NO public setup methods beyond constructor.
    All state is provided via constructor or captured during execution.
    """

    def __init__(
        self,
        *,
        hooks: dict[str, SlungWork] | None = None,
        raw_slots: dict[str, str] | None = None,
        conflict_policy: ConflictPolicy = ConflictPolicy.REJECT,
    ) -> None:
        """Create FakeHookStore with optional initial state.

        Args:
            hooks: Pending hooks keyed by agent identity
            raw_slots: Raw slot contents keyed by agent identity (for corruption tests)
            conflict_policy: Behavior when creating over a pending hook
        """
        self._slots: dict[str, str] = {}
        if hooks is not None:
            for agent, hook in hooks.items():
                self._slots[agent] = serialize_hook(hook)
        if raw_slots is not None:
            self._slots.update(raw_slots)
        self._conflict_policy = conflict_policy
        self._created: list[tuple[str, SlungWork]] = []
        self._burned: list[str] = []

    # --- Test assertions ---

    @property
    def created(self) -> list[tuple[str, SlungWork]]:
        """(agent, hook) pairs accepted by create_hook, oldest first.

        This property is for test assertions only.
        """
        return list(self._created)

    @property
    def burned(self) -> list[str]:
        """Agents whose hook was actually removed by burn_hook.

        This property is for test assertions only.
        """
        return list(self._burned)

    # --- HookStore ---

    def create_hook(self, agent: str, hook: SlungWork) -> HookCreated | HookAlreadyPending:
        superseded: str | None = None
        if agent in self._slots:
            pending_bead_id = self._pending_bead_id(agent)
            if self._conflict_policy == ConflictPolicy.REJECT:
                return HookAlreadyPending(agent=agent, pending_bead_id=pending_bead_id)
            superseded = pending_bead_id

        self._slots[agent] = serialize_hook(hook)
        self._created.append((agent, hook))
        return HookCreated(agent=agent, superseded=superseded)

    def read_hook(self, agent: str) -> SlungWork | None:
        if agent not in self._slots:
            return None
        return parse_hook(self._slots[agent], agent=agent)

    def burn_hook(self, agent: str) -> bool:
        if agent not in self._slots:
            return False
        del self._slots[agent]
        self._burned.append(agent)
        return True

    def list_pending_agents(self) -> list[str]:
        return sorted(self._slots)

    def _pending_bead_id(self, agent: str) -> str | None:
        try:
            hook = self.read_hook(agent)
        except HookCorruptedError:
            return None
        if hook is None:
            return None
        return hook.bead_id
