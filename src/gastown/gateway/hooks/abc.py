"""Abstract interface for per-agent hook slots."""

from abc import ABC, abstractmethod

from gastown.gateway.hooks.types import HookAlreadyPending, HookCreated, SlungWork


class HookStore(ABC):
    """Abstract interface for hook slot operations.

    Each agent identity owns exactly one slot holding at most one pending hook.
    Slot states are EMPTY and PENDING only: reading never changes state, and
    burning is the only way back to EMPTY.

    All implementations (real, fake, dry_run) must implement this interface.
    """

    @abstractmethod
    def create_hook(self, agent: str, hook: SlungWork) -> HookCreated | HookAlreadyPending:
        """Put a hook into the agent's slot.

        What happens when the slot is already pending is decided by the
        store's ConflictPolicy, fixed at construction.

        Args:
            agent: Target agent identity
            hook: Payload to attach

        Returns:
            HookCreated on success, HookAlreadyPending if rejected by policy

        Raises:
            OSError: If the slot cannot be written
        """
        ...

    @abstractmethod
    def read_hook(self, agent: str) -> SlungWork | None:
        """Read the agent's pending hook without consuming it.

        Args:
            agent: Agent identity

        Returns:
            The pending hook, or None if the slot is empty

        Raises:
            HookCorruptedError: If the slot holds an undecodable hook
        """
        ...

    @abstractmethod
    def burn_hook(self, agent: str) -> bool:
        """Remove the agent's hook.

        Safe to call on an empty slot.

        Returns:
            True if a hook was removed, False if the slot was already empty
        """
        ...

    @abstractmethod
    def list_pending_agents(self) -> list[str]:
        """Return agents that currently have a pending slot, sorted."""
        ...
