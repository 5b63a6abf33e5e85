"""Session-start hook restoration."""

from gastown.gateway.hooks.abc import HookStore
from gastown.gateway.hooks.types import SlungWork


def restore_on_start(hooks: HookStore, agent: str) -> SlungWork | None:
    """Return the work hooked to agent at session start.

    Never burns. The caller burns only after the work has been accepted into
    its own state, so a crash anywhere before that re-delivers the same hook
    on the next start.

    Raises:
        HookCorruptedError: If the slot holds an undecodable hook. Automatic
            resume must halt; an operator has to inspect the slot.
    """
    return hooks.read_hook(agent)
