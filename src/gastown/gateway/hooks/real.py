"""Production hook store using one JSON file per agent."""

import logging
import os
from pathlib import Path

from gastown.gateway.hooks.abc import HookStore
from gastown.gateway.hooks.types import (
    HOOK_PREFIX,
    HOOK_SUFFIX,
    ConflictPolicy,
    HookAlreadyPending,
    HookCorruptedError,
    HookCreated,
    SlungWork,
    agent_from_filename,
    hook_filename,
    parse_hook,
    serialize_hook,
)
from gastown.path_utils import write_temp_file

logger = logging.getLogger(__name__)


class RealHookStore(HookStore):
    """Hook slots stored as hook-<agent>.json files in a local-only directory.

    Writes go to a temp file in the hook directory first and are then
    published in one step: os.link for REJECT (fails if the slot exists),
    os.replace for OVERWRITE. Readers therefore see either no file or a
    complete one. Burning is a single unlink.
    """

    def __init__(self, *, hook_dir: Path, conflict_policy: ConflictPolicy) -> None:
        """Initialize RealHookStore.

        Args:
            hook_dir: Directory holding the hook files. Must not be part of the
                synced export.
            conflict_policy: Behavior when creating over a pending hook.
        """
        self._hook_dir = hook_dir
        self._conflict_policy = conflict_policy

    @property
    def hook_dir(self) -> Path:
        return self._hook_dir

    def hook_path(self, agent: str) -> Path:
        """Return the slot path for an agent."""
        return self._hook_dir / hook_filename(agent)

    def create_hook(self, agent: str, hook: SlungWork) -> HookCreated | HookAlreadyPending:
        self._hook_dir.mkdir(parents=True, exist_ok=True)
        path = self.hook_path(agent)

        if self._conflict_policy == ConflictPolicy.REJECT:
            return self._create_exclusive(agent, hook, path)
        return self._create_overwrite(agent, hook, path)

    def read_hook(self, agent: str) -> SlungWork | None:
        try:
            raw = self.hook_path(agent).read_bytes()
        except FileNotFoundError:
            return None
        hook = parse_hook(raw, agent=agent)
        logger.debug("read hook for %s: %s", agent, hook.bead_id)
        return hook

    def burn_hook(self, agent: str) -> bool:
        try:
            self.hook_path(agent).unlink()
        except FileNotFoundError:
            return False
        logger.debug("burned hook for %s", agent)
        return True

    def list_pending_agents(self) -> list[str]:
        if not self._hook_dir.is_dir():
            return []
        agents: list[str] = []
        for path in self._hook_dir.glob(f"{HOOK_PREFIX}*{HOOK_SUFFIX}"):
            agent = agent_from_filename(path.name)
            if agent is not None:
                agents.append(agent)
        return sorted(agents)

    def _create_exclusive(
        self, agent: str, hook: SlungWork, path: Path
    ) -> HookCreated | HookAlreadyPending:
        tmp_path = write_temp_file(self._hook_dir, serialize_hook(hook), prefix=f".{path.name}.")
        try:
            os.link(tmp_path, path)
        except FileExistsError:
            logger.debug("rejected hook for %s: slot already pending", agent)
            return HookAlreadyPending(agent=agent, pending_bead_id=self._pending_bead_id(agent))
        finally:
            tmp_path.unlink(missing_ok=True)

        logger.debug("created hook for %s: %s", agent, hook.bead_id)
        return HookCreated(agent=agent, superseded=None)

    def _create_overwrite(self, agent: str, hook: SlungWork, path: Path) -> HookCreated:
        had_pending = path.exists()
        superseded = self._pending_bead_id(agent) if had_pending else None

        tmp_path = write_temp_file(self._hook_dir, serialize_hook(hook), prefix=f".{path.name}.")
        try:
            os.replace(tmp_path, path)
        finally:
            tmp_path.unlink(missing_ok=True)

        if had_pending:
            logger.warning(
                "hook for %s overwritten: %s superseded by %s",
                agent,
                superseded if superseded is not None else "unreadable hook",
                hook.bead_id,
            )
        logger.debug("created hook for %s: %s", agent, hook.bead_id)
        return HookCreated(agent=agent, superseded=superseded)

    def _pending_bead_id(self, agent: str) -> str | None:
        """Best-effort bead id of the pending hook, for messages only."""
        try:
            hook = self.read_hook(agent)
        except HookCorruptedError:
            return None
        if hook is None:
            return None
        return hook.bead_id
