"""Town configuration loaded from .gastown/config.toml."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from gastown.gateway.hooks.types import ConflictPolicy

CONFIG_DIRNAME = ".gastown"
CONFIG_FILENAME = "config.toml"
AGENT_ENV_VAR = "GT_AGENT"

DEFAULT_ISSUE_PREFIX = "gt"


@dataclass(frozen=True)
class GastownConfig:
    """In-memory representation of `.gastown/config.toml`.

    Example config.toml:
      # Local issue store and synced log (default: .beads)
      beads_dir = ".beads"

      # Local-only directory for hook-<agent>.json files (default: beads_dir)
      hook_dir = ".beads"

      # Prefix for new issue ids (default: "gt")
      issue_prefix = "gt"

      [hooks]
      # "reject" keeps a pending hook and fails the sling; "overwrite" replaces it
      on_conflict = "reject"

      [agent]
      # Identity used when --agent is not given and GT_AGENT is unset
      name = "crew/joe"
    """

    root: Path
    beads_dir: Path
    hook_dir: Path
    issue_prefix: str
    conflict_policy: ConflictPolicy
    agent: str | None

    @staticmethod
    def defaults(root: Path) -> "GastownConfig":
        beads_dir = root / ".beads"
        return GastownConfig(
            root=root,
            beads_dir=beads_dir,
            hook_dir=beads_dir,
            issue_prefix=DEFAULT_ISSUE_PREFIX,
            conflict_policy=ConflictPolicy.REJECT,
            agent=None,
        )


def _resolve(root: Path, value: object) -> Path:
    path = Path(str(value)).expanduser()
    if path.is_absolute():
        return path
    return root / path


def _table(data: dict[str, object], key: str, cfg_path: Path) -> dict[str, object]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        msg = f"Invalid {key} in {cfg_path}: expected a [{key}] table, got {value!r}"
        raise ValueError(msg)
    return value


def load_config(root: Path) -> GastownConfig:
    """Load .gastown/config.toml under root if present; otherwise return defaults.

    Relative paths resolve against root.

    Raises:
        ValueError: If hooks.on_conflict is not a known policy, or [hooks] or
            [agent] is not a table
    """
    cfg_path = root / CONFIG_DIRNAME / CONFIG_FILENAME
    if not cfg_path.exists():
        return GastownConfig.defaults(root)

    data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))

    beads_dir = _resolve(root, data.get("beads_dir", ".beads"))
    hook_dir_value = data.get("hook_dir")
    hook_dir = _resolve(root, hook_dir_value) if hook_dir_value is not None else beads_dir

    issue_prefix = str(data.get("issue_prefix", DEFAULT_ISSUE_PREFIX))

    hooks = _table(data, "hooks", cfg_path)
    on_conflict = str(hooks.get("on_conflict", ConflictPolicy.REJECT.value))
    valid_policies = {policy.value: policy for policy in ConflictPolicy}
    if on_conflict not in valid_policies:
        msg = (
            f"Invalid hooks.on_conflict {on_conflict!r} in {cfg_path}; "
            f"expected one of: {', '.join(sorted(valid_policies))}"
        )
        raise ValueError(msg)

    agent = _table(data, "agent", cfg_path).get("name")
    if agent is not None:
        agent = str(agent)

    return GastownConfig(
        root=root,
        beads_dir=beads_dir,
        hook_dir=hook_dir,
        issue_prefix=issue_prefix,
        conflict_policy=valid_policies[on_conflict],
        agent=agent,
    )


def resolve_agent(explicit: str | None, config: GastownConfig) -> str | None:
    """Pick the agent identity: explicit option, then GT_AGENT, then config."""
    if explicit is not None:
        return explicit
    from_env = os.environ.get(AGENT_ENV_VAR)
    if from_env:
        return from_env
    return config.agent
