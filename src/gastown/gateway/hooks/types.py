"""Hook file schema, result types and (de)serialization.

Every hook file is a JSON object with a common header (type, created_at,
created_by) plus type-specific fields. The type tag is a closed set: adding a
new hook kind means adding a HookType member and a model to HOOK_MODELS.
"""

import json
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from urllib.parse import quote, unquote

from pydantic import AwareDatetime, BaseModel, ConfigDict, ValidationError, field_validator

HOOK_PREFIX = "hook-"
HOOK_SUFFIX = ".json"


class HookType(Enum):
    """Kind of hook file."""

    SLUNG_WORK = "slung-work"


class ConflictPolicy(Enum):
    """What create_hook does when the agent already has a pending hook.

    REJECT: leave the pending hook untouched and report HookAlreadyPending.
    OVERWRITE: replace it (last writer wins) and log a warning.
    """

    REJECT = "reject"
    OVERWRITE = "overwrite"


class HookHeader(BaseModel):
    """Common header for hook files.

    Fields:
        type: What kind of hook file this is
        created_at: When the hook was created (timezone-aware)
        created_by: Who created the hook (e.g., "crew/joe", "deacon")
    """

    model_config = ConfigDict(frozen=True)

    type: HookType
    created_at: AwareDatetime
    created_by: str


class SlungWork(HookHeader):
    """Work attached to an agent's hook by sling or handoff.

    Fields:
        bead_id: The issue/bead to work on (e.g., "gt-abc")
        context: Optional additional context from the slinger
        subject: Optional subject line (used in handoff mail)
    """

    type: HookType = HookType.SLUNG_WORK
    bead_id: str
    context: str | None = None
    subject: str | None = None

    @field_validator("bead_id")
    @classmethod
    def validate_bead_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @classmethod
    def new(
        cls,
        bead_id: str,
        *,
        created_by: str,
        created_at: datetime,
        context: str | None = None,
        subject: str | None = None,
    ) -> "SlungWork":
        """Create a slung-work hook."""
        return cls(
            type=HookType.SLUNG_WORK,
            created_at=created_at,
            created_by=created_by,
            bead_id=bead_id,
            context=context,
            subject=subject,
        )


HOOK_MODELS: dict[HookType, type[SlungWork]] = {
    HookType.SLUNG_WORK: SlungWork,
}


class HookCorruptedError(ValueError):
    """Raised when a hook file exists but cannot be decoded into a known hook.

    Corruption is never treated as "no work": the agent must stop its
    automatic resume and an operator has to inspect the file.
    """

    def __init__(self, agent: str, reason: str) -> None:
        self.agent = agent
        self.reason = reason
        super().__init__(f"Hook for agent '{agent}' is corrupted: {reason}")


@dataclass(frozen=True)
class HookCreated:
    """Success result from creating a hook.

    Attributes:
        agent: Agent whose slot now holds the hook
        superseded: Bead id of a pending hook that was overwritten, if any
    """

    agent: str
    superseded: str | None


@dataclass(frozen=True)
class HookAlreadyPending:
    """Error: agent already has unburned work on its hook. Implements NonIdealState."""

    agent: str
    pending_bead_id: str | None

    @property
    def error_type(self) -> str:
        return "hook-already-pending"

    @property
    def message(self) -> str:
        if self.pending_bead_id is None:
            return f"Agent '{self.agent}' already has pending work on its hook"
        return (
            f"Agent '{self.agent}' already has pending work on its hook: "
            f"{self.pending_bead_id}\n"
            f"Wait for the agent to pick it up, or burn it with: gt hook burn --agent {self.agent}"
        )


def hook_filename(agent: str) -> str:
    """Return the filename for an agent's hook file.

    The agent identity is percent-encoded, so namespaced identities such as
    "crew/joe" become a flat name ("hook-crew%2Fjoe.json") and distinct
    identities never share a slot.
    """
    return HOOK_PREFIX + quote(agent, safe="") + HOOK_SUFFIX


def agent_from_filename(filename: str) -> str | None:
    """Recover the agent identity from a hook filename, or None if it is not one."""
    if not filename.startswith(HOOK_PREFIX) or not filename.endswith(HOOK_SUFFIX):
        return None
    stem = filename[len(HOOK_PREFIX) : -len(HOOK_SUFFIX)]
    if not stem:
        return None
    agent = unquote(stem)
    # Only names hook_filename itself would produce
    if hook_filename(agent) != filename:
        return None
    return agent


def serialize_hook(hook: SlungWork) -> str:
    """Serialize a hook to JSON, omitting unset optional fields."""
    return hook.model_dump_json(exclude_none=True)


def parse_hook(raw: bytes | str, *, agent: str) -> SlungWork:
    """Decode hook file contents, dispatching on the header's type tag.

    Args:
        raw: File contents
        agent: Agent identity, for error reporting

    Returns:
        The typed hook payload

    Raises:
        HookCorruptedError: If the contents are not valid JSON, not an object,
            carry a missing or unknown type tag, or fail field validation
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise HookCorruptedError(agent, f"invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise HookCorruptedError(agent, "expected a JSON object")

    type_tag = data.get("type")
    if type_tag is None:
        raise HookCorruptedError(agent, "missing type tag")

    known_types = {hook_type.value: hook_type for hook_type in HOOK_MODELS}
    if not isinstance(type_tag, str) or type_tag not in known_types:
        raise HookCorruptedError(agent, f"unknown type tag {type_tag!r}")

    model = HOOK_MODELS[known_types[type_tag]]
    try:
        return model.model_validate(data)
    except ValidationError as e:
        reason = f"invalid {type_tag} payload ({e.error_count()} validation errors)"
        raise HookCorruptedError(agent, reason) from e
