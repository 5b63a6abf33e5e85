"""Session-start resume of hooked work.

The crash-safe order is: read the hook (any number of times) -> accept the
bead into the agent's state -> burn the hook. A crash before acceptance
leaves the hook pending and it is re-delivered on the next start. A crash
after acceptance but before the burn re-reads the same hook, and acceptance
is idempotent, so the work is never duplicated or lost.
"""

import logging
from dataclasses import dataclass

from gastown.gateway.beads.abc import BeadsGateway
from gastown.gateway.beads.types import BeadsIssue
from gastown.gateway.hooks.abc import HookStore
from gastown.gateway.hooks.restore import restore_on_start
from gastown.gateway.hooks.types import SlungWork
from gastown.non_ideal_state import IssueNotFound

logger = logging.getLogger(__name__)

IN_PROGRESS_STATUS = "in_progress"


@dataclass(frozen=True)
class ResumeResult:
    """Success result from resuming hooked work.

    Attributes:
        hook: The hook that was picked up (now burned)
        issue: The bead as it stands after acceptance
        already_accepted: True if an earlier, interrupted start had already
            accepted this bead
    """

    hook: SlungWork
    issue: BeadsIssue
    already_accepted: bool


@dataclass(frozen=True)
class NoHookedWork:
    """The agent's hook is empty. Expected on most starts; not an error."""

    agent: str

    @property
    def error_type(self) -> str:
        return "no-hooked-work"

    @property
    def message(self) -> str:
        return f"No work on hook for agent '{self.agent}'"


@dataclass(frozen=True)
class HookedBeadNotFound:
    """Error: the hook references a bead missing from the store. Implements NonIdealState.

    The hook is left pending so it can be resumed once the bead is available.
    """

    agent: str
    bead_id: str

    @property
    def error_type(self) -> str:
        return "hooked-bead-not-found"

    @property
    def message(self) -> str:
        return (
            f"Hook for agent '{self.agent}' references {self.bead_id}, "
            f"which is not in the issue store. The hook was left in place."
        )


def is_accepted_by(issue: BeadsIssue, agent: str) -> bool:
    """Return whether the bead is already the agent's current task."""
    return issue.status == IN_PROGRESS_STATUS and issue.assignee == agent


def accept_work(
    beads: BeadsGateway, issue: BeadsIssue, *, agent: str
) -> BeadsIssue | IssueNotFound:
    """Make issue the agent's current task. A no-op if it already is."""
    if is_accepted_by(issue, agent):
        return issue
    return beads.update_issue(issue.id, status=IN_PROGRESS_STATUS, assignee=agent)


def resume_hooked_work(
    hooks: HookStore,
    beads: BeadsGateway,
    *,
    agent: str,
) -> ResumeResult | NoHookedWork | HookedBeadNotFound:
    """Pick up the agent's hooked work: restore, accept, then burn.

    Raises:
        HookCorruptedError: If the hook cannot be decoded. Nothing is burned
            and nothing is accepted.
    """
    hook = restore_on_start(hooks, agent)
    if hook is None:
        logger.debug("no hooked work for %s", agent)
        return NoHookedWork(agent=agent)

    issue = beads.get_issue(hook.bead_id)
    if issue is None:
        return HookedBeadNotFound(agent=agent, bead_id=hook.bead_id)

    already_accepted = is_accepted_by(issue, agent)
    accepted = accept_work(beads, issue, agent=agent)
    if isinstance(accepted, IssueNotFound):
        return HookedBeadNotFound(agent=agent, bead_id=hook.bead_id)

    hooks.burn_hook(agent)
    logger.debug("resumed %s for %s (already_accepted=%s)", hook.bead_id, agent, already_accepted)
    return ResumeResult(hook=hook, issue=accepted, already_accepted=already_accepted)
