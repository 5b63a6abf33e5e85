"""Sling and handoff: attaching work to an agent's hook."""

import logging
from dataclasses import dataclass

from gastown.core.services.mail_service import lifecycle_subject, send_mail
from gastown.gateway.beads.abc import BeadsGateway
from gastown.gateway.beads.types import BeadsIssue
from gastown.gateway.hooks.abc import HookStore
from gastown.gateway.hooks.types import HookAlreadyPending, HookCreated, SlungWork
from gastown.gateway.time.abc import Time

logger = logging.getLogger(__name__)

HANDOFF_EVENT = "handoff"
SLING_EVENT = "sling"


@dataclass(frozen=True)
class SlingResult:
    """Success result from slinging work.

    Attributes:
        hook: The hook now pending for the target
        created: Create result (carries any superseded bead id)
        notification: Ephemeral lifecycle mail sent to the target, if any
    """

    hook: SlungWork
    created: HookCreated
    notification: BeadsIssue | None


def sling_work(
    hooks: HookStore,
    beads: BeadsGateway,
    time: Time,
    *,
    bead_id: str,
    target: str,
    created_by: str,
    context: str | None,
    subject: str | None,
    notify: bool,
) -> SlingResult | HookAlreadyPending:
    """Attach bead_id to target's hook, optionally notifying with ephemeral mail.

    The hook does not check that the bead exists; the receiving agent does
    that when it resumes. Mail is only sent once the hook is in place, so a
    rejected sling leaves no stray notification behind.
    """
    hook = SlungWork.new(
        bead_id,
        created_by=created_by,
        created_at=time.now(),
        context=context,
        subject=subject,
    )
    created = hooks.create_hook(target, hook)
    if isinstance(created, HookAlreadyPending):
        return created

    notification = None
    if notify:
        notification = send_mail(
            beads,
            sender=created_by,
            target=target,
            subject=lifecycle_subject(SLING_EVENT),
            body=_notification_body(hook),
            ephemeral=True,
        )

    logger.debug("slung %s to %s", bead_id, target)
    return SlingResult(hook=hook, created=created, notification=notification)


def handoff_work(
    hooks: HookStore,
    beads: BeadsGateway,
    time: Time,
    *,
    bead_id: str,
    agent: str,
    subject: str | None,
    context: str | None,
) -> SlingResult | HookAlreadyPending:
    """Hand agent's current work to its next session.

    The hook goes into the agent's own slot; the next session start picks it
    up. A lifecycle mail records the handoff locally.
    """
    hook = SlungWork.new(
        bead_id,
        created_by=agent,
        created_at=time.now(),
        context=context,
        subject=subject if subject is not None else f"Handoff: {bead_id}",
    )
    created = hooks.create_hook(agent, hook)
    if isinstance(created, HookAlreadyPending):
        return created

    notification = send_mail(
        beads,
        sender=agent,
        target=agent,
        subject=lifecycle_subject(HANDOFF_EVENT),
        body=_notification_body(hook),
        ephemeral=True,
    )
    logger.debug("handed off %s to next session of %s", bead_id, agent)
    return SlingResult(hook=hook, created=created, notification=notification)


def _notification_body(hook: SlungWork) -> str:
    lines = [f"Work attached to your hook: {hook.bead_id}"]
    if hook.subject is not None:
        lines.append(f"Subject: {hook.subject}")
    if hook.context is not None:
        lines.append("")
        lines.append(hook.context)
    return "\n".join(lines)
