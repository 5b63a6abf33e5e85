"""Mail delivery on top of the issue store.

Mail is an ordinary issue labelled gt:message and assigned to the recipient.
Ephemeral mail sets the wisp flag at creation, which alone keeps it out of the
synced log; nothing else special-cases mail.
"""

import logging

from gastown.gateway.beads.abc import BeadsGateway
from gastown.gateway.beads.types import BeadsIssue

logger = logging.getLogger(__name__)

MESSAGE_LABEL = "gt:message"
SENDER_LABEL_PREFIX = "from:"
LIFECYCLE_SUBJECT_PREFIX = "LIFECYCLE: "


def lifecycle_subject(event: str) -> str:
    """Subject line for a lifecycle notification (e.g. "LIFECYCLE: spawn")."""
    return f"{LIFECYCLE_SUBJECT_PREFIX}{event}"


def send_mail(
    beads: BeadsGateway,
    *,
    sender: str,
    target: str,
    subject: str,
    body: str,
    ephemeral: bool,
) -> BeadsIssue:
    """Deliver a message to target as an issue.

    Args:
        beads: Issue store
        sender: Identity of the sending agent or operator
        target: Recipient agent identity
        subject: Message subject, used as the issue title
        body: Message body, used as the issue description
        ephemeral: Create the message as a wisp (local only, never synced)

    Returns:
        The created message issue
    """
    issue = beads.create_issue(
        title=subject,
        labels=[MESSAGE_LABEL, f"{SENDER_LABEL_PREFIX}{sender}"],
        description=body,
        assignee=target,
        ephemeral=ephemeral,
    )
    logger.debug("mail %s from %s to %s (ephemeral=%s)", issue.id, sender, target, ephemeral)
    return issue


def list_inbox(beads: BeadsGateway, agent: str) -> list[BeadsIssue]:
    """Open messages assigned to agent, in store order.

    Ephemeral mail is included: it is local and queryable for as long as it exists.
    """
    messages = beads.list_issues(labels=[MESSAGE_LABEL], status="open", limit=None)
    return [message for message in messages if message.assignee == agent]


def message_sender(message: BeadsIssue) -> str | None:
    """Return the sender recorded on a message issue, if any."""
    for label in message.labels:
        if label.startswith(SENDER_LABEL_PREFIX):
            return label[len(SENDER_LABEL_PREFIX) :]
    return None
