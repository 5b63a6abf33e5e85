"""CLI error handling for non-ideal-state type narrowing."""

from typing import TypeVar

import click

from gastown.core.config import resolve_agent
from gastown.core.context import GtContext
from gastown.non_ideal_state import NonIdealState
from gastown.output import user_output

T = TypeVar("T")


class EnsureIdeal:
    """Helpers that narrow results or exit with a user-friendly error."""

    @staticmethod
    def ideal_state(result: T | NonIdealState) -> T:
        """Return result unchanged unless it is a NonIdealState.

        Raises:
            SystemExit: If result is NonIdealState (with exit code 1)
        """
        if isinstance(result, NonIdealState):
            user_output(click.style("Error: ", fg="red") + result.message)
            raise SystemExit(1)
        return result

    @staticmethod
    def agent(ctx: GtContext, explicit: str | None) -> str:
        """Resolve the acting agent identity or exit with a hint.

        Raises:
            SystemExit: If no identity is available (with exit code 1)
        """
        agent = resolve_agent(explicit, ctx.config)
        if agent is None:
            user_output(
                click.style("Error: ", fg="red")
                + "No agent identity. Pass --agent, set GT_AGENT, "
                "or set [agent] name in .gastown/config.toml"
            )
            raise SystemExit(1)
        return agent
