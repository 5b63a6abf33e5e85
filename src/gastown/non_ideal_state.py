"""Non-ideal state results shared across gateways and services.

Operations with expected failure modes return `Success | NonIdealState`
discriminated unions instead of raising. Callers narrow with isinstance()
or, at the CLI boundary, with EnsureIdeal.ideal_state().
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class NonIdealState(Protocol):
    """An expected, recoverable failure carrying a user-facing message."""

    @property
    def error_type(self) -> str: ...

    @property
    def message(self) -> str: ...


@dataclass(frozen=True)
class IssueNotFound:
    """Error: no issue with the given id exists in the local store. Implements NonIdealState."""

    issue_id: str

    @property
    def error_type(self) -> str:
        return "issue-not-found"

    @property
    def message(self) -> str:
        return f"Issue {self.issue_id} not found"
