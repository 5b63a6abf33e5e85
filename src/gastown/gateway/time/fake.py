"""Fixed clock for deterministic tests."""

from datetime import UTC, datetime

from gastown.gateway.time.abc import Time

DEFAULT_FAKE_NOW = datetime(2025, 1, 15, 14, 30, 0, tzinfo=UTC)


class FakeTime(Time):
    """Clock frozen at a constructor-supplied instant.

    All state is provided via constructor; advance() exists for tests that
    need to observe updated_at changing.
    """

    def __init__(self, *, current: datetime | None = None) -> None:
        self._current = current if current is not None else DEFAULT_FAKE_NOW

    def now(self) -> datetime:
        return self._current

    def advance(self, new_time: datetime) -> None:
        self._current = new_time
