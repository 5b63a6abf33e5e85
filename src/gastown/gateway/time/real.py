"""Production clock."""

from datetime import UTC, datetime

from gastown.gateway.time.abc import Time


class RealTime(Time):
    def now(self) -> datetime:
        return datetime.now(UTC)
