from datetime import UTC, datetime, timedelta

from payment_gateways.application.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    """Production clock for audit timestamps."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedTimeProvider(TimeProvider):
    """Test clock returning a controllable fixed timestamp.

    Note: This implementation is NOT thread-safe. Concurrency tests that
    share it must only read from it.
    """

    def __init__(self, fixed_time: datetime) -> None:
        self._validate_utc(fixed_time)
        self._fixed_time = fixed_time

    def now(self) -> datetime:
        return self._fixed_time

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward so consecutive audit entries differ."""
        self._fixed_time = self._fixed_time + delta

    def _validate_utc(self, dt: datetime) -> None:
        if dt.tzinfo is not UTC:
            raise ValueError(f"datetime must have tzinfo=UTC, got tzinfo={dt.tzinfo}")
