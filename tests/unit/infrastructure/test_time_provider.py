"""Tests for TimeProvider implementations.

Tests cover:
- SystemTimeProvider returns UTC datetime
- FixedTimeProvider returns fixed time and supports advance()
- UTC validation rejects non-UTC datetimes
"""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from payment_gateways.application.ports import TimeProvider
from payment_gateways.infrastructure.time_provider import (
    FixedTimeProvider,
    SystemTimeProvider,
)

# =============================================================================
# SystemTimeProvider Tests
# =============================================================================


class TestSystemTimeProvider:
    def test_implements_time_provider_interface(self) -> None:
        assert isinstance(SystemTimeProvider(), TimeProvider)

    def test_now_returns_utc_datetime(self) -> None:
        result = SystemTimeProvider().now()

        assert result.tzinfo is UTC

    def test_now_returns_current_time(self) -> None:
        provider = SystemTimeProvider()
        before = datetime.now(UTC)

        result = provider.now()

        after = datetime.now(UTC)
        assert before <= result <= after


# =============================================================================
# FixedTimeProvider Tests
# =============================================================================


class TestFixedTimeProvider:
    def test_implements_time_provider_interface(self) -> None:
        provider = FixedTimeProvider(datetime(2024, 1, 1, tzinfo=UTC))

        assert isinstance(provider, TimeProvider)

    def test_now_returns_fixed_time(self) -> None:
        fixed_time = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)
        provider = FixedTimeProvider(fixed_time)

        assert provider.now() == fixed_time
        assert provider.now() == fixed_time

    def test_advance_moves_clock_forward(self) -> None:
        fixed_time = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)
        provider = FixedTimeProvider(fixed_time)

        provider.advance(timedelta(seconds=5))

        assert provider.now() == fixed_time + timedelta(seconds=5)
        assert provider.now().tzinfo is UTC


class TestFixedTimeProviderValidation:
    def test_rejects_naive_datetime(self) -> None:
        with pytest.raises(ValueError, match="tzinfo=UTC"):
            FixedTimeProvider(datetime(2024, 1, 1, 12, 0, 0))

    def test_rejects_non_utc_offset(self) -> None:
        minus_six = timezone(timedelta(hours=-6))

        with pytest.raises(ValueError, match="tzinfo=UTC"):
            FixedTimeProvider(datetime(2024, 1, 1, 12, 0, 0, tzinfo=minus_six))
