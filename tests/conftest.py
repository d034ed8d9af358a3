"""Shared pytest fixtures for the test suite."""

from datetime import UTC, datetime

import pytest
import structlog
from structlog.testing import LogCapture

from payment_gateways.application.gateway_factory import GatewayFactory
from payment_gateways.application.gateway_family import GatewayDependencies
from payment_gateways.application.use_cases import PaymentDispatcher
from payment_gateways.infrastructure.audit_sink import InMemoryAuditSink
from payment_gateways.infrastructure.gateways import default_gateway_factory
from payment_gateways.infrastructure.time_provider import FixedTimeProvider
from payment_gateways.infrastructure.token_source import SequentialTokenSource


@pytest.fixture
def log_output() -> LogCapture:
    """Captured structlog events (dicts with 'event' and 'log_level')."""
    return LogCapture()


@pytest.fixture(autouse=True)
def configure_structlog(log_output: LogCapture):
    structlog.configure(processors=[log_output])
    yield
    structlog.reset_defaults()


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def token_source() -> SequentialTokenSource:
    return SequentialTokenSource()


@pytest.fixture
def audit_sink() -> InMemoryAuditSink:
    return InMemoryAuditSink()


@pytest.fixture
def dependencies(
    audit_sink: InMemoryAuditSink,
    time_provider: FixedTimeProvider,
    token_source: SequentialTokenSource,
) -> GatewayDependencies:
    return GatewayDependencies(
        audit_sink=audit_sink,
        time_provider=time_provider,
        token_source=token_source,
    )


@pytest.fixture
def gateway_factory(dependencies: GatewayDependencies) -> GatewayFactory:
    """A factory with the built-in families registered."""
    return default_gateway_factory(dependencies)


@pytest.fixture
def dispatcher(gateway_factory: GatewayFactory) -> PaymentDispatcher:
    return PaymentDispatcher(gateway_factory)
