"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Gateways: The built-in gateway families (PagSeguro, MercadoPago, Stripe)
- Audit Sinks: In-memory and stream-backed audit trails
- Time Provider: Clock abstraction for testability
- Token Sources: Random and sequential reference tokens
- Config and Logging: Settings and structlog setup

Infrastructure adapters implement the ports defined in the application layer.
"""

from payment_gateways.infrastructure.audit_sink import InMemoryAuditSink, StreamAuditSink
from payment_gateways.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider
from payment_gateways.infrastructure.token_source import SequentialTokenSource, UuidTokenSource

__all__ = [
    "FixedTimeProvider",
    "InMemoryAuditSink",
    "SequentialTokenSource",
    "StreamAuditSink",
    "SystemTimeProvider",
    "UuidTokenSource",
]
