"""Ports - Abstract interfaces for gateway components and external dependencies.

Ports define the contracts that gateway families and infrastructure adapters
must implement. This keeps orchestration decoupled from concrete providers.
"""

from payment_gateways.application.ports.audit_sink import AuditSink
from payment_gateways.application.ports.card_validator import CardValidator
from payment_gateways.application.ports.time_provider import TimeProvider
from payment_gateways.application.ports.token_source import TokenSource
from payment_gateways.application.ports.transaction_logger import TransactionLogger
from payment_gateways.application.ports.transaction_processor import TransactionProcessor

__all__ = [
    "AuditSink",
    "CardValidator",
    "TimeProvider",
    "TokenSource",
    "TransactionLogger",
    "TransactionProcessor",
]
