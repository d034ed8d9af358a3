"""Domain entities - Results and records produced by a dispatch."""

from payment_gateways.domain.entities.log_entry import LogEntry
from payment_gateways.domain.entities.payment_outcome import (
    OutcomeStatus,
    PaymentOutcome,
    RejectionReason,
)
from payment_gateways.domain.entities.transaction_result import TransactionResult

__all__ = [
    "LogEntry",
    "OutcomeStatus",
    "PaymentOutcome",
    "RejectionReason",
    "TransactionResult",
]
