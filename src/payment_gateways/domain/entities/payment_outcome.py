"""Terminal outcome of a payment dispatch.

A dispatch for a registered gateway always ends in exactly one of:
    - SUCCEEDED, carrying the processor's transaction reference
    - REJECTED, carrying the reason the payment did not go through
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutcomeStatus(Enum):
    """Terminal states of the orchestration."""

    SUCCEEDED = "succeeded"
    REJECTED = "rejected"


class RejectionReason(Enum):
    """Why a payment ended in the REJECTED state."""

    CARD_REJECTED = "card_rejected"
    PROCESSING_FAILED = "processing_failed"


@dataclass(frozen=True, slots=True)
class PaymentOutcome:
    """Result returned to the caller for every dispatch.

    Use the succeeded() and rejected() factory methods; they guarantee that
    a successful outcome always has a reference and a rejected one always
    has a reason.
    """

    status: OutcomeStatus
    gateway: str
    reference: str | None = None
    reason: RejectionReason | None = None

    @classmethod
    def succeeded(cls, gateway: str, reference: str) -> PaymentOutcome:
        return cls(status=OutcomeStatus.SUCCEEDED, gateway=gateway, reference=reference)

    @classmethod
    def rejected(cls, gateway: str, reason: RejectionReason) -> PaymentOutcome:
        return cls(status=OutcomeStatus.REJECTED, gateway=gateway, reason=reason)

    @property
    def is_success(self) -> bool:
        return self.status == OutcomeStatus.SUCCEEDED
