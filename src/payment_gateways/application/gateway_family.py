"""Gateway family contract and the shared payment orchestration.

A gateway family is a matched validator + processor + logger triple for one
payment provider. Concrete families only say HOW to build their three
components; the orchestration (validate -> process -> log) lives here and is
identical for every family.

Orchestration states:
    Start -> Validating -> Rejected                  (card rejected)
    Start -> Validating -> Processing -> Rejected    (processing failed)
    Start -> Validating -> Processing -> Logged      (succeeded)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

import structlog

from payment_gateways.domain.entities import PaymentOutcome, RejectionReason
from payment_gateways.domain.exceptions import TransactionProcessingError

if TYPE_CHECKING:
    from payment_gateways.application.ports import (
        AuditSink,
        CardValidator,
        TimeProvider,
        TokenSource,
        TransactionLogger,
        TransactionProcessor,
    )
    from payment_gateways.domain.value_objects import GatewaySelector, PaymentRequest

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class GatewayDependencies:
    """Infrastructure shared by every family a factory creates.

    None of these carry per-family state: the sink and token source are
    thread-safe, and the clock is read-only.
    """

    audit_sink: AuditSink
    time_provider: TimeProvider
    token_source: TokenSource


class GatewayFamily(ABC):
    """Base class for all gateway families.

    Subclasses declare a display ``name`` and a ``selector`` and implement the
    three ``_build_*`` hooks. Components are built once in ``__init__`` from
    the family's own hooks and exposed read-only, so there is no way to hand a
    family a validator, processor or logger that belongs to another family.

    Instances hold no mutable state after construction and are independent
    of each other.
    """

    name: ClassVar[str]
    selector: ClassVar[GatewaySelector]

    def __init__(self, dependencies: GatewayDependencies) -> None:
        self._validator = self._build_validator(dependencies)
        self._processor = self._build_processor(dependencies)
        self._logger = self._build_logger(dependencies)

    @property
    def validator(self) -> CardValidator:
        return self._validator

    @property
    def processor(self) -> TransactionProcessor:
        return self._processor

    @property
    def logger(self) -> TransactionLogger:
        return self._logger

    @abstractmethod
    def _build_validator(self, dependencies: GatewayDependencies) -> CardValidator:
        """Build this family's card validator."""

    @abstractmethod
    def _build_processor(self, dependencies: GatewayDependencies) -> TransactionProcessor:
        """Build this family's transaction processor."""

    @abstractmethod
    def _build_logger(self, dependencies: GatewayDependencies) -> TransactionLogger:
        """Build this family's transaction logger."""

    def process_payment(self, request: PaymentRequest) -> PaymentOutcome:
        """Run validate -> process -> log for one payment.

        Args:
            request: The payment to process.

        Returns:
            PaymentOutcome.succeeded with the processor reference, or
            PaymentOutcome.rejected with CARD_REJECTED or PROCESSING_FAILED.
            When the outcome is rejected, the audit logger is not invoked.

        Raises:
            Anything other than TransactionProcessingError raised by a
            component propagates unchanged; it signals a programming error.
        """
        log = logger.bind(gateway=self.selector.name, card=request.masked_card)

        # Validating
        if not self._validator.validate(request.card_identifier):
            log.info("Card rejected")
            return PaymentOutcome.rejected(self.selector.name, RejectionReason.CARD_REJECTED)

        # Processing
        try:
            result = self._processor.process(request.amount, request.card_identifier)
        except TransactionProcessingError as e:
            log.warning("Transaction processing failed", error=str(e))
            return PaymentOutcome.rejected(self.selector.name, RejectionReason.PROCESSING_FAILED)

        if not result.succeeded:
            log.warning("Processor reported an unsuccessful transaction", reference=result.reference)
            return PaymentOutcome.rejected(self.selector.name, RejectionReason.PROCESSING_FAILED)

        # Logged
        self._logger.log(f"Transaction processed: {result.reference}")
        log.info("Payment succeeded", reference=result.reference, amount=str(request.amount))
        return PaymentOutcome.succeeded(self.selector.name, result.reference)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(selector={self.selector.name!r})"
