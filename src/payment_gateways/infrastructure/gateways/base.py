"""Reusable component bases for gateway families.

Each family subclasses these once per component and fixes its own class
attributes (family name, card rule, reference prefix). The bases hold no
family knowledge of their own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import structlog

from payment_gateways.application.ports import (
    CardValidator,
    TransactionLogger,
    TransactionProcessor,
)
from payment_gateways.domain.entities import LogEntry, TransactionResult
from payment_gateways.domain.value_objects import mask_card_identifier

if TYPE_CHECKING:
    from decimal import Decimal

    from payment_gateways.application.ports import AuditSink, TimeProvider, TokenSource

logger = structlog.get_logger(__name__)


class CardRuleValidator(CardValidator):
    """Accepts cards of an exact length that start with a required prefix."""

    family_name: ClassVar[str]
    card_length: ClassVar[int] = 16
    card_prefix: ClassVar[str] = ""

    def validate(self, card_identifier: str) -> bool:
        logger.debug(
            "Validating card",
            family=self.family_name,
            card=mask_card_identifier(card_identifier),
        )
        if not isinstance(card_identifier, str):
            return False
        return len(card_identifier) == self.card_length and card_identifier.startswith(
            self.card_prefix
        )


class PrefixedReferenceProcessor(TransactionProcessor):
    """Issues references of the form ``<PREFIX>-<token>``."""

    family_name: ClassVar[str]
    reference_prefix: ClassVar[str]

    def __init__(self, token_source: TokenSource) -> None:
        self._token_source = token_source

    def process(self, amount: Decimal, card_identifier: str) -> TransactionResult:
        logger.info(
            "Processing transaction",
            family=self.family_name,
            amount=str(amount),
            card=mask_card_identifier(card_identifier),
        )
        reference = f"{self.reference_prefix}-{self._token_source.next_token()}"
        return TransactionResult(reference=reference, succeeded=True)


class AuditTransactionLogger(TransactionLogger):
    """Writes family-tagged, timestamped entries to an audit sink.

    Sink failures are reported on the diagnostic channel and swallowed: the
    transaction has already been processed, and losing an audit line must not
    turn it into a failure for the caller.
    """

    family_name: ClassVar[str]

    def __init__(self, audit_sink: AuditSink, time_provider: TimeProvider) -> None:
        self._audit_sink = audit_sink
        self._time_provider = time_provider

    def log(self, message: str) -> None:
        try:
            entry = LogEntry(
                timestamp=self._time_provider.now(),
                family_name=self.family_name,
                message=message,
            )
            self._audit_sink.append(entry)
        except Exception:  # noqa: BLE001
            logger.exception("Audit sink failure", family=self.family_name, audit_message=message)
