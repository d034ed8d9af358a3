from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decimal import Decimal

    from payment_gateways.domain.entities import TransactionResult


class TransactionProcessor(ABC):
    """Port for turning a validated payment into a confirmation reference.

    Contract:
    - process() is only called after the family's validator accepted the
      card; it does not re-validate
    - The returned reference starts with the family prefix and is unique
    - Implementations backed by a real provider raise
      TransactionProcessingError when the transaction cannot be completed
    """

    family_name: str

    @abstractmethod
    def process(self, amount: Decimal, card_identifier: str) -> TransactionResult:
        """Process a validated transaction.

        Args:
            amount: Non-negative amount to charge.
            card_identifier: Card already accepted by the family validator.

        Returns:
            TransactionResult with the family-prefixed reference.

        Raises:
            TransactionProcessingError: The transaction could not be completed.
        """
