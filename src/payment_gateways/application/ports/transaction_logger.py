from __future__ import annotations

from abc import ABC, abstractmethod


class TransactionLogger(ABC):
    """Port for recording the audit line of a completed transaction.

    Contract:
    - log() appends one entry tagged with the family name and a UTC timestamp
    - log() MUST NOT raise into the payment flow; sink failures are
      swallowed and reported on the diagnostic channel instead
    """

    family_name: str

    @abstractmethod
    def log(self, message: str) -> None:
        """Record one audit message for this family."""
