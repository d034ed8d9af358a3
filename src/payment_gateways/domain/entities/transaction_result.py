from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TransactionResult:
    """Confirmation produced by a processor for one transaction.

    The reference is family-prefixed (e.g. "STRIPE-...") and never reused.
    """

    reference: str
    succeeded: bool = True
