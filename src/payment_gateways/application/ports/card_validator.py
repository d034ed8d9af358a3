from __future__ import annotations

from abc import ABC, abstractmethod


class CardValidator(ABC):
    """Port for deciding whether a card is acceptable for one family.

    Contract:
    - validate() has no side effects beyond a diagnostic trace
    - Malformed input (wrong length, wrong type) returns False; it never raises
    """

    family_name: str

    @abstractmethod
    def validate(self, card_identifier: str) -> bool:
        """Return True if the family accepts the card identifier."""
