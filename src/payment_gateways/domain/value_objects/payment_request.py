from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from payment_gateways.domain.exceptions import InvalidAmountError

VISIBLE_CARD_DIGITS = 4


def mask_card_identifier(card_identifier: object) -> str:
    """Mask all but the last four characters of a card identifier.

    Used for diagnostic traces; the raw identifier never reaches a log line.
    """
    if not isinstance(card_identifier, str):
        return "<invalid>"
    if len(card_identifier) <= VISIBLE_CARD_DIGITS:
        return "*" * len(card_identifier)
    hidden = len(card_identifier) - VISIBLE_CARD_DIGITS
    return "*" * hidden + card_identifier[hidden:]


@dataclass(frozen=True, slots=True)
class PaymentRequest:
    """A single payment to dispatch: amount plus card identifier.

    Lives only for the duration of one dispatch call.

    Amount rules:
      - int, str and Decimal inputs are normalized to Decimal
      - float is rejected (binary floats cannot represent money exactly)
      - must be finite and >= 0

    The card identifier is NOT validated here. Whether a card is acceptable
    depends on the gateway family, so an invalid card is a Rejected outcome
    of the dispatch rather than a construction error.
    """

    amount: Decimal
    card_identifier: str

    def __post_init__(self) -> None:
        amount = self._coerce_amount(self.amount)

        if not amount.is_finite():
            raise InvalidAmountError(f"Payment amount must be finite, got {self.amount!r}")

        if amount < 0:
            raise InvalidAmountError(
                f"Payment amount must be greater than or equal to 0, got {amount}"
            )

        if amount is not self.amount:
            object.__setattr__(self, "amount", amount)

    @property
    def masked_card(self) -> str:
        return mask_card_identifier(self.card_identifier)

    @staticmethod
    def _coerce_amount(value: object) -> Decimal:
        if isinstance(value, Decimal):
            return value
        if isinstance(value, (bool, float)):
            raise InvalidAmountError(
                f"Payment amount must be a Decimal, int or numeric string, got {type(value).__name__}"
            )
        if isinstance(value, (int, str)):
            try:
                return Decimal(value.strip() if isinstance(value, str) else value)
            except InvalidOperation as e:
                raise InvalidAmountError(f"Invalid payment amount: {value!r}") from e
        raise InvalidAmountError(f"Invalid payment amount type: {type(value).__name__}")
