from __future__ import annotations

from dataclasses import dataclass

from payment_gateways.domain.exceptions import InvalidGatewaySelectorError


@dataclass(frozen=True, slots=True)
class GatewaySelector:
    """Value object naming a gateway family.

    Normalization:
      - Whitespace is trimmed
      - Names are case-insensitive (stored lower-case)
      - Must be non-empty

    The set of selectors is open: a new family is added by registering a new
    selector with the GatewayFactory, not by editing this class.
    """

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise InvalidGatewaySelectorError(
                f"Gateway selector must be a string, got {type(self.name).__name__}"
            )

        normalized = self.name.strip().lower()

        if normalized != self.name:
            object.__setattr__(self, "name", normalized)

        if not normalized:
            raise InvalidGatewaySelectorError("Gateway selector cannot be empty")

    @classmethod
    def of(cls, value: GatewaySelector | str) -> GatewaySelector:
        """Coerce a selector or a plain name into a GatewaySelector."""
        if isinstance(value, GatewaySelector):
            return value
        return cls(name=value)

    def __str__(self) -> str:
        return self.name


PAGSEGURO = GatewaySelector("pagseguro")
MERCADOPAGO = GatewaySelector("mercadopago")
STRIPE = GatewaySelector("stripe")
