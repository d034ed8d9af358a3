"""Value objects - Immutable objects defined by their attributes."""

from payment_gateways.domain.value_objects.gateway_selector import (
    MERCADOPAGO,
    PAGSEGURO,
    STRIPE,
    GatewaySelector,
)
from payment_gateways.domain.value_objects.payment_request import (
    PaymentRequest,
    mask_card_identifier,
)

__all__ = [
    "MERCADOPAGO",
    "PAGSEGURO",
    "STRIPE",
    "GatewaySelector",
    "PaymentRequest",
    "mask_card_identifier",
]
