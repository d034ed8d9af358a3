from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

import structlog

from payment_gateways.domain.value_objects import PaymentRequest

if TYPE_CHECKING:
    from payment_gateways.application.gateway_factory import GatewayFactory
    from payment_gateways.domain.entities import PaymentOutcome
    from payment_gateways.domain.value_objects import GatewaySelector

logger = structlog.get_logger(__name__)


class PaymentDispatcher:
    """Caller-facing entry point for payments.

    Responsibilities:
    - Resolve the selector to a gateway family via the GatewayFactory
    - Delegate the request to that family's process_payment

    The dispatcher knows nothing about individual gateways. Supporting a new
    gateway is a factory registration, never a change here.
    """

    def __init__(self, gateway_factory: GatewayFactory) -> None:
        self._gateway_factory = gateway_factory

    def dispatch(
        self,
        selector: GatewaySelector | str,
        request: PaymentRequest,
    ) -> PaymentOutcome:
        """Route a payment request to the selected gateway family.

        Args:
            selector: Gateway to use (GatewaySelector or plain name).
            request: The payment to process.

        Returns:
            PaymentOutcome, either succeeded (with reference) or rejected.

        Raises:
            UnsupportedGatewayError: No family is registered for the selector.
        """
        family = self._gateway_factory.create(selector)
        logger.debug("Dispatching payment", gateway=family.selector.name, card=request.masked_card)
        return family.process_payment(request)

    def process_payment(
        self,
        selector: GatewaySelector | str,
        amount: Decimal | int | str,
        card_identifier: str,
    ) -> PaymentOutcome:
        """Build a PaymentRequest and dispatch it.

        Raises:
            UnsupportedGatewayError: No family is registered for the selector.
            InvalidAmountError: The amount is negative or not a decimal.
        """
        request = PaymentRequest(amount=amount, card_identifier=card_identifier)  # type: ignore[arg-type]
        return self.dispatch(selector, request)
