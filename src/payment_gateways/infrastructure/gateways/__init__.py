"""Built-in gateway families and the default registration table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from payment_gateways.application.gateway_factory import GatewayFactory
from payment_gateways.infrastructure.gateways.mercadopago import MercadoPagoGateway
from payment_gateways.infrastructure.gateways.pagseguro import PagSeguroGateway
from payment_gateways.infrastructure.gateways.stripe import StripeGateway

if TYPE_CHECKING:
    from collections.abc import Mapping

    from payment_gateways.application.gateway_factory import FamilyFactory
    from payment_gateways.application.gateway_family import GatewayDependencies
    from payment_gateways.domain.value_objects import GatewaySelector

DEFAULT_GATEWAYS: Mapping[GatewaySelector, FamilyFactory] = {
    family.selector: family
    for family in (PagSeguroGateway, MercadoPagoGateway, StripeGateway)
}


def default_gateway_factory(dependencies: GatewayDependencies) -> GatewayFactory:
    """Build a factory with every built-in family registered."""
    return GatewayFactory(dependencies, DEFAULT_GATEWAYS.items())


__all__ = [
    "DEFAULT_GATEWAYS",
    "MercadoPagoGateway",
    "PagSeguroGateway",
    "StripeGateway",
    "default_gateway_factory",
]
