"""MercadoPago gateway family.

Cards must be 16 characters starting with "5". References are prefixed "MP-".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from payment_gateways.application.gateway_family import GatewayFamily
from payment_gateways.domain.value_objects import MERCADOPAGO
from payment_gateways.infrastructure.gateways.base import (
    AuditTransactionLogger,
    CardRuleValidator,
    PrefixedReferenceProcessor,
)

if TYPE_CHECKING:
    from payment_gateways.application.gateway_family import GatewayDependencies

FAMILY_NAME = "MercadoPago"


class MercadoPagoValidator(CardRuleValidator):
    family_name = FAMILY_NAME
    card_prefix = "5"


class MercadoPagoProcessor(PrefixedReferenceProcessor):
    family_name = FAMILY_NAME
    reference_prefix = "MP"


class MercadoPagoLogger(AuditTransactionLogger):
    family_name = FAMILY_NAME


class MercadoPagoGateway(GatewayFamily):
    name = FAMILY_NAME
    selector = MERCADOPAGO

    def _build_validator(self, dependencies: GatewayDependencies) -> MercadoPagoValidator:  # noqa: ARG002
        return MercadoPagoValidator()

    def _build_processor(self, dependencies: GatewayDependencies) -> MercadoPagoProcessor:
        return MercadoPagoProcessor(dependencies.token_source)

    def _build_logger(self, dependencies: GatewayDependencies) -> MercadoPagoLogger:
        return MercadoPagoLogger(dependencies.audit_sink, dependencies.time_provider)
