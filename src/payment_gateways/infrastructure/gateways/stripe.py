"""Stripe gateway family.

Cards must be 16 characters starting with "4". References are prefixed "STRIPE-".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from payment_gateways.application.gateway_family import GatewayFamily
from payment_gateways.domain.value_objects import STRIPE
from payment_gateways.infrastructure.gateways.base import (
    AuditTransactionLogger,
    CardRuleValidator,
    PrefixedReferenceProcessor,
)

if TYPE_CHECKING:
    from payment_gateways.application.gateway_family import GatewayDependencies

FAMILY_NAME = "Stripe"


class StripeValidator(CardRuleValidator):
    family_name = FAMILY_NAME
    card_prefix = "4"


class StripeProcessor(PrefixedReferenceProcessor):
    family_name = FAMILY_NAME
    reference_prefix = "STRIPE"


class StripeLogger(AuditTransactionLogger):
    family_name = FAMILY_NAME


class StripeGateway(GatewayFamily):
    name = FAMILY_NAME
    selector = STRIPE

    def _build_validator(self, dependencies: GatewayDependencies) -> StripeValidator:  # noqa: ARG002
        return StripeValidator()

    def _build_processor(self, dependencies: GatewayDependencies) -> StripeProcessor:
        return StripeProcessor(dependencies.token_source)

    def _build_logger(self, dependencies: GatewayDependencies) -> StripeLogger:
        return StripeLogger(dependencies.audit_sink, dependencies.time_provider)
