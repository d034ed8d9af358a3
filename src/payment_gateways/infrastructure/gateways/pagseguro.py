"""PagSeguro gateway family.

Cards must be exactly 16 characters. References are prefixed "PAGSEG-".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from payment_gateways.application.gateway_family import GatewayFamily
from payment_gateways.domain.value_objects import PAGSEGURO
from payment_gateways.infrastructure.gateways.base import (
    AuditTransactionLogger,
    CardRuleValidator,
    PrefixedReferenceProcessor,
)

if TYPE_CHECKING:
    from payment_gateways.application.gateway_family import GatewayDependencies

FAMILY_NAME = "PagSeguro"


class PagSeguroValidator(CardRuleValidator):
    family_name = FAMILY_NAME


class PagSeguroProcessor(PrefixedReferenceProcessor):
    family_name = FAMILY_NAME
    reference_prefix = "PAGSEG"


class PagSeguroLogger(AuditTransactionLogger):
    family_name = FAMILY_NAME


class PagSeguroGateway(GatewayFamily):
    name = FAMILY_NAME
    selector = PAGSEGURO

    def _build_validator(self, dependencies: GatewayDependencies) -> PagSeguroValidator:  # noqa: ARG002
        return PagSeguroValidator()

    def _build_processor(self, dependencies: GatewayDependencies) -> PagSeguroProcessor:
        return PagSeguroProcessor(dependencies.token_source)

    def _build_logger(self, dependencies: GatewayDependencies) -> PagSeguroLogger:
        return PagSeguroLogger(dependencies.audit_sink, dependencies.time_provider)
