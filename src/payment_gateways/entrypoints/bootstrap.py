"""Composition root: wires settings and infrastructure into a dispatcher."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from payment_gateways.application.gateway_family import GatewayDependencies
from payment_gateways.application.use_cases import PaymentDispatcher
from payment_gateways.infrastructure.audit_sink import StreamAuditSink
from payment_gateways.infrastructure.config import get_settings
from payment_gateways.infrastructure.gateways import default_gateway_factory
from payment_gateways.infrastructure.time_provider import SystemTimeProvider
from payment_gateways.infrastructure.token_source import UuidTokenSource

if TYPE_CHECKING:
    from payment_gateways.application.ports import AuditSink, TimeProvider, TokenSource
    from payment_gateways.infrastructure.config import GatewaySettings


def build_dependencies(
    settings: GatewaySettings | None = None,
    audit_sink: AuditSink | None = None,
    time_provider: TimeProvider | None = None,
    token_source: TokenSource | None = None,
) -> GatewayDependencies:
    """Build shared gateway dependencies, defaulting anything not given."""
    settings = settings or get_settings()
    if audit_sink is None:
        stream = sys.stdout if settings.audit_stream == "stdout" else sys.stderr
        audit_sink = StreamAuditSink(stream)
    return GatewayDependencies(
        audit_sink=audit_sink,
        time_provider=time_provider or SystemTimeProvider(),
        token_source=token_source or UuidTokenSource(settings.reference_token_length),
    )


def build_dispatcher(
    settings: GatewaySettings | None = None,
    audit_sink: AuditSink | None = None,
    time_provider: TimeProvider | None = None,
    token_source: TokenSource | None = None,
) -> PaymentDispatcher:
    """Build a dispatcher over the built-in gateway families."""
    dependencies = build_dependencies(settings, audit_sink, time_provider, token_source)
    return PaymentDispatcher(default_gateway_factory(dependencies))
