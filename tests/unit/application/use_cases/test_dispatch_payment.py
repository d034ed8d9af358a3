"""Tests for PaymentDispatcher.

Tests cover:
- The reference scenarios for each built-in gateway
- Unsupported gateways fail hard, before any family is built
- Reference uniqueness across many dispatches
- Concurrent dispatches sharing one audit sink
"""

import io
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal
from unittest import mock

import pytest

from payment_gateways.application.gateway_factory import GatewayFactory
from payment_gateways.application.gateway_family import GatewayDependencies
from payment_gateways.application.use_cases import PaymentDispatcher
from payment_gateways.domain.entities import OutcomeStatus, RejectionReason
from payment_gateways.domain.exceptions import InvalidAmountError, UnsupportedGatewayError
from payment_gateways.domain.value_objects import (
    MERCADOPAGO,
    PAGSEGURO,
    STRIPE,
    GatewaySelector,
    PaymentRequest,
)
from payment_gateways.infrastructure.audit_sink import InMemoryAuditSink, StreamAuditSink
from payment_gateways.infrastructure.gateways import default_gateway_factory
from payment_gateways.infrastructure.time_provider import FixedTimeProvider
from payment_gateways.infrastructure.token_source import UuidTokenSource

# =============================================================================
# Reference Scenarios
# =============================================================================


class TestDispatchScenarios:
    def test_pagseguro_accepts_sixteen_digit_card(self, dispatcher: PaymentDispatcher) -> None:
        request = PaymentRequest(amount=Decimal("150.00"), card_identifier="1234567890123456")

        outcome = dispatcher.dispatch(PAGSEGURO, request)

        assert outcome.status == OutcomeStatus.SUCCEEDED
        assert outcome.reference.startswith("PAGSEG-")

    def test_mercadopago_accepts_card_starting_with_five(
        self, dispatcher: PaymentDispatcher
    ) -> None:
        request = PaymentRequest(amount=Decimal("200.00"), card_identifier="5234567890123456")

        outcome = dispatcher.dispatch(MERCADOPAGO, request)

        assert outcome.status == OutcomeStatus.SUCCEEDED
        assert outcome.reference.startswith("MP-")

    def test_mercadopago_rejects_card_not_starting_with_five(
        self, dispatcher: PaymentDispatcher
    ) -> None:
        request = PaymentRequest(amount=Decimal("200.00"), card_identifier="1234567890123456")

        outcome = dispatcher.dispatch(MERCADOPAGO, request)

        assert outcome.status == OutcomeStatus.REJECTED
        assert outcome.reason == RejectionReason.CARD_REJECTED

    def test_stripe_rejects_fifteen_digit_card(self, dispatcher: PaymentDispatcher) -> None:
        request = PaymentRequest(amount=Decimal("10.00"), card_identifier="123456789012345")

        outcome = dispatcher.dispatch(STRIPE, request)

        assert outcome.status == OutcomeStatus.REJECTED

    def test_unknown_gateway_fails_without_building_a_family(
        self,
        dependencies: GatewayDependencies,
    ) -> None:
        family_factory = mock.Mock()
        dispatcher = PaymentDispatcher(GatewayFactory(dependencies, [(STRIPE, family_factory)]))
        request = PaymentRequest(amount=Decimal("10.00"), card_identifier="1234567890123456")

        with pytest.raises(UnsupportedGatewayError):
            dispatcher.dispatch(GatewaySelector("unknownfamily"), request)

        family_factory.assert_not_called()

    @pytest.mark.parametrize("selector", ["", "   "])
    def test_blank_gateway_name_is_unsupported(
        self,
        dependencies: GatewayDependencies,
        selector: str,
    ) -> None:
        family_factory = mock.Mock()
        dispatcher = PaymentDispatcher(GatewayFactory(dependencies, [(STRIPE, family_factory)]))
        request = PaymentRequest(amount=Decimal("10.00"), card_identifier="4234567890123456")

        with pytest.raises(UnsupportedGatewayError):
            dispatcher.dispatch(selector, request)

        family_factory.assert_not_called()


class TestDispatchAuditTrail:
    def test_success_writes_one_family_tagged_entry(
        self,
        dispatcher: PaymentDispatcher,
        audit_sink: InMemoryAuditSink,
    ) -> None:
        outcome = dispatcher.process_payment("stripe", Decimal("42.00"), "4234567890123456")

        (entry,) = audit_sink.entries
        assert entry.family_name == "Stripe"
        assert entry.message == f"Transaction processed: {outcome.reference}"

    def test_rejection_writes_nothing(
        self,
        dispatcher: PaymentDispatcher,
        audit_sink: InMemoryAuditSink,
    ) -> None:
        dispatcher.process_payment("stripe", Decimal("42.00"), "5234567890123456")

        assert audit_sink.entries == ()

    def test_entries_follow_dispatch_order(
        self,
        dispatcher: PaymentDispatcher,
        audit_sink: InMemoryAuditSink,
    ) -> None:
        dispatcher.process_payment("pagseguro", Decimal("1"), "1234567890123456")
        dispatcher.process_payment("mercadopago", Decimal("2"), "5234567890123456")
        dispatcher.process_payment("stripe", Decimal("3"), "4234567890123456")

        assert [e.family_name for e in audit_sink.entries] == ["PagSeguro", "MercadoPago", "Stripe"]


class TestProcessPayment:
    def test_accepts_string_selector_and_amount(self, dispatcher: PaymentDispatcher) -> None:
        outcome = dispatcher.process_payment("PagSeguro", "150.00", "1234567890123456")

        assert outcome.is_success is True
        assert outcome.gateway == "pagseguro"

    def test_raises_for_negative_amount(self, dispatcher: PaymentDispatcher) -> None:
        with pytest.raises(InvalidAmountError):
            dispatcher.process_payment(STRIPE, Decimal("-1"), "4234567890123456")

    def test_raises_for_unknown_gateway(self, dispatcher: PaymentDispatcher) -> None:
        with pytest.raises(UnsupportedGatewayError):
            dispatcher.process_payment("unknownfamily", Decimal("1"), "4234567890123456")


# =============================================================================
# Reference Uniqueness
# =============================================================================


class TestReferenceUniqueness:
    @pytest.mark.parametrize(
        ("selector", "card", "prefix"),
        [
            (PAGSEGURO, "1234567890123456", "PAGSEG-"),
            (MERCADOPAGO, "5234567890123456", "MP-"),
            (STRIPE, "4234567890123456", "STRIPE-"),
        ],
    )
    def test_ten_thousand_dispatches_yield_distinct_references(
        self,
        time_provider: FixedTimeProvider,
        selector: GatewaySelector,
        card: str,
        prefix: str,
    ) -> None:
        dependencies = GatewayDependencies(
            audit_sink=InMemoryAuditSink(),
            time_provider=time_provider,
            token_source=UuidTokenSource(),
        )
        dispatcher = PaymentDispatcher(default_gateway_factory(dependencies))
        request = PaymentRequest(amount=Decimal("1.00"), card_identifier=card)

        references = [dispatcher.dispatch(selector, request).reference for _ in range(10_000)]

        assert len(set(references)) == 10_000
        assert all(ref.startswith(prefix) for ref in references)


# =============================================================================
# Concurrency
# =============================================================================


class TestConcurrentDispatch:
    def test_parallel_dispatches_share_sink_safely(self, time_provider: FixedTimeProvider) -> None:
        stream = io.StringIO()
        dependencies = GatewayDependencies(
            audit_sink=StreamAuditSink(stream),
            time_provider=time_provider,
            token_source=UuidTokenSource(),
        )
        dispatcher = PaymentDispatcher(default_gateway_factory(dependencies))
        jobs = [
            ("pagseguro", "1234567890123456"),
            ("mercadopago", "5234567890123456"),
            ("stripe", "4234567890123456"),
        ] * 100

        with ThreadPoolExecutor(max_workers=8) as executor:
            outcomes = list(
                executor.map(lambda job: dispatcher.process_payment(job[0], "9.99", job[1]), jobs)
            )

        lines = stream.getvalue().splitlines()
        assert all(outcome.is_success for outcome in outcomes)
        assert len(lines) == 300
        for outcome in outcomes:
            assert sum(line.endswith(f": {outcome.reference}") for line in lines) == 1
