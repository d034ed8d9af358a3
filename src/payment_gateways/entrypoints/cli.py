"""Command-line driver for trying gateways by hand.

Usage:
    payment-gateways pay --gateway stripe --amount 99.90 --card 4111111111111111
    payment-gateways demo
    payment-gateways gateways

Exit codes: 0 success, 1 payment rejected, 2 unsupported gateway or bad input.
"""

from __future__ import annotations

import argparse
import sys
from decimal import Decimal
from typing import TYPE_CHECKING

from payment_gateways.application.use_cases import PaymentDispatcher
from payment_gateways.domain.exceptions import (
    InvalidAmountError,
    InvalidGatewaySelectorError,
    UnsupportedGatewayError,
)
from payment_gateways.entrypoints.bootstrap import build_dependencies
from payment_gateways.infrastructure.config import get_settings
from payment_gateways.infrastructure.gateways import default_gateway_factory
from payment_gateways.infrastructure.logging import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

    from payment_gateways.application.gateway_factory import GatewayFactory
    from payment_gateways.domain.entities import PaymentOutcome

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_USAGE = 2

# Sample transactions: (gateway, amount, card)
DEMO_TRANSACTIONS: tuple[tuple[str, Decimal, str], ...] = (
    ("pagseguro", Decimal("150.00"), "1234567890123456"),
    ("mercadopago", Decimal("200.00"), "5234567890123456"),
    ("mercadopago", Decimal("75.50"), "1234567890123456"),
    ("stripe", Decimal("42.00"), "4234567890123456"),
    ("stripe", Decimal("10.00"), "123456789012345"),
)


def build_parser(default_gateway: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payment-gateways",
        description="Dispatch payments to pluggable gateway families.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    pay = subparsers.add_parser("pay", help="Process a single payment")
    pay.add_argument(
        "--gateway",
        default=default_gateway,
        help=f"Gateway selector (default: {default_gateway})",
    )
    pay.add_argument("--amount", required=True, help="Decimal amount, e.g. 150.00")
    pay.add_argument("--card", required=True, help="Card identifier")

    subparsers.add_parser("demo", help="Run the sample transactions")
    subparsers.add_parser("gateways", help="List supported gateways")
    return parser


def format_outcome(outcome: PaymentOutcome) -> str:
    if outcome.is_success:
        return f"{outcome.gateway}: succeeded ({outcome.reference})"
    reason = outcome.reason.value if outcome.reason else "unknown"
    return f"{outcome.gateway}: rejected ({reason})"


def _pay(dispatcher: PaymentDispatcher, args: argparse.Namespace) -> int:
    outcome = dispatcher.process_payment(args.gateway, args.amount, args.card)
    print(format_outcome(outcome))
    return EXIT_OK if outcome.is_success else EXIT_REJECTED


def _demo(dispatcher: PaymentDispatcher) -> int:
    print("=== Payment System ===")
    for gateway, amount, card in DEMO_TRANSACTIONS:
        print()
        outcome = dispatcher.process_payment(gateway, amount, card)
        print(format_outcome(outcome))
    return EXIT_OK


def _gateways(factory: GatewayFactory) -> int:
    for selector in factory.supported_selectors():
        print(selector.name)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    configure_logging(settings)

    args = build_parser(settings.default_gateway).parse_args(argv)

    factory = default_gateway_factory(build_dependencies(settings))
    dispatcher = PaymentDispatcher(factory)

    try:
        if args.command == "pay":
            return _pay(dispatcher, args)
        if args.command == "demo":
            return _demo(dispatcher)
        return _gateways(factory)
    except (UnsupportedGatewayError, InvalidGatewaySelectorError, InvalidAmountError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
