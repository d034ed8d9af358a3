"""Use cases - Caller-facing operations."""

from payment_gateways.application.use_cases.dispatch_payment import PaymentDispatcher

__all__ = ["PaymentDispatcher"]
