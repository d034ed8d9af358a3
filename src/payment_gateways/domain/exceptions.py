"""Domain exceptions for payment-gateways.

Exception hierarchy:
    DomainException (base)
    ├── Gateway Resolution Errors
    │   ├── UnsupportedGatewayError (hard failure, configuration mistake)
    │   ├── DuplicateGatewayRegistrationError
    │   └── GatewaySelectorMismatchError
    ├── Validation Errors
    │   ├── InvalidGatewaySelectorError
    │   └── InvalidAmountError
    └── Processing Errors
        └── TransactionProcessingError

A rejected card is NOT an exception: it is a terminal Rejected outcome
returned to the caller (see PaymentOutcome).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Gateway Resolution Errors
# =============================================================================


class UnsupportedGatewayError(DomainException):
    """Raised when a selector has no registered gateway family.

    This is the only hard failure of a dispatch. It indicates a programming
    or configuration mistake, never a problem with the payment data, so it is
    never converted into a Rejected outcome.
    """

    def __init__(self, selector: str, supported: Iterable[str] = ()) -> None:
        self.selector = selector
        self.supported = tuple(sorted(supported))
        message = f"Unsupported payment gateway: {selector}"
        if self.supported:
            message += f". Supported gateways: {', '.join(self.supported)}"
        super().__init__(message)


class DuplicateGatewayRegistrationError(DomainException):
    """Raised when a selector is registered twice on the same factory.

    Every selector maps to exactly one family; silently replacing an
    existing registration would change the behavior of callers that
    already rely on it.
    """


class GatewaySelectorMismatchError(DomainException):
    """Raised when a family is registered under a selector it does not own.

    Outcomes and traces are labelled with the family's own selector, so a
    family registered under another name would report the wrong gateway.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidGatewaySelectorError(DomainException):
    """Raised when a gateway selector name is empty or not a string."""


class InvalidAmountError(DomainException):
    """Raised when a payment amount fails validation.

    Amounts must be finite decimals greater than or equal to zero.
    """


# =============================================================================
# Processing Errors
# =============================================================================


class TransactionProcessingError(DomainException):
    """Raised by a processor that cannot complete a validated transaction.

    The orchestrator turns this into a Rejected outcome with reason
    PROCESSING_FAILED. The audit logger is not invoked for the failed
    transaction.
    """
