"""Domain layer - Payment data, outcomes, and rules.

This layer contains:
- Entities: Results produced by a dispatch (PaymentOutcome, TransactionResult, LogEntry)
- Value Objects: Immutable inputs (PaymentRequest, GatewaySelector)
- Domain Exceptions: Business rule violations

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
