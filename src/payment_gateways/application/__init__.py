"""Application layer - Gateway contracts, factory and dispatch.

This layer contains:
- Ports: Abstract interfaces for gateway components and infrastructure
- GatewayFamily: The family contract and the validate -> process -> log orchestration
- GatewayFactory: Selector -> family registration table
- Use Cases: PaymentDispatcher, the caller-facing entry point

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
