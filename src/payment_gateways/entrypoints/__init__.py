"""Entrypoints layer - Delivery mechanisms.

This layer contains:
- Bootstrap: Composition root wiring settings and infrastructure
- CLI: Command-line driver (payment-gateways)

Entrypoints translate external requests into dispatcher calls
and format outcomes for the delivery mechanism.
"""
