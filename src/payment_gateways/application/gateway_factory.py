"""Gateway factory: selector -> fully assembled gateway family.

The factory owns a registration table built once at start-up. Dispatch code
looks selectors up in the table; it never branches on gateway identity.
Adding a family means registering one new selector -> factory mapping.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import structlog

from payment_gateways.domain.exceptions import (
    DuplicateGatewayRegistrationError,
    GatewaySelectorMismatchError,
    InvalidGatewaySelectorError,
    UnsupportedGatewayError,
)
from payment_gateways.domain.value_objects import GatewaySelector

if TYPE_CHECKING:
    from collections.abc import Iterable

    from payment_gateways.application.gateway_family import (
        GatewayDependencies,
        GatewayFamily,
    )

logger = structlog.get_logger(__name__)

FamilyFactory = Callable[["GatewayDependencies"], "GatewayFamily"]


class GatewayFactory:
    """Creates gateway families from selectors.

    Contract:
    - create() returns a NEW, independent family on every call
    - create() has no side effects besides a debug trace
    - create() raises UnsupportedGatewayError for unregistered selectors;
      there is no default family
    - each selector maps to exactly one factory
    - a family is only registered under its own selector
    - blank selectors are unsupported, never a separate error

    A family class is itself a valid factory (it takes GatewayDependencies),
    so ``factory.register(selector, MyFamily)`` is the usual form.
    """

    def __init__(
        self,
        dependencies: GatewayDependencies,
        registrations: Iterable[tuple[GatewaySelector | str, FamilyFactory]] = (),
    ) -> None:
        self._dependencies = dependencies
        self._registry: dict[GatewaySelector, FamilyFactory] = {}
        for selector, family_factory in registrations:
            self.register(selector, family_factory)

    def register(self, selector: GatewaySelector | str, family_factory: FamilyFactory) -> None:
        """Register a family under a selector.

        Raises:
            DuplicateGatewayRegistrationError: The selector is already registered.
            GatewaySelectorMismatchError: The family declares a different selector.
            InvalidGatewaySelectorError: The selector name is empty.
        """
        key = GatewaySelector.of(selector)
        if key in self._registry:
            raise DuplicateGatewayRegistrationError(
                f"Gateway already registered for selector: {key.name}"
            )
        _ensure_owned_by(key, family_factory)
        self._registry[key] = family_factory

    def create(self, selector: GatewaySelector | str) -> GatewayFamily:
        """Create a fully assembled family for the selector.

        Args:
            selector: A GatewaySelector or a plain (case-insensitive) name.

        Returns:
            A new GatewayFamily instance.

        Raises:
            UnsupportedGatewayError: No family is registered for the selector,
                including empty or blank names.
            GatewaySelectorMismatchError: A plain callable built a family that
                declares a different selector.
        """
        key = self._lookup_key(selector)
        family_factory = self._registry.get(key) if key is not None else None
        if family_factory is None:
            raise UnsupportedGatewayError(
                key.name if key is not None else repr(selector),
                (s.name for s in self._registry),
            )

        family = family_factory(self._dependencies)
        _ensure_owned_by(key, family)
        logger.debug("Gateway family created", gateway=key.name, family=type(family).__name__)
        return family

    def supports(self, selector: GatewaySelector | str) -> bool:
        key = self._lookup_key(selector)
        return key is not None and key in self._registry

    def supported_selectors(self) -> list[GatewaySelector]:
        return sorted(self._registry, key=lambda s: s.name)

    @staticmethod
    def _lookup_key(selector: GatewaySelector | str) -> GatewaySelector | None:
        # A blank name can never be registered, so lookups treat it as unknown.
        try:
            return GatewaySelector.of(selector)
        except InvalidGatewaySelectorError:
            return None


def _ensure_owned_by(key: GatewaySelector, family_or_factory: object) -> None:
    owned = getattr(family_or_factory, "selector", None)
    if isinstance(owned, GatewaySelector) and owned != key:
        raise GatewaySelectorMismatchError(
            f"Gateway family for selector {owned.name} cannot be registered as {key.name}"
        )
