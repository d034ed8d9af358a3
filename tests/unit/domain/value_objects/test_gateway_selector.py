import pytest

from payment_gateways.domain.exceptions import InvalidGatewaySelectorError
from payment_gateways.domain.value_objects import (
    MERCADOPAGO,
    PAGSEGURO,
    STRIPE,
    GatewaySelector,
)


class TestGatewaySelectorCreation:
    def test_creates_valid_selector(self) -> None:
        selector = GatewaySelector(name="stripe")

        assert isinstance(selector, GatewaySelector)
        assert selector.name == "stripe"

    def test_str_returns_name(self) -> None:
        assert str(GatewaySelector("mercadopago")) == "mercadopago"

    def test_accepts_names_outside_builtin_set(self) -> None:
        selector = GatewaySelector("paypal")

        assert selector.name == "paypal"


class TestGatewaySelectorNormalization:
    def test_lowercases_name(self) -> None:
        selector = GatewaySelector(name="PagSeguro")

        assert selector.name == "pagseguro"

    def test_trims_whitespace(self) -> None:
        selector = GatewaySelector(name="  stripe  ")

        assert selector.name == "stripe"

    def test_normalized_selectors_are_equal(self) -> None:
        assert GatewaySelector(" MercadoPago ") == MERCADOPAGO

    def test_normalized_selectors_hash_equal(self) -> None:
        registry = {STRIPE: "stripe-factory"}

        assert registry[GatewaySelector("STRIPE")] == "stripe-factory"


class TestGatewaySelectorValidation:
    def test_raises_for_empty_string(self) -> None:
        with pytest.raises(InvalidGatewaySelectorError):
            GatewaySelector(name="")

    def test_raises_for_whitespace_only(self) -> None:
        with pytest.raises(InvalidGatewaySelectorError):
            GatewaySelector(name="   ")

    def test_raises_for_non_string(self) -> None:
        with pytest.raises(InvalidGatewaySelectorError):
            GatewaySelector(name=42)  # type: ignore[arg-type]


class TestGatewaySelectorOf:
    def test_returns_same_instance_for_selector(self) -> None:
        assert GatewaySelector.of(PAGSEGURO) is PAGSEGURO

    def test_builds_selector_from_string(self) -> None:
        assert GatewaySelector.of("Stripe") == STRIPE

    def test_raises_for_empty_string(self) -> None:
        with pytest.raises(InvalidGatewaySelectorError):
            GatewaySelector.of("")


class TestGatewaySelectorImmutability:
    def test_selector_is_frozen(self) -> None:
        selector = GatewaySelector("stripe")

        with pytest.raises(AttributeError):
            selector.name = "pagseguro"  # type: ignore[misc]


class TestBuiltinSelectors:
    def test_builtin_selectors_are_distinct(self) -> None:
        assert len({PAGSEGURO, MERCADOPAGO, STRIPE}) == 3

    @pytest.mark.parametrize(
        ("selector", "name"),
        [(PAGSEGURO, "pagseguro"), (MERCADOPAGO, "mercadopago"), (STRIPE, "stripe")],
    )
    def test_builtin_selector_names(self, selector: GatewaySelector, name: str) -> None:
        assert selector.name == name
