from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal

import pytest
from storecart.core.config import DEFAULT_PRICING, PricingConfig
from storecart.errors import InvalidArgumentError


def test_defaults_are_two_places_half_even():
    assert DEFAULT_PRICING.scale == 2
    assert DEFAULT_PRICING.rounding == ROUND_HALF_EVEN
    assert DEFAULT_PRICING.quantum == Decimal("0.01")
    DEFAULT_PRICING.validate()


def test_quantum_follows_scale():
    assert PricingConfig(scale=0).quantum == Decimal("1")
    assert PricingConfig(scale=4).quantum == Decimal("0.0001")


def test_valid_custom_config():
    PricingConfig(scale=3, rounding=ROUND_HALF_UP).validate()


@pytest.mark.parametrize("scale", [-1, 1.5, True])
def test_invalid_scale(scale):
    with pytest.raises(InvalidArgumentError) as exc:
        PricingConfig(scale=scale).validate()
    assert exc.value.details == {"scale": scale}


def test_invalid_rounding():
    with pytest.raises(InvalidArgumentError, match="Unknown rounding mode"):
        PricingConfig(rounding="HALF_EVEN").validate()


def test_config_is_frozen():
    with pytest.raises(AttributeError):
        DEFAULT_PRICING.scale = 3  # type: ignore[misc]
