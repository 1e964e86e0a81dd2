from decimal import ROUND_HALF_EVEN, Decimal

import pytest
from storecart.cart.interfaces import Cart
from storecart.cart.pricing import exact_product, exact_sum, line_total, qualifies_for_bulk, round_money
from storecart.cart.store import StoreCart
from storecart.cart.types import CartSize
from storecart.core.config import PricingConfig
from storecart.model.types import Item, ItemOrder

MOUSE = Item("Mouse", Decimal("25.00"), 12, Decimal("200.00"))


@pytest.mark.parametrize(
    "quantity, membership, expected",
    [
        (11, True, False),
        (12, True, True),
        (13, True, True),
        (12, False, False),
        (0, True, False),
    ],
)
def test_qualifies_for_bulk(quantity: int, membership: bool, expected: bool):
    assert qualifies_for_bulk(ItemOrder(MOUSE, quantity), membership) is expected


def test_non_bulk_item_never_qualifies():
    assert qualifies_for_bulk(ItemOrder(Item("Laptop", Decimal("999.99")), 100), True) is False


def test_line_total_splits_sets_and_remainder():
    assert line_total(ItemOrder(MOUSE, 30), True) == Decimal("450.00")  # 2 sets + 6 units


def test_line_total_is_unrounded():
    assert line_total(ItemOrder(Item("Bolt", Decimal("0.125")), 3), False) == Decimal("0.375")


@pytest.mark.parametrize(
    "amount, expected",
    [
        ("0.005", "0.00"),
        ("0.015", "0.02"),
        ("0.025", "0.02"),
        ("2.675", "2.68"),
        ("10", "10.00"),
    ],
)
def test_round_money_half_even(amount: str, expected: str):
    assert str(round_money(Decimal(amount))) == expected


def test_round_money_uses_config():
    cfg = PricingConfig(scale=3, rounding=ROUND_HALF_EVEN)
    assert str(round_money(Decimal("1.23456"), cfg)) == "1.235"


def test_store_cart_satisfies_cart_protocol():
    cart: Cart = StoreCart()
    cart.add(ItemOrder(MOUSE, 1))
    assert cart.get_cart_size() == CartSize(1, 1)


def test_exact_sum_of_nothing_is_zero():
    assert exact_sum([]) == Decimal("0")
    assert exact_sum([Decimal("0.00"), Decimal("0")]) == Decimal("0")


def test_exact_sum_keeps_every_digit():
    total = exact_sum([Decimal("1E+150"), Decimal("1E-150"), Decimal("1E-150")])
    assert total - Decimal("1E+150") != 0
    assert total.as_tuple().exponent == -150
    assert len(total.as_tuple().digits) == 301


def test_exact_product_does_not_round():
    amount = Decimal("1234567890123456789012345678901234.99")
    product = exact_product(amount, 999_999_999)
    assert product.as_tuple().exponent == -2
    assert exact_sum([product, amount]) == Decimal("1234567890123456789012345678901234.99E+9")


def test_round_money_of_large_amount():
    assert str(round_money(Decimal("1E+120"))) == "1" + "0" * 120 + ".00"
