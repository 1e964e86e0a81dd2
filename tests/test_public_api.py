from decimal import Decimal

import storecart


def test_top_level_exports():
    for name in storecart.__all__:
        assert hasattr(storecart, name), name


def test_version_is_a_string():
    assert isinstance(storecart.__version__, str)
    assert storecart.__version__


def test_end_to_end_through_top_level_names():
    cart = storecart.StoreCart()
    cart.add(storecart.ItemOrder(storecart.Item("Laptop", Decimal("999.99")), 1))
    cart.add(storecart.ItemOrder(storecart.Item("Mouse", Decimal("25.00")), 4))
    assert cart.calculate_total() == Decimal("1099.99")


def test_version_falls_back_when_not_installed():
    from storecart._version import UNKNOWN_VERSION, installed_version

    assert installed_version("storecart-no-such-distribution") == UNKNOWN_VERSION
