# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Storecart Contributors
#
# This file is part of Storecart.
#
# Storecart is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Storecart is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from storecart.errors import InvalidArgumentError
from storecart.model.validator import require_money, require_name, require_not_none, require_quantity


def format_money(amount: Decimal) -> str:
    """Display helper: ``Decimal("1099.99")`` -> ``"$1,099.99"``."""
    return f"${amount:,.2f}"


# Core model entities


@dataclass(frozen=True, slots=True)
class Item:
    """
    A purchasable good, sold individually and optionally in bulk.

    A bulk tier is ``bulk_quantity`` units for the flat ``bulk_price``.
    ``bulk_quantity == 0`` means the item has no bulk tier.

    Items are immutable value objects: two items with the same four fields
    are equal and hash alike, which is what the cart uses to decide whether
    an order replaces an existing cart line.
    """

    name: str
    price: Decimal
    bulk_quantity: int = 0
    bulk_price: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        name = require_name(self.name)
        price = require_money(self.price, "price")
        bulk_quantity = require_quantity(self.bulk_quantity, "bulk_quantity")
        bulk_price = require_money(self.bulk_price, "bulk_price")

        # ints are normalized to Decimal so equality/hash stay type-consistent
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "price", price)
        object.__setattr__(self, "bulk_quantity", bulk_quantity)
        object.__setattr__(self, "bulk_price", bulk_price)

    def is_bulk(self) -> bool:
        """True when a bulk tier exists. Independent of the bulk price value."""
        return self.bulk_quantity > 0

    def to_dict(self) -> Mapping[str, Any]:
        return {
            "name": self.name,
            "price": str(self.price),
            "bulk_quantity": self.bulk_quantity,
            "bulk_price": str(self.bulk_price),
        }

    def __str__(self) -> str:
        result = f"{self.name}, {format_money(self.price)}"
        if self.is_bulk():
            result += f" ({self.bulk_quantity} for {format_money(self.bulk_price)})"
        return result


@dataclass(frozen=True, slots=True)
class ItemOrder:
    """
    A requested quantity of one item.

    The item is shared, not copied. Zero quantity is valid here; the cart
    treats it as "remove this item".
    """

    item: Item
    quantity: int

    def __post_init__(self) -> None:
        require_not_none(self.item, "item")
        if not isinstance(self.item, Item):
            raise InvalidArgumentError(
                "item must be an Item.",
                details={"field": "item", "type": type(self.item).__name__},
            )
        require_quantity(self.quantity, "quantity")

    def to_dict(self) -> Mapping[str, Any]:
        return {
            "item": self.item.to_dict(),
            "quantity": self.quantity,
        }

    def __str__(self) -> str:
        return f"Item: {self.item.name}, Quantity: {self.quantity}"
