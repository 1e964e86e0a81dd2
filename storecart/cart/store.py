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

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from storecart.cart.pricing import exact_sum, line_total, round_money
from storecart.cart.types import CartSize
from storecart.core.config import DEFAULT_PRICING, PricingConfig
from storecart.errors import InvalidArgumentError
from storecart.model.types import Item, ItemOrder
from storecart.model.validator import require_flag, require_not_none

logger = logging.getLogger(__name__)


class StoreCart:
    """
    In-memory shopping cart.

    Holds at most one order per distinct item (compared by value, so two
    separately built but identical items share a cart line). Adding an order
    replaces the previous one for that item; a zero quantity removes it.

    Members get bulk pricing on items that offer it once the ordered quantity
    reaches the bulk threshold.

    Not thread-safe: concurrent mutation of one cart is undefined.
    """

    def __init__(self, config: PricingConfig | None = None) -> None:
        self._config = config if config is not None else DEFAULT_PRICING
        self._config.validate()
        self._orders: dict[Item, ItemOrder] = {}
        self._membership = False

    @property
    def membership(self) -> bool:
        return self._membership

    @property
    def config(self) -> PricingConfig:
        return self._config

    def add(self, order: ItemOrder) -> None:
        """
        Add an order, replacing any existing order for the same item.

        Orders with quantity 0 are not stored, so a zero order for an item
        already in the cart removes it and one for a new item does nothing.
        """
        require_not_none(order, "order")
        if not isinstance(order, ItemOrder):
            raise InvalidArgumentError(
                "order must be an ItemOrder.",
                details={"type": type(order).__name__},
            )

        previous = self._orders.pop(order.item, None)

        if order.quantity > 0:
            self._orders[order.item] = order
            if previous is None:
                logger.debug(f"Added {order.quantity} x {order.item.name}")
            else:
                logger.debug(f"Replaced {order.item.name}: quantity {previous.quantity} -> {order.quantity}")
        elif previous is not None:
            logger.debug(f"Removed {order.item.name} (zero quantity)")
        else:
            logger.debug(f"Ignored zero-quantity order for {order.item.name}")

    def set_membership(self, active: bool) -> None:
        self._membership = require_flag(active, "membership")
        logger.debug(f"Membership set to {self._membership}")

    def calculate_total(self) -> Decimal:
        """
        Total cost of the cart.

        Lines are summed exactly and only the final amount is rounded
        (2 places, half-even, unless the cart was given another PricingConfig).
        An empty cart costs ``Decimal("0.00")``.
        """
        total = exact_sum(line_total(order, self._membership) for order in self._orders.values())
        rounded = round_money(total, self._config)

        logger.debug(f"Calculated total {rounded} for {len(self._orders)} orders (membership={self._membership})")
        return rounded

    def clear(self) -> None:
        self._orders.clear()
        logger.debug("Cart cleared")

    def get_cart_size(self) -> CartSize:
        item_count = 0
        for order in self._orders.values():
            item_count += order.quantity
        return CartSize(item_order_count=len(self._orders), item_count=item_count)

    def orders(self) -> tuple[ItemOrder, ...]:
        """Snapshot of current orders, oldest first."""
        return tuple(self._orders.values())

    def to_dict(self) -> Mapping[str, Any]:
        return {
            "orders": [o.to_dict() for o in self._orders.values()],
            "membership": self._membership,
            "size": self.get_cart_size().to_dict(),
            "total": str(self.calculate_total()),
        }

    def __len__(self) -> int:
        return len(self._orders)

    def __str__(self) -> str:
        orders = ", ".join(str(o) for o in self._orders.values())
        return f"StoreCart{{orders=[{orders}], membership={self._membership}}}"
