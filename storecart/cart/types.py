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

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class CartSize:
    """
    Size of a cart: distinct order lines and total units across them.

    Unpacks like a pair: ``orders, units = cart.get_cart_size()``.
    """

    item_order_count: int
    item_count: int

    def __iter__(self) -> Iterator[int]:
        yield self.item_order_count
        yield self.item_count

    def to_dict(self) -> Mapping[str, Any]:
        return {"item_order_count": self.item_order_count, "item_count": self.item_count}
