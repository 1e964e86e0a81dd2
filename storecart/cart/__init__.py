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

from storecart.cart.interfaces import Cart
from storecart.cart.pricing import exact_product, exact_sum, line_total, qualifies_for_bulk, round_money
from storecart.cart.store import StoreCart
from storecart.cart.types import CartSize

__all__ = [
    "Cart",
    "CartSize",
    "StoreCart",
    "exact_product",
    "exact_sum",
    "line_total",
    "qualifies_for_bulk",
    "round_money",
]
