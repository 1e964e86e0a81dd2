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

"""
storecart: in-memory shopping cart pricing with membership bulk discounts.
"""

from storecart._version import __version__
from storecart.cart import Cart, CartSize, StoreCart
from storecart.core import DEFAULT_PRICING, PricingConfig
from storecart.errors import CartError, InvalidArgumentError, NullReferenceError
from storecart.model import Item, ItemOrder

__all__ = [
    "__version__",
    "Item",
    "ItemOrder",
    "Cart",
    "CartSize",
    "StoreCart",
    "PricingConfig",
    "DEFAULT_PRICING",
    "CartError",
    "NullReferenceError",
    "InvalidArgumentError",
]
