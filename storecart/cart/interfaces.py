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

from decimal import Decimal
from typing import Protocol

from storecart.cart.types import CartSize
from storecart.model.types import ItemOrder


class Cart(Protocol):
    """
    Shopping cart contract.

    Collaborators (UIs, importers) drive a cart through this surface only.
    Implementations hold at most one order per distinct item.
    """

    def add(self, order: ItemOrder) -> None: ...

    def set_membership(self, active: bool) -> None: ...

    def calculate_total(self) -> Decimal: ...

    def clear(self) -> None: ...

    def get_cart_size(self) -> CartSize: ...
