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
Pricing of individual cart lines.

Bulk pricing is a flat price per complete bulk set, not a per-unit rate:
with "12 for $200.00", 13 units cost one set plus one unit at the regular
price. A line is bulk-priced only when membership is active, the item has a
bulk tier, and the quantity reaches the bulk threshold.
"""

import decimal
from collections.abc import Iterable
from decimal import Decimal

from storecart.core.config import DEFAULT_PRICING, PricingConfig
from storecart.model.types import ItemOrder


def _context(precision: int) -> decimal.Context:
    return decimal.Context(
        prec=max(precision, 1),
        rounding=decimal.ROUND_HALF_EVEN,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
    )


def exact_product(amount: Decimal, count: int) -> Decimal:
    digits = len(amount.as_tuple().digits) + len(str(count)) + 1
    return _context(digits).multiply(amount, Decimal(count))


def exact_sum(amounts: Iterable[Decimal]) -> Decimal:
    """
    Sum without any intermediate rounding.

    The working precision spans from the most significant digit of the
    largest term to the last digit of the finest one, plus room for carries.
    """
    terms = [a for a in amounts if a]
    if not terms:
        return Decimal(0)

    top = max(a.adjusted() for a in terms)
    bottom = min(a.as_tuple().exponent for a in terms)
    ctx = _context(top - bottom + len(str(len(terms))) + 2)

    total = Decimal(0)
    for amount in terms:
        total = ctx.add(total, amount)
    return total


def qualifies_for_bulk(order: ItemOrder, membership: bool) -> bool:
    item = order.item
    return membership and item.is_bulk() and order.quantity >= item.bulk_quantity


def line_total(order: ItemOrder, membership: bool) -> Decimal:
    """Unrounded cost of one order."""
    item = order.item
    quantity = order.quantity

    if qualifies_for_bulk(order, membership):
        bulk_sets, remainder = divmod(quantity, item.bulk_quantity)
        return exact_sum(
            [
                exact_product(item.bulk_price, bulk_sets),
                exact_product(item.price, remainder),
            ]
        )

    return exact_product(item.price, quantity)


def round_money(amount: Decimal, config: PricingConfig = DEFAULT_PRICING) -> Decimal:
    # the quantized result keeps every integer digit plus `scale` fractional ones
    ctx = _context(max(amount.adjusted(), 0) + config.scale + 2)
    return amount.quantize(config.quantum, rounding=config.rounding, context=ctx)
