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
Argument checks shared by the model constructors and the cart.

Every check either returns the (normalized) value or raises. Money is kept as
Decimal end to end; ints are converted exactly, floats are refused.
"""

from decimal import Decimal
from typing import Any

from storecart.errors import InvalidArgumentError, NullReferenceError


def require_not_none(value: Any, field: str) -> Any:
    if value is None:
        raise NullReferenceError(f"{field} cannot be None.", details={"field": field})
    return value


def require_name(value: Any, field: str = "name") -> str:
    require_not_none(value, field)
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{field} must be a string.",
            details={"field": field, "type": type(value).__name__},
        )
    if not value:
        raise InvalidArgumentError(f"{field} cannot be empty.", details={"field": field})
    return value


def require_money(value: Any, field: str) -> Decimal:
    """
    Validate a non-negative money amount.

    Accepts Decimal or int. Floats (and bools) are rejected outright rather
    than converted, because the binary value is already inexact.
    """
    require_not_none(value, field)
    if isinstance(value, bool) or not isinstance(value, (Decimal, int)):
        raise InvalidArgumentError(
            f"{field} must be a Decimal, got {type(value).__name__}.",
            details={"field": field, "type": type(value).__name__},
        )
    amount = value if isinstance(value, Decimal) else Decimal(value)
    if not amount.is_finite():
        raise InvalidArgumentError(f"{field} must be a finite amount.", details={"field": field})
    if amount < 0:
        raise InvalidArgumentError(
            "Prices and quantities must not be negative.",
            details={"field": field, "value": str(amount)},
        )
    return amount


def require_quantity(value: Any, field: str) -> int:
    require_not_none(value, field)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{field} must be an integer, got {type(value).__name__}.",
            details={"field": field, "type": type(value).__name__},
        )
    if value < 0:
        raise InvalidArgumentError(
            "Prices and quantities must not be negative.",
            details={"field": field, "value": value},
        )
    return value


def require_flag(value: Any, field: str) -> bool:
    require_not_none(value, field)
    if not isinstance(value, bool):
        raise InvalidArgumentError(
            f"{field} must be True or False, got {type(value).__name__}.",
            details={"field": field, "type": type(value).__name__},
        )
    return value
