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

import decimal
from dataclasses import dataclass

from storecart.errors import InvalidArgumentError

ROUNDING_MODES: frozenset[str] = frozenset(
    {
        decimal.ROUND_UP,
        decimal.ROUND_DOWN,
        decimal.ROUND_CEILING,
        decimal.ROUND_FLOOR,
        decimal.ROUND_HALF_UP,
        decimal.ROUND_HALF_DOWN,
        decimal.ROUND_HALF_EVEN,
        decimal.ROUND_05UP,
    }
)


@dataclass(frozen=True)
class PricingConfig:
    scale: int = 2  # fractional digits kept in the final total
    rounding: str = decimal.ROUND_HALF_EVEN

    @property
    def quantum(self) -> decimal.Decimal:
        return decimal.Decimal(1).scaleb(-self.scale)

    def validate(self) -> None:
        if isinstance(self.scale, bool) or not isinstance(self.scale, int) or self.scale < 0:
            raise InvalidArgumentError(
                "PricingConfig.scale must be a non-negative integer.",
                details={"scale": self.scale},
            )
        if self.rounding not in ROUNDING_MODES:
            raise InvalidArgumentError(
                f"Unknown rounding mode '{self.rounding}'. Must be one of: {', '.join(sorted(ROUNDING_MODES))}.",
                details={"rounding": self.rounding},
            )


DEFAULT_PRICING = PricingConfig()
