# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import AppliedDiscount, CartLine, CartSession, CartTotals, PricedLine
from .pricing import (
    INVALID_DISCOUNT_MESSAGE,
    TAX_RATE,
    add_item,
    apply_discount,
    compute_totals,
    drop_lines,
    normalize_discount_code,
    remove_item,
)

__all__ = [
    "AppliedDiscount",
    "CartLine",
    "CartSession",
    "CartTotals",
    "INVALID_DISCOUNT_MESSAGE",
    "PricedLine",
    "TAX_RATE",
    "add_item",
    "apply_discount",
    "compute_totals",
    "drop_lines",
    "normalize_discount_code",
    "remove_item",
]
