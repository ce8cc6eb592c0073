# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Cart state held per visitor and the totals derived from it."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from storefront.domain.catalog import Product
from storefront.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class CartLine:

    product_id: int
    quantity: int

    def __post_init__(self) -> None:
        if self.product_id < 1:
            raise InvariantViolation("product id must be positive", field="product_id")
        if self.quantity < 1:
            raise InvariantViolation("quantity must be at least 1", field="quantity")


@dataclass(slots=True, frozen=True)
class AppliedDiscount:

    code: str
    percent: Decimal


@dataclass(slots=True, frozen=True)
class CartSession:
    """Immutable snapshot of a visitor's cart.

    Lines keep insertion order and hold at most one entry per product id.
    """

    cart: tuple[CartLine, ...] = ()
    discount: AppliedDiscount | None = None
    discount_error: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.cart

    def to_dict(self) -> dict[str, Any]:
        return {
            "cart": [{"product_id": ln.product_id, "quantity": ln.quantity} for ln in self.cart],
            "discount": (
                {"code": self.discount.code, "percent": str(self.discount.percent)}
                if self.discount
                else None
            ),
            "discount_error": self.discount_error,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> CartSession:
        if not data:
            return cls()
        discount = data.get("discount")
        return cls(
            cart=tuple(
                CartLine(product_id=int(item["product_id"]), quantity=int(item["quantity"]))
                for item in data.get("cart") or []
            ),
            discount=(
                AppliedDiscount(code=discount["code"], percent=Decimal(discount["percent"]))
                if discount
                else None
            ),
            discount_error=data.get("discount_error"),
        )


@dataclass(slots=True, frozen=True)
class PricedLine:

    product: Product
    quantity: int
    subtotal: Decimal


@dataclass(slots=True, frozen=True)
class CartTotals:

    lines: tuple[PricedLine, ...]
    subtotal: Decimal
    tax: Decimal
    discount_amount: Decimal
    discount_code: str | None
    total: Decimal
    discount_error: str | None = None
    missing_product_ids: tuple[int, ...] = field(default_factory=tuple)
