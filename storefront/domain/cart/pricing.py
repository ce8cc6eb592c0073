# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Cart mutations and pricing.

These functions are the only way session pricing state changes. Each takes a
:class:`CartSession` and returns a new one; nothing here touches storage.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import replace
from decimal import Decimal

from storefront.domain.catalog import Discount, Product
from storefront.shared.errors.base import InvalidCartInputError

from .entities import AppliedDiscount, CartLine, CartSession, CartTotals, PricedLine

TAX_RATE = Decimal("0.0825")
INVALID_DISCOUNT_MESSAGE = "Invalid discount code. Please try again."

_ZERO = Decimal(0)
_HUNDRED = Decimal(100)


def add_item(session: CartSession, product_id: int | None, quantity: int = 1) -> CartSession:
    if product_id is None or product_id < 1:
        raise InvalidCartInputError("product_id", product_id)
    if quantity < 1:
        raise InvalidCartInputError("quantity", quantity)

    lines = list(session.cart)
    for idx, line in enumerate(lines):
        if line.product_id == product_id:
            lines[idx] = replace(line, quantity=line.quantity + quantity)
            break
    else:
        lines.append(CartLine(product_id=product_id, quantity=quantity))

    return replace(session, cart=tuple(lines))


def remove_item(session: CartSession, product_id: int | None) -> CartSession:
    return drop_lines(session, {product_id})


def drop_lines(session: CartSession, product_ids: Collection[int | None]) -> CartSession:
    lines = tuple(line for line in session.cart if line.product_id not in product_ids)
    if not lines:
        # A discount means nothing on an empty cart.
        return CartSession()
    return replace(session, cart=lines)


def normalize_discount_code(code: str | None) -> str:
    return (code or "").strip().upper()


def apply_discount(session: CartSession, code: str, discount: Discount | None) -> CartSession:
    """Record the outcome of looking up ``code``.

    ``discount`` is the lookup result for the normalized code. An empty code is
    a no-op; a miss keeps the previously applied discount.
    """

    if not normalize_discount_code(code):
        return session
    if discount is None:
        return replace(session, discount_error=INVALID_DISCOUNT_MESSAGE)
    return replace(
        session,
        discount=AppliedDiscount(code=discount.code, percent=discount.percent),
        discount_error=None,
    )


def compute_totals(session: CartSession, products: Mapping[int, Product]) -> CartTotals:
    """Price ``session`` against the resolved ``products``.

    Lines whose product is absent from ``products`` are left out of every sum
    and reported in ``missing_product_ids``.
    """

    priced: list[PricedLine] = []
    missing: list[int] = []
    for line in session.cart:
        product = products.get(line.product_id)
        if product is None:
            missing.append(line.product_id)
            continue
        priced.append(
            PricedLine(
                product=product,
                quantity=line.quantity,
                subtotal=product.price * line.quantity,
            )
        )

    subtotal = sum((p.subtotal for p in priced), _ZERO)
    tax = subtotal * TAX_RATE

    discount_amount = _ZERO
    discount_code = None
    if session.discount is not None:
        discount_amount = subtotal * (session.discount.percent / _HUNDRED)
        discount_code = session.discount.code

    return CartTotals(
        lines=tuple(priced),
        subtotal=subtotal,
        tax=tax,
        discount_amount=discount_amount,
        discount_code=discount_code,
        total=subtotal + tax - discount_amount,
        discount_error=session.discount_error,
        missing_product_ids=tuple(missing),
    )
