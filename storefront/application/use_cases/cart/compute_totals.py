# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.domain.cart import CartSession, CartTotals, compute_totals, drop_lines
from storefront.domain.cart.repositories import SessionStore
from storefront.domain.catalog.repositories import ProductRepository
from storefront.shared.logging import logger


class ComputeCartTotalsUseCase:
    """Shared by the cart and checkout views.

    Lines pointing at products that no longer exist are pruned from the stored
    session, so an orphan can never keep a discount alive on an empty cart.
    """

    def __init__(self, *, sessions: SessionStore, products: ProductRepository) -> None:
        self._sessions = sessions
        self._products = products

    def execute(self, session_key: str | None) -> CartTotals:
        session = self._sessions.load(session_key) if session_key else None
        if session is None or session.is_empty:
            return compute_totals(session or CartSession(), {})

        products = self._products.get_many(line.product_id for line in session.cart)
        totals = compute_totals(session, products)
        if not totals.missing_product_ids:
            return totals

        missing = list(totals.missing_product_ids)
        logger.warning(f"cart.totals: dropped lines for missing products {missing}")
        pruned = drop_lines(session, set(missing))
        self._sessions.save(session_key, pruned)
        return compute_totals(pruned, products)
