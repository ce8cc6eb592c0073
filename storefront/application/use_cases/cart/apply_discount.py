# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.domain.cart import CartSession, apply_discount, normalize_discount_code
from storefront.domain.cart.repositories import SessionStore
from storefront.domain.catalog.repositories import DiscountRepository
from storefront.shared.logging import logger


class ApplyDiscountUseCase:
    def __init__(self, *, sessions: SessionStore, discounts: DiscountRepository) -> None:
        self._sessions = sessions
        self._discounts = discounts

    def execute(self, session_key: str, code: str) -> CartSession:
        session = self._sessions.load(session_key)
        normalized = normalize_discount_code(code)
        if not normalized:
            return session

        discount = self._discounts.find_by_code(normalized)
        updated = apply_discount(session, normalized, discount)
        self._sessions.save(session_key, updated)
        if discount is None:
            logger.info(f"cart.discount: unknown code={normalized}")
        else:
            logger.info(f"cart.discount: ok code={discount.code} percent={discount.percent}")
        return updated
