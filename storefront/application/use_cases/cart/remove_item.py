# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.domain.cart import CartSession, remove_item
from storefront.domain.cart.repositories import SessionStore
from storefront.shared.logging import logger


class RemoveCartItemUseCase:
    def __init__(self, *, sessions: SessionStore) -> None:
        self._sessions = sessions

    def execute(self, session_key: str, product_id: int | None) -> CartSession:
        updated = remove_item(self._sessions.load(session_key), product_id)
        self._sessions.save(session_key, updated)
        logger.info(f"cart.remove: ok product_id={product_id} lines={len(updated.cart)}")
        return updated
