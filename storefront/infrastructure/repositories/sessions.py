# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Server-side storage for per-visitor cart sessions."""

from __future__ import annotations

import threading
from datetime import UTC, datetime, timedelta

from sqlalchemy import delete
from sqlalchemy.orm import Session

from storefront.domain.cart import CartSession
from storefront.domain.cart.repositories import SessionStore
from storefront.infrastructure.db.models import CartSessionRecord
from storefront.infrastructure.db.session import session_scope
from storefront.shared.logging import logger


def _aware(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back.
    return value if value.tzinfo else value.replace(tzinfo=UTC)


class SqlAlchemySessionStore(SessionStore):
    def __init__(self, *, ttl_seconds: int) -> None:
        self._ttl = timedelta(seconds=ttl_seconds)

    def load(self, key: str) -> CartSession:
        with session_scope() as session:
            row = session.get(CartSessionRecord, key)
            if row is None:
                return CartSession()
            if _aware(row.expires_at) <= datetime.now(UTC):
                logger.debug("cart.session: expired, starting fresh")
                session.delete(row)
                return CartSession()
            return CartSession.from_dict(row.payload)

    def save(self, key: str, cart_session: CartSession) -> None:
        now = datetime.now(UTC)
        with session_scope() as session:
            row = session.get(CartSessionRecord, key)
            if row is None:
                # Minting a session also sweeps out abandoned ones.
                purged = self._purge(session, now)
                if purged:
                    logger.debug(f"cart.session: swept {purged} expired sessions")
                session.add(
                    CartSessionRecord(
                        key=key, payload=cart_session.to_dict(), expires_at=now + self._ttl
                    )
                )
            else:
                row.payload = cart_session.to_dict()
                row.expires_at = now + self._ttl

    def delete(self, key: str) -> None:
        with session_scope() as session:
            session.execute(delete(CartSessionRecord).where(CartSessionRecord.key == key))

    def purge_expired(self) -> int:
        with session_scope() as session:
            purged = self._purge(session, datetime.now(UTC))
        if purged:
            logger.info(f"cart.session: purged {purged} expired sessions")
        return purged

    @staticmethod
    def _purge(session: Session, now: datetime) -> int:
        result = session.execute(
            delete(CartSessionRecord).where(CartSessionRecord.expires_at <= now)
        )
        return result.rowcount or 0


class InMemorySessionStore(SessionStore):
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sessions: dict[str, CartSession] = {}

    def load(self, key: str) -> CartSession:
        with self._lock:
            return self._sessions.get(key, CartSession())

    def save(self, key: str, cart_session: CartSession) -> None:
        with self._lock:
            self._sessions[key] = cart_session

    def delete(self, key: str) -> None:
        with self._lock:
            self._sessions.pop(key, None)
