from __future__ import annotations

from decimal import Decimal

from storefront.domain.cart import AppliedDiscount, CartLine, CartSession
from storefront.infrastructure.repositories.sessions import SqlAlchemySessionStore

KEY = "visitor-session-key-0002"


def _session() -> CartSession:
    return CartSession(
        cart=(CartLine(product_id=2, quantity=3),),
        discount=AppliedDiscount(code="WELCOME5", percent=Decimal("5")),
    )


def test_unknown_key_loads_an_empty_session(reset_database) -> None:
    assert SqlAlchemySessionStore(ttl_seconds=60).load("missing") == CartSession()


def test_save_then_load_and_overwrite(reset_database) -> None:
    store = SqlAlchemySessionStore(ttl_seconds=60)

    store.save(KEY, _session())
    assert store.load(KEY) == _session()

    store.save(KEY, CartSession())
    assert store.load(KEY) == CartSession()


def test_expired_session_starts_fresh(reset_database) -> None:
    store = SqlAlchemySessionStore(ttl_seconds=0)
    store.save(KEY, _session())

    assert store.load(KEY) == CartSession()


def test_delete_and_purge(reset_database) -> None:
    store = SqlAlchemySessionStore(ttl_seconds=60)
    store.save(KEY, _session())
    store.delete(KEY)
    assert store.load(KEY) == CartSession()

    store.save(KEY, _session())
    expired = SqlAlchemySessionStore(ttl_seconds=0)
    expired.save("stale-session-key-0001", _session())

    assert store.purge_expired() == 1
    assert store.load(KEY) == _session()


def test_new_session_sweeps_expired_rows(reset_database) -> None:
    SqlAlchemySessionStore(ttl_seconds=0).save("stale-session-key-0001", _session())
    store = SqlAlchemySessionStore(ttl_seconds=60)

    store.save(KEY, _session())

    assert store.purge_expired() == 0
    assert store.load(KEY) == _session()
