from __future__ import annotations

import time

import pytest

from storefront.application.services.auth_tokens import SignedTokenService
from storefront.application.services.password_hashing import WerkzeugPasswordHasher
from storefront.domain.users.entities import User


@pytest.fixture()
def user() -> User:
    return User(id=7, username="alice", password_hash="unused")


def test_issued_token_verifies_to_the_same_identity(user: User) -> None:
    service = SignedTokenService("signing-key", ttl_seconds=3600)

    issued = service.issue(user)
    identity = service.verify(issued.value)

    assert identity is not None
    assert identity.user_id == 7
    assert identity.username == "alice"
    assert issued.max_age == 3600
    assert issued.identity.expires_at == identity.expires_at


def test_token_signed_with_another_key_is_rejected(user: User) -> None:
    issued = SignedTokenService("signing-key").issue(user)

    assert SignedTokenService("other-key").verify(issued.value) is None


def test_tampered_token_is_rejected(user: User) -> None:
    service = SignedTokenService("signing-key")
    issued = service.issue(user)

    assert service.verify(issued.value.replace(".", ".x", 1)) is None
    assert service.verify("not-a-token") is None
    assert service.verify("") is None
    assert service.verify(None) is None


def test_expired_token_is_rejected(user: User, monkeypatch: pytest.MonkeyPatch) -> None:
    service = SignedTokenService("signing-key", ttl_seconds=60)
    issued = service.issue(user)
    now = time.time()

    monkeypatch.setattr(time, "time", lambda: now + 61)

    assert service.verify(issued.value) is None


def test_default_lifetime_is_one_day() -> None:
    assert SignedTokenService("signing-key").ttl_seconds == 24 * 60 * 60


def test_password_hasher_round_trip() -> None:
    hasher = WerkzeugPasswordHasher()

    hashed = hasher.hash("correcthorse1")

    assert hashed != "correcthorse1"
    assert hasher.verify("correcthorse1", hashed) is True
    assert hasher.verify("wrongpassword", hashed) is False
