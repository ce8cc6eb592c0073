# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-limited auth tokens carried in the auth cookie."""

from __future__ import annotations

import time
from datetime import UTC, datetime

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from storefront.domain.users.entities import AuthIdentity, IssuedToken, User
from storefront.domain.users.repositories import TokenService
from storefront.shared.logging import logger

_SALT = "storefront.auth"


class SignedTokenService(TokenService):
    """Stateless tokens: validity is the signature plus the expiry claim."""

    def __init__(self, secret_key: str, *, ttl_seconds: int = 60 * 60 * 24) -> None:
        self._serializer = URLSafeTimedSerializer(secret_key, salt=_SALT)
        self._ttl = ttl_seconds

    @property
    def ttl_seconds(self) -> int:
        return self._ttl

    def issue(self, user: User) -> IssuedToken:
        exp = int(time.time()) + self._ttl
        value = self._serializer.dumps({"uid": user.id, "username": user.username, "exp": exp})
        identity = AuthIdentity(
            user_id=user.id,
            username=user.username,
            expires_at=datetime.fromtimestamp(exp, UTC),
        )
        return IssuedToken(value=value, identity=identity, max_age=self._ttl)

    def verify(self, token: str | None) -> AuthIdentity | None:
        if not token:
            return None
        try:
            claims = self._serializer.loads(token, max_age=self._ttl)
        except SignatureExpired:
            logger.debug("auth.token: expired")
            return None
        except BadSignature:
            logger.debug("auth.token: bad signature")
            return None

        try:
            exp = int(claims["exp"])
            identity = AuthIdentity(
                user_id=int(claims["uid"]),
                username=str(claims["username"]),
                expires_at=datetime.fromtimestamp(exp, UTC),
            )
        except (KeyError, TypeError, ValueError):
            logger.debug("auth.token: malformed claims")
            return None

        if exp <= time.time():
            logger.debug("auth.token: expired")
            return None
        return identity
