# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from storefront.domain.users.entities import IssuedToken, User
from storefront.domain.users.exceptions import InvalidCredentialsError
from storefront.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from storefront.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._decoy_hash: str | None = None

    def _decoy(self) -> str:
        # Unknown usernames still pay for one hash check.
        if self._decoy_hash is None:
            self._decoy_hash = self._password_hasher.hash(secrets.token_urlsafe(16))
        return self._decoy_hash

    def execute(self, username: str, password: str) -> tuple[User, IssuedToken]:
        if not username.strip():
            raise InvalidCredentialsError()

        user = self._users.find_by_username(username)
        if user is None:
            self._password_hasher.verify(password, self._decoy())
            password_valid = False
        else:
            password_valid = self._password_hasher.verify(password, user.password_hash)

        if not password_valid:
            logger.info("auth.login: rejected")
            raise InvalidCredentialsError()

        token = self._tokens.issue(user)
        logger.info(f"auth.login: ok user_id={user.id}")
        return user, token
