# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.domain.users.entities import IssuedToken, User
from storefront.domain.users.exceptions import RegistrationRejectedError
from storefront.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from storefront.domain.users.rules import registration_errors
from storefront.shared.logging import logger


class RegisterUserUseCase:
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

    def execute(self, username: str, password: str) -> tuple[User, IssuedToken]:
        username = username.strip()
        errors = registration_errors(
            username,
            password,
            is_taken=lambda name: self._users.find_by_username(name) is not None,
        )
        if errors:
            logger.info(f"auth.register: rejected ({len(errors)} rule(s) failed)")
            raise RegistrationRejectedError(errors)

        hashed = self._password_hasher.hash(password)
        user = self._users.add(username, hashed)
        token = self._tokens.issue(user)
        logger.info(f"auth.register: ok user_id={user.id}")
        return user, token
