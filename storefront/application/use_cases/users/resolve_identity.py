# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case for turning the auth cookie into the current identity."""

from __future__ import annotations

from storefront.domain.users.entities import AuthIdentity
from storefront.domain.users.repositories import TokenService


class ResolveIdentityUseCase:
    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def execute(self, token: str | None) -> AuthIdentity | None:
        return self._tokens.verify(token)
