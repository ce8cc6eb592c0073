# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import CartSession


class SessionStore(Protocol):
    """Maps an opaque session key to the visitor's cart state."""

    def load(self, key: str) -> CartSession: ...
    def save(self, key: str, session: CartSession) -> None: ...
    def delete(self, key: str) -> None: ...
