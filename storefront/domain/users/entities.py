# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str
    is_admin: bool = False


@dataclass(slots=True, frozen=True)
class AuthIdentity:
    """Claims carried by a verified auth token."""

    user_id: int
    username: str
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class IssuedToken:

    value: str
    identity: AuthIdentity
    max_age: int
