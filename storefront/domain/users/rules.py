# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Registration rules, evaluated in order with every failure collected."""

from __future__ import annotations

import re
from collections.abc import Callable

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 10
PASSWORD_MIN_LENGTH = 12
PASSWORD_MAX_LENGTH = 70

_USERNAME_RE = re.compile(r"[a-zA-Z0-9]+")


def registration_errors(
    username: str, password: str, *, is_taken: Callable[[str], bool]
) -> list[str]:
    """Return the ordered list of failed rules; username must already be trimmed.

    The uniqueness lookup runs even when earlier username rules failed.
    """

    errors: list[str] = []

    if not username:
        errors.append("Enter a username.")
    else:
        if len(username) < USERNAME_MIN_LENGTH:
            errors.append(f"Username must be at least {USERNAME_MIN_LENGTH} characters")
        if len(username) > USERNAME_MAX_LENGTH:
            errors.append(f"Username cannot exceed {USERNAME_MAX_LENGTH} characters")
        if not _USERNAME_RE.fullmatch(username):
            errors.append("Username can only contain letters and numbers")

    if is_taken(username):
        errors.append("Username is taken.")

    if not password:
        errors.append("Enter a password.")
    else:
        if len(password) < PASSWORD_MIN_LENGTH:
            errors.append(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
        if len(password) > PASSWORD_MAX_LENGTH:
            errors.append(f"Password cannot exceed {PASSWORD_MAX_LENGTH} characters")

    return errors
