# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import AuthIdentity, IssuedToken, User
from .exceptions import InvalidCredentialsError, RegistrationRejectedError

__all__ = [
    "AuthIdentity",
    "InvalidCredentialsError",
    "IssuedToken",
    "RegistrationRejectedError",
    "User",
]
