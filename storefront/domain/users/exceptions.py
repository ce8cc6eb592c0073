# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from http import HTTPStatus

from storefront.shared.errors.base import DomainError, ValidationError

INVALID_CREDENTIALS_MESSAGE = "Invalid username / password."


class InvalidCredentialsError(DomainError):
    """Raised for every login failure so the form cannot leak which field was wrong."""

    default_code = "invalid_credentials"
    default_status = HTTPStatus.UNAUTHORIZED

    @property
    def messages(self) -> list[str]:
        return [INVALID_CREDENTIALS_MESSAGE]


class RegistrationRejectedError(ValidationError):
    default_code = "registration_invalid"

    def __init__(self, messages: Sequence[str]) -> None:
        super().__init__({"messages": list(messages)})

    @property
    def messages(self) -> list[str]:
        return list((self.context or {}).get("messages", []))
