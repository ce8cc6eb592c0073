# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, ClassVar


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    """Error whose code and status are fixed per subclass."""

    default_code: ClassVar[str] = "domain_error"
    default_status: ClassVar[HTTPStatus] = HTTPStatus.BAD_REQUEST

    def __init__(
        self,
        context: Mapping[str, Any] | None = None,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
    ) -> None:
        super().__init__(
            code=code or self.default_code,
            status=status or self.default_status,
            context=context,
        )


class ValidationError(DomainError):
    default_code = "validation_error"
    default_status = HTTPStatus.UNPROCESSABLE_ENTITY


class ProductNotFoundError(DomainError):
    default_code = "product_not_found"
    default_status = HTTPStatus.NOT_FOUND

    def __init__(self, product_id: int) -> None:
        super().__init__({"product_id": product_id})


class InvalidCartInputError(DomainError):
    default_code = "invalid_cart_input"

    def __init__(self, field: str, value: Any = None) -> None:
        super().__init__({"field": field, "value": value})


class AdminAuthenticationError(DomainError):
    default_code = "admin_authentication_required"
    default_status = HTTPStatus.UNAUTHORIZED


class AdminAccessDeniedError(DomainError):
    default_code = "admin_access_denied"
    default_status = HTTPStatus.FORBIDDEN


class RateLimitedError(DomainError):
    default_code = "rate_limited"
    default_status = HTTPStatus.TOO_MANY_REQUESTS

    def __init__(self, retry_after: int) -> None:
        super().__init__({"retry_after": retry_after})
