# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def field_errors(exc: PydanticValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into ``{"field", "message"}`` pairs, in input order."""

    flattened = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()))
        flattened.append({"field": field or "form", "message": error.get("msg", "Invalid value")})
    return flattened


def form_error_messages(exc: PydanticValidationError) -> list[str]:
    return [
        f"{entry['field'].replace('_', ' ').capitalize()}: {entry['message']}"
        for entry in field_errors(exc)
    ]


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    raise ValidationError({"errors": field_errors(exc)}) from exc


__all__ = ["field_errors", "form_error_messages", "raise_validation_error"]
