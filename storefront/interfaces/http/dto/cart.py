# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class CartItemDTO(BaseModel):
    product_id: int | None = None
    quantity: int = 1

    model_config = ConfigDict(extra="ignore")

    @field_validator("product_id", mode="before")
    @classmethod
    def _parse_product_id(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("quantity", mode="before")
    @classmethod
    def _default_quantity(cls, value: Any) -> Any:
        value = _blank_to_none(value)
        return 1 if value is None else value


class DiscountFormDTO(BaseModel):
    discount: str = ""

    model_config = ConfigDict(extra="ignore", strict=True)
