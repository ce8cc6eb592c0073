# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from storefront.domain.catalog import ProductDraft


class ProductCreateDTO(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    description: str | None = Field(None, max_length=2000)
    image: str | None = Field(None, max_length=500)
    category: str | None = Field(None, max_length=100)

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    @field_validator("description", "image", "category", mode="before")
    @classmethod
    def _empty_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_draft(self) -> ProductDraft:
        return ProductDraft(
            name=self.name,
            price=self.price,
            description=self.description,
            image=self.image,
            category=self.category,
        )
