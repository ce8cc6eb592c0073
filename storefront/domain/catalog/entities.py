# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Catalog entities: products, discount codes and listing filters."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from storefront.domain.exceptions import InvariantViolation


class SortOrder(str, Enum):
    DEFAULT = "default"
    PRICE_LOW = "low"
    PRICE_HIGH = "high"

    @classmethod
    def parse(cls, value: str | None) -> SortOrder:
        """Unknown or missing values fall back to insertion order."""

        try:
            return cls(value) if value else cls.DEFAULT
        except ValueError:
            return cls.DEFAULT


@dataclass(slots=True, frozen=True)
class Product:

    id: int
    name: str
    description: str | None
    price: Decimal
    image: str | None
    category: str | None

    def __post_init__(self) -> None:
        if self.price < 0:
            raise InvariantViolation("price must be non-negative", field="price")


@dataclass(slots=True, frozen=True)
class ProductDraft:
    """Admin input for a product that has not been stored yet."""

    name: str
    price: Decimal
    description: str | None = None
    image: str | None = None
    category: str | None = None

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise InvariantViolation("name is required", field="name")
        if self.price < 0:
            raise InvariantViolation("price must be non-negative", field="price")


@dataclass(slots=True, frozen=True)
class Discount:

    code: str
    percent: Decimal

    def __post_init__(self) -> None:
        if not Decimal(0) <= self.percent <= Decimal(100):
            raise InvariantViolation("percent must be within [0, 100]", field="percent")


@dataclass(slots=True, frozen=True)
class ProductQuery:

    category: str | None = None
    search: str | None = None
    sort: SortOrder = SortOrder.DEFAULT

    @classmethod
    def from_params(
        cls, category: str | None, search: str | None, sort: str | None
    ) -> ProductQuery:
        return cls(
            category=category or None,
            search=(search or "").strip() or None,
            sort=SortOrder.parse(sort),
        )
