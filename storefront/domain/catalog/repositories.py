# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Protocol

from .entities import Discount, Product, ProductDraft, ProductQuery


class ProductRepository(Protocol):
    def list(self, query: ProductQuery) -> Sequence[Product]: ...
    def get(self, product_id: int) -> Product | None: ...
    def get_many(self, product_ids: Iterable[int]) -> Mapping[int, Product]: ...
    def add(self, draft: ProductDraft) -> Product: ...


class DiscountRepository(Protocol):
    def find_by_code(self, code: str) -> Discount | None: ...
