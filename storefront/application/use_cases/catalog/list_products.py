# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from storefront.domain.catalog import Product, ProductQuery
from storefront.domain.catalog.repositories import ProductRepository


class ListProductsUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, query: ProductQuery) -> Sequence[Product]:
        return self._products.list(query)
