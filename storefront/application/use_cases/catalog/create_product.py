# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.domain.catalog import Product, ProductDraft
from storefront.domain.catalog.repositories import ProductRepository
from storefront.shared.logging import logger


class CreateProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, draft: ProductDraft) -> Product:
        product = self._products.add(draft)
        logger.info(f"catalog.create: ok product_id={product.id}")
        return product
