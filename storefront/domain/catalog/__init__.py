# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Discount, Product, ProductDraft, ProductQuery, SortOrder

__all__ = ["Discount", "Product", "ProductDraft", "ProductQuery", "SortOrder"]
