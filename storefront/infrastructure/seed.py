# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Startup seeding for discount codes and the demo catalog."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import func, select

from storefront.infrastructure.db.models import Discount, Product
from storefront.infrastructure.db.session import session_scope
from storefront.shared.logging import logger

SEED_DISCOUNTS: tuple[tuple[str, Decimal], ...] = (
    ("SAVE10", Decimal("10")),
    ("FALL25", Decimal("25")),
    ("WELCOME5", Decimal("5")),
)

SEED_PRODUCTS: tuple[dict[str, object], ...] = (
    {
        "name": "Slim Fit Jeans",
        "description": "Tapered denim with stretch comfort",
        "price": Decimal("59.99"),
        "image": "/images/jeans.jpg",
        "category": "Bottoms",
    },
    {
        "name": "Oversized Hoodie",
        "description": "Cozy fleece with front pocket",
        "price": Decimal("44.99"),
        "image": "/images/hoodie.jpg",
        "category": "Tops",
    },
    {
        "name": "Graphic Tee",
        "description": "Soft cotton with bold print",
        "price": Decimal("24.99"),
        "image": "/images/tee.jpg",
        "category": "Tops",
    },
)


def seed_discounts() -> int:
    """Insert missing discount codes; existing codes are left untouched."""

    added = 0
    with session_scope() as session:
        for code, percent in SEED_DISCOUNTS:
            if session.get(Discount, code) is None:
                session.add(Discount(code=code, percent=percent))
                added += 1
    logger.info(f"seed.discounts: ok added={added}")
    return added


def seed_products() -> int:
    """Insert the demo catalog, only into an empty products table."""

    with session_scope() as session:
        count = session.scalar(select(func.count()).select_from(Product)) or 0
        if count > 0:
            logger.info(f"seed.products: skipped, {count} products present")
            return 0
        session.add_all(Product(**row) for row in SEED_PRODUCTS)
    logger.info(f"seed.products: ok added={len(SEED_PRODUCTS)}")
    return len(SEED_PRODUCTS)


__all__ = ["SEED_DISCOUNTS", "SEED_PRODUCTS", "seed_discounts", "seed_products"]
