# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from sqlalchemy import or_, select

from storefront.domain.catalog import Discount as DomainDiscount
from storefront.domain.catalog import Product as DomainProduct
from storefront.domain.catalog import ProductDraft, ProductQuery, SortOrder
from storefront.domain.catalog.repositories import DiscountRepository, ProductRepository
from storefront.infrastructure.db.models import Discount, Product
from storefront.infrastructure.db.session import session_scope


def _to_domain(row: Product) -> DomainProduct:
    return DomainProduct(
        id=row.id,
        name=row.name,
        description=row.description,
        price=row.price,
        image=row.image,
        category=row.category,
    )


class SqlAlchemyProductRepository(ProductRepository):
    def list(self, query: ProductQuery) -> Sequence[DomainProduct]:
        stmt = select(Product)
        if query.search:
            stmt = stmt.where(
                or_(
                    Product.name.icontains(query.search, autoescape=True),
                    Product.description.icontains(query.search, autoescape=True),
                )
            )
        if query.category:
            stmt = stmt.where(Product.category == query.category)

        if query.sort is SortOrder.PRICE_LOW:
            stmt = stmt.order_by(Product.price.asc(), Product.id.asc())
        elif query.sort is SortOrder.PRICE_HIGH:
            stmt = stmt.order_by(Product.price.desc(), Product.id.asc())
        else:
            stmt = stmt.order_by(Product.id.asc())

        with session_scope() as session:
            return [_to_domain(row) for row in session.scalars(stmt).all()]

    def get(self, product_id: int) -> DomainProduct | None:
        with session_scope() as session:
            row = session.get(Product, product_id)
            return _to_domain(row) if row else None

    def get_many(self, product_ids: Iterable[int]) -> Mapping[int, DomainProduct]:
        ids = set(product_ids)
        if not ids:
            return {}
        with session_scope() as session:
            rows = session.scalars(select(Product).where(Product.id.in_(ids))).all()
            return {row.id: _to_domain(row) for row in rows}

    def add(self, draft: ProductDraft) -> DomainProduct:
        with session_scope() as session:
            row = Product(
                name=draft.name.strip(),
                description=draft.description,
                price=draft.price,
                image=draft.image,
                category=draft.category,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_domain(row)


class SqlAlchemyDiscountRepository(DiscountRepository):
    def find_by_code(self, code: str) -> DomainDiscount | None:
        with session_scope() as session:
            row = session.get(Discount, code)
            if not row:
                return None
            return DomainDiscount(code=row.code, percent=row.percent)
