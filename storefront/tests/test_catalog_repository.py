from __future__ import annotations

from decimal import Decimal

import pytest

from storefront.domain.catalog import ProductDraft, ProductQuery
from storefront.infrastructure.repositories.catalog import (
    SqlAlchemyDiscountRepository,
    SqlAlchemyProductRepository,
)
from storefront.infrastructure.seed import seed_discounts, seed_products


@pytest.fixture()
def repository(reset_database) -> SqlAlchemyProductRepository:
    seed_products()
    return SqlAlchemyProductRepository()


def _names(repository: SqlAlchemyProductRepository, **params: str | None) -> list[str]:
    query = ProductQuery.from_params(
        params.get("category"), params.get("search"), params.get("sort")
    )
    return [p.name for p in repository.list(query)]


def test_default_listing_keeps_insertion_order(repository: SqlAlchemyProductRepository) -> None:
    assert _names(repository) == ["Slim Fit Jeans", "Oversized Hoodie", "Graphic Tee"]


def test_search_is_case_insensitive_on_name_and_description(
    repository: SqlAlchemyProductRepository,
) -> None:
    assert _names(repository, search="JEANS") == ["Slim Fit Jeans"]
    assert _names(repository, search="fleece") == ["Oversized Hoodie"]
    assert _names(repository, search="  ") == _names(repository)


def test_search_treats_wildcards_literally(repository: SqlAlchemyProductRepository) -> None:
    assert _names(repository, search="%") == []
    assert _names(repository, search="_") == []


def test_category_filter_is_exact(repository: SqlAlchemyProductRepository) -> None:
    assert _names(repository, category="Tops") == ["Oversized Hoodie", "Graphic Tee"]
    assert _names(repository, category="tops") == []


def test_sort_by_price(repository: SqlAlchemyProductRepository) -> None:
    assert _names(repository, sort="low") == ["Graphic Tee", "Oversized Hoodie", "Slim Fit Jeans"]
    assert _names(repository, sort="high") == ["Slim Fit Jeans", "Oversized Hoodie", "Graphic Tee"]
    assert _names(repository, sort="sideways") == _names(repository)


def test_filters_combine(repository: SqlAlchemyProductRepository) -> None:
    assert _names(repository, category="Tops", search="tee", sort="high") == ["Graphic Tee"]


def test_get_and_get_many(repository: SqlAlchemyProductRepository) -> None:
    jeans = repository.get(1)

    assert jeans is not None
    assert jeans.price == Decimal("59.99")
    assert repository.get(999) is None
    assert set(repository.get_many([1, 3, 999])) == {1, 3}
    assert repository.get_many([]) == {}


def test_add_product(repository: SqlAlchemyProductRepository) -> None:
    created = repository.add(
        ProductDraft(name="Canvas Tote", price=Decimal("15.50"), category="Accessories")
    )

    assert created.id == 4
    assert repository.get(created.id) == created


def test_seeding_is_idempotent(reset_database) -> None:
    assert seed_products() == 3
    assert seed_products() == 0
    assert seed_discounts() == 3
    assert seed_discounts() == 0

    discount = SqlAlchemyDiscountRepository().find_by_code("FALL25")
    assert discount is not None
    assert discount.percent == Decimal("25")
    assert SqlAlchemyDiscountRepository().find_by_code("fall25") is None
