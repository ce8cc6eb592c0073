# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, redirect, render_template, request, url_for
from pydantic import ValidationError

from storefront.application.use_cases.catalog.create_product import CreateProductUseCase
from storefront.application.use_cases.catalog.get_product import GetProductUseCase
from storefront.application.use_cases.catalog.list_products import ListProductsUseCase
from storefront.domain.catalog import ProductQuery
from storefront.infrastructure.auth import require_admin
from storefront.interfaces.http.dto.catalog import ProductCreateDTO
from storefront.interfaces.http.forms import form_payload
from storefront.shared.errors.base import ProductNotFoundError
from storefront.shared.errors.validation import form_error_messages
from storefront.shared.logging import logger


class CatalogController:
    def __init__(
        self,
        *,
        list_products: ListProductsUseCase,
        get_product: GetProductUseCase,
        create_product: CreateProductUseCase,
    ) -> None:
        self._list_products = list_products
        self._get_product = get_product
        self._create_product = create_product

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("catalog", __name__)
        bp.add_url_rule("/products", view_func=self.list_products, methods=["GET"])
        bp.add_url_rule(
            "/products/<int:product_id>",
            view_func=self.product_detail,
            methods=["GET"],
        )
        bp.add_url_rule("/admin/products/new", view_func=self.new_product_form, methods=["GET"])
        bp.add_url_rule("/admin/products/new", view_func=self.create_product, methods=["POST"])
        return bp

    def list_products(self):
        query = ProductQuery.from_params(
            request.args.get("category"),
            request.args.get("search"),
            request.args.get("sort"),
        )
        products = self._list_products.execute(query)
        logger.debug(f"catalog.list: n={len(products)} query={query}")
        return render_template(
            "products.html",
            products=products,
            category=query.category,
            search=query.search,
            sort=query.sort.value,
        )

    def product_detail(self, product_id: int):
        try:
            product = self._get_product.execute(product_id)
        except ProductNotFoundError:
            logger.info(f"catalog.detail: not found product_id={product_id}")
            return render_template("not_found.html"), 404
        return render_template("product_detail.html", product=product)

    @require_admin
    def new_product_form(self):
        return render_template("admin_new_product.html", errors=[], form={})

    @require_admin
    def create_product(self):
        payload = form_payload()
        try:
            dto = ProductCreateDTO.model_validate(payload)
        except ValidationError as exc:
            return (
                render_template(
                    "admin_new_product.html", errors=form_error_messages(exc), form=payload
                ),
                422,
            )

        product = self._create_product.execute(dto.to_draft())
        return redirect(url_for("catalog.product_detail", product_id=product.id))
