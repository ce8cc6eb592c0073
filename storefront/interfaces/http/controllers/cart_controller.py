# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, redirect, render_template, url_for
from pydantic import ValidationError

from storefront.application.use_cases.cart.add_item import AddCartItemUseCase
from storefront.application.use_cases.cart.apply_discount import ApplyDiscountUseCase
from storefront.application.use_cases.cart.compute_totals import ComputeCartTotalsUseCase
from storefront.application.use_cases.cart.remove_item import RemoveCartItemUseCase
from storefront.domain.cart import normalize_discount_code
from storefront.interfaces.http.dto.cart import CartItemDTO, DiscountFormDTO
from storefront.interfaces.http.forms import form_payload
from storefront.interfaces.http.session_cookie import session_key
from storefront.shared.errors.base import InvalidCartInputError
from storefront.shared.errors.validation import raise_validation_error


def _cart_item() -> CartItemDTO:
    try:
        return CartItemDTO.model_validate(form_payload())
    except ValidationError as exc:
        errors = exc.errors()
        field = str(errors[0]["loc"][0]) if errors and errors[0].get("loc") else "unknown"
        raise InvalidCartInputError(field) from exc


class CartController:
    def __init__(
        self,
        *,
        add_item: AddCartItemUseCase,
        remove_item: RemoveCartItemUseCase,
        apply_discount: ApplyDiscountUseCase,
        compute_totals: ComputeCartTotalsUseCase,
    ) -> None:
        self._add_item = add_item
        self._remove_item = remove_item
        self._apply_discount = apply_discount
        self._compute_totals = compute_totals

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("cart", __name__)
        bp.add_url_rule("/cart", view_func=self.view_cart, methods=["GET"])
        bp.add_url_rule("/cart/add", view_func=self.add, methods=["POST"])
        bp.add_url_rule("/cart/remove", view_func=self.remove, methods=["POST"])
        bp.add_url_rule("/cart/apply-discount", view_func=self.apply_discount, methods=["POST"])
        bp.add_url_rule("/checkout", view_func=self.checkout, methods=["GET"])
        return bp

    def add(self):
        dto = _cart_item()
        # Reject before a session key is minted for this visitor.
        if dto.product_id is None or dto.product_id < 1:
            raise InvalidCartInputError("product_id", dto.product_id)
        if dto.quantity < 1:
            raise InvalidCartInputError("quantity", dto.quantity)
        self._add_item.execute(session_key(create=True), dto.product_id, dto.quantity)
        return redirect(url_for("cart.view_cart"))

    def remove(self):
        dto = _cart_item()
        key = session_key()
        if key is not None:
            self._remove_item.execute(key, dto.product_id)
        return redirect(url_for("cart.view_cart"))

    def apply_discount(self):
        try:
            dto = DiscountFormDTO.model_validate(form_payload())
        except ValidationError as exc:
            raise_validation_error(exc)

        if normalize_discount_code(dto.discount):
            self._apply_discount.execute(session_key(create=True), dto.discount)
        return redirect(url_for("cart.view_cart"))

    def view_cart(self):
        totals = self._compute_totals.execute(session_key())
        return render_template("cart.html", totals=totals)

    def checkout(self):
        totals = self._compute_totals.execute(session_key())
        return render_template("checkout.html", totals=totals)
