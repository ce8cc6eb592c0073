# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from storefront.application.services.auth_tokens import SignedTokenService
from storefront.application.services.password_hashing import WerkzeugPasswordHasher
from storefront.application.use_cases.cart.add_item import AddCartItemUseCase
from storefront.application.use_cases.cart.apply_discount import ApplyDiscountUseCase
from storefront.application.use_cases.cart.compute_totals import ComputeCartTotalsUseCase
from storefront.application.use_cases.cart.remove_item import RemoveCartItemUseCase
from storefront.application.use_cases.catalog.create_product import CreateProductUseCase
from storefront.application.use_cases.catalog.get_product import GetProductUseCase
from storefront.application.use_cases.catalog.list_products import ListProductsUseCase
from storefront.application.use_cases.users.login_user import LoginUserUseCase
from storefront.application.use_cases.users.register_user import RegisterUserUseCase
from storefront.application.use_cases.users.resolve_identity import ResolveIdentityUseCase
from storefront.domain.cart.repositories import SessionStore
from storefront.infrastructure.repositories.catalog import (
    SqlAlchemyDiscountRepository, SqlAlchemyProductRepository)
from storefront.infrastructure.repositories.sessions import SqlAlchemySessionStore
from storefront.infrastructure.repositories.users import SqlAlchemyUserRepository
from storefront.interfaces.http.controllers.auth_controller import AuthController
from storefront.interfaces.http.controllers.cart_controller import CartController
from storefront.interfaces.http.controllers.catalog_controller import CatalogController
from storefront.interfaces.http.controllers.misc_controller import MiscController
from storefront.shared.config import AppConfig, load_config


class Container:
    def __init__(
        self, config: AppConfig | None = None, *, session_store: SessionStore | None = None
    ) -> None:
        self._config = config or load_config()
        if session_store is not None:
            self.__dict__["session_store"] = session_store

    @property
    def config(self) -> AppConfig:
        return self._config

    # Services

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> SignedTokenService:
        return SignedTokenService(
            self._config.secret_key, ttl_seconds=self._config.security.auth_token_ttl
        )

    # Repositories

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def product_repository(self) -> SqlAlchemyProductRepository:
        return SqlAlchemyProductRepository()

    @cached_property
    def discount_repository(self) -> SqlAlchemyDiscountRepository:
        return SqlAlchemyDiscountRepository()

    @cached_property
    def session_store(self) -> SessionStore:
        return SqlAlchemySessionStore(ttl_seconds=self._config.security.session_ttl)

    # Auth use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def resolve_identity_use_case(self) -> ResolveIdentityUseCase:
        return ResolveIdentityUseCase(tokens=self.token_service)

    # Catalog use cases

    @cached_property
    def list_products_use_case(self) -> ListProductsUseCase:
        return ListProductsUseCase(products=self.product_repository)

    @cached_property
    def get_product_use_case(self) -> GetProductUseCase:
        return GetProductUseCase(products=self.product_repository)

    @cached_property
    def create_product_use_case(self) -> CreateProductUseCase:
        return CreateProductUseCase(products=self.product_repository)

    # Cart use cases

    @cached_property
    def add_cart_item_use_case(self) -> AddCartItemUseCase:
        return AddCartItemUseCase(sessions=self.session_store)

    @cached_property
    def remove_cart_item_use_case(self) -> RemoveCartItemUseCase:
        return RemoveCartItemUseCase(sessions=self.session_store)

    @cached_property
    def apply_discount_use_case(self) -> ApplyDiscountUseCase:
        return ApplyDiscountUseCase(sessions=self.session_store, discounts=self.discount_repository)

    @cached_property
    def compute_cart_totals_use_case(self) -> ComputeCartTotalsUseCase:
        return ComputeCartTotalsUseCase(sessions=self.session_store, products=self.product_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def catalog_controller(self) -> CatalogController:
        return CatalogController(
            list_products=self.list_products_use_case,
            get_product=self.get_product_use_case,
            create_product=self.create_product_use_case,
        )

    @cached_property
    def cart_controller(self) -> CartController:
        return CartController(
            add_item=self.add_cart_item_use_case,
            remove_item=self.remove_cart_item_use_case,
            apply_discount=self.apply_discount_use_case,
            compute_totals=self.compute_cart_totals_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()


container = Container()
