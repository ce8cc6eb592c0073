# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import Flask, current_app, g, request

from storefront.application.use_cases.users.resolve_identity import ResolveIdentityUseCase
from storefront.domain.users.entities import AuthIdentity
from storefront.domain.users.repositories import UserRepository
from storefront.shared.config import load_config
from storefront.shared.errors.base import AdminAccessDeniedError, AdminAuthenticationError
from storefront.shared.logging import logger

_USERS_EXTENSION = "storefront.users"


def current_identity() -> AuthIdentity | None:
    return getattr(g, "user", None)


def configure_identity(
    app: Flask, *, resolve: ResolveIdentityUseCase, users: UserRepository
) -> None:
    """Decode the auth cookie on every request; failures leave the visitor anonymous.

    ``users`` backs the admin check in :func:`require_admin`.
    """

    cookie_name = load_config().security.auth_cookie_name
    app.extensions[_USERS_EXTENSION] = users

    @app.before_request
    def _resolve_identity() -> None:
        try:
            identity = resolve.execute(request.cookies.get(cookie_name))
        except Exception:
            logger.exception("auth.identity: token verification failed unexpectedly")
            identity = None
        g.user = identity
        if identity is not None:
            logger.debug(f"Auth OK: user={identity.user_id} {request.method} {request.path}")

    @app.context_processor
    def _inject_user() -> dict[str, Any]:
        return {"user": current_identity()}


def _is_admin(user_id: int) -> bool:
    users: UserRepository = current_app.extensions[_USERS_EXTENSION]
    user = users.find_by_id(user_id)
    return user is not None and user.is_admin


def require_admin(func: Callable[..., Any]) -> Callable[..., Any]:
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not load_config().security.require_admin:
            return func(*args, **kwargs)

        identity = current_identity()
        if identity is None:
            logger.warning(f"Admin access denied: no authentication on {request.method} {request.path}")
            raise AdminAuthenticationError()

        if not _is_admin(identity.user_id):
            logger.warning(f"Admin access denied: user {identity.user_id} is not admin")
            raise AdminAccessDeniedError()

        logger.debug(f"Admin access granted: user {identity.user_id} on {request.method} {request.path}")
        return func(*args, **kwargs)

    return wrapper
