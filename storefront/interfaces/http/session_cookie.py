# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Opaque session key cookie that addresses the server-side cart session."""

from __future__ import annotations

import re
import secrets

from flask import Flask, g, request

from storefront.shared.config import load_config
from storefront.shared.logging import logger

_KEY_RE = re.compile(r"^[A-Za-z0-9_\-]{16,128}$")
_SAFE_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


def session_key(*, create: bool = False) -> str | None:
    """Return the visitor's session key, minting one when ``create`` is set."""

    key = g.get("cart_session_key")
    if key:
        return key

    cookie = request.cookies.get(load_config().security.session_cookie_name, "")
    if _KEY_RE.match(cookie):
        g.cart_session_key = cookie
        return cookie

    if not create:
        return None

    key = secrets.token_urlsafe(32)
    g.cart_session_key = key
    g.cart_session_new = True
    logger.debug("cart.session: issued new session key")
    return key


def configure_session_cookie(app: Flask) -> None:
    # The stored session slides on every write, so the cookie is re-issued with it.
    @app.after_request
    def _persist_session_cookie(resp):
        key = g.get("cart_session_key")
        if key and (g.get("cart_session_new") or request.method not in _SAFE_METHODS):
            security = load_config().security
            resp.set_cookie(
                security.session_cookie_name,
                key,
                httponly=True,
                samesite=security.cookie_samesite,
                secure=security.cookie_secure,
                max_age=security.session_ttl,
            )
        return resp


__all__ = ["configure_session_cookie", "session_key"]
