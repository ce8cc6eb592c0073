# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Global error handlers.

Errors render as JSON unless the client prefers HTML, in which case the
shared ``error.html`` page is used with the same status code.
"""

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, g, jsonify, render_template, request
from werkzeug.exceptions import HTTPException

from storefront.shared.config import load_config
from storefront.shared.logging import logger

from .base import AppError, RateLimitedError

_PAGE_MESSAGES = {
    "invalid_cart_input": "That cart request could not be processed.",
    "admin_authentication_required": "Please log in to continue.",
    "admin_access_denied": "You do not have access to this page.",
    "rate_limited": "Too many attempts. Please wait a minute and try again.",
    "validation_error": "Some of the submitted values are invalid.",
    "internal_error": "Something went wrong on our side. Please try again.",
}
_DEFAULT_PAGE_MESSAGE = "That request could not be completed."


def _prefers_html() -> bool:
    if request.is_json or request.path.startswith("/api/"):
        return False
    best = request.accept_mimetypes.best_match(("application/json", "text/html"))
    return best == "text/html"


def _respond(code: str, status: HTTPStatus, payload: dict, headers: dict | None = None):
    if _prefers_html():
        message = _PAGE_MESSAGES.get(code, _DEFAULT_PAGE_MESSAGE)
        body = render_template("error.html", message=message, status=int(status))
    else:
        body = jsonify(payload)
    return body, status, headers or {}


def register_error_handler(app: Flask) -> None:
    debug_mode = load_config().debug_logging

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        logger.warning(f"Handled application error {exc.code} on {request.method} {request.path}")
        headers = None
        if isinstance(exc, RateLimitedError) and exc.context:
            headers = {"Retry-After": str(exc.context["retry_after"])}
        return _respond(exc.code, exc.status, exc.to_dict(), headers)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        identity = getattr(g, "user", None)
        user_id = identity.user_id if identity else None

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"user={user_id} query={dict(request.args)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        return _respond(
            "internal_error", HTTPStatus.INTERNAL_SERVER_ERROR, {"error": "internal_error"}
        )


__all__ = ["register_error_handler"]
