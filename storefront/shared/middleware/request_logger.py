# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Per-request correlation ids and access logging."""

from __future__ import annotations

import re
import secrets
import time

from flask import Flask, g, request

from storefront.shared.config import load_config
from storefront.shared.logging import (
    clear_correlation_id,
    get_correlation_id,
    logger,
    set_correlation_id,
)

_REQUEST_ID_RE = re.compile(r"[A-Za-z0-9\-]{8,64}")
_REDACTED_PARAMS = ("password", "token", "secret")


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def _user_id() -> int | None:
    identity = g.get("user")
    return identity.user_id if identity else None


def _query_for_log() -> dict[str, str]:
    return {
        key: "<redacted>" if any(word in key.lower() for word in _REDACTED_PARAMS) else value
        for key, value in request.args.items()
    }


def _incoming_request_id() -> str:
    # Client-supplied ids are echoed into logs, so only well-formed ones are kept.
    candidate = request.headers.get("X-Request-ID", "")
    return candidate if _REQUEST_ID_RE.fullmatch(candidate) else secrets.token_hex(8)


def configure_request_logging(app: Flask) -> None:
    debug_mode = load_config().debug_logging

    @app.before_request
    def _start_request() -> None:
        set_correlation_id(_incoming_request_id())
        g.request_started = time.perf_counter()
        if debug_mode:
            logger.debug(
                f"Request started: {request.method} {request.path} from {_client_ip()} "
                f"query={_query_for_log()} body_size={request.content_length or 0}"
            )

    @app.after_request
    def _finish_request(response):
        elapsed = time.perf_counter() - g.get("request_started", time.perf_counter())
        logger.info(
            f"{request.method} {request.path} status={response.status_code} "
            f"duration={elapsed:.3f}s ip={_client_ip()} user={_user_id()}"
        )
        response.headers.setdefault("X-Request-ID", get_correlation_id())
        return response

    @app.teardown_request
    def _teardown_request(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(
                f"Request error: {type(exc).__name__} on {request.method} {request.path}"
            )
        clear_correlation_id()


__all__ = ["configure_request_logging"]
