# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import math
import threading
import time
from collections import deque
from collections.abc import Callable
from functools import wraps

from flask import request

from storefront.shared.config import load_config
from storefront.shared.errors.base import RateLimitedError
from storefront.shared.logging import logger


class SlidingWindowLimiter:
    """Per-key sliding window counter, shared by all request threads."""

    def __init__(self, limit: int, window_seconds: float) -> None:
        self.limit = max(1, int(limit))
        self.window = max(0.1, float(window_seconds))
        self._hits: dict[str, deque[float]] = {}
        self._lock = threading.Lock()

    def hit(self, key: str, now: float | None = None) -> float | None:
        """Record a request for ``key``.

        Returns ``None`` when it is allowed, otherwise the seconds until the
        oldest hit leaves the window.
        """

        now = time.monotonic() if now is None else now
        with self._lock:
            hits = self._hits.setdefault(key, deque())
            while hits and now - hits[0] > self.window:
                hits.popleft()
            if len(hits) >= self.limit:
                return hits[0] + self.window - now
            hits.append(now)
            return None

    def allow(self, key: str, now: float | None = None) -> bool:
        return self.hit(key, now) is None


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    return forwarded or request.remote_addr or "unknown"


def rate_limit(limit: int | None = None, window_seconds: float | None = None):
    """Limit a view per client ip; limits default to ``RL_LIMIT`` / ``RL_WINDOW``."""

    security = load_config().security

    def decorator(view: Callable):
        if not security.enable_rate_limit:
            return view

        limiter = SlidingWindowLimiter(
            limit or security.rate_limit_requests,
            window_seconds or security.rate_limit_window,
        )

        @wraps(view)
        def wrapper(*args, **kwargs):
            retry_after = limiter.hit(f"{request.endpoint}:{_client_ip()}")
            if retry_after is not None:
                logger.warning(f"rate_limit: rejected {request.method} {request.path}")
                raise RateLimitedError(max(1, math.ceil(retry_after)))
            return view(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["SlidingWindowLimiter", "rate_limit"]
