from __future__ import annotations

import pytest
from flask import Flask

from storefront.shared.config import AppConfig
from storefront.shared.config.settings import SecurityConfig
from storefront.shared.errors import register_error_handler
from storefront.shared.middleware import rate_limit as rate_limit_module
from storefront.shared.middleware.rate_limit import SlidingWindowLimiter, rate_limit


def test_limiter_blocks_after_limit_within_window() -> None:
    limiter = SlidingWindowLimiter(limit=2, window_seconds=10)

    assert limiter.allow("k", now=0.0) is True
    assert limiter.allow("k", now=1.0) is True
    assert limiter.allow("k", now=2.0) is False
    assert limiter.allow("other", now=2.0) is True


def test_limiter_reports_time_until_a_slot_frees() -> None:
    limiter = SlidingWindowLimiter(limit=1, window_seconds=5)

    assert limiter.hit("k", now=0.0) is None
    assert limiter.hit("k", now=4.0) == 1.0
    assert limiter.hit("k", now=5.5) is None


def test_rejected_hits_do_not_extend_the_window() -> None:
    limiter = SlidingWindowLimiter(limit=1, window_seconds=5)

    limiter.hit("k", now=0.0)
    for second in (1.0, 2.0, 3.0, 4.0):
        assert limiter.allow("k", now=second) is False

    assert limiter.allow("k", now=5.1) is True


def test_decorator_is_a_passthrough_when_disabled() -> None:
    def view() -> str:
        return "ok"

    # The suite runs with ENABLE_RATE_LIMIT=0.
    assert rate_limit(limit=1, window_seconds=60)(view) is view

    app = Flask(__name__)
    app.add_url_rule("/", view_func=rate_limit(limit=1)(view))
    with app.test_client() as client:
        assert client.get("/").status_code == 200
        assert client.get("/").status_code == 200


def test_decorator_rejects_with_retry_after(monkeypatch: pytest.MonkeyPatch) -> None:
    config = AppConfig(security=SecurityConfig(enable_rate_limit=True))
    monkeypatch.setattr(rate_limit_module, "load_config", lambda: config)

    def login() -> str:
        return "ok"

    app = Flask(__name__)
    register_error_handler(app)
    app.add_url_rule("/login", view_func=rate_limit(limit=1, window_seconds=60)(login))

    with app.test_client() as client:
        assert client.get("/login").status_code == 200
        rejected = client.get("/login")

    assert rejected.status_code == 429
    assert rejected.get_json()["error"] == "rate_limited"
    assert rejected.headers["Retry-After"] == "60"
