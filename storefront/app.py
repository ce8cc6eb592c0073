# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import os

from flask import Flask, render_template

from storefront.infrastructure.admin_setup import setup_admin_user
from storefront.infrastructure.auth import configure_identity
from storefront.infrastructure.container import Container
from storefront.infrastructure.container import container as default_container
from storefront.infrastructure.db import init_db
from storefront.infrastructure.seed import seed_discounts, seed_products
from storefront.interfaces.http.forms import money
from storefront.interfaces.http.session_cookie import configure_session_cookie
from storefront.shared.config import load_config
from storefront.shared.errors import register_error_handler
from storefront.shared.logging import logger, setup_logging
from storefront.shared.middleware.request_logger import configure_request_logging


def _bootstrap_data(container: Container) -> None:
    init_db()
    seed_discounts()
    if container.config.seed_products:
        seed_products()
    setup_admin_user(container.config.admin_username)

    purge = getattr(container.session_store, "purge_expired", None)
    if purge is not None:
        purge()


def create_app(container: Container | None = None) -> Flask:
    container = container or default_container
    config = container.config
    setup_logging(debug_mode=config.debug_logging)

    _bootstrap_data(container)

    app = Flask(__name__)
    register_error_handler(app)
    configure_request_logging(app)
    configure_identity(
        app, resolve=container.resolve_identity_use_case, users=container.user_repository
    )
    configure_session_cookie(app)

    app.config.update(SECRET_KEY=config.secret_key)
    app.add_template_filter(money, "money")

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.catalog_controller.as_blueprint())
    app.register_blueprint(container.cart_controller.as_blueprint())

    @app.errorhandler(404)
    def _not_found(_exc):
        return render_template("not_found.html"), 404

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        resp.headers.setdefault(
            "Permissions-Policy",
            "geolocation=(), microphone=(), camera=(), usb=()",
        )

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


def main() -> None:
    app = create_app()
    port = int(os.environ.get("PORT", "3000"))
    app.run(host="0.0.0.0", port=port, debug=not load_config().is_production())


if __name__ == "__main__":
    main()
