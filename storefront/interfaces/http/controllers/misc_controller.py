# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify, render_template

from storefront.infrastructure.auth import current_identity
from storefront.infrastructure.health import health_report


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def index(self):
        if current_identity() is not None:
            return render_template("dashboard.html")
        return render_template("homepage.html", errors=[])

    def health(self):
        report = health_report()
        return jsonify(report), 200 if report["ok"] else 503
