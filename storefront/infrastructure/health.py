# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from storefront.infrastructure.db import ENGINE
from storefront.shared.logging import logger


def health_report() -> dict[str, object]:
    """Liveness plus a database round trip; error details stay in the log."""

    try:
        with ENGINE.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error(f"health: database check failed ({type(exc).__name__})")
        return {"ok": False, "database": "unavailable"}
    return {"ok": True, "database": "ok"}


__all__ = ["health_report"]
