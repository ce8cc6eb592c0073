# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Startup promotion of the configured ``ADMIN_USERNAME`` account."""

from __future__ import annotations

from sqlalchemy import select

from storefront.infrastructure.db.models import User
from storefront.infrastructure.db.session import session_scope
from storefront.shared.logging import logger


def setup_admin_user(username: str | None) -> bool:
    """Grant admin rights to ``username``; return whether that account is now an admin.

    A missing account is not an error: it may register later and is promoted
    on the next start.
    """

    if not username:
        logger.info("admin_setup: no ADMIN_USERNAME configured, skipping")
        return False

    with session_scope() as session:
        user = session.scalar(select(User).where(User.username == username))
        if user is None:
            logger.warning(f"admin_setup: ADMIN_USERNAME '{username}' not found, nothing to promote")
            return False
        if user.is_admin:
            logger.info(f"admin_setup: '{username}' already has admin privileges")
        else:
            user.is_admin = True
            logger.info(f"admin_setup: granted admin privileges to '{username}'")
    return True


__all__ = ["setup_admin_user"]
