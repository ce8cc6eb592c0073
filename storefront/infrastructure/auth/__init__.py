# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .identity import configure_identity, current_identity, require_admin

__all__ = ["configure_identity", "current_identity", "require_admin"]
