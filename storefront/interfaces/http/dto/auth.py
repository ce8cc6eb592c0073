# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CredentialsFormDTO(BaseModel):
    """Login and registration form; absent fields arrive as empty strings."""

    username: str = ""
    password: str = ""

    model_config = ConfigDict(extra="ignore", strict=True)
