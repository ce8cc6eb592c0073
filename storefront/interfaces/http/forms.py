# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from flask import request

_CENT = Decimal("0.01")


def form_payload() -> dict[str, Any]:
    """HTML forms post urlencoded bodies; JSON is accepted for scripted clients."""

    if request.form:
        return request.form.to_dict()
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def money(value: Decimal | int | None) -> str:
    amount = Decimal(value or 0).quantize(_CENT, rounding=ROUND_HALF_UP)
    return f"${amount}"


__all__ = ["form_payload", "money"]
