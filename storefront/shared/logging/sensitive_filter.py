# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Redaction applied to every log record before it is written."""

from __future__ import annotations

import re
from typing import Any

_MASK = "***REDACTED***"

_KEY_VALUE = r"(\b{key}\s*[:=]\s*['\"]?)({value})"

_RULES: list[tuple[re.Pattern[str], str]] = [
    # Signing secret
    (re.compile(_KEY_VALUE.format(key=r"secret[_-]?key", value=r"[\w\-]{8,}"), re.I), rf"\1{_MASK}"),
    # Auth cookie and cart session key
    (re.compile(_KEY_VALUE.format(key=r"(?:auth[_-]?)?token", value=r"[\w\-\.]{20,}"), re.I), rf"\1{_MASK}"),
    (re.compile(_KEY_VALUE.format(key=r"(?:sid|session[_-]?(?:id|key))", value=r"[\w\-]{16,}"), re.I), rf"\1{_MASK}"),
    # Plain passwords and stored hashes
    (re.compile(_KEY_VALUE.format(key=r"password", value=r"[^'\"\s,}]+"), re.I), rf"\1{_MASK}"),
    (re.compile(r"\b(pbkdf2|scrypt):[^\s'\"]+"), rf"\1:{_MASK}"),
    # Credentials inside database URLs
    (re.compile(r"\b((?:postgresql|postgres|mysql)(?:\+\w+)?://[^:/@\s]+):[^@\s]+@"), rf"\1:{_MASK}@"),
    # Card numbers typed into the search box
    (re.compile(r"\b\d{4}[- ]?\d{4}[- ]?\d{4}[- ]?\d{4}\b"), "****-****-****-****"),
    # Raw cookie headers
    (re.compile(r"(\bcookie\s*:\s*)(.{10,})", re.I), rf"\1{_MASK}"),
]


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """loguru filter: rewrite the message in place and always keep the record."""

    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True


__all__ = ["sanitize_message", "sanitize_record"]
