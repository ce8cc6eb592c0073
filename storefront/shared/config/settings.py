# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Environment-driven settings; every field maps to one environment variable."""

import sys
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
_INSECURE_SECRETS = frozenset({"", "dev", "development", "test", "fallback-secret"})
_ONE_DAY = 60 * 60 * 24


def _as_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///storefront.db", alias="DATABASE_URL")
    pool_size: int = Field(5, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = _ENV


class SecurityConfig(BaseSettings):
    """Cookie attributes, token and cart lifetimes, and request guards."""

    cookie_secure: bool = Field(True, alias="COOKIE_SECURE")
    # SameSite is the only CSRF defence for the form posts; "None" is not accepted.
    cookie_samesite: Literal["Strict", "Lax"] = Field("Strict", alias="COOKIE_SAMESITE")
    auth_cookie_name: str = Field("auth_token", alias="AUTH_COOKIE_NAME")
    session_cookie_name: str = Field("sid", alias="SESSION_COOKIE_NAME")

    auth_token_ttl: int = Field(_ONE_DAY, ge=1, alias="AUTH_TOKEN_TTL")
    session_ttl: int = Field(_ONE_DAY, ge=1, alias="SESSION_TTL")

    enable_rate_limit: bool = Field(True, alias="ENABLE_RATE_LIMIT")
    rate_limit_requests: int = Field(10, ge=1, alias="RL_LIMIT")
    rate_limit_window: float = Field(60.0, gt=0, alias="RL_WINDOW")

    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")
    require_admin: bool = Field(True, alias="REQUIRE_ADMIN")

    model_config = _ENV

    @field_validator(
        "cookie_secure", "enable_rate_limit", "enable_hsts", "require_admin", mode="before"
    )
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        return _as_bool(value)


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str = Field("dev", alias="SECRET_KEY")
    admin_username: str | None = Field(None, alias="ADMIN_USERNAME")
    seed_products: bool = Field(True, alias="SEED_PRODUCTS")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("debug_logging", "seed_products", mode="before")
    @classmethod
    def _parse_flags(cls, value: str | bool) -> bool:
        return _as_bool(value)

    @field_validator("admin_username", mode="before")
    @classmethod
    def _blank_admin(cls, value: str | None) -> str | None:
        return (value or "").strip() or None

    @property
    def has_insecure_secret(self) -> bool:
        return self.secret_key.strip() in _INSECURE_SECRETS

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    @model_validator(mode="after")
    def _check_secret_key(self) -> "AppConfig":
        if not self.has_insecure_secret:
            return self

        if self.is_production():
            print(
                "\n❌ SECRET_KEY is missing or a known placeholder while APP_ENV is production.\n"
                "   It signs every auth cookie; refusing to start.\n"
                "   Set it to a long random value, e.g. the output of secrets.token_urlsafe(32).\n",
                file=sys.stderr,
            )
            sys.exit(1)

        print(
            "⚠️  SECRET_KEY is not set; auth cookies are signed with a development "
            "placeholder. Set SECRET_KEY before any real deployment.",
            file=sys.stderr,
        )
        return self


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "DatabaseConfig", "SecurityConfig", "load_config"]
