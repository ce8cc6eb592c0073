from __future__ import annotations

import pytest
from pydantic import ValidationError

from storefront.shared.config import AppConfig


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "APP_ENV",
        "SECRET_KEY",
        "COOKIE_SECURE",
        "COOKIE_SAMESITE",
        "SESSION_TTL",
        "ENABLE_RATE_LIMIT",
        "REQUIRE_ADMIN",
        "SEED_PRODUCTS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    config = AppConfig(_env_file=None)  # type: ignore[call-arg]

    assert config.app_env == "development"
    assert config.security.cookie_secure is True
    assert config.security.auth_cookie_name == "auth_token"
    assert config.security.session_cookie_name == "sid"
    assert config.security.auth_token_ttl == 86400
    assert config.security.require_admin is True
    assert config.seed_products is True


def test_environment_overrides(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("SECRET_KEY", "a-long-random-signing-key")
    clean_env.setenv("COOKIE_SECURE", "0")
    clean_env.setenv("SESSION_TTL", "600")
    clean_env.setenv("REQUIRE_ADMIN", "false")

    config = AppConfig(_env_file=None)  # type: ignore[call-arg]

    assert config.secret_key == "a-long-random-signing-key"
    assert config.security.cookie_secure is False
    assert config.security.session_ttl == 600
    assert config.security.require_admin is False


def test_insecure_secret_warns_outside_production(
    clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    clean_env.setenv("SECRET_KEY", "dev")

    AppConfig(_env_file=None)  # type: ignore[call-arg]

    assert "SECRET_KEY" in capsys.readouterr().err


def test_insecure_secret_is_fatal_in_production(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("APP_ENV", "production")
    clean_env.setenv("SECRET_KEY", "fallback-secret")

    with pytest.raises(SystemExit):
        AppConfig(_env_file=None)  # type: ignore[call-arg]


def test_samesite_accepts_lax_but_not_none(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("COOKIE_SAMESITE", "Lax")
    assert AppConfig(_env_file=None).security.cookie_samesite == "Lax"  # type: ignore[call-arg]

    clean_env.setenv("COOKIE_SAMESITE", "None")
    with pytest.raises(ValidationError):
        AppConfig(_env_file=None)  # type: ignore[call-arg]
