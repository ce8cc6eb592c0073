from __future__ import annotations

from storefront.shared.logging import sanitize_message, sanitize_record


def test_passwords_are_redacted() -> None:
    assert sanitize_message("password=hunter2hunter2") == "password=***REDACTED***"
    assert sanitize_message("Password: hunter2") == "Password: ***REDACTED***"


def test_auth_and_session_tokens_are_redacted() -> None:
    token = "eyJ1aWQiOjF9.ZyXwVu.abcdefghijklmnopqrstuv"
    session_key = "Q2x1c3RlcmVkLXNlc3Npb24ta2V5LTAwMDE"

    assert token not in sanitize_message(f"auth_token={token}")
    assert session_key not in sanitize_message(f"sid={session_key}")


def test_password_hashes_are_redacted() -> None:
    message = "stored scrypt:32768:8:1$salt$0123456789abcdef"

    assert sanitize_message(message) == "stored scrypt:***REDACTED***"


def test_database_credentials_are_redacted() -> None:
    message = sanitize_message("connecting to postgresql+psycopg://shop:s3cret@db/shop")

    assert "s3cret" not in message
    assert "postgresql+psycopg://shop:***REDACTED***@db/shop" in message


def test_ordinary_messages_pass_through() -> None:
    message = "cart.add: ok product_id=1 qty=2 lines=1"

    assert sanitize_message(message) == message


def test_sanitize_record_rewrites_in_place() -> None:
    record = {"message": "password=hunter2hunter2"}

    assert sanitize_record(record) is True
    assert record["message"] == "password=***REDACTED***"
