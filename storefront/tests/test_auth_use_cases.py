from __future__ import annotations

from datetime import UTC, datetime

import pytest

from storefront.application.use_cases.users.login_user import LoginUserUseCase
from storefront.application.use_cases.users.register_user import RegisterUserUseCase
from storefront.application.use_cases.users.resolve_identity import ResolveIdentityUseCase
from storefront.domain.users.entities import AuthIdentity, IssuedToken, User
from storefront.domain.users.exceptions import (
    INVALID_CREDENTIALS_MESSAGE,
    InvalidCredentialsError,
    RegistrationRejectedError,
)
from storefront.domain.users.repositories import PasswordHasher, TokenService, UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def find_by_id(self, user_id: int) -> User | None:
        return next((u for u in self._users.values() if u.id == user_id), None)

    def add(self, username: str, password_hash: str) -> User:
        user = User(id=self._seq, username=username, password_hash=password_hash)
        self._seq += 1
        self._users[username] = user
        return user


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class StubTokenService(TokenService):
    def issue(self, user: User) -> IssuedToken:
        identity = AuthIdentity(
            user_id=user.id, username=user.username, expires_at=datetime.now(UTC)
        )
        return IssuedToken(value=f"token-{user.id}", identity=identity, max_age=60)

    def verify(self, token: str | None) -> AuthIdentity | None:
        if token == "token-1":
            return AuthIdentity(user_id=1, username="alice", expires_at=datetime.now(UTC))
        return None


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


def _register(users: InMemoryUserRepository) -> RegisterUserUseCase:
    return RegisterUserUseCase(
        users=users, tokens=StubTokenService(), password_hasher=DeterministicHasher()
    )


def _login(users: InMemoryUserRepository) -> LoginUserUseCase:
    return LoginUserUseCase(
        users=users, tokens=StubTokenService(), password_hasher=DeterministicHasher()
    )


def test_register_user_success(users: InMemoryUserRepository) -> None:
    user, token = _register(users).execute("alice", "correcthorse1")

    assert user.id == 1
    assert user.password_hash == "hashed:correcthorse1"
    assert token.value == "token-1"
    assert token.identity.username == "alice"


def test_register_trims_username(users: InMemoryUserRepository) -> None:
    user, _ = _register(users).execute("  alice  ", "correcthorse1")

    assert user.username == "alice"
    assert users.find_by_username("alice") is not None


def test_register_rejects_duplicate_username(users: InMemoryUserRepository) -> None:
    use_case = _register(users)
    use_case.execute("alice", "correcthorse1")

    with pytest.raises(RegistrationRejectedError) as exc_info:
        use_case.execute("alice", "anotherpassword")

    assert exc_info.value.messages == ["Username is taken."]
    assert exc_info.value.status == 422


def test_register_reports_every_failed_rule(users: InMemoryUserRepository) -> None:
    with pytest.raises(RegistrationRejectedError) as exc_info:
        _register(users).execute("", "short")

    assert exc_info.value.messages == [
        "Enter a username.",
        "Password must be at least 12 characters",
    ]
    assert users.find_by_username("") is None


def test_login_user_success(users: InMemoryUserRepository) -> None:
    _register(users).execute("alice", "correcthorse1")

    user, token = _login(users).execute("alice", "correcthorse1")

    assert user.username == "alice"
    assert token.value == "token-1"


@pytest.mark.parametrize(
    ("username", "password"),
    [
        ("alice", "wrongpassword"),
        ("nobody", "correcthorse1"),
        ("", "correcthorse1"),
        ("   ", "correcthorse1"),
    ],
)
def test_login_failures_are_indistinguishable(
    users: InMemoryUserRepository, username: str, password: str
) -> None:
    _register(users).execute("alice", "correcthorse1")

    with pytest.raises(InvalidCredentialsError) as exc_info:
        _login(users).execute(username, password)

    assert exc_info.value.messages == [INVALID_CREDENTIALS_MESSAGE]
    assert exc_info.value.code == "invalid_credentials"
    assert exc_info.value.status == 401


def test_resolve_identity_delegates_to_token_service() -> None:
    use_case = ResolveIdentityUseCase(tokens=StubTokenService())

    identity = use_case.execute("token-1")

    assert identity is not None
    assert identity.user_id == 1
    assert use_case.execute("garbage") is None
    assert use_case.execute(None) is None


class RecordingHasher(DeterministicHasher):
    def __init__(self) -> None:
        self.verified: list[str] = []

    def verify(self, password: str, hashed: str) -> bool:
        self.verified.append(hashed)
        return super().verify(password, hashed)


def test_unknown_user_still_runs_a_password_check(users: InMemoryUserRepository) -> None:
    hasher = RecordingHasher()
    use_case = LoginUserUseCase(users=users, tokens=StubTokenService(), password_hasher=hasher)

    for _ in range(2):
        with pytest.raises(InvalidCredentialsError):
            use_case.execute("nobody", "correcthorse1")

    assert len(hasher.verified) == 2
    assert hasher.verified[0] == hasher.verified[1]
    assert hasher.verified[0].startswith("hashed:")
