from __future__ import annotations

import asyncio

import pytest

from userauth.application.services.tokens import JwtTokenService
from userauth.application.use_cases.auth.login_or_register import (
    AuthOutcomeKind,
    ExistingAccount,
    LoginOrRegisterUseCase,
    NewAccount,
)
from userauth.domain.users.entities import User
from userauth.domain.users.exceptions import AuthenticationError, DuplicateEmailError
from userauth.shared.errors import CorruptDataError, InternalError, ValidationError


@pytest.fixture()
def use_case(users, tokens, hasher) -> LoginOrRegisterUseCase:
    return LoginOrRegisterUseCase(users=users, tokens=tokens, password_hasher=hasher)


def test_unseen_email_registers_exactly_one_user(users, tokens, use_case) -> None:
    outcome = asyncio.run(use_case.execute("a@x.com", "p1", "A"))

    assert outcome.kind is AuthOutcomeKind.REGISTERED
    assert users.inserts == 1
    stored = users.find_by_email("a@x.com")
    assert stored is not None
    assert stored.password_hash != "p1"
    assert tokens.verify(outcome.token) == stored.id


def test_known_email_with_correct_password_logs_in(users, tokens, use_case) -> None:
    first = asyncio.run(use_case.execute("a@x.com", "p1", "A"))
    second = asyncio.run(use_case.execute("a@x.com", "p1", "A"))

    assert second.kind is AuthOutcomeKind.LOGGED_IN
    assert users.inserts == 1
    assert tokens.verify(second.token) == first.user.id


def test_login_does_not_need_a_name(users, use_case) -> None:
    asyncio.run(use_case.execute("a@x.com", "p1", "A"))

    outcome = asyncio.run(use_case.execute("a@x.com", "p1"))

    assert outcome.kind is AuthOutcomeKind.LOGGED_IN


def test_known_email_with_wrong_password_is_rejected(users, use_case) -> None:
    asyncio.run(use_case.execute("a@x.com", "p1", "A"))

    with pytest.raises(AuthenticationError) as exc_info:
        asyncio.run(use_case.execute("a@x.com", "wrong", "A"))

    assert exc_info.value.message == "Invalid credentials"
    assert users.inserts == 1


def test_register_without_name_is_a_validation_error(users, use_case) -> None:
    with pytest.raises(ValidationError):
        asyncio.run(use_case.execute("a@x.com", "p1"))

    assert users.inserts == 0


@pytest.mark.parametrize("email,password", [("", "p1"), ("a@x.com", "")])
def test_missing_credentials_are_rejected(use_case, email: str, password: str) -> None:
    with pytest.raises(ValidationError):
        asyncio.run(use_case.execute(email, password, "A"))


def test_resolve_tags_lookup_result(users, use_case) -> None:
    assert asyncio.run(use_case.resolve("a@x.com")) == NewAccount(email="a@x.com")

    asyncio.run(use_case.execute("a@x.com", "p1", "A"))
    lookup = asyncio.run(use_case.resolve("a@x.com"))

    assert isinstance(lookup, ExistingAccount)
    assert lookup.user.email == "a@x.com"


def test_login_branch_in_isolation(tokens, use_case) -> None:
    account = ExistingAccount(
        user=User(id="user-9", name="B", email="b@x.com", password_hash="hashed:pw")
    )

    outcome = asyncio.run(use_case.login(account, "pw"))

    assert outcome.kind is AuthOutcomeKind.LOGGED_IN
    assert tokens.verify(outcome.token) == "user-9"


def test_register_race_surfaces_as_internal_error(users, tokens, hasher) -> None:
    class RacingRepository(type(users)):
        def insert(self, user: User) -> User:
            # Another request registered the same e-mail after our lookup.
            raise DuplicateEmailError()

    use_case = LoginOrRegisterUseCase(
        users=RacingRepository(), tokens=tokens, password_hasher=hasher
    )

    with pytest.raises(InternalError) as exc_info:
        asyncio.run(use_case.execute("a@x.com", "p1", "A"))

    assert exc_info.value.status == 500
    assert exc_info.value.message == "Email is already registered"


def test_store_failure_propagates_message_verbatim(tokens, hasher) -> None:
    class BrokenRepository:
        def find_by_email(self, email: str) -> User | None:
            raise ConnectionError("connection refused: mongo:27017")

    use_case = LoginOrRegisterUseCase(
        users=BrokenRepository(), tokens=tokens, password_hasher=hasher
    )

    with pytest.raises(InternalError) as exc_info:
        asyncio.run(use_case.execute("a@x.com", "p1", "A"))

    assert exc_info.value.message == "connection refused: mongo:27017"


def test_corrupt_stored_hash_is_internal_error(users, tokens) -> None:
    class CorruptHasher:
        def hash(self, password: str) -> str:
            return f"hashed:{password}"

        def verify(self, password: str, hashed: str) -> bool:
            raise CorruptDataError("Stored password hash is malformed")

    use_case = LoginOrRegisterUseCase(users=users, tokens=tokens, password_hasher=CorruptHasher())
    asyncio.run(use_case.execute("a@x.com", "p1", "A"))

    with pytest.raises(InternalError):
        asyncio.run(use_case.execute("a@x.com", "p1", "A"))


def test_missing_secret_is_internal_error(users, hasher) -> None:
    use_case = LoginOrRegisterUseCase(
        users=users, tokens=JwtTokenService(""), password_hasher=hasher
    )

    with pytest.raises(InternalError) as exc_info:
        asyncio.run(use_case.execute("a@x.com", "p1", "A"))

    assert "JWT secret" in exc_info.value.message
