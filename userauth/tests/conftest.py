from __future__ import annotations

from dataclasses import replace

import pytest

from userauth.application.services.tokens import JwtTokenService
from userauth.domain.users.entities import User, UserChanges
from userauth.domain.users.exceptions import DuplicateEmailError
from userauth.domain.users.repositories import PasswordHasher, UserRepository

SECRET = "test-secret-key-with-enough-length"


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1
        self.inserts = 0

    def find_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    def insert(self, user: User) -> User:
        if self.find_by_email(user.email) is not None:
            raise DuplicateEmailError()
        new_user = replace(user, id=f"user-{self._seq}")
        self._seq += 1
        self.inserts += 1
        self._users[new_user.id] = new_user
        return new_user

    def find_by_id_and_update(self, user_id: str, changes: UserChanges) -> User | None:
        current = self._users.get(user_id)
        if current is None:
            return None
        if changes.email and changes.email != current.email and self.find_by_email(changes.email):
            raise DuplicateEmailError()
        updated = replace(current, **changes.as_fields())
        self._users[user_id] = updated
        return updated

    def list_all(self) -> list[User]:
        return list(self._users.values())


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def tokens() -> JwtTokenService:
    return JwtTokenService(SECRET)


@pytest.fixture()
def secret() -> str:
    return SECRET
