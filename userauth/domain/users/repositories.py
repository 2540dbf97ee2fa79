# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import User, UserChanges


class UserRepository(Protocol):
    def find_by_email(self, email: str) -> User | None: ...
    def insert(self, user: User) -> User: ...
    def find_by_id_and_update(self, user_id: str, changes: UserChanges) -> User | None: ...
    def list_all(self) -> list[User]: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenService(Protocol):
    def issue(self, subject_id: str) -> str: ...
    def verify(self, token: str) -> str: ...
