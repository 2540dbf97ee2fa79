# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import asyncio

from userauth.domain.users.entities import User
from userauth.domain.users.repositories import PasswordHasher, UserRepository
from userauth.shared.errors import ValidationError
from userauth.shared.logging import logger


class CreateUserUseCase:
    def __init__(self, *, users: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = users
        self._password_hasher = password_hasher

    async def execute(
        self, name: str | None, email: str | None, password: str | None
    ) -> User:
        if not name or not email or not password:
            raise ValidationError("All fields are required", code="missing_fields")
        hashed = await asyncio.to_thread(self._password_hasher.hash, password)
        user = User(id=None, name=name, email=email, password_hash=hashed)
        persisted = await asyncio.to_thread(self._users.insert, user)
        logger.info(f"users.create: ok user_id={persisted.id}")
        return persisted
