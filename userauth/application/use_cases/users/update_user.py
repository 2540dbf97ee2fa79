# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import asyncio

from userauth.domain.users.entities import User, UserChanges
from userauth.domain.users.exceptions import UserNotFoundError
from userauth.domain.users.repositories import PasswordHasher, UserRepository
from userauth.shared.errors import ValidationError
from userauth.shared.logging import logger


class UpdateUserUseCase:
    def __init__(self, *, users: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = users
        self._password_hasher = password_hasher

    async def execute(
        self,
        user_id: str,
        *,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> User:
        if not name and not email and not password:
            raise ValidationError("At least one field is required", code="missing_fields")

        password_hash = None
        if password:
            password_hash = await asyncio.to_thread(self._password_hasher.hash, password)

        changes = UserChanges(
            name=name or None,
            email=email or None,
            password_hash=password_hash,
        )
        updated = await asyncio.to_thread(self._users.find_by_id_and_update, user_id, changes)
        if updated is None:
            raise UserNotFoundError()
        logger.info(
            f"users.update: ok user_id={user_id} fields={sorted(changes.as_fields())}"
        )
        return updated
