"""Use-case for listing stored users."""

from __future__ import annotations

import asyncio

from userauth.domain.users.entities import User
from userauth.domain.users.repositories import UserRepository


class ListUsersUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    async def execute(self) -> list[User]:
        return await asyncio.to_thread(self._users.list_all)
