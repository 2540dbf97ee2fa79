# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Single entry point that logs a known e-mail in or registers an unseen one."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum

from userauth.domain.users.entities import User
from userauth.domain.users.exceptions import AuthenticationError
from userauth.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from userauth.shared.errors import InternalError, ValidationError
from userauth.shared.logging import logger


@dataclass(slots=True, frozen=True)
class ExistingAccount:
    user: User


@dataclass(slots=True, frozen=True)
class NewAccount:
    email: str


AccountLookup = ExistingAccount | NewAccount


class AuthOutcomeKind(str, Enum):
    LOGGED_IN = "logged_in"
    REGISTERED = "registered"


@dataclass(slots=True, frozen=True)
class AuthOutcome:
    kind: AuthOutcomeKind
    user: User
    token: str


class LoginOrRegisterUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    async def execute(self, email: str, password: str, name: str | None = None) -> AuthOutcome:
        if not email or not password:
            raise ValidationError("Email and password are required")
        try:
            lookup = await self.resolve(email)
            if isinstance(lookup, ExistingAccount):
                return await self.login(lookup, password)
            return await self.register(lookup, password, name)
        except (AuthenticationError, ValidationError):
            raise
        except Exception as exc:
            # Includes the lookup/insert race surfacing as DuplicateEmailError.
            logger.error(f"auth.login_or_register: failed {type(exc).__name__}: {exc}")
            raise InternalError.from_exception(exc) from exc

    async def resolve(self, email: str) -> AccountLookup:
        user = await asyncio.to_thread(self._users.find_by_email, email)
        if user is None:
            return NewAccount(email=email)
        return ExistingAccount(user=user)

    async def login(self, account: ExistingAccount, password: str) -> AuthOutcome:
        user = account.user
        matches = await asyncio.to_thread(
            self._password_hasher.verify, password, user.password_hash
        )
        if not matches:
            logger.info(f"auth.login: rejected user_id={user.id}")
            raise AuthenticationError()
        token = self._tokens.issue(str(user.id))
        logger.info(f"auth.login: ok user_id={user.id}")
        return AuthOutcome(kind=AuthOutcomeKind.LOGGED_IN, user=user, token=token)

    async def register(self, account: NewAccount, password: str, name: str | None) -> AuthOutcome:
        if not name:
            raise ValidationError("Name is required to register", code="name_required")
        hashed = await asyncio.to_thread(self._password_hasher.hash, password)
        draft = User(id=None, name=name, email=account.email, password_hash=hashed)
        persisted = await asyncio.to_thread(self._users.insert, draft)
        token = self._tokens.issue(str(persisted.id))
        logger.info(f"auth.register: ok user_id={persisted.id}")
        return AuthOutcome(kind=AuthOutcomeKind.REGISTERED, user=persisted, token=token)
