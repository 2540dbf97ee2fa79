# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from userauth.application.services.password_hashing import BcryptPasswordHasher
from userauth.application.services.tokens import JwtTokenService
from userauth.application.use_cases.auth.login_or_register import LoginOrRegisterUseCase
from userauth.application.use_cases.users.create_user import CreateUserUseCase
from userauth.application.use_cases.users.list_users import ListUsersUseCase
from userauth.application.use_cases.users.update_user import UpdateUserUseCase
from userauth.infrastructure.repositories.users.mongo_user_repository import (
    MongoUserRepository,
)
from userauth.interfaces.http.controllers.auth_controller import AuthController
from userauth.interfaces.http.controllers.misc_controller import MiscController
from userauth.interfaces.http.controllers.users_controller import UsersController
from userauth.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self._config = config

    @cached_property
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher()

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(self._config.jwt_secret)

    @cached_property
    def user_repository(self) -> MongoUserRepository:
        return MongoUserRepository()

    @cached_property
    def login_or_register_use_case(self) -> LoginOrRegisterUseCase:
        return LoginOrRegisterUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def list_users_use_case(self) -> ListUsersUseCase:
        return ListUsersUseCase(users=self.user_repository)

    @cached_property
    def create_user_use_case(self) -> CreateUserUseCase:
        return CreateUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def update_user_use_case(self) -> UpdateUserUseCase:
        return UpdateUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(login_or_register_use_case=self.login_or_register_use_case)

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            list_users=self.list_users_use_case,
            create_user=self.create_user_use_case,
            update_user=self.update_user_use_case,
            tokens=self.token_service,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()
