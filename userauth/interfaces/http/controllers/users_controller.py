# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from userauth.application.use_cases.users.create_user import CreateUserUseCase
from userauth.application.use_cases.users.list_users import ListUsersUseCase
from userauth.application.use_cases.users.update_user import UpdateUserUseCase
from userauth.domain.users.repositories import TokenService
from userauth.interfaces.http.auth import auth_required, current_user_id
from userauth.interfaces.http.dto.users import (
    CreateUserRequestDTO,
    UpdateUserRequestDTO,
    UserDTO,
)
from userauth.shared.errors.validation import raise_validation_error
from userauth.shared.logging import logger
from userauth.shared.responses import envelope


class UsersController:
    def __init__(
        self,
        *,
        list_users: ListUsersUseCase,
        create_user: CreateUserUseCase,
        update_user: UpdateUserUseCase,
        tokens: TokenService,
    ) -> None:
        self._list_users = list_users
        self._create_user = create_user
        self._update_user = update_user
        self._tokens = tokens

    async def list_users(self) -> tuple[Response, HTTPStatus]:
        users = await self._list_users.execute()
        data = [UserDTO.from_entity(user).model_dump() for user in users]
        return jsonify(envelope(True, "Users retrieved", data)), HTTPStatus.OK

    async def add_user(self) -> tuple[Response, HTTPStatus]:
        try:
            dto = CreateUserRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc, "All fields are required")

        user = await self._create_user.execute(dto.name, dto.email, dto.password)
        logger.info(f"users.add: user_id={user.id} by={current_user_id()}")
        return (
            jsonify(envelope(True, "User added successfully", UserDTO.from_entity(user).model_dump())),
            HTTPStatus.CREATED,
        )

    async def update_user(self, user_id: str) -> tuple[Response, HTTPStatus]:
        try:
            dto = UpdateUserRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc, "At least one field is required")

        user = await self._update_user.execute(
            user_id, name=dto.name, email=dto.email, password=dto.password
        )
        logger.info(f"users.update: user_id={user_id} by={current_user_id()}")
        return (
            jsonify(envelope(True, "User updated successfully", UserDTO.from_entity(user).model_dump())),
            HTTPStatus.OK,
        )

    def as_blueprint(self) -> Blueprint:
        guard = auth_required(self._tokens)
        bp = Blueprint("users", __name__, url_prefix="/api/users")
        bp.add_url_rule("", view_func=guard(self.list_users), methods=["GET"])
        bp.add_url_rule("", view_func=guard(self.add_user), methods=["POST"])
        bp.add_url_rule(
            "/<user_id>", view_func=guard(self.update_user), methods=["PUT"]
        )
        return bp
