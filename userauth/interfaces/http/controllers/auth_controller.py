# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from userauth.application.use_cases.auth.login_or_register import (
    AuthOutcomeKind,
    LoginOrRegisterUseCase,
)
from userauth.interfaces.http.dto.auth import LoginOrRegisterRequestDTO, TokenDTO
from userauth.shared.errors.validation import raise_validation_error
from userauth.shared.logging import logger
from userauth.shared.responses import envelope


class AuthController:
    def __init__(self, *, login_or_register_use_case: LoginOrRegisterUseCase) -> None:
        self._login_or_register_use_case = login_or_register_use_case

    async def login_or_register(self) -> tuple[Response, HTTPStatus]:
        try:
            dto = LoginOrRegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc, "Email and password are required")

        outcome = await self._login_or_register_use_case.execute(
            dto.email, dto.password, dto.name
        )
        payload = TokenDTO(token=outcome.token).model_dump()

        if outcome.kind is AuthOutcomeKind.REGISTERED:
            logger.info(f"auth.loginOrRegister: registered user_id={outcome.user.id}")
            return (
                jsonify(envelope(True, "User registered and logged in successfully", payload)),
                HTTPStatus.CREATED,
            )
        logger.info(f"auth.loginOrRegister: logged in user_id={outcome.user.id}")
        return jsonify(envelope(True, "Login successful", payload)), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule(
            "/loginOrRegister", view_func=self.login_or_register, methods=["POST"]
        )
        return bp
