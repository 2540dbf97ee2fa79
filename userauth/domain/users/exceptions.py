# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from userauth.shared.errors.base import DomainError, NotFoundError


class DuplicateEmailError(DomainError):
    code = "duplicate_email"
    status = HTTPStatus.CONFLICT
    message = "Email is already registered"


class AuthenticationError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid credentials"


class UserNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__("User not found", code="user_not_found")
