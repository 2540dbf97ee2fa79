# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import User, UserChanges
from .exceptions import AuthenticationError, DuplicateEmailError, UserNotFoundError
from .repositories import PasswordHasher, TokenService, UserRepository

__all__ = [
    "AuthenticationError",
    "DuplicateEmailError",
    "PasswordHasher",
    "TokenService",
    "User",
    "UserChanges",
    "UserNotFoundError",
    "UserRepository",
]
