# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

from flask import g, request

from userauth.application.services.tokens import MissingTokenError, TokenError
from userauth.domain.users.repositories import TokenService
from userauth.shared.logging import logger

R = TypeVar("R")


def bearer_token() -> str:
    header = request.headers.get("Authorization", "")
    scheme, _, value = header.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return value.strip()


def current_user_id() -> str | None:
    return getattr(g, "user_id", None)


def auth_required(
    tokens: TokenService,
) -> Callable[[Callable[..., Awaitable[R]]], Callable[..., Awaitable[R]]]:
    """Reject requests without a valid bearer token before the view runs."""

    def decorator(view: Callable[..., Awaitable[R]]) -> Callable[..., Awaitable[R]]:
        @wraps(view)
        async def inner(*args: Any, **kwargs: Any) -> R:
            token = bearer_token()
            if not token:
                logger.warning(
                    f"No Authorization header on {request.method} {request.path} "
                    f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
                )
                raise MissingTokenError()
            try:
                g.user_id = tokens.verify(token)
            except TokenError as exc:
                logger.warning(
                    f"Auth failed ({exc.code}: {exc.detail}) on {request.method} {request.path}"
                )
                raise
            logger.debug(f"Auth OK: user={g.user_id} {request.method} {request.path}")
            return await view(*args, **kwargs)

        return inner

    return decorator


__all__ = ["auth_required", "bearer_token", "current_user_id"]
