# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast

from userauth.shared.responses import envelope


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str = ""
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def __str__(self) -> str:
        return self.message or self.code

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.context) if self.context else None
        return envelope(False, str(self), data)


class DomainError(AppError):
    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        resolved_message = message or cast(str, getattr(self, "message", ""))
        super().__init__(
            code=resolved_code,
            status=resolved_status,
            message=resolved_message,
            context=context,
        )


class InfrastructureError(AppError):
    def __init__(
        self,
        message: str = "",
        *,
        code: str = "infrastructure_error",
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(code=code, status=resolved_status, message=message, context=context)


class ValidationError(AppError):
    def __init__(
        self,
        message: str = "Invalid request",
        *,
        code: str = "validation_error",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            message=message,
            context=context,
        )


class NotFoundError(AppError):
    def __init__(self, message: str = "Not found", *, code: str = "not_found") -> None:
        super().__init__(code=code, status=HTTPStatus.NOT_FOUND, message=message)


class ConfigError(InfrastructureError):
    def __init__(self, message: str) -> None:
        super().__init__(message, code="config_error")


class CorruptDataError(InfrastructureError):
    def __init__(self, message: str = "Stored data is corrupt") -> None:
        super().__init__(message, code="corrupt_data")


class InternalError(InfrastructureError):
    """Unexpected failure; the message of the underlying cause is kept as-is."""

    def __init__(self, message: str = "Internal Server Error") -> None:
        super().__init__(message, code="internal_error")

    @classmethod
    def from_exception(cls, exc: BaseException) -> InternalError:
        return cls(str(exc) or type(exc).__name__)
