from .base import (
    AppError,
    ConfigError,
    CorruptDataError,
    DomainError,
    InfrastructureError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler
from .validation import format_pydantic_errors, raise_validation_error

__all__ = [
    "AppError",
    "ConfigError",
    "CorruptDataError",
    "DomainError",
    "InfrastructureError",
    "InternalError",
    "NotFoundError",
    "ValidationError",
    "format_pydantic_errors",
    "handle_app_error",
    "raise_validation_error",
    "register_error_handler",
]
