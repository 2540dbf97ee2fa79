# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from userauth.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class User:

    id: str | None
    name: str
    email: str
    password_hash: str

    def __post_init__(self) -> None:
        if not self.name:
            raise InvariantViolation("name must not be empty", field="name")
        if not self.email:
            raise InvariantViolation("email must not be empty", field="email")

    def to_public_dict(self) -> dict[str, Any]:
        """Representation safe to hand to clients; the hash never leaves the service."""

        return {"id": self.id, "name": self.name, "email": self.email}


@dataclass(slots=True, frozen=True)
class UserChanges:
    """Partial update; ``None`` means leave the stored value untouched."""

    name: str | None = None
    email: str | None = None
    password_hash: str | None = None

    def as_fields(self) -> dict[str, str]:
        fields = {
            "name": self.name,
            "email": self.email,
            "password_hash": self.password_hash,
        }
        return {key: value for key, value in fields.items() if value is not None}

    def is_empty(self) -> bool:
        return not self.as_fields()
