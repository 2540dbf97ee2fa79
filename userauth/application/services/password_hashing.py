"""Password hashing strategies."""

from __future__ import annotations

import bcrypt

from userauth.domain.users.repositories import PasswordHasher
from userauth.shared.errors import CorruptDataError, ValidationError

DEFAULT_ROUNDS = 10
# bcrypt only looks at the first 72 bytes of a password.
_MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        if not password:
            raise ValidationError("Password is required", code="password_required")
        raw = password.encode("utf-8")
        if len(raw) > _MAX_PASSWORD_BYTES:
            raise ValidationError(
                "Password is too long",
                code="password_too_long",
                context={"max_bytes": _MAX_PASSWORD_BYTES},
            )
        return bcrypt.hashpw(raw, bcrypt.gensalt(rounds=self._rounds)).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed:
            raise CorruptDataError("Stored password hash is empty")
        raw = (password or "").encode("utf-8")
        if not raw or len(raw) > _MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(raw, hashed.encode("utf-8"))
        except ValueError as exc:
            raise CorruptDataError(f"Stored password hash is malformed: {exc}") from exc
