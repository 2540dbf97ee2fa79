"""JWT issuance and verification.

Tokens are stateless: HS256-signed, carrying the user id as ``sub`` plus
``iat``/``exp``. Nothing is stored server-side and there is no revocation.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from http import HTTPStatus

import jwt

from userauth.domain.users.repositories import TokenService
from userauth.shared.errors import AppError, ConfigError

TOKEN_LIFETIME = timedelta(hours=1)
ALGORITHM = "HS256"


class TokenError(AppError):
    """Base for bearer token failures; clients only ever see a generic message."""

    def __init__(self, code: str, detail: str = "") -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.UNAUTHORIZED,
            message="Invalid token",
        )
        self.detail = detail


class MissingTokenError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="missing_token",
            status=HTTPStatus.UNAUTHORIZED,
            message="No token provided",
        )


class InvalidTokenError(TokenError):
    def __init__(self, detail: str = "") -> None:
        super().__init__("invalid_token", detail)


class ExpiredTokenError(TokenError):
    def __init__(self, detail: str = "") -> None:
        super().__init__("expired_token", detail)


class MalformedTokenError(TokenError):
    def __init__(self, detail: str = "") -> None:
        super().__init__("malformed_token", detail)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    """Signs and checks bearer tokens with a process-wide secret.

    ``clock`` only drives issuance; expiry is checked against wall time by
    PyJWT, so a token minted with a clock set in the past is already expired.
    """

    def __init__(
        self,
        secret: str | None,
        *,
        lifetime: timedelta = TOKEN_LIFETIME,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._secret = secret or ""
        self._lifetime = lifetime
        self._clock = clock

    def _require_secret(self) -> str:
        if not self._secret:
            raise ConfigError("JWT secret is not configured")
        return self._secret

    def issue(self, subject_id: str) -> str:
        secret = self._require_secret()
        now = self._clock()
        payload = {
            "sub": str(subject_id),
            "iat": now,
            "exp": now + self._lifetime,
        }
        return jwt.encode(payload, secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> str:
        secret = self._require_secret()
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[ALGORITHM],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise ExpiredTokenError(str(exc)) from exc
        except jwt.InvalidSignatureError as exc:
            raise InvalidTokenError(str(exc)) from exc
        except (jwt.DecodeError, jwt.MissingRequiredClaimError) as exc:
            raise MalformedTokenError(str(exc)) from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError(str(exc)) from exc

        subject = payload["sub"]
        if not isinstance(subject, str) or not subject:
            raise MalformedTokenError("subject claim is empty")
        return subject


__all__ = [
    "ALGORITHM",
    "TOKEN_LIFETIME",
    "ExpiredTokenError",
    "InvalidTokenError",
    "JwtTokenService",
    "MalformedTokenError",
    "MissingTokenError",
    "TokenError",
]
