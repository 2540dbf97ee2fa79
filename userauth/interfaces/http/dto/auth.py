from __future__ import annotations

from pydantic import BaseModel, Field


class LoginOrRegisterRequestDTO(BaseModel):
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=128)
    # Only needed when the e-mail is unseen and the request turns into a registration.
    name: str | None = Field(None, max_length=128)


class TokenDTO(BaseModel):
    token: str
