from __future__ import annotations

from pydantic import BaseModel, Field

from userauth.domain.users.entities import User


class CreateUserRequestDTO(BaseModel):
    name: str | None = Field(None, max_length=128)
    email: str | None = Field(None, max_length=255)
    password: str | None = Field(None, max_length=128)


class UpdateUserRequestDTO(BaseModel):
    name: str | None = Field(None, max_length=128)
    email: str | None = Field(None, max_length=255)
    password: str | None = Field(None, max_length=128)


class UserDTO(BaseModel):
    id: str
    name: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls.model_validate(user.to_public_dict())
