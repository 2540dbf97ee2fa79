# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from bson import ObjectId
from mongoengine.errors import NotUniqueError
from pymongo.errors import DuplicateKeyError

from userauth.domain.users.entities import User as DomainUser
from userauth.domain.users.entities import UserChanges
from userauth.domain.users.exceptions import DuplicateEmailError
from userauth.domain.users.repositories import UserRepository
from userauth.infrastructure.db.models import UserDocument

# Domain field -> document field.
_FIELD_MAP = {"name": "name", "email": "email", "password_hash": "password"}


def _to_domain(doc: UserDocument) -> DomainUser:
    return DomainUser(
        id=str(doc.id),
        name=doc.name,
        email=doc.email,
        password_hash=doc.password,
    )


class MongoUserRepository(UserRepository):
    def find_by_email(self, email: str) -> DomainUser | None:
        doc = UserDocument.objects(email=email).first()
        if doc is None:
            return None
        return _to_domain(doc)

    def insert(self, user: DomainUser) -> DomainUser:
        doc = UserDocument(name=user.name, email=user.email, password=user.password_hash)
        try:
            doc.save(force_insert=True)
        except (NotUniqueError, DuplicateKeyError) as exc:
            raise DuplicateEmailError(context={"email": user.email}) from exc
        return _to_domain(doc)

    def find_by_id_and_update(self, user_id: str, changes: UserChanges) -> DomainUser | None:
        if not ObjectId.is_valid(user_id):
            return None
        updates = {f"set__{_FIELD_MAP[key]}": value for key, value in changes.as_fields().items()}
        query = UserDocument.objects(id=ObjectId(user_id))
        try:
            doc = query.first() if changes.is_empty() else query.modify(new=True, **updates)
        except (NotUniqueError, DuplicateKeyError) as exc:
            raise DuplicateEmailError(context={"email": changes.email}) from exc
        if doc is None:
            return None
        return _to_domain(doc)

    def list_all(self) -> list[DomainUser]:
        return [_to_domain(doc) for doc in UserDocument.objects.order_by("id")]
