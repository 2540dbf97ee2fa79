# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from mongoengine import Document, StringField

USERS_COLLECTION = "custom_users"


class UserDocument(Document):
    """Stored user record.

    ``password`` holds the bcrypt hash; the field name matches records
    written by earlier deployments, which may also carry a ``__v`` key.
    """

    name = StringField(required=True)
    email = StringField(required=True, unique=True)
    password = StringField(required=True)

    meta = {
        "collection": USERS_COLLECTION,
        "strict": False,
    }
