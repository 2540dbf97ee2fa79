# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .models import USERS_COLLECTION, UserDocument
from .session import close_db, init_db, ping

__all__ = ["USERS_COLLECTION", "UserDocument", "close_db", "init_db", "ping"]
