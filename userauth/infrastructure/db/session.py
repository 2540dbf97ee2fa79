# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""MongoDB connection helpers."""

from __future__ import annotations

from typing import Any

from mongoengine import connect, disconnect
from mongoengine.connection import get_db

from userauth.shared.config import DatabaseConfig
from userauth.shared.errors import ConfigError
from userauth.shared.logging import logger

from .models import UserDocument


def init_db(config: DatabaseConfig, *, mongo_client_class: type | None = None) -> None:
    """Open the default mongoengine connection and make sure indexes exist."""

    if not config.uri:
        raise ConfigError("MONGODB_URI is not configured")

    kwargs: dict[str, Any] = {"serverSelectionTimeoutMS": config.timeout_ms}
    if mongo_client_class is not None:
        kwargs["mongo_client_class"] = mongo_client_class

    disconnect()
    connect(host=config.uri, **kwargs)
    UserDocument.ensure_indexes()
    logger.info(f"Connected to MongoDB {config.uri}")


def close_db() -> None:
    disconnect()
    logger.debug("db.session: disconnected")


def ping() -> bool:
    get_db().command("ping")
    return True


__all__ = ["close_db", "init_db", "ping"]
