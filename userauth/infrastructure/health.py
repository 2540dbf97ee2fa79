# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userauth.infrastructure.db import ping


def check_database() -> bool:
    return ping()


__all__ = ["check_database"]
