# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Uniform ``{success, message, data}`` response envelope."""

from __future__ import annotations

from typing import Any


def envelope(success: bool, message: str, data: Any = None) -> dict[str, Any]:
    return {"success": success, "message": message, "data": data}


__all__ = ["envelope"]
