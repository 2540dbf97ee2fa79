# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, jsonify

from userauth.infrastructure.health import check_database
from userauth.shared.logging import logger
from userauth.shared.responses import envelope


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        try:
            check_database()
        except Exception as exc:
            logger.warning(f"health: database check failed {type(exc).__name__}: {exc}")
            return (
                jsonify(envelope(False, f"Database unavailable: {exc}", {"database": "error"})),
                HTTPStatus.SERVICE_UNAVAILABLE,
            )
        return jsonify(envelope(True, "OK", {"database": "ok"})), HTTPStatus.OK
