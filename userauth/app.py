# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys

from flask import Flask
from flask_cors import CORS

from userauth.infrastructure.container import Container
from userauth.infrastructure.db import init_db, ping
from userauth.shared.config import AppConfig, load_config
from userauth.shared.logging import logger, setup_logging
from userauth.shared.middleware.error_handler import configure_error_handling
from userauth.shared.middleware.request_logger import configure_request_logging
from userauth.shared.middleware.security_headers import configure_security_headers

CONTAINER_EXTENSION = "userauth.container"


def create_app(
    config: AppConfig | None = None,
    *,
    mongo_client_class: type | None = None,
) -> Flask:
    config = config or load_config()
    setup_logging(config.log_level, debug_mode=config.debug_logging, log_file=config.log_file)
    init_db(config.database, mongo_client_class=mongo_client_class)

    container = Container(config)

    app = Flask(__name__)
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_security_headers(app, enable_hsts=config.security.enable_hsts)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.users_controller.as_blueprint())
    app.extensions[CONTAINER_EXTENSION] = container

    if not config.jwt_secret:
        logger.warning("JWT_SECRET is not set; token issuance and verification will fail")

    logger.info("Flask app initialized")
    return app


def main() -> None:
    config = load_config()
    try:
        app = create_app(config)
        ping()
    except Exception as exc:
        logger.error(f"Error starting server: {exc}")
        sys.exit(1)

    logger.info(f"Server is running on port {config.port}")
    app.run(host=config.host, port=config.port)


if __name__ == "__main__":
    main()
