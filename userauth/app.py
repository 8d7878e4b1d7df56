# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask

from userauth.container import Container
from userauth.domain.users.exceptions import AuthError
from userauth.interfaces.http.error_mapper import map_auth_error
from userauth.shared.config import AppConfig, load_config
from userauth.shared.logging import logger, setup_logging
from userauth.shared.middleware.error_handler import configure_error_handling
from userauth.shared.middleware.request_logger import configure_request_logging

EXTENSION_KEY = "userauth"


def create_app(config: AppConfig | None = None, *, container: Container | None = None) -> Flask:
    config = config or load_config()
    container = container or Container(config)

    setup_logging(config.log_level, log_file=config.log_file, debug_mode=config.debug_logging)
    container.database.create_schema()

    app = Flask(__name__)
    configure_error_handling(
        app,
        translators={AuthError: map_auth_error},
        debug_mode=config.debug_logging,
    )
    configure_request_logging(app, debug_mode=config.debug_logging)

    app.extensions[EXTENSION_KEY] = container
    app.register_blueprint(container.status_controller.as_blueprint())
    app.register_blueprint(container.users_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        # Responses carry bearer tokens.
        resp.headers.setdefault("Cache-Control", "no-store")
        return resp

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(f"Serving on {config.server.address()}")
    app.run(host=config.server.host, port=config.server.port, threaded=True)


if __name__ == "__main__":
    main()
