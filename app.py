import logging

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

import routes
from core.config import Config
from core.errors import register_error_handlers
from core.extensions import init_extensions
from core.hooks import register_hooks


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    app.logger.setLevel(getattr(logging, app.config.get("LOG_LEVEL", "INFO"), logging.INFO))

    init_extensions(app)

    app.secret_key = app.config.get("SECRET_KEY")
    if app.config.get("ENV") != "development" and not app.testing:
        assert app.secret_key and app.secret_key != "local-dev-secret", \
            "SECURITY: set SECRET_KEY to a strong value."

    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1)

    routes.register_routes(app)
    register_hooks(app)
    register_error_handlers(app)

    # 로그에서 DB 드라이버 확인 (비밀번호 노출 방지)
    db_uri = app.config.get("SQLALCHEMY_DATABASE_URI") or ""
    app.logger.info("[DB] driver=%s", db_uri.split(":", 1)[0] or "(unset)")

    return app
