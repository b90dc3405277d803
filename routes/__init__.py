# routes/__init__.py
from .api.ai import api_ai_bp
from .api.health import api_health_bp
from .api.usage import api_usage_bp


def register_routes(app):
    app.register_blueprint(api_health_bp)
    app.register_blueprint(api_usage_bp)
    app.register_blueprint(api_ai_bp)
