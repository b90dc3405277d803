# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# - Sets up mock environment variables before any imports
# - Builds the Flask app against in-memory SQLite
# - Replaces every upstream service call with an in-process fake
# =============================================================================

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")
os.environ.setdefault("CLIPDROP_API_KEY", "test-clipdrop-key")

import pytest

from app import create_app
from core.config import Config
from domain.models import Creation, Subscriber, db
from services import media_service, pdf_text
from services.ai import clipdrop_service, gemini_service
from services.auth_tokens import caller_serializer


class AppTestConfig(Config):
    TESTING = True
    ENV = "development"
    SECRET_KEY = "test-secret-key"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    RATELIMIT_ENABLED = False
    GEMINI_API_KEY = "test-gemini-key"
    CLIPDROP_API_KEY = "test-clipdrop-key"
    CLOUDINARY_CLOUD_NAME = "demo"
    CLOUDINARY_API_KEY = "key"
    CLOUDINARY_API_SECRET = "secret"
    FREE_USAGE_LIMIT = 10


# =============================================================================
# App fixtures
# =============================================================================

@pytest.fixture
def app():
    app = create_app(AppTestConfig)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_subscriber(app):
    """Create a subscriber row and return bearer auth headers for it."""

    def _make(user_id="user_1", plan="free", free_usage=0):
        with app.app_context():
            db.session.add(Subscriber(user_id=user_id, plan=plan, free_usage=free_usage))
            db.session.commit()
            token = caller_serializer().dumps(user_id)
        return {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture
def caller_token(app):
    """Sign a bearer token the way the external identity service does."""

    def _issue(user_id):
        with app.app_context():
            return caller_serializer().dumps(user_id)

    return _issue


@pytest.fixture
def stored_usage(app):
    def _get(user_id):
        with app.app_context():
            return Subscriber.query.filter_by(user_id=user_id).one().free_usage

    return _get


@pytest.fixture
def stored_creations(app):
    def _get(user_id=None):
        with app.app_context():
            q = Creation.query
            if user_id:
                q = q.filter_by(user_id=user_id)
            return [
                {"prompt": c.prompt, "content": c.content, "type": c.type, "publish": c.publish}
                for c in q.order_by(Creation.id).all()
            ]

    return _get


# =============================================================================
# Upstream fakes
# =============================================================================

class Recorder:
    def __init__(self, result):
        self.result = result
        self.calls = []

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


@pytest.fixture
def upstream(monkeypatch):
    fakes = {
        "generate_text": Recorder("Generated text"),
        "generate_image": Recorder(b"\x89PNG fake"),
        "upload_png_bytes": Recorder(media_service.UploadResult(secure_url="https://cdn.test/gen.png")),
        "remove_background": Recorder("https://cdn.test/no-bg.png"),
        "remove_object": Recorder("https://cdn.test/no-object.png"),
        "extract_text": Recorder("Jane Doe\nSoftware Engineer"),
    }
    monkeypatch.setattr(gemini_service, "generate_text", fakes["generate_text"])
    monkeypatch.setattr(clipdrop_service, "generate_image", fakes["generate_image"])
    monkeypatch.setattr(media_service, "upload_png_bytes", fakes["upload_png_bytes"])
    monkeypatch.setattr(media_service, "remove_background", fakes["remove_background"])
    monkeypatch.setattr(media_service, "remove_object", fakes["remove_object"])
    monkeypatch.setattr(pdf_text, "extract_text", fakes["extract_text"])
    return fakes
