import os

from dotenv import load_dotenv

load_dotenv()


def _csv(v: str):
    return [x.strip() for x in (v or "").split(",") if x.strip()]


def _env_bool(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "y", "on")


def _env_int(name: str, default=None):
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    return int(v)


# Config 에서는 환경변수 설정만
class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "local-dev-secret")

    ENV = os.getenv("FLASK_ENV", "production")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # DB
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///quickai.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
        "pool_recycle": 280,
    }

    # 업로드 상한 (Werkzeug 가 초과 시 413)
    MAX_CONTENT_LENGTH = _env_int("MAX_CONTENT_LENGTH", 10 * 1024 * 1024)
    MAX_RESUME_BYTES = _env_int("MAX_RESUME_BYTES", 5 * 1024 * 1024)

    # -------------------------
    # 호출자 인증 토큰 (Authorization: Bearer ...)
    # -------------------------
    CALLER_TOKEN_SALT = os.getenv("CALLER_TOKEN_SALT", "caller-token-v1")
    CALLER_TOKEN_TTL = _env_int("CALLER_TOKEN_TTL", 60 * 60 * 24)

    # -------------------------
    # 외부 서비스
    # -------------------------
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")

    CLIPDROP_API_KEY = os.getenv("CLIPDROP_API_KEY", "")
    CLIPDROP_API_URL = os.getenv("CLIPDROP_API_URL", "https://clipdrop-api.co/text-to-image/v1")

    CLOUDINARY_CLOUD_NAME = os.getenv("CLOUDINARY_CLOUD_NAME", "")
    CLOUDINARY_API_KEY = os.getenv("CLOUDINARY_API_KEY", "")
    CLOUDINARY_API_SECRET = os.getenv("CLOUDINARY_API_SECRET", "")

    # None 이면 외부 호출에 타임아웃을 걸지 않음
    UPSTREAM_TIMEOUT = _env_int("UPSTREAM_TIMEOUT")

    # -------------------------
    # CORS
    # -------------------------
    CORS_ORIGINS = _csv(os.getenv("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173"))

    # -------------------------
    # Rate limiting (Flask-Limiter 표준 키)
    # -------------------------
    REDIS_URL = os.getenv("REDIS_URL", "")
    RATELIMIT_ENABLED = _env_bool("RATELIMIT_ENABLED", True)
    RATELIMIT_STORAGE_URI = REDIS_URL if REDIS_URL else "memory://"
    RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", "200 per hour")

    # =========================
    #  티어/한도 정책
    # =========================
    FREE_USAGE_LIMIT = _env_int("FREE_USAGE_LIMIT", 10)
