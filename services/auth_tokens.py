# 호출자 인증 토큰 (Authorization: Bearer ...) 검증용 serializer
# 토큰 발급은 외부 인증 서비스가 같은 SECRET_KEY / salt 로 수행
from flask import current_app
from itsdangerous import URLSafeTimedSerializer


def caller_serializer():
    cfg = current_app.config
    return URLSafeTimedSerializer(cfg["SECRET_KEY"], salt=cfg.get("CALLER_TOKEN_SALT"))
