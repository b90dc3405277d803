from dataclasses import dataclass
from typing import Optional

from flask import current_app, g, request, session
from itsdangerous import BadSignature, SignatureExpired
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError

from domain.models import Subscriber, db, utcnow
from services.auth_tokens import caller_serializer


# 요청마다 호출자를 한 번만 로드해 g 에 저장
# before_request 훅에서 load_current_user() 호출 후
# 필요 할 때 마다 get_current_user() / get_caller_context() 로 가져옴


@dataclass(frozen=True)
class CallerContext:
    user_id: str
    tier: str
    free_usage: int


def _caller_id_from_request() -> Optional[str]:
    auth_header = request.headers.get("Authorization") or ""
    if auth_header.lower().startswith("bearer "):
        token = auth_header[7:].strip()
        try:
            uid = caller_serializer().loads(token, max_age=current_app.config.get("CALLER_TOKEN_TTL"))
        except SignatureExpired:
            current_app.logger.info("[AUTH] caller token expired")
            return None
        except BadSignature:
            current_app.logger.info("[AUTH] caller token rejected")
            return None
        return str(uid) if uid else None

    # 세션 로그인도 허용
    sess = session.get("user") or {}
    return sess.get("user_id")


def _get_or_create_subscriber(uid: str) -> Subscriber:
    sub = Subscriber.query.filter_by(user_id=uid).first()
    if sub:
        return sub

    # 처음 보는 호출자는 free 플랜으로 등록
    sub = Subscriber(user_id=uid, plan="free", free_usage=0)
    db.session.add(sub)
    try:
        db.session.commit()
    except IntegrityError:
        # 동시 요청이 먼저 만들었으면 그걸 사용
        db.session.rollback()
        sub = Subscriber.query.filter_by(user_id=uid).one()
    return sub


def load_current_user() -> Optional[Subscriber]:
    uid = _caller_id_from_request()
    if not uid:
        g.current_user = None
        return None

    g.current_user = _get_or_create_subscriber(uid)
    return g.current_user


def get_current_user() -> Optional[Subscriber]:
    return getattr(g, "current_user", None)


def get_caller_context() -> Optional[CallerContext]:
    user = get_current_user()
    if not user:
        return None
    return CallerContext(
        user_id=user.user_id,
        tier="premium" if user.is_premium else "free",
        free_usage=int(user.free_usage or 0),
    )


def increment_free_usage(user_id: str) -> bool:
    """
    free_usage 원자적 +1 (UPDATE ... SET free_usage = free_usage + 1)
    premium 구독자 row 는 조건에서 제외되므로 건드리지 않음
    """
    result = db.session.execute(
        update(Subscriber)
        .where(Subscriber.user_id == user_id, Subscriber.plan != "premium")
        .values(free_usage=Subscriber.free_usage + 1, updated_at=utcnow())
    )
    db.session.commit()
    return result.rowcount == 1
