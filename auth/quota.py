from functools import wraps

from flask import current_app, g, make_response

from auth.entitlements import get_caller_context
from auth.guards import admit, record_usage
from core.errors import AuthRequired, EntitlementDenied
from domain.policies import DENY_MESSAGES, FREE_USAGE_LIMIT, OPERATION_CLASSES


def require_auth(view):
    """호출자 식별 게이트: 없으면 401"""
    @wraps(view)
    def wrapper(*args, **kwargs):
        ctx = get_caller_context()
        if not ctx:
            raise AuthRequired()
        g.caller = ctx
        return view(*args, **kwargs)
    return wrapper


def enforce_admission(operation_class: str):
    """
    권한/한도 게이트 + 사용량 기록(성공시에만 +1)
      1) admit() 로 허용 여부 판단 → 거부면 403
      2) view 실행 (외부 호출 + creations 저장)
      3) 2xx 응답이면 record_usage()
    """
    assert operation_class in OPERATION_CLASSES, f"Unknown operation class '{operation_class}'"

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            ctx = getattr(g, "caller", None) or get_caller_context()
            if not ctx:
                raise AuthRequired()

            limit = current_app.config.get("FREE_USAGE_LIMIT", FREE_USAGE_LIMIT)
            decision = admit(ctx.tier, ctx.free_usage, operation_class, limit=limit)
            if not decision.admitted:
                current_app.logger.info(
                    "[ADMIT] denied uid=%s tier=%s op=%s reason=%s usage=%s",
                    ctx.user_id, ctx.tier, operation_class, decision.reason, ctx.free_usage,
                )
                raise EntitlementDenied(decision.reason, DENY_MESSAGES[decision.reason])

            g.caller = ctx
            resp = make_response(view(*args, **kwargs))

            if resp.status_code < 400:
                record_usage(ctx.tier, ctx.user_id)
            return resp

        return wrapper

    return decorator
