# guards.py
from dataclasses import dataclass
from typing import Optional

from flask import current_app

from auth.entitlements import increment_free_usage
from domain.models import db
from domain.policies import (
    DENY_LIMIT_REACHED,
    DENY_PREMIUM_REQUIRED,
    FREE_USAGE_LIMIT,
    METERED,
    OPERATION_CLASSES,
    PREMIUM_ONLY,
)


@dataclass(frozen=True)
class Decision:
    admitted: bool
    reason: Optional[str] = None


ADMITTED = Decision(admitted=True)


def admit(tier: str, usage_count: int, operation_class: str, limit: int = FREE_USAGE_LIMIT) -> Decision:
    """
    요청 허용 여부 판단 (순수 함수, 부작용 없음)
      - premium-only 작업 + premium 아님 → premium-required
      - metered 작업 + premium 아님 + 한도 도달 → limit-reached
    """
    if operation_class not in OPERATION_CLASSES:
        raise ValueError(f"Unknown operation class '{operation_class}'")
    if usage_count is None or usage_count < 0:
        raise ValueError("usage_count must be a non-negative integer")

    if tier == "premium":
        return ADMITTED

    kind = OPERATION_CLASSES[operation_class]
    if kind == PREMIUM_ONLY:
        return Decision(admitted=False, reason=DENY_PREMIUM_REQUIRED)
    if kind == METERED and usage_count >= limit:
        return Decision(admitted=False, reason=DENY_LIMIT_REACHED)
    return ADMITTED


def record_usage(tier: str, user_id: str) -> None:
    """
    작업 성공 후에만 호출. free 플랜이면 사용량 +1, premium 이면 아무것도 안 함
    증가 실패는 재시도하지 않고 로그만 남김 (요청 자체는 성공 처리)
    """
    if tier == "premium":
        return

    try:
        if not increment_free_usage(user_id):
            current_app.logger.warning("[USAGE] no subscriber row updated uid=%s", user_id)
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("[USAGE] increment failed uid=%s err=%r", user_id, e)
