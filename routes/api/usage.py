from flask import Blueprint, current_app, g

from auth.quota import require_auth
from core.http_utils import _json_ok, nocache
from domain.policies import FREE_USAGE_LIMIT

api_usage_bp = Blueprint("api_usage", __name__)


@api_usage_bp.route("/api/usage", methods=["GET"])
@nocache
@require_auth
def api_usage_status():
    """
    호출자 사용량 조회
    - free: 누적 사용량 / 한도
    - premium: 한도 없음 (limit=None)
    """
    caller = g.caller
    limit = current_app.config.get("FREE_USAGE_LIMIT", FREE_USAGE_LIMIT)
    return _json_ok({
        "tier": caller.tier,
        "free_usage": caller.free_usage,
        "limit": None if caller.tier == "premium" else int(limit),
    })
