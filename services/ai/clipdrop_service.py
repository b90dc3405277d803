import requests
from flask import current_app

from core.errors import UpstreamFailure


def generate_image(prompt: str) -> bytes:
    """Clipdrop text-to-image 호출 → PNG 바이트"""
    cfg = current_app.config
    api_key = cfg.get("CLIPDROP_API_KEY")
    if not api_key:
        raise UpstreamFailure("Internal server error: CLIPDROP_API_KEY is not configured")

    try:
        # multipart/form-data 로 prompt 필드만 전송
        r = requests.post(
            cfg.get("CLIPDROP_API_URL"),
            files={"prompt": (None, prompt)},
            headers={"x-api-key": api_key},
            timeout=cfg.get("UPSTREAM_TIMEOUT"),
        )
    except requests.RequestException as e:
        current_app.logger.warning("[Clipdrop] request failed: %r", e)
        raise UpstreamFailure(f"Internal server error: {e}") from e

    if not r.ok:
        current_app.logger.warning("[Clipdrop] status=%s body=%s", r.status_code, r.text[:300])
        raise UpstreamFailure(f"Internal server error: image service responded {r.status_code}")

    if not r.content:
        raise UpstreamFailure("Image service did not return any content. Try again.")
    return r.content
