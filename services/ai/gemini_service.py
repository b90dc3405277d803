# gemini_service.py
import time
from typing import Any, Dict

from flask import current_app
from google import genai
from google.genai import types

from core.errors import UpstreamFailure

NO_CONTENT_MESSAGE = "AI did not return any content. Try again."


def _extract_usage(resp) -> Dict[str, Any]:
    usage = getattr(resp, "usage_metadata", None)
    if not usage:
        return {"prompt_tokens": None, "completion_tokens": None, "total_tokens": None}
    return {
        "prompt_tokens": getattr(usage, "prompt_token_count", None),
        "completion_tokens": getattr(usage, "candidates_token_count", None),
        "total_tokens": getattr(usage, "total_token_count", None),
    }


def _client():
    api_key = current_app.config.get("GEMINI_API_KEY")
    if not api_key:
        raise UpstreamFailure("Internal server error: GEMINI_API_KEY is not configured")

    # UPSTREAM_TIMEOUT 는 초 단위, HttpOptions.timeout 은 ms 단위
    timeout = current_app.config.get("UPSTREAM_TIMEOUT")
    if timeout:
        return genai.Client(api_key=api_key, http_options=types.HttpOptions(timeout=int(timeout * 1000)))
    return genai.Client(api_key=api_key)


def generate_text(prompt: str, *, temperature: float = 0.7, max_output_tokens: int = 1000) -> str:
    """Gemini 로 텍스트 생성. 빈 응답이면 UpstreamFailure (재시도 없음)"""
    model = current_app.config.get("GEMINI_MODEL") or "gemini-2.0-flash"
    client = _client()

    start = time.perf_counter()
    try:
        resp = client.models.generate_content(
            model=model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=max_output_tokens,
            ),
        )
    except Exception as e:
        current_app.logger.warning("[Gemini] model=%s call failed: %r", model, e)
        raise UpstreamFailure(f"Internal server error: {e}") from e

    text = (getattr(resp, "text", "") or "").strip()
    usage = _extract_usage(resp)
    current_app.logger.info(
        "[Gemini] model=%s ms=%d chars=%d tokens=%s",
        model, int((time.perf_counter() - start) * 1000), len(text), usage.get("total_tokens"),
    )

    if not text:
        raise UpstreamFailure(NO_CONTENT_MESSAGE)
    return text
