import time

from flask import current_app, g, request

from auth.entitlements import load_current_user


def load_user():
    load_current_user()


def mark_request_start():
    g.request_started = time.perf_counter()


# -------------------- 요청 로깅 --------------------

def log_api_request(resp):
    if not request.path.startswith("/api/"):
        return resp
    started = getattr(g, "request_started", None)
    elapsed_ms = int((time.perf_counter() - started) * 1000) if started else -1
    user = getattr(g, "current_user", None)
    current_app.logger.info(
        "[API] %s %s status=%s uid=%s ms=%d",
        request.method, request.path, resp.status_code,
        getattr(user, "user_id", None), elapsed_ms,
    )
    return resp


def register_hooks(app):
    app.before_request(mark_request_start)
    app.before_request(load_user)
    app.after_request(log_api_request)
