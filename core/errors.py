from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException


class ApiError(Exception):
    """핸들러 경계에서 {success: false, message} 로 변환되는 오류"""

    http_status = 500

    def __init__(self, message: str, http_status: int = None):
        super().__init__(message)
        self.message = message
        if http_status is not None:
            self.http_status = http_status


class ValidationError(ApiError):
    http_status = 400


class AuthRequired(ApiError):
    http_status = 401

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class EntitlementDenied(ApiError):
    http_status = 403

    def __init__(self, reason: str, message: str):
        super().__init__(message)
        self.reason = reason


class UpstreamFailure(ApiError):
    http_status = 500


def _error_body(message, status):
    return jsonify({"success": False, "message": message}), status


def register_error_handlers(app):

    @app.errorhandler(ApiError)
    def _handle_api_error(e: ApiError):
        if e.http_status >= 500:
            current_app.logger.warning("[API] %s: %s", type(e).__name__, e.message)
        return _error_body(e.message, e.http_status)

    @app.errorhandler(HTTPException)
    def _handle_http_error(e: HTTPException):
        # 413 (업로드 초과), 404, 405 등도 같은 응답 형태로
        return _error_body(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def _handle_unexpected(e: Exception):
        current_app.logger.exception("[API] unhandled error: %r", e)
        return _error_body(f"Internal server error: {e}", 500)
