"""
validation.py — 요청 입력 검증 (JSON / multipart 폼 공용)
"""

from functools import wraps

from flask import g, request
from jsonschema import ValidationError as SchemaError
from jsonschema import validate

from core.errors import ValidationError


# -------------------- 유틸 함수 --------------------
def _form_to_dict(formdata):
    """MultiDict → 일반 dict 변환 (getlist 포함)"""
    result = {}
    for k in formdata.keys():
        vals = formdata.getlist(k)
        result[k] = vals if len(vals) > 1 else (vals[0] if vals else None)
    return result


def _strip_strings(value):
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, list):
        return [_strip_strings(v) for v in value]
    if isinstance(value, dict):
        return {k: _strip_strings(v) for k, v in value.items()}
    return value


def _validate_schema(data, schema):
    """JSON Schema 검증 (타입, 길이 등)"""
    if not schema:
        return
    try:
        validate(instance=data, schema=schema)
    except SchemaError as e:
        raise ValidationError(f"Invalid input: {e.message}")


# -------------------- 메인 데코레이터 --------------------
def require_safe_input(json_schema=None, *, form=False, required=None, files=None):
    """
    입력 검증 데코레이터
      - json_schema : JSON 스키마(dict)
      - form=True   : request.form 검사 (multipart 업로드)
      - required    : {필드명: 비었을 때 메시지} (스키마보다 먼저 검사)
      - files       : {파일 필드명: 없을 때 메시지}
    검증된 값은 g.safe_input, 파일은 g.safe_files 에 저장
    """
    required = dict(required or {})
    files = dict(files or {})

    def deco(f):
        @wraps(f)
        def wrapped(*args, **kwargs):
            if form:
                payload = _form_to_dict(request.form)
            else:
                payload = request.get_json(silent=True)
                if not isinstance(payload, dict):
                    payload = {}

            safe = _strip_strings(payload)

            for name, message in required.items():
                if not safe.get(name):
                    raise ValidationError(message)

            uploads = {}
            for name, message in files.items():
                storage = request.files.get(name)
                if storage is None or not storage.filename:
                    raise ValidationError(message)
                uploads[name] = storage

            _validate_schema(safe, json_schema)

            g.safe_input = safe
            g.safe_files = uploads
            return f(*args, **kwargs)
        return wrapped
    return deco
