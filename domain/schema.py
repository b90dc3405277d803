# -------------------- 입력 양식 스키마 --------------------
MAX_PROMPT_LENGTH = 4000

article_schema = {
    "type": "object",
    "properties": {
        "prompt": {"type": "string", "minLength": 1, "maxLength": MAX_PROMPT_LENGTH},
        "length": {"type": ["integer", "string", "null"]},
    },
    "required": ["prompt"],
    "additionalProperties": True,
}

blog_title_schema = {
    "type": "object",
    "properties": {
        "prompt": {"type": "string", "minLength": 1, "maxLength": MAX_PROMPT_LENGTH},
    },
    "required": ["prompt"],
    "additionalProperties": True,
}

image_schema = {
    "type": "object",
    "properties": {
        "prompt": {"type": "string", "minLength": 1, "maxLength": MAX_PROMPT_LENGTH},
        "publish": {"type": ["boolean", "null"]},
    },
    "required": ["prompt"],
    "additionalProperties": True,
}

# multipart 폼 값은 모두 문자열
remove_object_schema = {
    "type": "object",
    "properties": {
        # 변환 URL 에 그대로 들어가므로 , / : 등 구분자 금지
        "object": {"type": "string", "minLength": 1, "maxLength": 100, "pattern": "^[A-Za-z0-9 _-]+$"},
    },
    "required": ["object"],
    "additionalProperties": True,
}
