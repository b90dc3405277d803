import base64
from dataclasses import dataclass
from typing import Optional

import cloudinary
import cloudinary.uploader
import cloudinary.utils
from flask import current_app

from core.errors import UpstreamFailure

BACKGROUND_REMOVAL = {
    "effect": "background_removal",
    "background_removal": "remove_the_background",
}


@dataclass
class UploadResult:
    secure_url: str
    public_id: Optional[str] = None


def _configure():
    cfg = current_app.config
    cloudinary.config(
        cloud_name=cfg.get("CLOUDINARY_CLOUD_NAME"),
        api_key=cfg.get("CLOUDINARY_API_KEY"),
        api_secret=cfg.get("CLOUDINARY_API_SECRET"),
        secure=True,  # 항상 https URL
    )


def upload_image(source, transformation=None) -> UploadResult:
    """
    Cloudinary 업로드
      - source: 파일 경로 / data URI / 파일 객체
      - transformation: 업로드 시 적용할 변환 목록
    """
    _configure()
    options = {"resource_type": "image"}
    if transformation:
        options["transformation"] = transformation
    timeout = current_app.config.get("UPSTREAM_TIMEOUT")
    if timeout:
        options["timeout"] = timeout

    try:
        result = cloudinary.uploader.upload(source, **options)
    except Exception as e:
        current_app.logger.warning("[Cloudinary] upload failed: %r", e)
        raise UpstreamFailure(f"Internal server error: {e}") from e

    secure_url = (result or {}).get("secure_url")
    if not secure_url:
        raise UpstreamFailure("Media service did not return an image URL. Try again.")
    return UploadResult(secure_url=secure_url, public_id=result.get("public_id"))


def upload_png_bytes(data: bytes) -> UploadResult:
    data_uri = "data:image/png;base64," + base64.b64encode(data).decode("ascii")
    return upload_image(data_uri)


def remove_background(source) -> str:
    return upload_image(source, transformation=[BACKGROUND_REMOVAL]).secure_url


def remove_object(source, object_name: str) -> str:
    """원본 업로드 후 gen_remove 변환이 적용된 파생 이미지 URL 생성"""
    uploaded = upload_image(source)
    if not uploaded.public_id:
        raise UpstreamFailure("Media service did not return an asset id. Try again.")

    url, _ = cloudinary.utils.cloudinary_url(
        uploaded.public_id,
        transformation=[
            {"effect": f"gen_remove:{object_name}"},
            {"width": 800, "crop": "scale"},
        ],
        resource_type="image",
        secure=True,
    )
    return url
