# -------------------- 라우트 --------------------
from flask import Blueprint, current_app, g

from auth.quota import enforce_admission, require_auth
from core.errors import ValidationError
from core.extensions import limiter
from core.http_utils import _json_content
from domain.schema import article_schema, blog_title_schema, image_schema, remove_object_schema
from security.validation import require_safe_input
from services import creations, media_service, pdf_text
from services.ai import clipdrop_service, gemini_service

api_ai_bp = Blueprint("api_ai", __name__, url_prefix="/api/ai")

PROMPT_REQUIRED = "Prompt is required"

RESUME_REVIEW_PROMPT = "Review the uploaded resume"
RESUME_REVIEW_INSTRUCTION = (
    "Review the following resume and provide constructive feedback on its strengths, "
    "weaknesses, and areas for improvement. Resume Content:\n\n"
)


@api_ai_bp.route("/generate-article", methods=["POST"])
@limiter.limit("30/minute")
@require_auth
@require_safe_input(article_schema, required={"prompt": PROMPT_REQUIRED})
@enforce_admission("text-generation")
def generate_article():
    caller = g.caller
    prompt = g.safe_input["prompt"]
    current_app.logger.info("[AI][article] uid=%s tier=%s", caller.user_id, caller.tier)

    content = gemini_service.generate_text(prompt, temperature=0.7, max_output_tokens=1000)
    creations.save_creation(caller.user_id, prompt, content, "article")
    return _json_content(content)


@api_ai_bp.route("/generate-blog-title", methods=["POST"])
@limiter.limit("30/minute")
@require_auth
@require_safe_input(blog_title_schema, required={"prompt": PROMPT_REQUIRED})
@enforce_admission("title-generation")
def generate_blog_title():
    caller = g.caller
    prompt = g.safe_input["prompt"]
    current_app.logger.info("[AI][blog-title] uid=%s tier=%s", caller.user_id, caller.tier)

    content = gemini_service.generate_text(prompt, temperature=0.7, max_output_tokens=100)
    creations.save_creation(caller.user_id, prompt, content, "blog-title")
    return _json_content(content)


@api_ai_bp.route("/generate-image", methods=["POST"])
@limiter.limit("10/minute")
@require_auth
@require_safe_input(image_schema, required={"prompt": PROMPT_REQUIRED})
@enforce_admission("image-generation")
def generate_image():
    caller = g.caller
    prompt = g.safe_input["prompt"]
    publish = bool(g.safe_input.get("publish") or False)
    current_app.logger.info("[AI][image] uid=%s publish=%s", caller.user_id, publish)

    png = clipdrop_service.generate_image(prompt)
    secure_url = media_service.upload_png_bytes(png).secure_url

    creations.save_creation(caller.user_id, prompt, secure_url, "image", publish=publish)
    return _json_content(secure_url)


@api_ai_bp.route("/remove-image-background", methods=["POST"])
@limiter.limit("10/minute")
@require_auth
@require_safe_input(form=True, files={"image": "Image is required"})
@enforce_admission("background-removal")
def remove_image_background():
    caller = g.caller
    image = g.safe_files["image"]
    current_app.logger.info("[AI][remove-bg] uid=%s file=%s", caller.user_id, image.filename)

    secure_url = media_service.remove_background(image.stream)
    creations.save_creation(caller.user_id, "Remove background from image", secure_url, "image")
    return _json_content(secure_url)


@api_ai_bp.route("/remove-image-object", methods=["POST"])
@limiter.limit("10/minute")
@require_auth
@require_safe_input(
    remove_object_schema,
    form=True,
    required={"object": "Object is required"},
    files={"image": "Image is required"},
)
@enforce_admission("object-removal")
def remove_image_object():
    caller = g.caller
    image = g.safe_files["image"]
    object_name = g.safe_input["object"]
    current_app.logger.info("[AI][remove-object] uid=%s object=%s", caller.user_id, object_name)

    image_url = media_service.remove_object(image.stream, object_name)
    creations.save_creation(caller.user_id, f"Remove {object_name} from image", image_url, "image")
    return _json_content(image_url)


@api_ai_bp.route("/resume-review", methods=["POST"])
@limiter.limit("10/minute")
@require_auth
@require_safe_input(form=True, files={"resume": "Resume is required"})
@enforce_admission("resume-review")
def resume_review():
    caller = g.caller
    resume = g.safe_files["resume"]

    max_bytes = current_app.config.get("MAX_RESUME_BYTES", 5 * 1024 * 1024)
    data = resume.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise ValidationError(
            f"Resume file size exceeds allowed size ({max_bytes // (1024 * 1024)}MB)."
        )

    text = pdf_text.extract_text(data)
    if not text:
        raise ValidationError("Could not extract any text from the resume.")
    current_app.logger.info("[AI][resume] uid=%s chars=%d", caller.user_id, len(text))

    content = gemini_service.generate_text(
        RESUME_REVIEW_INSTRUCTION + text, temperature=0.7, max_output_tokens=1000
    )
    creations.save_creation(caller.user_id, RESUME_REVIEW_PROMPT, content, "resume-review")
    return _json_content(content)
