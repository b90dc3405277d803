# models.py
from datetime import datetime

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import Index

db = SQLAlchemy()


def utcnow():
    # NOTE: naive UTC 전제
    return datetime.utcnow()


# =========================
#   Entitlement: Subscriber
# =========================
class Subscriber(db.Model):
    __tablename__ = "subscribers"

    id = db.Column(db.Integer, primary_key=True)

    # 외부 인증 주체의 식별자
    user_id = db.Column(db.String(255), unique=True, nullable=False, index=True)

    plan = db.Column(db.String(16), nullable=False, default="free")  # free | premium
    # metered 작업 누적 횟수 (free 플랜만 증가)
    free_usage = db.Column(db.Integer, nullable=False, default=0)

    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    @property
    def is_premium(self) -> bool:
        return self.plan == "premium"


# =========================
#     Product: Creation
# =========================
class Creation(db.Model):
    __tablename__ = "creations"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(255), nullable=False, index=True)

    prompt = db.Column(db.Text, nullable=False)
    content = db.Column(db.Text, nullable=False)
    type = db.Column(db.String(32), nullable=False)  # article | blog-title | image | resume-review
    publish = db.Column(db.Boolean, nullable=False, default=False)

    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    __table_args__ = (
        Index("idx_creations_user_created", "user_id", "created_at"),
    )
