from domain.models import Creation, db


def save_creation(user_id, prompt, content, type_, *, publish=False) -> Creation:
    # 단순 INSERT (사용량 갱신과 같은 트랜잭션으로 묶지 않음)
    row = Creation(
        user_id=user_id,
        prompt=prompt,
        content=content,
        type=type_,
        publish=bool(publish),
    )
    db.session.add(row)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return row
