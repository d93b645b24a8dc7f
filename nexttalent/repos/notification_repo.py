from sqlalchemy import func
from sqlalchemy.orm import Session

from nexttalent.core.security import generate_id
from nexttalent.models.enums import Role
from nexttalent.models.notification import Notification


def create_many(db: Session, rows: list[tuple[str, str]], title: str, message: str) -> int:
    """Insert one unread notification per (recipient_id, role) pair in a single commit."""
    for recipient_id, role in rows:
        db.add(
            Notification(
                id=generate_id(),
                recipient_id=recipient_id,
                role=role,
                title=title,
                message=message,
                is_read=False,
            )
        )
    db.commit()
    return len(rows)


def _scoped(db: Session, recipient_id: str, role: str):
    q = db.query(Notification)
    if role == Role.ADMIN.value:
        # Shared admin inbox
        return q.filter(Notification.role == Role.ADMIN.value)
    return q.filter(Notification.recipient_id == recipient_id, Notification.role == role)


def count_unread(db: Session, recipient_id: str, role: str) -> int:
    q = _scoped(db, recipient_id, role).filter(Notification.is_read == False)  # noqa: E712
    return q.with_entities(func.count(Notification.id)).scalar() or 0


def list_for(db: Session, recipient_id: str, role: str, limit: int = 100) -> list[Notification]:
    return (
        _scoped(db, recipient_id, role)
        .order_by(Notification.created_at.desc())
        .limit(limit)
        .all()
    )


def get_owned(db: Session, notification_id: str, recipient_id: str, role: str) -> Notification | None:
    return _scoped(db, recipient_id, role).filter(Notification.id == notification_id).first()


def mark_read(db: Session, notification_id: str, recipient_id: str, role: str) -> Notification | None:
    notification = get_owned(db, notification_id, recipient_id, role)
    if not notification:
        return None
    notification.is_read = True
    db.commit()
    db.refresh(notification)
    return notification


def delete(db: Session, notification_id: str, recipient_id: str, role: str) -> bool:
    notification = get_owned(db, notification_id, recipient_id, role)
    if not notification:
        return False
    db.delete(notification)
    db.commit()
    return True
