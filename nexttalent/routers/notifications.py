import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from nexttalent.core.session import SessionContext
from nexttalent.database import get_db
from nexttalent.dependencies import get_current_session
from nexttalent.models.notification import Notification
from nexttalent.repos.notification_repo import delete, list_for, mark_read
from nexttalent.schemas.notification import NotificationResponse, UnreadCount
from nexttalent.services.notification_service import count_unread

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_response(n: Notification) -> NotificationResponse:
    return NotificationResponse(
        id=n.id,
        recipient_id=n.recipient_id,
        role=n.role,
        title=n.title,
        message=n.message,
        is_read=bool(n.is_read),
        created_at=n.created_at.isoformat() if n.created_at else None,
    )


@router.get("", response_model=list[NotificationResponse])
def list_notifications(
    limit: int = 100,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_session),
):
    """Caller's inbox, newest first. Admins share a single inbox."""
    limit = min(max(1, limit), 500)
    items = list_for(db, ctx.actor_id, ctx.role.value, limit=limit)
    return [_notification_to_response(n) for n in items]


@router.get("/unread-count", response_model=UnreadCount)
def get_unread_count(
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_session),
):
    """Badge count, polled by clients."""
    return UnreadCount(unread=count_unread(db, ctx.actor_id, ctx.role))


@router.patch("/{notification_id}/read", response_model=NotificationResponse)
def mark_notification_read(
    notification_id: str,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_session),
):
    n = mark_read(db, notification_id, ctx.actor_id, ctx.role.value)
    if not n:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")
    return _notification_to_response(n)


@router.delete("/{notification_id}")
def delete_notification(
    notification_id: str,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_session),
):
    if not delete(db, notification_id, ctx.actor_id, ctx.role.value):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")
    return {"deleted": True}
