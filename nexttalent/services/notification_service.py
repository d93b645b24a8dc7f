"""
Notification fan-out and unread tracking.

Every send is best-effort: store errors are logged and dropped, never
retried and never raised, so a failed notification cannot undo or block the
workflow step that triggered it.
"""
import logging

from sqlalchemy.orm import Session

from nexttalent.config import settings
from nexttalent.models.enums import Role
from nexttalent.repos import notification_repo, profile_repo

logger = logging.getLogger(__name__)


def _role_value(role: Role | str) -> str:
    return role.value if isinstance(role, Role) else Role(role).value


def _insert(db: Session, rows: list[tuple[str, str]], title: str, message: str, target: str) -> int:
    try:
        created = notification_repo.create_many(db, rows, title, message)
    except Exception as e:
        db.rollback()
        logger.exception("Notification insert failed for %s title=%r: %s", target, title, e)
        return 0
    logger.debug("Sent %d notification(s) to %s title=%r", created, target, title)
    return created


def notify_user(db: Session, recipient_id: str, role: Role | str, title: str, message: str) -> bool:
    """Insert one notification for a single recipient. Returns True on success."""
    role = _role_value(role)
    return _insert(db, [(recipient_id, role)], title, message, f"recipient={recipient_id}") == 1


def notify_admin(db: Session, title: str, message: str) -> bool:
    """Drop a notification into the shared admin inbox."""
    return notify_user(db, settings.admin_uid, Role.ADMIN, title, message)


def notify_role(db: Session, role: Role | str, title: str, message: str) -> int:
    """
    Fan out one notification per current member of ``role``.
    Admins share one inbox, so an admin broadcast is a single admin notification.
    If membership cannot be resolved the broadcast is abandoned.
    Returns the number of notifications created.
    """
    role = _role_value(role)
    if role == Role.ADMIN.value:
        return 1 if notify_admin(db, title, message) else 0
    try:
        member_ids = profile_repo.get_ids_by_role(db, role)
    except Exception as e:
        db.rollback()
        logger.exception("Could not resolve members of role=%s; broadcast %r dropped: %s", role, title, e)
        return 0
    if not member_ids:
        logger.warning("No profiles found for role %s", role)
        return 0
    return _insert(db, [(member_id, role) for member_id in member_ids], title, message, f"role={role}")


def notify_all_users(db: Session, title: str, message: str) -> int:
    """Fan out to every profile, each notification carrying that profile's own role."""
    try:
        members = profile_repo.get_all_ids_and_roles(db)
    except Exception as e:
        db.rollback()
        logger.exception("Could not resolve profiles; broadcast %r dropped: %s", title, e)
        return 0
    if not members:
        logger.info("No profiles found to notify.")
        return 0
    return _insert(db, members, title, message, "all profiles")


def count_unread(db: Session, recipient_id: str, role: Role | str) -> int:
    """Unread badge count. Admins share one inbox; everyone else sees only their own."""
    return notification_repo.count_unread(db, recipient_id, _role_value(role))
