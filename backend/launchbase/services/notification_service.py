"""User notifications — created by backend events, read by the bell menu."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from ..models.notification import Notification

_LIST_LIMIT = 20


def create_notification(
    db: Session,
    *,
    user_id,
    title: str,
    message: str,
    type: str = "info",
    action_url: Optional[str] = None,
) -> Notification:
    notification = Notification(
        user_id=user_id,
        title=title,
        message=message,
        type=type,
        action_url=action_url,
    )
    db.add(notification)
    db.commit()
    db.refresh(notification)
    return notification


def list_notifications(db: Session, user_id) -> List[Notification]:
    """Latest notifications for the user, newest first."""
    return (
        db.query(Notification)
        .filter(Notification.user_id == str(user_id))
        .order_by(Notification.created_at.desc())
        .limit(_LIST_LIMIT)
        .all()
    )


def count_unread(db: Session, user_id) -> int:
    return (
        db.query(Notification)
        .filter(Notification.user_id == str(user_id), Notification.read_status == 0)
        .count()
    )


def _get_owned(db: Session, user_id, notification_id) -> Optional[Notification]:
    return (
        db.query(Notification)
        .filter(
            Notification.id == str(notification_id),
            Notification.user_id == str(user_id),
        )
        .first()
    )


def mark_read(db: Session, user_id, notification_id) -> Optional[Notification]:
    """Mark one notification read. Returns None when the user does not own it."""
    notification = _get_owned(db, user_id, notification_id)
    if notification is None:
        return None
    notification.read_status = 1
    db.commit()
    db.refresh(notification)
    return notification


def mark_all_read(db: Session, user_id) -> int:
    """Mark every unread notification read and return how many changed."""
    updated = (
        db.query(Notification)
        .filter(Notification.user_id == str(user_id), Notification.read_status == 0)
        .update({Notification.read_status: 1}, synchronize_session=False)
    )
    db.commit()
    return updated


def delete_notification(db: Session, user_id, notification_id) -> bool:
    notification = _get_owned(db, user_id, notification_id)
    if notification is None:
        return False
    db.delete(notification)
    db.commit()
    return True


def time_ago(created_at: datetime, now: Optional[datetime] = None) -> str:
    """Relative label shown next to each notification."""
    now = now or datetime.utcnow()
    seconds = (now - created_at).total_seconds()
    minutes = int(seconds // 60)
    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    return f"{hours // 24}d ago"
