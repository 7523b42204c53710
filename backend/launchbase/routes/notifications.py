"""Notification routes — the bell menu."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.notification import Notification
from ..models.user import User
from ..schemas.notification_schema import (
    MarkAllReadResponse,
    NotificationListResponse,
    NotificationRecord,
)
from ..services.auth_dependency import get_current_user
from ..services.notification_service import (
    count_unread,
    delete_notification,
    list_notifications,
    mark_all_read,
    mark_read,
    time_ago,
)

router = APIRouter(
    prefix="/notifications",
    tags=["Notifications"],
)


def _to_record(notification: Notification, now: datetime) -> NotificationRecord:
    created_at = notification.created_at or now
    return NotificationRecord(
        id=str(notification.id),
        title=notification.title,
        message=notification.message,
        type=notification.type,
        read=notification.read_status == 1,
        action_url=notification.action_url,
        created_at=created_at,
        time_ago=time_ago(created_at, now),
    )


@router.get("/", response_model=NotificationListResponse, summary="Latest notifications")
def read_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NotificationListResponse:
    now = datetime.utcnow()
    return NotificationListResponse(
        records=[_to_record(n, now) for n in list_notifications(db, current_user.id)],
        unread_count=count_unread(db, current_user.id),
    )


@router.patch("/{notification_id}/read", response_model=NotificationRecord, summary="Mark as read")
def read_one(
    notification_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NotificationRecord:
    notification = mark_read(db, current_user.id, notification_id)
    if notification is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Notification {notification_id} not found",
        )
    return _to_record(notification, datetime.utcnow())


@router.post("/read-all", response_model=MarkAllReadResponse, summary="Mark all as read")
def read_all(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MarkAllReadResponse:
    return MarkAllReadResponse(updated=mark_all_read(db, current_user.id))


@router.delete(
    "/{notification_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a notification",
)
def remove(
    notification_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> None:
    if not delete_notification(db, current_user.id, notification_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Notification {notification_id} not found",
        )
