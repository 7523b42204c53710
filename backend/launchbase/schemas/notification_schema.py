"""Pydantic schemas for user notifications."""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class NotificationRecord(BaseModel):
    id: str
    title: str
    message: str
    type: Literal["info", "success", "warning", "error"]
    read: bool
    action_url: Optional[str] = None
    created_at: datetime
    time_ago: str


class NotificationListResponse(BaseModel):
    records: List[NotificationRecord] = Field(default_factory=list)
    unread_count: int = 0


class MarkAllReadResponse(BaseModel):
    updated: int
