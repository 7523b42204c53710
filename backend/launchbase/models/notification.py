import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from ..database import Base
from .user import GUID


class Notification(Base):
    __tablename__ = "user_notifications"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    user_id = Column(GUID(), ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String(16), nullable=False, default="info")  # info | success | warning | error
    read_status = Column(Integer, nullable=False, default=0)  # 0 unread, 1 read
    action_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
