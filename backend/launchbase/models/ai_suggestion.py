import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from ..database import Base
from .user import GUID


class AISuggestion(Base):
    """AI output saved for the user: strategy steps, quick actions, agent requests."""

    __tablename__ = "ai_suggestions"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    user_id = Column(GUID(), ForeignKey("users.id"), nullable=False, index=True)
    type = Column(String(32), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    content = Column(Text, nullable=False)
    status = Column(String(32), nullable=False, default="pending")  # pending | completed
    priority = Column(String(16), nullable=False, default="medium")  # low | medium | high
    created_at = Column(DateTime, default=datetime.utcnow)
