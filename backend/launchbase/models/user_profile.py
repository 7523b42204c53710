import uuid
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text

from ..database import Base
from .user import GUID


class UserProfile(Base):
    """Per-user configuration: onboarding answers, connected integrations, checklist state."""

    __tablename__ = "user_profiles"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    user_id = Column(GUID(), ForeignKey("users.id"), nullable=False, unique=True)
    onboarding_completed = Column(Boolean, nullable=False, default=False)

    product_name = Column(String, nullable=True)
    product_description = Column(Text, nullable=True)
    target_audience = Column(Text, nullable=True)
    problem_solving = Column(Text, nullable=True)
    goals = Column(Text, nullable=True)
    timeline = Column(String, nullable=True)

    connected_integrations_json = Column(Text, nullable=False, default="[]")
    checked_items_json = Column(Text, nullable=False, default="[]")

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
