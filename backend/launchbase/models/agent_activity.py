import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from ..database import Base
from .user import GUID


class AgentActivity(Base):
    __tablename__ = "agent_activities"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    user_id = Column(GUID(), ForeignKey("users.id"), nullable=False, index=True)
    agent_name = Column(String(64), nullable=False)
    action = Column(String, nullable=False)
    details = Column(Text, nullable=True)
    status = Column(String(32), nullable=False, default="completed")
    created_at = Column(DateTime, default=datetime.utcnow)
