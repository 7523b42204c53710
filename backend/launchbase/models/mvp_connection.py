import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from ..database import Base
from .user import GUID


class MVPConnection(Base):
    __tablename__ = "mvp_connections"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    user_id = Column(GUID(), ForeignKey("users.id"), nullable=False, index=True)
    connection_type = Column(String(32), nullable=False)  # integration | manual | url
    platform = Column(String(64), nullable=True)
    connection_url = Column(Text, nullable=True)
    project_name = Column(String, nullable=True)
    project_description = Column(Text, nullable=True)
    status = Column(String(32), nullable=False, default="connected")  # connected | error
    created_at = Column(DateTime, default=datetime.utcnow)

    owner = relationship("User", back_populates="connections")
    analyses = relationship(
        "MVPAnalysis",
        back_populates="connection",
        cascade="all, delete-orphan",
    )
