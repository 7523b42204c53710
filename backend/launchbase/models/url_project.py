import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, UniqueConstraint

from ..database import Base
from .user import GUID


class UrlProject(Base):
    """A deployed app connected by URL; scraped once at connect time."""

    __tablename__ = "url_projects"
    __table_args__ = (
        UniqueConstraint("user_id", "url", name="uq_url_projects_user_url"),
    )

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    user_id = Column(GUID(), ForeignKey("users.id"), nullable=False, index=True)
    tracking_id = Column(String, nullable=False)
    name = Column(String, nullable=False)
    url = Column(String(2048), nullable=False)
    description = Column(Text, nullable=True)
    tech_stack_json = Column(Text, nullable=True)
    endpoints_json = Column(Text, nullable=True)
    metadata_json = Column(Text, nullable=True)
    gtm_suggestions_json = Column(Text, nullable=True)
    tracking_code = Column(Text, nullable=True)
    status = Column(String(32), nullable=False, default="live")  # live | error | checking
    connected_at = Column(DateTime, default=datetime.utcnow)
