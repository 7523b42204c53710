import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from ..database import Base
from .user import GUID


class GeneratedContent(Base):
    __tablename__ = "generated_content"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    user_id = Column(GUID(), ForeignKey("users.id"), nullable=False, index=True)
    content_type = Column(String(32), nullable=False)  # landing | email | social | sales
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    prompt = Column(Text, nullable=False, default="")
    status = Column(String(32), nullable=False, default="draft")  # draft | used
    created_at = Column(DateTime, default=datetime.utcnow)
