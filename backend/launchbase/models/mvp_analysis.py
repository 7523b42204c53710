import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, Float, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from ..database import Base
from .user import GUID


class MVPAnalysis(Base):
    __tablename__ = "mvp_analyses"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    user_id = Column(GUID(), ForeignKey("users.id"), nullable=False, index=True)
    mvp_connection_id = Column(GUID(), ForeignKey("mvp_connections.id"), nullable=False, index=True)
    analysis_status = Column(String(32), nullable=False, default="analyzing")  # analyzing | completed | failed

    # Scalar fields pulled out of the AI response line by line
    business_model = Column(Text, nullable=True)
    target_audience = Column(Text, nullable=True)
    market_category = Column(Text, nullable=True)
    industry = Column(Text, nullable=True)
    value_proposition = Column(Text, nullable=True)
    pricing_model = Column(Text, nullable=True)
    market_size = Column(Text, nullable=True)
    go_to_market_strategy = Column(Text, nullable=True)

    # JSON-encoded string lists (compatible with SQLite & PG)
    key_features = Column(Text, nullable=True)
    competitors = Column(Text, nullable=True)
    revenue_streams = Column(Text, nullable=True)
    customer_segments = Column(Text, nullable=True)
    pain_points = Column(Text, nullable=True)
    unique_selling_points = Column(Text, nullable=True)

    analysis_confidence = Column(Float, nullable=True)
    raw_analysis_data = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    connection = relationship("MVPConnection", back_populates="analyses")
