"""Pydantic schemas for MVP connections and their analyses."""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .url_project_schema import UrlProjectRecord

ConnectionKind = Literal["integration", "manual", "url"]


class ConnectionRequest(BaseModel):
    """Connect request. Which fields are required depends on ``kind``.

    Required-field checks happen in the connection service so that a
    missing field comes back as 400 with a readable message.
    """

    kind: ConnectionKind = Field(..., description="integration | manual | url")

    # integration + url
    platform: Optional[str] = Field(default=None, description="Catalog platform id (integration kind)")
    url: Optional[str] = Field(default=None, description="Deployed app or repository URL")
    description: Optional[str] = Field(default=None, description="Optional description (url kind)")

    # manual
    project_name: Optional[str] = Field(default=None, max_length=200)
    project_description: Optional[str] = Field(default=None, max_length=5000)
    project_url: Optional[str] = None
    target_audience: Optional[str] = None
    business_model: Optional[str] = None
    tech_stack: Optional[str] = None
    current_stage: Optional[str] = None
    key_features: Optional[str] = None


class ConnectionRecord(BaseModel):
    id: str
    connection_type: ConnectionKind
    platform: Optional[str] = None
    connection_url: Optional[str] = None
    project_name: Optional[str] = None
    project_description: Optional[str] = None
    status: str
    created_at: datetime


class ConnectionListResponse(BaseModel):
    records: List[ConnectionRecord] = Field(
        default_factory=list, description="Connections sorted by created_at DESC"
    )


class ConnectionCreatedResponse(BaseModel):
    """Returned as soon as the connection is stored; analysis runs after the response."""

    connection: ConnectionRecord
    analysis_status: Literal["analyzing"] = "analyzing"
    message: str
    url_project: Optional[UrlProjectRecord] = None


class AnalysisRecord(BaseModel):
    """One AI analysis; list fields are decoded from their JSON columns."""

    id: str
    mvp_connection_id: str
    analysis_status: Literal["analyzing", "completed", "failed"]

    business_model: Optional[str] = None
    target_audience: Optional[str] = None
    market_category: Optional[str] = None
    industry: Optional[str] = None
    value_proposition: Optional[str] = None
    pricing_model: Optional[str] = None
    market_size: Optional[str] = None
    go_to_market_strategy: Optional[str] = None

    key_features: List[str] = Field(default_factory=list)
    competitors: List[str] = Field(default_factory=list)
    revenue_streams: List[str] = Field(default_factory=list)
    customer_segments: List[str] = Field(default_factory=list)
    pain_points: List[str] = Field(default_factory=list)
    unique_selling_points: List[str] = Field(default_factory=list)

    analysis_confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    raw_analysis_data: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class AnalysisListResponse(BaseModel):
    records: List[AnalysisRecord] = Field(default_factory=list)
