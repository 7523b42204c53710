"""Pydantic schemas for URL-connected projects (Replit connector)."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class ReplitConnectRequest(BaseModel):
    url: str = Field(..., description="Deployed Replit app URL")


class UrlProjectMetadata(BaseModel):
    title: Optional[str] = None
    favicon: Optional[str] = None
    language: str = "Unknown"
    framework: str = "Web Application"
    last_deployed: Optional[str] = None


class UrlProjectRecord(BaseModel):
    id: str
    tracking_id: str
    name: str
    url: str
    description: Optional[str] = None
    tech_stack: List[str] = Field(default_factory=list)
    endpoints: List[str] = Field(default_factory=list)
    metadata: UrlProjectMetadata = Field(default_factory=UrlProjectMetadata)
    gtm_suggestions: List[str] = Field(default_factory=list)
    tracking_code: str = ""
    status: str = "live"
    connected_at: datetime


class UrlProjectStats(BaseModel):
    connected_apps: int = 0
    active_apps: int = 0
    gtm_suggestions: int = 0
    tech_stacks: int = 0


class UrlProjectListResponse(BaseModel):
    records: List[UrlProjectRecord] = Field(default_factory=list)
    stats: UrlProjectStats = Field(default_factory=UrlProjectStats)
