"""Pydantic schema for the dashboard summary."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .connection_schema import AnalysisRecord, ConnectionRecord
from .suggestion_schema import SuggestionRecord


class ActivityEntry(BaseModel):
    id: Optional[str] = None
    agent: str
    action: str
    type: str
    time: Optional[datetime] = None


class AgentInfo(BaseModel):
    id: str
    name: str
    role: str
    description: str


class DashboardResponse(BaseModel):
    has_mvp: bool
    connections: List[ConnectionRecord] = Field(default_factory=list)
    latest_analysis: Optional[AnalysisRecord] = None
    recent_activity: List[ActivityEntry] = Field(default_factory=list)
    suggestions: List[SuggestionRecord] = Field(default_factory=list)
    agents: List[AgentInfo] = Field(default_factory=list)
