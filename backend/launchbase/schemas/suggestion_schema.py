"""Pydantic schemas for strategy steps, quick actions and agent suggestions."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class SuggestionRecord(BaseModel):
    id: str
    type: str
    title: str
    description: Optional[str] = None
    content: str
    status: Literal["pending", "completed"]
    priority: Literal["low", "medium", "high"]
    created_at: datetime


class SuggestionListResponse(BaseModel):
    records: List[SuggestionRecord] = Field(default_factory=list)


class StrategyStepInfo(BaseModel):
    id: str
    title: str
    description: str
    completed: bool = False


class StrategyResponse(BaseModel):
    """Step catalog plus the latest generated strategy per step."""

    steps: List[StrategyStepInfo]
    strategies: Dict[str, SuggestionRecord] = Field(default_factory=dict)
    completed_steps: int = 0
    total_steps: int = 0
