"""Pydantic schemas for the launch checklist."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class ChecklistItem(BaseModel):
    id: str
    title: str
    critical: bool
    preset: bool = Field(..., description="Completed by default; cannot be toggled")
    completed: bool


class ChecklistSection(BaseModel):
    id: str
    title: str
    completed: int
    total: int
    items: List[ChecklistItem]


class ChecklistResponse(BaseModel):
    sections: List[ChecklistSection]
    progress: int = Field(..., ge=0, le=100)
    critical_remaining: int = Field(..., ge=0)
    ready_to_launch: bool
