"""Pydantic schemas for the content generator."""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

ContentType = Literal["landing", "email", "social", "sales"]


class ContentGenerateRequest(BaseModel):
    content_type: ContentType = Field(..., description="landing | email | social | sales")
    custom_input: Optional[str] = Field(
        default=None, max_length=2000, description="Extra context appended to the prompt"
    )

    @field_validator("custom_input")
    @classmethod
    def strip_custom_input(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return v.strip() or None


class ContentRecord(BaseModel):
    id: str
    content_type: str
    title: str
    content: str
    prompt: str = ""
    status: Literal["draft", "used"]
    created_at: datetime


class ContentListResponse(BaseModel):
    records: List[ContentRecord] = Field(default_factory=list, description="Latest drafts, newest first")
