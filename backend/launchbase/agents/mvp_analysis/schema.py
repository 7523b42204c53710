"""MVP analysis schemas — source descriptor in, extracted fields out."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class SourceDescriptor(BaseModel):
    """What the analysis prompt is built from.

    Exactly one shape is used per connection kind:
      - integration: platform + url
      - url: url + optional description
      - manual: structured form fields in ``data``
    """

    source: Literal["integration", "manual", "url"]
    platform: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    data: Optional[Dict[str, Any]] = None


class AnalysisFields(BaseModel):
    """Structured view of one AI analysis response."""

    business_model: str
    target_audience: str
    market_category: str
    industry: str
    value_proposition: str
    key_features: List[str] = Field(default_factory=list)
    pricing_model: str
    competitors: List[str] = Field(default_factory=list)
    market_size: str
    revenue_streams: List[str] = Field(default_factory=list)
    customer_segments: List[str] = Field(default_factory=list)
    pain_points: List[str] = Field(default_factory=list)
    unique_selling_points: List[str] = Field(default_factory=list)
    go_to_market_strategy: str
