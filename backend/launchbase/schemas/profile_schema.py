"""Pydantic schemas for the user profile, onboarding and integrations catalog."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class OnboardingRequest(BaseModel):
    product_name: str = Field(..., min_length=1, max_length=200)
    product_description: str = Field(..., min_length=1, max_length=5000)
    target_audience: Optional[str] = None
    problem_solving: Optional[str] = None
    goals: Optional[str] = None
    timeline: Optional[str] = None


class ProfileResponse(BaseModel):
    onboarding_completed: bool
    product_name: Optional[str] = None
    product_description: Optional[str] = None
    target_audience: Optional[str] = None
    problem_solving: Optional[str] = None
    goals: Optional[str] = None
    timeline: Optional[str] = None
    connected_integrations: List[str] = Field(default_factory=list)


class IntegrationInfo(BaseModel):
    id: str
    name: str
    description: str
    status: str
    connected: bool = False


class IntegrationCategory(BaseModel):
    id: str
    title: str
    description: str
    connected: int
    total: int
    integrations: List[IntegrationInfo]


class IntegrationCount(BaseModel):
    connected: int
    total: int


class IntegrationsResponse(BaseModel):
    categories: List[IntegrationCategory]
    connected_integrations: List[str] = Field(default_factory=list)
    connected: int = 0
    total: int = 0
    category_counts: Dict[str, IntegrationCount] = Field(default_factory=dict)
