"""Schemas for scraped pages and the inspection result built from them."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class PageMetadata(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    favicon: Optional[str] = None
    generator: Optional[str] = None


class PageExtract(BaseModel):
    text: str = ""


class ScrapeResult(BaseModel):
    """Output of the page-scrape collaborator."""

    metadata: PageMetadata = Field(default_factory=PageMetadata)
    extract: PageExtract = Field(default_factory=PageExtract)


class ProjectMetadata(BaseModel):
    title: Optional[str] = None
    favicon: Optional[str] = None
    language: str = "Unknown"
    framework: str = "Web Application"
    last_deployed: Optional[str] = None


class UrlInspection(BaseModel):
    """Everything derived from one URL before it is persisted."""

    tracking_id: str
    name: str
    url: str
    description: str
    tech_stack: List[str]
    endpoints: List[str]
    metadata: ProjectMetadata
    gtm_suggestions: List[str]
    tracking_code: str
    status: str = "live"
