from .detectors import detect_framework, detect_language, detect_tech_stack, extract_endpoints
from .inspector import inspect_page
from .rules import (
    derive_tracking_id,
    generate_gtm_suggestions,
    generate_tracking_code,
    is_replit_url,
)
from .schema import PageExtract, PageMetadata, ProjectMetadata, ScrapeResult, UrlInspection

__all__ = [
    "PageExtract",
    "PageMetadata",
    "ProjectMetadata",
    "ScrapeResult",
    "UrlInspection",
    "derive_tracking_id",
    "detect_framework",
    "detect_language",
    "detect_tech_stack",
    "extract_endpoints",
    "generate_gtm_suggestions",
    "generate_tracking_code",
    "inspect_page",
    "is_replit_url",
]
