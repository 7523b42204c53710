"""URL inspector — turns one scraped page into a connectable project.

No I/O here: the caller scrapes, this module runs the detectors and the
rule tables over the result.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from .detectors import detect_framework, detect_language, detect_tech_stack, extract_endpoints
from .rules import derive_tracking_id, generate_gtm_suggestions, generate_tracking_code
from .schema import ProjectMetadata, ScrapeResult, UrlInspection


def inspect_page(
    url: str,
    scraped: ScrapeResult,
    *,
    default_description: str = "Web application",
    now: Optional[datetime] = None,
) -> UrlInspection:
    """Run every detector over ``scraped`` and assemble the inspection record."""
    now = now or datetime.utcnow()
    text = scraped.extract.text or ""
    meta = scraped.metadata

    tracking_id = derive_tracking_id(url, now_ms=int(now.timestamp() * 1000))
    tech_stack = detect_tech_stack(meta, text)
    endpoints = extract_endpoints(text)

    print(f"🔍 [INSPECT] {url}: stack={tech_stack} endpoints={len(endpoints)}")

    return UrlInspection(
        tracking_id=tracking_id,
        name=meta.title or tracking_id,
        url=url,
        description=meta.description or default_description,
        tech_stack=tech_stack,
        endpoints=endpoints,
        metadata=ProjectMetadata(
            title=meta.title,
            favicon=meta.favicon,
            language=detect_language(text),
            framework=detect_framework(tech_stack),
            last_deployed=now.isoformat(),
        ),
        gtm_suggestions=generate_gtm_suggestions(tech_stack, endpoints),
        tracking_code=generate_tracking_code(tracking_id),
        status="live",
    )
