"""URL connector — scrape a deployed app once and keep what the detectors found.

Shared by the url kind of the connection orchestrator and the Replit
connector. The (user_id, url) unique constraint is the final word on
duplicates; the pre-check only saves a scrape. A url-kind connection owns
the project stored for its URL and removes it on disconnect.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..agents.url_inspector import inspect_page, is_replit_url
from ..models.url_project import UrlProject
from .errors import ConnectionValidationError, DuplicateConnectionError
from .page_scraper import scrape_page

logger = logging.getLogger(__name__)


def find_url_project(db: Session, user_id, url: str) -> Optional[UrlProject]:
    return (
        db.query(UrlProject)
        .filter(UrlProject.user_id == str(user_id), UrlProject.url == url)
        .first()
    )


async def connect_url_project(
    db: Session,
    user_id,
    url: Optional[str],
    *,
    default_description: str = "Web application",
    require_replit: bool = False,
    commit: bool = True,
) -> UrlProject:
    """Validate, scrape, inspect and persist one URL project.

    With ``commit=False`` the project is only flushed; the caller commits it
    together with whatever else belongs in the same transaction.

    Raises
    ------
    ConnectionValidationError
        Missing URL, or not a Replit URL when ``require_replit`` is set.
    DuplicateConnectionError
        The user already connected this URL.
    ScrapeError
        The page could not be fetched. Nothing is persisted.
    """
    url = (url or "").strip()
    if not url:
        raise ConnectionValidationError("URL is required")
    if require_replit and not is_replit_url(url):
        raise ConnectionValidationError(
            "Please enter a valid Replit URL (e.g., https://myapp.replit.app)"
        )

    if find_url_project(db, user_id, url) is not None:
        raise DuplicateConnectionError(url)

    scraped = await scrape_page(url)
    inspection = inspect_page(url, scraped, default_description=default_description)

    project = UrlProject(
        user_id=user_id,
        tracking_id=inspection.tracking_id,
        name=inspection.name,
        url=inspection.url,
        description=inspection.description,
        tech_stack_json=json.dumps(inspection.tech_stack),
        endpoints_json=json.dumps(inspection.endpoints),
        metadata_json=inspection.metadata.model_dump_json(),
        gtm_suggestions_json=json.dumps(inspection.gtm_suggestions),
        tracking_code=inspection.tracking_code,
        status=inspection.status,
    )
    db.add(project)
    try:
        if commit:
            db.commit()
        else:
            db.flush()
    except IntegrityError as exc:
        db.rollback()
        logger.info("Concurrent connect lost the race for %s", url)
        raise DuplicateConnectionError(url) from exc
    if commit:
        db.refresh(project)

    print(f"✅ [URL-PROJECT] Connected {url} as {project.tracking_id}")
    return project


def list_url_projects(db: Session, user_id) -> List[UrlProject]:
    return (
        db.query(UrlProject)
        .filter(UrlProject.user_id == str(user_id))
        .order_by(UrlProject.connected_at.desc())
        .all()
    )


def _json_list(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        return []
    return value if isinstance(value, list) else []


def project_to_dict(project: UrlProject) -> Dict[str, Any]:
    """Decode the JSON columns for the API layer."""
    try:
        metadata = json.loads(project.metadata_json) if project.metadata_json else {}
    except ValueError:
        metadata = {}
    return {
        "id": str(project.id),
        "tracking_id": project.tracking_id,
        "name": project.name,
        "url": project.url,
        "description": project.description,
        "tech_stack": _json_list(project.tech_stack_json),
        "endpoints": _json_list(project.endpoints_json),
        "metadata": metadata,
        "gtm_suggestions": _json_list(project.gtm_suggestions_json),
        "tracking_code": project.tracking_code or "",
        "status": project.status,
        "connected_at": project.connected_at,
    }


def project_stats(projects: List[UrlProject]) -> Dict[str, int]:
    """Header counters of the Replit page."""
    tech: set[str] = set()
    suggestions = 0
    for project in projects:
        tech.update(_json_list(project.tech_stack_json))
        suggestions += len(_json_list(project.gtm_suggestions_json))
    return {
        "connected_apps": len(projects),
        "active_apps": sum(1 for p in projects if p.status == "live"),
        "gtm_suggestions": suggestions,
        "tech_stacks": len(tech),
    }


def disconnect_url_project(db: Session, user_id, project_id) -> bool:
    project = (
        db.query(UrlProject)
        .filter(UrlProject.id == str(project_id), UrlProject.user_id == str(user_id))
        .first()
    )
    if project is None:
        return False
    db.delete(project)
    db.commit()
    return True
