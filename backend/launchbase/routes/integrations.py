"""Integration routes — catalog toggles and the Replit URL connector.

Endpoints:
  GET    /integrations/                      — Catalog with connected state and counts
  POST   /integrations/{id}/connect          — Connect a catalog integration
  DELETE /integrations/{id}/connect          — Disconnect it
  POST   /integrations/replit                — Connect a deployed Replit app
  GET    /integrations/replit                — Connected Replit apps + stats
  DELETE /integrations/replit/{project_id}   — Disconnect a Replit app
"""

from __future__ import annotations

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..constants import INTEGRATION_CATEGORIES
from ..database import get_db
from ..models.user import User
from ..schemas.profile_schema import (
    IntegrationCategory,
    IntegrationCount,
    IntegrationInfo,
    IntegrationsResponse,
)
from ..schemas.url_project_schema import (
    ReplitConnectRequest,
    UrlProjectListResponse,
    UrlProjectRecord,
    UrlProjectStats,
)
from ..services.auth_dependency import get_current_user
from ..services.errors import ConnectionValidationError, DuplicateConnectionError, ScrapeError
from ..services.profile_service import (
    connect_integration,
    disconnect_integration,
    get_connected_integrations,
    get_or_create_profile,
    integration_counts,
)
from ..services.url_project_service import (
    connect_url_project,
    disconnect_url_project,
    list_url_projects,
    project_stats,
    project_to_dict,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/integrations",
    tags=["Integrations"],
)


def _catalog_response(connected: List[str]) -> IntegrationsResponse:
    counts = integration_counts(connected)
    categories = [
        IntegrationCategory(
            id=category["id"],
            title=category["title"],
            description=category["description"],
            connected=counts["categories"][category["id"]]["connected"],
            total=counts["categories"][category["id"]]["total"],
            integrations=[
                IntegrationInfo(**integration, connected=integration["id"] in connected)
                for integration in category["integrations"]
            ],
        )
        for category in INTEGRATION_CATEGORIES
    ]
    return IntegrationsResponse(
        categories=categories,
        connected_integrations=connected,
        connected=counts["connected"],
        total=counts["total"],
        category_counts={
            cid: IntegrationCount(**c) for cid, c in counts["categories"].items()
        },
    )


# ── Catalog ──────────────────────────────────────────────────────────────

@router.get("/", response_model=IntegrationsResponse, summary="Integrations catalog")
def get_integrations(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> IntegrationsResponse:
    profile = get_or_create_profile(db, current_user.id)
    return _catalog_response(get_connected_integrations(profile))


@router.post(
    "/{integration_id}/connect",
    response_model=IntegrationsResponse,
    summary="Connect a catalog integration",
)
def connect_catalog_integration(
    integration_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> IntegrationsResponse:
    try:
        profile = connect_integration(db, current_user.id, integration_id)
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown integration: {integration_id}",
        )
    return _catalog_response(get_connected_integrations(profile))


@router.delete(
    "/{integration_id}/connect",
    response_model=IntegrationsResponse,
    summary="Disconnect a catalog integration",
)
def disconnect_catalog_integration(
    integration_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> IntegrationsResponse:
    try:
        profile = disconnect_integration(db, current_user.id, integration_id)
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown integration: {integration_id}",
        )
    return _catalog_response(get_connected_integrations(profile))


# ── Replit connector ─────────────────────────────────────────────────────

@router.post(
    "/replit",
    response_model=UrlProjectRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Connect a Replit app",
    response_description="Detected tech stack, GTM suggestions and tracking snippet",
)
async def connect_replit(
    payload: ReplitConnectRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UrlProjectRecord:
    try:
        project = await connect_url_project(
            db,
            current_user.id,
            payload.url,
            default_description="Replit application",
            require_replit=True,
        )
    except ConnectionValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except DuplicateConnectionError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    except ScrapeError as exc:
        logger.warning("Replit scrape failed: %s", exc)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))

    return UrlProjectRecord(**project_to_dict(project))


@router.get("/replit", response_model=UrlProjectListResponse, summary="Connected Replit apps")
def get_replit_projects(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UrlProjectListResponse:
    projects = list_url_projects(db, current_user.id)
    return UrlProjectListResponse(
        records=[UrlProjectRecord(**project_to_dict(p)) for p in projects],
        stats=UrlProjectStats(**project_stats(projects)),
    )


@router.delete(
    "/replit/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Disconnect a Replit app",
)
def delete_replit_project(
    project_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> None:
    if not disconnect_url_project(db, current_user.id, project_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Project {project_id} not found",
        )
