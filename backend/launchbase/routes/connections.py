"""MVP connection routes — connect a project and kick off its AI analysis.

Endpoints:
  POST   /connections/       — Connect an MVP (integration | manual | url)
  GET    /connections/       — List the user's connections
  DELETE /connections/{id}   — Disconnect (analyses are removed with it)

The analysis runs as a background task after the response is sent; its
result shows up under /analyses and as a notification.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db, get_session_factory
from ..models.mvp_connection import MVPConnection
from ..models.user import User
from ..schemas.connection_schema import (
    ConnectionCreatedResponse,
    ConnectionListResponse,
    ConnectionRecord,
    ConnectionRequest,
)
from ..schemas.url_project_schema import UrlProjectRecord
from ..services.analysis_service import run_analysis_in_background
from ..services.auth_dependency import get_current_user
from ..services.connection_service import connect, disconnect, list_connections
from ..services.errors import ConnectionValidationError, DuplicateConnectionError, ScrapeError
from ..services.url_project_service import project_to_dict

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/connections",
    tags=["MVP Connections"],
)


def connection_to_record(connection: MVPConnection) -> ConnectionRecord:
    """Convert an MVPConnection ORM instance to its response schema."""
    return ConnectionRecord(
        id=str(connection.id),
        connection_type=connection.connection_type,
        platform=connection.platform,
        connection_url=connection.connection_url,
        project_name=connection.project_name,
        project_description=connection.project_description,
        status=connection.status,
        created_at=connection.created_at or datetime.utcnow(),
    )


_SUCCESS_MESSAGES = {
    "integration": "Successfully connected to {platform}!",
    "manual": "MVP details submitted successfully!",
    "url": "URL connected successfully!",
}


@router.post(
    "/",
    response_model=ConnectionCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Connect an MVP",
    response_description="The stored connection; analysis continues in the background",
)
async def create_connection(
    payload: ConnectionRequest,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    session_factory: Callable[[], Session] = Depends(get_session_factory),
    current_user: User = Depends(get_current_user),
) -> ConnectionCreatedResponse:
    print(f"➡️  [CONNECT] {payload.kind} connection requested by {current_user.email}")

    try:
        connection, source, url_project = await connect(db, current_user.id, payload)
    except ConnectionValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except DuplicateConnectionError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    except ScrapeError as exc:
        logger.warning("Connect scrape failed: %s", exc)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))

    background_tasks.add_task(
        run_analysis_in_background,
        session_factory,
        current_user.id,
        connection.id,
        source,
    )

    return ConnectionCreatedResponse(
        connection=connection_to_record(connection),
        message=_SUCCESS_MESSAGES[connection.connection_type].format(platform=connection.platform),
        url_project=UrlProjectRecord(**project_to_dict(url_project)) if url_project is not None else None,
    )


@router.get(
    "/",
    response_model=ConnectionListResponse,
    summary="List MVP connections",
)
def get_connections(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ConnectionListResponse:
    connections = list_connections(db, current_user.id)
    return ConnectionListResponse(records=[connection_to_record(c) for c in connections])


@router.delete(
    "/{connection_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Disconnect an MVP",
)
def delete_connection(
    connection_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> None:
    if not disconnect(db, current_user.id, connection_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Connection {connection_id} not found",
        )
