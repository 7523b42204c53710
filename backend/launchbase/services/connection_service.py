"""Connection orchestrator — validate a connect request per kind and store it.

The caller schedules the analysis with the returned source descriptor
after the connection is committed, so the HTTP response never waits on
the AI call.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..agents.mvp_analysis import SourceDescriptor
from ..constants import INTEGRATION_PLATFORM_IDS
from ..models.mvp_connection import MVPConnection
from ..models.url_project import UrlProject
from ..schemas.connection_schema import ConnectionRequest
from .errors import ConnectionValidationError
from .url_project_service import connect_url_project, find_url_project

_MANUAL_DATA_FIELDS = (
    "project_name",
    "project_description",
    "project_url",
    "target_audience",
    "business_model",
    "tech_stack",
    "current_stage",
    "key_features",
)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _validate(payload: ConnectionRequest) -> None:
    """Raise ConnectionValidationError before anything is written."""
    if payload.kind == "integration":
        platform = _clean(payload.platform)
        if not platform or not _clean(payload.url):
            raise ConnectionValidationError("Platform and URL are required for an integration connection")
        if platform not in INTEGRATION_PLATFORM_IDS:
            raise ConnectionValidationError(f"Unsupported platform: {platform}")
    elif payload.kind == "manual":
        if not _clean(payload.project_name) or not _clean(payload.project_description):
            raise ConnectionValidationError("Project name and description are required")
    elif payload.kind == "url":
        if not _clean(payload.url):
            raise ConnectionValidationError("URL is required")


def _persist(db: Session, connection: MVPConnection) -> MVPConnection:
    """Commit the connection along with anything already flushed (the url project)."""
    db.add(connection)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(connection)
    return connection


async def connect(
    db: Session,
    user_id,
    payload: ConnectionRequest,
) -> Tuple[MVPConnection, SourceDescriptor, Optional[UrlProject]]:
    """Store a new connection and return it with the analysis source.

    The third element is the UrlProject created for url-kind connections.

    Raises ConnectionValidationError, DuplicateConnectionError or ScrapeError;
    in each case no MVPConnection is written.
    """
    _validate(payload)
    url_project: Optional[UrlProject] = None

    if payload.kind == "integration":
        platform = _clean(payload.platform)
        url = _clean(payload.url)
        connection = MVPConnection(
            user_id=user_id,
            connection_type="integration",
            platform=platform,
            connection_url=url,
            status="connected",
        )
        source = SourceDescriptor(source="integration", platform=platform, url=url)

    elif payload.kind == "manual":
        data = {
            field: _clean(getattr(payload, field)) or ""
            for field in _MANUAL_DATA_FIELDS
        }
        connection = MVPConnection(
            user_id=user_id,
            connection_type="manual",
            project_name=data["project_name"],
            project_description=data["project_description"],
            connection_url=data["project_url"] or None,
            status="connected",
        )
        source = SourceDescriptor(source="manual", data=data)

    else:
        url_project = await connect_url_project(db, user_id, payload.url, commit=False)
        description = _clean(payload.description)
        connection = MVPConnection(
            user_id=user_id,
            connection_type="url",
            connection_url=url_project.url,
            project_name=url_project.name,
            project_description=description,
            status="connected",
        )
        source = SourceDescriptor(
            source="url",
            url=url_project.url,
            description=description or url_project.description,
        )

    connection = _persist(db, connection)
    if url_project is not None:
        db.refresh(url_project)
    print(f"✅ [CONNECT] {connection.connection_type} connection {connection.id} stored")
    return connection, source, url_project


def list_connections(db: Session, user_id) -> List[MVPConnection]:
    return (
        db.query(MVPConnection)
        .filter(MVPConnection.user_id == str(user_id))
        .order_by(MVPConnection.created_at.desc())
        .all()
    )


def get_connection(db: Session, user_id, connection_id) -> Optional[MVPConnection]:
    return (
        db.query(MVPConnection)
        .filter(
            MVPConnection.id == str(connection_id),
            MVPConnection.user_id == str(user_id),
        )
        .first()
    )


def disconnect(db: Session, user_id, connection_id) -> bool:
    """Delete the connection, its analyses and, for url kind, its url project.

    False when not found.
    """
    connection = get_connection(db, user_id, connection_id)
    if connection is None:
        return False
    if connection.connection_type == "url" and connection.connection_url:
        url_project = find_url_project(db, user_id, connection.connection_url)
        if url_project is not None:
            db.delete(url_project)
    db.delete(connection)
    db.commit()
    print(f"🗑️  [CONNECT] Connection {connection_id} removed")
    return True
