"""Content generator routes."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.generated_content import GeneratedContent
from ..models.user import User
from ..schemas.content_schema import ContentGenerateRequest, ContentListResponse, ContentRecord
from ..services.auth_dependency import get_current_user
from ..services.content_service import generate_content, list_recent_content, mark_content_used
from ..services.errors import AIGenerationError

router = APIRouter(
    prefix="/content",
    tags=["Content Generator"],
)


def _content_to_record(record: GeneratedContent) -> ContentRecord:
    return ContentRecord(
        id=str(record.id),
        content_type=record.content_type,
        title=record.title,
        content=record.content,
        prompt=record.prompt or "",
        status=record.status,
        created_at=record.created_at or datetime.utcnow(),
    )


@router.post(
    "/generate",
    response_model=ContentRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Generate marketing content",
)
async def generate(
    payload: ContentGenerateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ContentRecord:
    try:
        record = await generate_content(db, current_user.id, payload.content_type, payload.custom_input)
    except AIGenerationError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to generate content: {exc}",
        )
    return _content_to_record(record)


@router.get("/", response_model=ContentListResponse, summary="Recent content")
def recent_content(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ContentListResponse:
    records = list_recent_content(db, current_user.id)
    return ContentListResponse(records=[_content_to_record(r) for r in records])


@router.patch("/{content_id}/used", response_model=ContentRecord, summary="Mark content as used")
def mark_used(
    content_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ContentRecord:
    record = mark_content_used(db, current_user.id, content_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Content {content_id} not found",
        )
    return _content_to_record(record)
