"""Launch checklist routes."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.user import User
from ..schemas.checklist_schema import ChecklistResponse
from ..services.auth_dependency import get_current_user
from ..services.checklist_service import ChecklistItemLocked, get_checklist, toggle_item

router = APIRouter(
    prefix="/checklist",
    tags=["Launch Checklist"],
)


@router.get("/", response_model=ChecklistResponse, summary="Launch checklist with progress")
def read_checklist(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ChecklistResponse:
    return ChecklistResponse(**get_checklist(db, current_user.id))


@router.post("/items/{item_id}/toggle", response_model=ChecklistResponse, summary="Toggle a checklist item")
def toggle_checklist_item(
    item_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ChecklistResponse:
    try:
        checklist = toggle_item(db, current_user.id, item_id)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown checklist item: {item_id}")
    except ChecklistItemLocked as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return ChecklistResponse(**checklist)
