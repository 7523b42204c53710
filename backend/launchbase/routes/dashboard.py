"""Dashboard summary route."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.user import User
from ..schemas.dashboard_schema import ActivityEntry, AgentInfo, DashboardResponse
from ..services.auth_dependency import get_current_user
from ..services.dashboard_service import build_dashboard
from .analyses import analysis_to_record
from .connections import connection_to_record
from .suggestions import suggestion_to_record

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
)


@router.get("/", response_model=DashboardResponse, summary="Dashboard summary")
def read_dashboard(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DashboardResponse:
    """Connections, latest analysis, recent agent activity and suggestions."""
    summary = build_dashboard(db, current_user.id)
    latest = summary["latest_analysis"]
    return DashboardResponse(
        has_mvp=summary["has_mvp"],
        connections=[connection_to_record(c) for c in summary["connections"]],
        latest_analysis=analysis_to_record(latest) if latest is not None else None,
        recent_activity=[ActivityEntry(**a) for a in summary["recent_activity"]],
        suggestions=[suggestion_to_record(s) for s in summary["suggestions"]],
        agents=[AgentInfo(**a) for a in summary["agents"]],
    )
