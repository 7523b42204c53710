"""Dashboard summary — everything the landing page of the app shows in one call."""

from __future__ import annotations

from typing import Any, Dict, List

from sqlalchemy.orm import Session

from ..constants import AI_AGENTS, DEFAULT_ACTIVITY
from ..models.agent_activity import AgentActivity
from .analysis_service import get_latest_analysis
from .connection_service import list_connections
from .suggestion_service import list_suggestions

_ACTIVITY_LIMIT = 4

# First keyword found in the lower-cased action decides the activity type
_ACTIVITY_TYPES = (
    ("email", "outreach"),
    ("content", "content"),
    ("legal", "legal"),
)


def classify_activity(action: str) -> str:
    lowered = (action or "").lower()
    for keyword, activity_type in _ACTIVITY_TYPES:
        if keyword in lowered:
            return activity_type
    return "analysis"


def recent_activity(db: Session, user_id) -> List[Dict[str, Any]]:
    """Latest logged agent actions, or the idle roster when there are none."""
    rows = (
        db.query(AgentActivity)
        .filter(AgentActivity.user_id == str(user_id))
        .order_by(AgentActivity.created_at.desc())
        .limit(_ACTIVITY_LIMIT)
        .all()
    )
    if not rows:
        return [dict(entry, id=None, time=None) for entry in DEFAULT_ACTIVITY]
    return [
        {
            "id": str(row.id),
            "agent": row.agent_name,
            "action": row.action,
            "type": classify_activity(row.action),
            "time": row.created_at,
        }
        for row in rows
    ]


def build_dashboard(db: Session, user_id) -> Dict[str, Any]:
    connections = list_connections(db, user_id)
    latest = get_latest_analysis(db, user_id) if connections else None
    return {
        "has_mvp": bool(connections),
        "connections": connections,
        "latest_analysis": latest,
        "recent_activity": recent_activity(db, user_id),
        "suggestions": list_suggestions(db, user_id),
        "agents": AI_AGENTS,
    }
