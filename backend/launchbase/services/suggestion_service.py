"""AI suggestions — strategy steps, dashboard quick actions and agent requests.

All three persist an AISuggestion row keyed by ``type``:
  - strategy step  → type=<step id>,   status=completed, priority=high
  - quick action   → type=<action id>, status=pending,   priority=high
  - agent request  → type=<agent id>,  status=pending,   priority=medium
Quick actions and agent requests also log an AgentActivity entry.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from ..agents.gtm_content import AGENT_PROMPTS, QUICK_ACTIONS, STRATEGY_STEPS
from ..constants import (
    AGENT_MAX_TOKENS,
    AGENTS_BY_ID,
    QUICK_ACTION_MAX_TOKENS,
    STRATEGY_MAX_TOKENS,
)
from ..models.agent_activity import AgentActivity
from ..models.ai_suggestion import AISuggestion
from .openai_client import generate_text

_LIST_LIMIT = 5
_QUICK_ACTION_AGENT = "Maya"


def _save_suggestion(
    db: Session,
    *,
    user_id,
    type: str,
    title: str,
    description: str,
    content: str,
    status: str,
    priority: str,
) -> AISuggestion:
    suggestion = AISuggestion(
        user_id=user_id,
        type=type,
        title=title,
        description=description,
        content=content,
        status=status,
        priority=priority,
    )
    db.add(suggestion)
    db.commit()
    db.refresh(suggestion)
    return suggestion


def _log_activity(db: Session, *, user_id, agent_name: str, title: str, details: str) -> AgentActivity:
    activity = AgentActivity(
        user_id=user_id,
        agent_name=agent_name,
        action=f"Generated {title}",
        details=details,
        status="completed",
    )
    db.add(activity)
    db.commit()
    return activity


# ── Strategy builder ─────────────────────────────────────────────────────

async def generate_strategy_step(db: Session, user_id, step_id: str) -> AISuggestion:
    """Generate one strategy step. Unknown ids raise KeyError."""
    entry = STRATEGY_STEPS[step_id]
    print(f"🧭 [STRATEGY] Generating {step_id}")
    text = await generate_text(entry["prompt"], max_tokens=STRATEGY_MAX_TOKENS)
    return _save_suggestion(
        db,
        user_id=user_id,
        type=step_id,
        title=entry["title"],
        description=f"AI-generated {entry['title'].lower()}",
        content=text,
        status="completed",
        priority="high",
    )


def get_strategies(db: Session, user_id) -> Dict[str, AISuggestion]:
    """Latest suggestion per strategy step; steps never generated are absent."""
    rows = (
        db.query(AISuggestion)
        .filter(
            AISuggestion.user_id == str(user_id),
            AISuggestion.type.in_(list(STRATEGY_STEPS)),
        )
        .order_by(AISuggestion.created_at.desc())
        .all()
    )
    strategies: Dict[str, AISuggestion] = {}
    for row in rows:
        strategies.setdefault(row.type, row)
    return strategies


async def generate_full_strategy(db: Session, user_id) -> List[AISuggestion]:
    """Generate every missing step in order. Stops at the first AI failure."""
    existing = get_strategies(db, user_id)
    created: List[AISuggestion] = []
    for step_id in STRATEGY_STEPS:
        if step_id in existing:
            continue
        created.append(await generate_strategy_step(db, user_id, step_id))
    print(f"✅ [STRATEGY] Full strategy: {len(created)} steps generated")
    return created


# ── Quick actions & agents ───────────────────────────────────────────────

async def run_quick_action(db: Session, user_id, action_id: str) -> AISuggestion:
    entry = QUICK_ACTIONS[action_id]
    print(f"⚡ [QUICK-ACTION] {action_id}")
    text = await generate_text(entry["prompt"], max_tokens=QUICK_ACTION_MAX_TOKENS)
    suggestion = _save_suggestion(
        db,
        user_id=user_id,
        type=action_id,
        title=entry["title"],
        description=f"AI-generated {entry['title'].lower()}",
        content=text,
        status="pending",
        priority="high",
    )
    _log_activity(
        db,
        user_id=user_id,
        agent_name=_QUICK_ACTION_AGENT,
        title=entry["title"],
        details=f"Created comprehensive {entry['title'].lower()} with actionable insights",
    )
    return suggestion


async def run_agent_request(db: Session, user_id, agent_id: str) -> AISuggestion:
    entry = AGENT_PROMPTS[agent_id]
    agent = AGENTS_BY_ID[agent_id]
    print(f"🤖 [AGENT] {agent['name']} working on {entry['title']}")
    text = await generate_text(entry["prompt"], max_tokens=AGENT_MAX_TOKENS)
    suggestion = _save_suggestion(
        db,
        user_id=user_id,
        type=agent_id,
        title=entry["title"],
        description=f"{agent['name']} generated {entry['title'].lower()}",
        content=text,
        status="pending",
        priority="medium",
    )
    _log_activity(
        db,
        user_id=user_id,
        agent_name=agent["name"],
        title=entry["title"],
        details=f"Created comprehensive {entry['title'].lower()} with actionable recommendations",
    )
    return suggestion


def list_suggestions(db: Session, user_id, limit: int = _LIST_LIMIT) -> List[AISuggestion]:
    return (
        db.query(AISuggestion)
        .filter(AISuggestion.user_id == str(user_id))
        .order_by(AISuggestion.created_at.desc())
        .limit(limit)
        .all()
    )


def complete_suggestion(db: Session, user_id, suggestion_id) -> Optional[AISuggestion]:
    suggestion = (
        db.query(AISuggestion)
        .filter(
            AISuggestion.id == str(suggestion_id),
            AISuggestion.user_id == str(user_id),
        )
        .first()
    )
    if suggestion is None:
        return None
    suggestion.status = "completed"
    db.commit()
    db.refresh(suggestion)
    return suggestion
