"""AI suggestion routes — strategy builder, dashboard quick actions, agent requests.

Endpoints:
  GET   /strategy/                          — Step catalog + latest strategy per step
  POST  /strategy/full                      — Generate every missing step
  POST  /strategy/{step_id}                 — Generate one step
  POST  /suggestions/quick-actions/{action} — Run a quick action
  POST  /suggestions/agents/{agent}         — Ask an AI agent
  GET   /suggestions/                       — Latest suggestions
  PATCH /suggestions/{id}/complete          — Mark a suggestion completed
"""

from __future__ import annotations

import logging
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..agents.gtm_content import AGENT_PROMPTS, QUICK_ACTIONS, STRATEGY_STEPS
from ..database import get_db
from ..models.ai_suggestion import AISuggestion
from ..models.user import User
from ..schemas.suggestion_schema import (
    StrategyResponse,
    StrategyStepInfo,
    SuggestionListResponse,
    SuggestionRecord,
)
from ..services.auth_dependency import get_current_user
from ..services.errors import AIGenerationError
from ..services.suggestion_service import (
    complete_suggestion,
    generate_full_strategy,
    generate_strategy_step,
    get_strategies,
    list_suggestions,
    run_agent_request,
    run_quick_action,
)

logger = logging.getLogger(__name__)

strategy_router = APIRouter(
    prefix="/strategy",
    tags=["Strategy Builder"],
)

router = APIRouter(
    prefix="/suggestions",
    tags=["AI Suggestions"],
)


def suggestion_to_record(suggestion: AISuggestion) -> SuggestionRecord:
    return SuggestionRecord(
        id=str(suggestion.id),
        type=suggestion.type,
        title=suggestion.title,
        description=suggestion.description,
        content=suggestion.content,
        status=suggestion.status,
        priority=suggestion.priority,
        created_at=suggestion.created_at or datetime.utcnow(),
    )


def _ai_failure(exc: AIGenerationError, what: str) -> HTTPException:
    logger.warning("%s failed: %s", what, exc)
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=f"Failed to generate {what}: {exc}",
    )


def _strategy_response(db: Session, user_id) -> StrategyResponse:
    strategies = get_strategies(db, user_id)
    return StrategyResponse(
        steps=[
            StrategyStepInfo(
                id=step_id,
                title=entry["title"],
                description=entry["description"],
                completed=step_id in strategies,
            )
            for step_id, entry in STRATEGY_STEPS.items()
        ],
        strategies={k: suggestion_to_record(v) for k, v in strategies.items()},
        completed_steps=len(strategies),
        total_steps=len(STRATEGY_STEPS),
    )


# ── Strategy builder ─────────────────────────────────────────────────────

@strategy_router.get("/", response_model=StrategyResponse, summary="Current strategy")
def read_strategy(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> StrategyResponse:
    return _strategy_response(db, current_user.id)


@strategy_router.post("/full", response_model=StrategyResponse, summary="Generate full strategy")
async def full_strategy(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> StrategyResponse:
    try:
        await generate_full_strategy(db, current_user.id)
    except AIGenerationError as exc:
        raise _ai_failure(exc, "strategy")
    return _strategy_response(db, current_user.id)


@strategy_router.post(
    "/{step_id}",
    response_model=SuggestionRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Generate one strategy step",
)
async def strategy_step(
    step_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SuggestionRecord:
    if step_id not in STRATEGY_STEPS:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown strategy step: {step_id}")
    try:
        suggestion = await generate_strategy_step(db, current_user.id, step_id)
    except AIGenerationError as exc:
        raise _ai_failure(exc, "strategy")
    return suggestion_to_record(suggestion)


# ── Quick actions & agents ───────────────────────────────────────────────

@router.post(
    "/quick-actions/{action_id}",
    response_model=SuggestionRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Run a dashboard quick action",
)
async def quick_action(
    action_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SuggestionRecord:
    if action_id not in QUICK_ACTIONS:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown quick action: {action_id}")
    try:
        suggestion = await run_quick_action(db, current_user.id, action_id)
    except AIGenerationError as exc:
        raise _ai_failure(exc, QUICK_ACTIONS[action_id]["title"].lower())
    return suggestion_to_record(suggestion)


@router.post(
    "/agents/{agent_id}",
    response_model=SuggestionRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Ask an AI agent",
)
async def agent_request(
    agent_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SuggestionRecord:
    if agent_id not in AGENT_PROMPTS:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown agent: {agent_id}")
    try:
        suggestion = await run_agent_request(db, current_user.id, agent_id)
    except AIGenerationError as exc:
        raise _ai_failure(exc, AGENT_PROMPTS[agent_id]["title"].lower())
    return suggestion_to_record(suggestion)


@router.get("/", response_model=SuggestionListResponse, summary="Latest suggestions")
def read_suggestions(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SuggestionListResponse:
    return SuggestionListResponse(
        records=[suggestion_to_record(s) for s in list_suggestions(db, current_user.id)]
    )


@router.patch("/{suggestion_id}/complete", response_model=SuggestionRecord, summary="Mark suggestion completed")
def mark_completed(
    suggestion_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SuggestionRecord:
    suggestion = complete_suggestion(db, current_user.id, suggestion_id)
    if suggestion is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Suggestion {suggestion_id} not found",
        )
    return suggestion_to_record(suggestion)
