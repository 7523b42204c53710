"""Analysis orchestrator — one AI go-to-market analysis per connected MVP.

Flow:
  1. Persist MVPAnalysis(status="analyzing") so the dashboard can show progress
  2. Build the analysis prompt from the source descriptor
  3. Call the AI collaborator with web-search grounding
  4. Extract the labelled fields line by line (fallbacks for misses)
  5. Update the record to "completed" with the raw text attached

A failure in step 3 or 5 propagates to the caller and leaves the record in
"analyzing". Nothing here retries; the AI client already does.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from ..agents.mvp_analysis import (
    SourceDescriptor,
    build_analysis_prompt,
    build_search_query,
    parse_analysis_response,
)
from ..constants import ANALYSIS_CONFIDENCE, ANALYSIS_MAX_TOKENS
from ..models.mvp_analysis import MVPAnalysis
from .notification_service import create_notification
from .openai_client import generate_text
from .timing import StepTimer

logger = logging.getLogger(__name__)

_LIST_FIELDS = (
    "key_features",
    "competitors",
    "revenue_streams",
    "customer_segments",
    "pain_points",
    "unique_selling_points",
)


async def analyze(
    db: Session,
    *,
    user_id,
    connection_id,
    source: SourceDescriptor,
) -> MVPAnalysis:
    """Run one analysis for ``connection_id`` and return the completed record."""
    timer = StepTimer("mvp_analysis")
    print(f"➡️  [ANALYSIS] START connection={connection_id} source={source.source}")

    with timer.step("create_record"):
        record = MVPAnalysis(
            user_id=user_id,
            mvp_connection_id=connection_id,
            analysis_status="analyzing",
        )
        db.add(record)
        db.commit()
        db.refresh(record)

    prompt = build_analysis_prompt(source)

    async with timer.async_step("ai_call"):
        text = await generate_text(
            prompt,
            max_tokens=ANALYSIS_MAX_TOKENS,
            search_grounding=True,
            search_query=build_search_query(source),
        )

    with timer.step("extract"):
        fields = parse_analysis_response(text)

    with timer.step("persist"):
        for name, value in fields.model_dump().items():
            if name in _LIST_FIELDS:
                value = json.dumps(value)
            setattr(record, name, value)
        record.analysis_confidence = ANALYSIS_CONFIDENCE
        record.raw_analysis_data = text
        record.analysis_status = "completed"
        record.updated_at = datetime.utcnow()
        db.commit()
        db.refresh(record)

    timer.summary()
    print(f"✅ [ANALYSIS] DONE analysis={record.id}")
    return record


async def run_analysis_in_background(
    session_factory: Callable[[], Session],
    user_id,
    connection_id,
    source: SourceDescriptor,
) -> None:
    """Background-task entry point: own session, result surfaced as a notification."""
    db = session_factory()
    try:
        try:
            record = await analyze(
                db,
                user_id=user_id,
                connection_id=connection_id,
                source=source,
            )
        except Exception as exc:
            logger.exception("Analysis failed for connection %s", connection_id)
            db.rollback()
            create_notification(
                db,
                user_id=user_id,
                title="Analysis Failed",
                message=f"We couldn't analyze your MVP: {exc}",
                type="error",
            )
            return

        create_notification(
            db,
            user_id=user_id,
            title="AI Analysis Ready",
            message="Your MVP analysis is complete. Review your go-to-market insights.",
            type="success",
            action_url=f"/analyses/{record.id}",
        )
    finally:
        db.close()


# ── Read side ────────────────────────────────────────────────────────────

def get_latest_analysis(db: Session, user_id) -> Optional[MVPAnalysis]:
    """Most recently created analysis across all of the user's connections."""
    return (
        db.query(MVPAnalysis)
        .filter(MVPAnalysis.user_id == str(user_id))
        .order_by(MVPAnalysis.created_at.desc())
        .first()
    )


def list_analyses_for_connection(db: Session, user_id, connection_id) -> List[MVPAnalysis]:
    return (
        db.query(MVPAnalysis)
        .filter(
            MVPAnalysis.user_id == str(user_id),
            MVPAnalysis.mvp_connection_id == str(connection_id),
        )
        .order_by(MVPAnalysis.created_at.desc())
        .all()
    )


def get_analysis(db: Session, user_id, analysis_id) -> Optional[MVPAnalysis]:
    return (
        db.query(MVPAnalysis)
        .filter(
            MVPAnalysis.id == str(analysis_id),
            MVPAnalysis.user_id == str(user_id),
        )
        .first()
    )


def decode_list(raw: Optional[str]) -> List[str]:
    """JSON list column back to a Python list; malformed or empty gives []."""
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        return []
    return value if isinstance(value, list) else []
