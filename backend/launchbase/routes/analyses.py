"""MVP analysis routes — read-only; analyses are created by the connect flow."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.mvp_analysis import MVPAnalysis
from ..models.user import User
from ..schemas.connection_schema import AnalysisListResponse, AnalysisRecord
from ..services.analysis_service import (
    decode_list,
    get_analysis,
    get_latest_analysis,
    list_analyses_for_connection,
)
from ..services.auth_dependency import get_current_user
from ..services.connection_service import get_connection

router = APIRouter(
    prefix="/analyses",
    tags=["MVP Analysis"],
)


def analysis_to_record(record: MVPAnalysis) -> AnalysisRecord:
    """Convert an MVPAnalysis ORM instance, decoding its JSON list columns."""
    return AnalysisRecord(
        id=str(record.id),
        mvp_connection_id=str(record.mvp_connection_id),
        analysis_status=record.analysis_status,
        business_model=record.business_model,
        target_audience=record.target_audience,
        market_category=record.market_category,
        industry=record.industry,
        value_proposition=record.value_proposition,
        pricing_model=record.pricing_model,
        market_size=record.market_size,
        go_to_market_strategy=record.go_to_market_strategy,
        key_features=decode_list(record.key_features),
        competitors=decode_list(record.competitors),
        revenue_streams=decode_list(record.revenue_streams),
        customer_segments=decode_list(record.customer_segments),
        pain_points=decode_list(record.pain_points),
        unique_selling_points=decode_list(record.unique_selling_points),
        analysis_confidence=record.analysis_confidence,
        raw_analysis_data=record.raw_analysis_data,
        created_at=record.created_at or datetime.utcnow(),
        updated_at=record.updated_at,
    )


@router.get("/latest", response_model=AnalysisRecord, summary="Latest analysis")
def latest_analysis(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> AnalysisRecord:
    record = get_latest_analysis(db, current_user.id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No analysis yet")
    return analysis_to_record(record)


@router.get(
    "/connection/{connection_id}",
    response_model=AnalysisListResponse,
    summary="Analyses for one connection",
)
def analyses_for_connection(
    connection_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> AnalysisListResponse:
    if get_connection(db, current_user.id, connection_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Connection {connection_id} not found",
        )
    records = list_analyses_for_connection(db, current_user.id, connection_id)
    return AnalysisListResponse(records=[analysis_to_record(r) for r in records])


@router.get("/{analysis_id}", response_model=AnalysisRecord, summary="Get one analysis")
def read_analysis(
    analysis_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> AnalysisRecord:
    record = get_analysis(db, current_user.id, analysis_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Analysis {analysis_id} not found",
        )
    return analysis_to_record(record)
