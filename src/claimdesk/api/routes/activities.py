"""
Activity API routes.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from claimdesk.api.schemas import ActivityCreate, ActivityResponse
from claimdesk.db.connection import get_db
from claimdesk.db.repositories import ActivityRepository, ClaimRepository

router = APIRouter()


@router.get("", response_model=list[ActivityResponse])
def list_activities(
    limit: Optional[int] = Query(None, ge=1, le=500),
    session: Session = Depends(get_db),
) -> list[ActivityResponse]:
    """List activities across all claims, newest first."""
    activities = ActivityRepository(session).get_recent(limit=limit)
    return [ActivityResponse.model_validate(a) for a in activities]


@router.post("", response_model=ActivityResponse, status_code=201)
def create_activity(
    payload: ActivityCreate, session: Session = Depends(get_db)
) -> ActivityResponse:
    """
    Record an activity.

    Raises:
        HTTPException 404: The referenced claim does not exist
    """
    if payload.claim_id is not None and not ClaimRepository(session).get(
        payload.claim_id
    ):
        raise HTTPException(
            status_code=404, detail=f"Claim {payload.claim_id} not found"
        )

    activity = ActivityRepository(session).create(
        claim_id=payload.claim_id,
        type=payload.type.value,
        description=payload.description,
        created_by=payload.created_by,
        extra_data={"details": payload.details} if payload.details else None,
    )
    return ActivityResponse.model_validate(activity)
