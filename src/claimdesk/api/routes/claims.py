"""
Claim API routes.

Endpoints for listing, creating and updating claims and for reading the
tasks, activities and documents attached to a claim.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from claimdesk.api.schemas import (
    ActivityResponse,
    ClaimCreate,
    ClaimResponse,
    ClaimUpdate,
    DocumentResponse,
    TaskResponse,
)
from claimdesk.db.connection import get_db
from claimdesk.db.repositories import (
    ActivityRepository,
    ClaimRepository,
    DocumentRepository,
    TaskRepository,
)
from claimdesk.exceptions import NotFoundError
from claimdesk.models.db import Claim, ClaimStatus
from claimdesk.services import claims_service

router = APIRouter()


def _get_claim(session: Session, claim_id: int) -> Claim:
    try:
        return ClaimRepository(session).get_or_raise(claim_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("", response_model=list[ClaimResponse])
def list_claims(
    status: Optional[ClaimStatus] = Query(None, description="Filter by claim status"),
    limit: Optional[int] = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: Session = Depends(get_db),
) -> list[ClaimResponse]:
    """
    List claims.

    Without a status filter claims are returned in id order; filtered
    results are newest first.
    """
    repo = ClaimRepository(session)
    if status is not None:
        claims = repo.get_by_status(status.value, limit=limit, offset=offset)
    else:
        claims = repo.get_all(limit=limit, offset=offset)
    return [ClaimResponse.model_validate(c) for c in claims]


@router.get("/{claim_id}", response_model=ClaimResponse)
def get_claim(claim_id: int, session: Session = Depends(get_db)) -> ClaimResponse:
    """Get a single claim."""
    return ClaimResponse.model_validate(_get_claim(session, claim_id))


@router.post("", response_model=ClaimResponse, status_code=201)
def create_claim(
    payload: ClaimCreate, session: Session = Depends(get_db)
) -> ClaimResponse:
    """
    Create a claim.

    Records a "Claim Created" activity alongside the claim.

    Raises:
        HTTPException 409: Claim number already exists
    """
    if ClaimRepository(session).get_by_number(payload.claim_number):
        raise HTTPException(
            status_code=409,
            detail=f"Claim {payload.claim_number} already exists",
        )

    claim = claims_service.create_claim(session, **payload.model_dump(mode="json"))
    return ClaimResponse.model_validate(claim)


@router.patch("/{claim_id}", response_model=ClaimResponse)
def update_claim(
    claim_id: int,
    payload: ClaimUpdate,
    session: Session = Depends(get_db),
) -> ClaimResponse:
    """
    Partially update a claim.

    Supplying a field clears matching missing-information items, and a
    status change is recorded as an activity. Moving to ``completed`` sets
    the completion date.
    """
    changes = payload.model_dump(mode="json", exclude_unset=True)
    updated_by = changes.pop("updated_by", None)

    try:
        claim = claims_service.update_claim(
            session, claim_id, changes, updated_by=updated_by
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return ClaimResponse.model_validate(claim)


@router.get("/{claim_id}/tasks", response_model=list[TaskResponse])
def list_claim_tasks(
    claim_id: int, session: Session = Depends(get_db)
) -> list[TaskResponse]:
    """List tasks attached to a claim, soonest due first."""
    _get_claim(session, claim_id)
    tasks = TaskRepository(session).get_by_claim(claim_id)
    return [TaskResponse.model_validate(t) for t in tasks]


@router.get("/{claim_id}/activities", response_model=list[ActivityResponse])
def list_claim_activities(
    claim_id: int, session: Session = Depends(get_db)
) -> list[ActivityResponse]:
    """List activities recorded on a claim, newest first."""
    _get_claim(session, claim_id)
    activities = ActivityRepository(session).get_by_claim(claim_id)
    return [ActivityResponse.model_validate(a) for a in activities]


@router.get("/{claim_id}/documents", response_model=list[DocumentResponse])
def list_claim_documents(
    claim_id: int, session: Session = Depends(get_db)
) -> list[DocumentResponse]:
    """List documents filed for a claim, most recent upload first."""
    _get_claim(session, claim_id)
    documents = DocumentRepository(session).get_by_claim(claim_id)
    return [DocumentResponse.model_validate(d) for d in documents]
