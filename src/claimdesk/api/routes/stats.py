"""
Statistics API routes.

Summary counts for the claims dashboard.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from claimdesk.api.schemas import OverviewStats
from claimdesk.db.connection import get_db
from claimdesk.db.repositories import ClaimRepository, TaskRepository
from claimdesk.models.db import ClaimStatus

router = APIRouter()


@router.get("/overview", response_model=OverviewStats)
async def get_overview_stats(session: Session = Depends(get_db)) -> OverviewStats:
    """
    Get overview statistics.

    Returns the total claim count, counts per status, and open and overdue
    task counts.
    """
    claim_repo = ClaimRepository(session)
    task_repo = TaskRepository(session)

    by_status = claim_repo.count_by_status()
    # Report every status, including those with no claims
    claims_by_status = {status.value: by_status.get(status.value, 0) for status in ClaimStatus}

    return OverviewStats(
        total_claims=sum(by_status.values()),
        claims_by_status=claims_by_status,
        pending_action=claims_by_status[ClaimStatus.FOLLOW_UP.value],
        missing_info=claims_by_status[ClaimStatus.MISSING_INFO.value],
        completed=claims_by_status[ClaimStatus.COMPLETED.value],
        pending_tasks=task_repo.count_open(),
        overdue_tasks=len(task_repo.get_overdue()),
    )
