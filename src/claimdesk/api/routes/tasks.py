"""
Task API routes.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from claimdesk.api.schemas import TaskCreate, TaskResponse, TaskUpdate
from claimdesk.db.connection import get_db
from claimdesk.db.repositories import ClaimRepository, TaskRepository
from claimdesk.exceptions import NotFoundError
from claimdesk.models.db import TaskStatus
from claimdesk.services import claims_service

router = APIRouter()


@router.get("", response_model=list[TaskResponse])
def list_tasks(
    status: Optional[TaskStatus] = Query(None, description="Filter by task status"),
    session: Session = Depends(get_db),
) -> list[TaskResponse]:
    """List tasks, optionally filtered by status."""
    repo = TaskRepository(session)
    tasks = repo.get_by_status(status.value) if status else repo.get_all()
    return [TaskResponse.model_validate(t) for t in tasks]


@router.post("", response_model=TaskResponse, status_code=201)
def create_task(payload: TaskCreate, session: Session = Depends(get_db)) -> TaskResponse:
    """
    Create a task.

    Raises:
        HTTPException 404: The referenced claim does not exist
    """
    if payload.claim_id is not None and not ClaimRepository(session).get(
        payload.claim_id
    ):
        raise HTTPException(
            status_code=404, detail=f"Claim {payload.claim_id} not found"
        )

    fields = payload.model_dump()
    fields["status"] = payload.status.value
    task = TaskRepository(session).create(**fields)
    return TaskResponse.model_validate(task)


@router.patch("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: int,
    payload: TaskUpdate,
    session: Session = Depends(get_db),
) -> TaskResponse:
    """Partially update a task. Completing it stamps the completion date."""
    changes = payload.model_dump(exclude_unset=True)
    if changes.get("status") is not None:
        changes["status"] = TaskStatus(changes["status"]).value

    try:
        task = claims_service.update_task(session, task_id, changes)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return TaskResponse.model_validate(task)
