"""
Claim workflow operations.

Wraps the repositories with the bookkeeping the claims desk expects:
every new claim and every status change is recorded as an activity, and
supplying a field clears the matching "missing information" items.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy.orm import Session

from claimdesk.db.repositories import (
    ActivityRepository,
    ClaimRepository,
    TaskRepository,
)
from claimdesk.models.db import (
    ActivityType,
    Claim,
    ClaimStatus,
    Task,
    TaskStatus,
)
from claimdesk.models.summaries import ActivitySummary, ClaimSummary, TaskSummary

logger = logging.getLogger(__name__)

SYSTEM_USER = "System"

# Claim field -> labels it satisfies in a claim's missing_information list
MISSING_INFO_FIELDS: dict[str, list[str]] = {
    "pro_number": ["Pro Number"],
    "claimant_ref_number": ["Claimant's Reference Number"],
    "freight_bill_date": ["Freight Bill Date"],
    "claim_amount": ["Claim Amount"],
    "shipper_name": ["Shipper Name", "Shipper Details"],
    "consignee_name": ["Consignee Name", "Consignee Details"],
    "claim_description": ["Claim Description"],
    "company_name": ["Company Name"],
    "contact_person": ["Contact Person"],
    "email": ["Email Address"],
    "phone": ["Phone Number"],
}


def create_claim(session: Session, **fields: Any) -> Claim:
    """
    Create a claim and record a "Claim Created" activity.

    Args:
        session: Database session
        **fields: Claim column values

    Returns:
        The new claim
    """
    claim = ClaimRepository(session).create(**fields)

    ActivityRepository(session).create(
        claim_id=claim.id,
        type=ActivityType.STATUS_UPDATE.value,
        description="Claim Created",
        created_by=claim.assigned_to or SYSTEM_USER,
        extra_data={
            "details": f"New claim #{claim.claim_number} created for {claim.company_name}"
        },
    )

    logger.info(f"Created claim {claim.claim_number} (id={claim.id})")
    return claim


def resolve_missing_information(
    missing: list[str], supplied_fields: list[str]
) -> tuple[list[str], list[str]]:
    """
    Remove missing-information items satisfied by newly supplied fields.

    Matching is a case-insensitive substring test of each label against the
    outstanding items; each label clears at most one item.

    Args:
        missing: Outstanding missing-information items
        supplied_fields: Claim fields being set to non-empty values

    Returns:
        Tuple of (remaining items, removed items)
    """
    remaining = list(missing)
    removed: list[str] = []

    for field in supplied_fields:
        for label in MISSING_INFO_FIELDS.get(field, []):
            for index, item in enumerate(remaining):
                if label.lower() in item.lower():
                    removed.append(remaining.pop(index))
                    break

    return remaining, removed


def update_claim(
    session: Session,
    claim_id: int,
    changes: dict[str, Any],
    updated_by: Optional[str] = None,
) -> Claim:
    """
    Apply changes to a claim with activity bookkeeping.

    Args:
        session: Database session
        claim_id: Claim to update
        changes: Column values to set
        updated_by: User making the change (defaults to the assignee)

    Returns:
        The updated claim

    Raises:
        NotFoundError: If the claim does not exist
    """
    claims = ClaimRepository(session)
    activities = ActivityRepository(session)
    claim = claims.get_or_raise(claim_id)

    actor = updated_by or changes.get("assigned_to") or claim.assigned_to or SYSTEM_USER
    updates = dict(changes)

    if claim.missing_information:
        supplied = [
            key for key, value in changes.items() if value not in (None, "")
        ]
        remaining, removed = resolve_missing_information(
            claim.missing_information, supplied
        )
        if removed:
            updates["missing_information"] = remaining
            activities.create(
                claim_id=claim.id,
                type=ActivityType.DOCUMENT.value,
                description="Missing Information Updated",
                created_by=actor,
                extra_data={
                    "details": f"Information provided: {', '.join(removed)}",
                    "removed": removed,
                    "remaining": remaining,
                },
            )

    old_status = claim.status
    new_status = changes.get("status")
    if new_status is not None:
        new_status = ClaimStatus(new_status).value
        updates["status"] = new_status
        if new_status == ClaimStatus.COMPLETED.value and claim.completion_date is None:
            updates.setdefault("completion_date", datetime.now(timezone.utc))

    claim = claims.update(claim_id, **updates)

    if new_status is not None and new_status != old_status:
        activities.create(
            claim_id=claim.id,
            type=ActivityType.STATUS_UPDATE.value,
            description=f"Status Update: {new_status}",
            created_by=actor,
            extra_data={
                "details": (
                    f"Claim #{claim.claim_number} status updated "
                    f"from {old_status} to {new_status}"
                ),
                "oldStatus": old_status,
                "newStatus": new_status,
            },
        )
        logger.info(
            f"Claim {claim.claim_number} status changed: {old_status} -> {new_status}"
        )

    return claim


def update_task(session: Session, task_id: int, changes: dict[str, Any]) -> Task:
    """
    Apply changes to a task, stamping the completion date on completion.

    Raises:
        NotFoundError: If the task does not exist
    """
    tasks = TaskRepository(session)
    task = tasks.get_or_raise(task_id)

    updates = dict(changes)
    if (
        updates.get("status") == TaskStatus.COMPLETED.value
        and task.completion_date is None
    ):
        updates.setdefault("completion_date", datetime.now(timezone.utc))

    return tasks.update(task_id, **updates)


def load_snapshots(
    session: Session,
) -> tuple[list[ClaimSummary], list[TaskSummary], list[ActivitySummary]]:
    """Load every claim, task and activity as immutable snapshots."""
    claims = [ClaimSummary.from_model(c) for c in ClaimRepository(session).get_all()]
    tasks = [TaskSummary.from_model(t) for t in TaskRepository(session).get_all()]
    activities = [
        ActivitySummary.from_model(a) for a in ActivityRepository(session).get_recent()
    ]
    return claims, tasks, activities
