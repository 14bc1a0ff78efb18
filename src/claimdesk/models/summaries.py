"""
Immutable snapshots of claims, tasks and activities.

The insights generator works on these rather than on ORM rows so that it
never touches a database session and cannot mutate stored records. Each
snapshot knows how to project itself into the compact JSON shape embedded
in LLM prompts.
"""

from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from claimdesk.models.db import Activity, ActivityType, Claim, ClaimStatus, Task


def _iso(value: Optional[date | datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


class _Snapshot(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ClaimSummary(_Snapshot):
    """Point-in-time view of a claim."""

    id: int
    claim_number: str
    status: ClaimStatus
    date_submitted: datetime
    completion_date: Optional[datetime] = None
    amount: str

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_as_text(cls, value: Any) -> Any:
        # Amounts are stored as display strings ("$1,250.00"); accept numbers too
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return f"{value:.2f}"
        return value

    @property
    def missing_info(self) -> bool:
        return self.status == ClaimStatus.MISSING_INFO

    @classmethod
    def from_model(cls, claim: Claim) -> "ClaimSummary":
        return cls(
            id=claim.id,
            claim_number=claim.claim_number,
            status=claim.status,
            date_submitted=claim.date_submitted,
            completion_date=claim.completion_date,
            amount=claim.claim_amount,
        )

    def projection(self) -> dict[str, Any]:
        """Compact JSON-ready view used in insight prompts."""
        return {
            "id": self.id,
            "claimNumber": self.claim_number,
            "status": self.status.value,
            "dateSubmitted": _iso(self.date_submitted),
            "completionDate": _iso(self.completion_date),
            "amount": self.amount,
            "missingInfo": self.missing_info,
        }

    def history_projection(self) -> dict[str, Any]:
        """Anonymous view used as historical context for outcome prediction."""
        return {
            "status": self.status.value,
            "dateSubmitted": _iso(self.date_submitted),
            "completionDate": _iso(self.completion_date),
            "amount": self.amount,
            "missingInfo": self.missing_info,
        }


class TaskSummary(_Snapshot):
    """Point-in-time view of a follow-up task."""

    id: int
    claim_id: Optional[int] = None
    title: str
    description: str
    status: str
    due_date: date
    completion_date: Optional[datetime] = None

    @classmethod
    def from_model(cls, task: Task) -> "TaskSummary":
        return cls(
            id=task.id,
            claim_id=task.claim_id,
            title=task.title,
            description=task.description,
            status=task.status,
            due_date=task.due_date,
            completion_date=task.completion_date,
        )

    def projection(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "claimId": self.claim_id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "dueDate": _iso(self.due_date),
            "completionDate": _iso(self.completion_date),
        }


class ActivitySummary(_Snapshot):
    """Point-in-time view of a claim activity."""

    id: int
    claim_id: Optional[int] = None
    type: ActivityType
    description: str
    timestamp: datetime

    @classmethod
    def from_model(cls, activity: Activity) -> "ActivitySummary":
        return cls(
            id=activity.id,
            claim_id=activity.claim_id,
            type=activity.type,
            description=activity.description,
            timestamp=activity.timestamp,
        )

    def projection(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "claimId": self.claim_id,
            "type": self.type.value,
            "description": self.description,
            "timestamp": _iso(self.timestamp),
        }
