"""
API schemas for ClaimDesk.

Pydantic models for request/response validation. Responses use camelCase
keys; requests accept either camelCase or snake_case.
"""

from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from claimdesk.models.db import ActivityType, ClaimStatus, ClaimType, TaskStatus


class APIModel(BaseModel):
    """Base schema with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ===== Claim Schemas =====


class ClaimBase(APIModel):
    """Fields shared by claim create and response schemas."""

    pro_number: Optional[str] = None
    freight_bill_date: Optional[str] = None
    claimant_ref_number: Optional[str] = None
    claim_amount: str
    claim_type: ClaimType
    claim_description: Optional[str] = None
    shipper_name: Optional[str] = None
    consignee_name: Optional[str] = None
    company_name: str
    contact_person: str
    email: str
    phone: str
    assigned_to: Optional[str] = None


class ClaimCreate(ClaimBase):
    """Request schema for creating a claim."""

    claim_number: str = Field(min_length=1)
    status: ClaimStatus = ClaimStatus.NEW
    missing_information: list[str] = Field(default_factory=list)


class ClaimUpdate(APIModel):
    """Request schema for a partial claim update."""

    pro_number: Optional[str] = None
    freight_bill_date: Optional[str] = None
    claimant_ref_number: Optional[str] = None
    claim_amount: Optional[str] = None
    claim_type: Optional[ClaimType] = None
    claim_description: Optional[str] = None
    shipper_name: Optional[str] = None
    consignee_name: Optional[str] = None
    company_name: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[ClaimStatus] = None
    assigned_to: Optional[str] = None
    missing_information: Optional[list[str]] = None
    updated_by: Optional[str] = None

    @field_validator(
        "claim_amount",
        "claim_type",
        "company_name",
        "contact_person",
        "email",
        "phone",
        "status",
        "missing_information",
        mode="before",
    )
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        """Required columns may be omitted from a patch but not cleared."""
        if value is None:
            raise ValueError("field cannot be null")
        return value


class ClaimResponse(ClaimBase):
    """Response schema for a claim."""

    id: int
    claim_number: str
    claim_type: str
    status: str
    missing_information: list[str] = Field(default_factory=list)
    date_submitted: datetime
    completion_date: Optional[datetime] = None


# ===== Task Schemas =====


class TaskCreate(APIModel):
    """Request schema for creating a task."""

    claim_id: Optional[int] = None
    title: str = Field(min_length=1)
    description: str
    due_date: date
    status: TaskStatus = TaskStatus.PENDING
    assigned_to: Optional[str] = None


class TaskUpdate(APIModel):
    """Request schema for a partial task update."""

    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = None
    status: Optional[TaskStatus] = None
    assigned_to: Optional[str] = None

    @field_validator("title", "description", "due_date", "status", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("field cannot be null")
        return value


class TaskResponse(APIModel):
    """Response schema for a task."""

    id: int
    claim_id: Optional[int] = None
    title: str
    description: str
    due_date: date
    status: str
    assigned_to: Optional[str] = None
    completion_date: Optional[datetime] = None


# ===== Activity Schemas =====


class ActivityCreate(APIModel):
    """Request schema for recording an activity."""

    claim_id: Optional[int] = None
    type: ActivityType
    description: str = Field(min_length=1)
    created_by: str
    details: Optional[str] = None


class ActivityResponse(APIModel):
    """Response schema for an activity."""

    id: int
    claim_id: Optional[int] = None
    type: str
    description: str
    timestamp: datetime
    created_by: str
    extra_data: Optional[dict[str, Any]] = None


# ===== Document Schemas =====


class DocumentCreate(APIModel):
    """Request schema for registering a stored document."""

    claim_id: Optional[int] = None
    file_name: str = Field(min_length=1)
    file_type: str = Field(min_length=1)
    file_path: str = Field(min_length=1)
    uploaded_by: str = Field(min_length=1)


class DocumentResponse(APIModel):
    """Response schema for a document record."""

    id: int
    claim_id: Optional[int] = None
    file_name: str
    file_type: str
    file_path: str
    uploaded_at: datetime
    uploaded_by: str


# ===== Stats Schemas =====


class OverviewStats(APIModel):
    """Dashboard summary counts."""

    total_claims: int
    claims_by_status: dict[str, int]
    pending_action: int  # claims in follow_up
    missing_info: int
    completed: int
    pending_tasks: int  # every task not yet completed
    overdue_tasks: int


# ===== Insights Schemas =====


class PredictionRequest(APIModel):
    """Request schema for outcome prediction."""

    claim: dict[str, Any]
