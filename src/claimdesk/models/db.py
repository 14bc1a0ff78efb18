"""
SQLAlchemy database models for ClaimDesk.

These models represent the database schema for trucking claims, the
follow-up tasks raised against them, the activity log of contacts and
status changes, and the documents filed with each claim.
"""

import enum
from datetime import date, datetime
from typing import Optional

from sqlalchemy import JSON, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class ClaimStatus(str, enum.Enum):
    """Processing status of a claim."""

    NEW = "new"
    MISSING_INFO = "missing_info"  # Waiting on documents from the claimant
    IN_REVIEW = "in_review"
    FOLLOW_UP = "follow_up"  # Needs action from a claims handler
    COMPLETED = "completed"


class ClaimType(str, enum.Enum):
    """Kind of freight loss being claimed."""

    SHORTAGE = "shortage"
    DAMAGE = "damage"


class TaskStatus(str, enum.Enum):
    """Status of a follow-up task."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class ActivityType(str, enum.Enum):
    """Kind of activity recorded against a claim."""

    EMAIL = "email"
    PHONE = "phone"
    DOCUMENT = "document"
    STATUS_UPDATE = "status_update"


class Claim(Base):
    """A freight shortage or damage claim."""

    __tablename__ = "claims"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    claim_number: Mapped[str] = mapped_column(
        String(64), nullable=False, unique=True, index=True
    )

    # Freight details
    pro_number: Mapped[Optional[str]] = mapped_column(String(64))
    freight_bill_date: Mapped[Optional[str]] = mapped_column(String(32))
    claimant_ref_number: Mapped[Optional[str]] = mapped_column(String(64))
    claim_amount: Mapped[str] = mapped_column(String(32), nullable=False)
    claim_type: Mapped[str] = mapped_column(String(32), nullable=False)
    claim_description: Mapped[Optional[str]] = mapped_column(Text)

    shipper_name: Mapped[Optional[str]] = mapped_column(String(255))
    consignee_name: Mapped[Optional[str]] = mapped_column(String(255))

    # Claimant contact
    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_person: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(64), nullable=False)

    # Processing state
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default=ClaimStatus.NEW.value, index=True
    )
    assigned_to: Mapped[Optional[str]] = mapped_column(String(255))
    missing_information: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list
    )
    date_submitted: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    completion_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True)
    )

    # Relationships
    tasks: Mapped[list["Task"]] = relationship(back_populates="claim")
    documents: Mapped[list["Document"]] = relationship(back_populates="claim")
    activities: Mapped[list["Activity"]] = relationship(
        back_populates="claim", order_by="Activity.timestamp.desc()"
    )

    def __repr__(self) -> str:
        return (
            f"<Claim(id={self.id}, claim_number={self.claim_number!r}, "
            f"status={self.status!r})>"
        )


class Task(Base):
    """A follow-up task, usually attached to a claim."""

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    claim_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("claims.id", ondelete="SET NULL"), index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default=TaskStatus.PENDING.value, index=True
    )
    assigned_to: Mapped[Optional[str]] = mapped_column(String(255))
    completion_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True)
    )
    extra_data: Mapped[Optional[dict]] = mapped_column(JSON)

    claim: Mapped[Optional["Claim"]] = relationship(back_populates="tasks")

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, title={self.title!r}, status={self.status!r})>"


class Activity(Base):
    """An email, call, document or status change recorded on a claim."""

    __tablename__ = "activities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    claim_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("claims.id", ondelete="CASCADE"), index=True
    )
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
    created_by: Mapped[str] = mapped_column(String(255), nullable=False)
    extra_data: Mapped[Optional[dict]] = mapped_column(JSON)

    claim: Mapped[Optional["Claim"]] = relationship(back_populates="activities")

    def __repr__(self) -> str:
        return f"<Activity(id={self.id}, type={self.type!r}, claim_id={self.claim_id})>"


class Document(Base):
    """A supporting file stored for a claim (bill of lading, photos, invoices)."""

    __tablename__ = "documents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    claim_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("claims.id", ondelete="CASCADE"), index=True
    )
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_type: Mapped[str] = mapped_column(String(128), nullable=False)
    file_path: Mapped[str] = mapped_column(Text, nullable=False)
    uploaded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    uploaded_by: Mapped[str] = mapped_column(String(255), nullable=False)

    claim: Mapped[Optional["Claim"]] = relationship(back_populates="documents")

    def __repr__(self) -> str:
        return (
            f"<Document(id={self.id}, file_name={self.file_name!r}, "
            f"claim_id={self.claim_id})>"
        )
