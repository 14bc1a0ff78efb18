"""
Demo data for a fresh ClaimDesk database.

Seeds five claims across the processing statuses with their follow-up
tasks and contact history. Skips seeding if any claim already exists.
"""

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.orm import Session

from claimdesk.db.repositories import (
    ActivityRepository,
    ClaimRepository,
    TaskRepository,
)
from claimdesk.models.db import ActivityType, ClaimStatus, ClaimType

logger = logging.getLogger(__name__)

DEMO_CLAIMS = [
    {
        "claim_number": "CLM-10001",
        "company_name": "Acme Logistics Inc.",
        "contact_person": "John Smith",
        "email": "john.smith@acmelogistics.com",
        "phone": "(555) 123-4567",
        "claim_amount": "$1,250.00",
        "claim_type": ClaimType.DAMAGE.value,
        "claim_description": "Shipment arrived with visible damage to outer packaging and contents",
        "status": ClaimStatus.MISSING_INFO.value,
        "assigned_to": "Sarah Johnson",
        "missing_information": [
            "Photos of damaged items",
            "Original packing list",
            "Delivery receipt signature",
        ],
        "days_ago": 5,
    },
    {
        "claim_number": "CLM-10002",
        "company_name": "Global Shipping Co.",
        "contact_person": "Mark Davis",
        "email": "mark.davis@globalshipping.com",
        "phone": "(555) 234-5678",
        "claim_amount": "$950.00",
        "claim_type": ClaimType.SHORTAGE.value,
        "claim_description": "Shipment never arrived at destination",
        "status": ClaimStatus.IN_REVIEW.value,
        "assigned_to": "Mike Thompson",
        "days_ago": 4,
    },
    {
        "claim_number": "CLM-10003",
        "company_name": "FastTrack Delivery",
        "contact_person": "Lisa Johnson",
        "email": "lisa.johnson@fasttrack.com",
        "phone": "(555) 345-6789",
        "claim_amount": "$2,300.00",
        "claim_type": ClaimType.SHORTAGE.value,
        "claim_description": "Shipment arrived with 3 items missing from the inventory list",
        "status": ClaimStatus.FOLLOW_UP.value,
        "assigned_to": "David Brown",
        "days_ago": 3,
    },
    {
        "claim_number": "CLM-10004",
        "company_name": "Metro Distribution",
        "contact_person": "Robert Chen",
        "email": "robert.chen@metrodist.com",
        "phone": "(555) 456-7890",
        "claim_amount": "$1,750.00",
        "claim_type": ClaimType.DAMAGE.value,
        "claim_description": "Multiple items damaged during transit",
        "status": ClaimStatus.COMPLETED.value,
        "assigned_to": "Jessica Williams",
        "days_ago": 2,
    },
    {
        "claim_number": "CLM-10005",
        "company_name": "Rapid Freight Services",
        "contact_person": "Emily Taylor",
        "email": "emily.taylor@rapidfreight.com",
        "phone": "(555) 567-8901",
        "claim_amount": "$3,200.00",
        "claim_type": ClaimType.DAMAGE.value,
        "claim_description": "Shipment delivered 5 days late causing business interruption",
        "status": ClaimStatus.COMPLETED.value,
        "assigned_to": "Sarah Johnson",
        "days_ago": 1,
    },
]

# (claim_number, title, description, due in days, assignee)
DEMO_TASKS = [
    ("CLM-10001", "Follow up on missing documentation",
     "Contact customer to request the missing photos and delivery receipt", 1, "Sarah Johnson"),
    ("CLM-10003", "Send claims data request email",
     "Email customer requesting additional information about the lost items", 2, "David Brown"),
    ("CLM-10002", "Review state law applicability",
     "Check which state laws apply to this interstate shipment", 3, "Mike Thompson"),
    ("CLM-10005", "Compile claims documentation packet",
     "Collect all documents and create claims packet for processing", 4, "Sarah Johnson"),
]

# (claim_number, type, description, hours ago, created_by, details)
DEMO_ACTIVITIES = [
    ("CLM-10001", ActivityType.EMAIL, "Email Sent: Missing Information Request", 12, "Sarah Johnson",
     "Sent email to Acme Logistics requesting missing shipment details for claim #CLM-10001."),
    ("CLM-10002", ActivityType.PHONE, "Phone Call: Claim Information", 24, "Mike Thompson",
     "Called Global Shipping to discuss claim details and requirements for #CLM-10002."),
    ("CLM-10003", ActivityType.DOCUMENT, "Document: Claim Form Received", 36, "David Brown",
     "Received completed claim form from FastTrack Delivery for claim #CLM-10003."),
    ("CLM-10004", ActivityType.STATUS_UPDATE, "Status Update: Claim Finalized", 48, "Jessica Williams",
     "Claim #CLM-10004 for Metro Distribution has been finalized and approved."),
]


def seed_database(session: Session, now: Optional[datetime] = None) -> bool:
    """
    Insert demo claims, tasks and activities.

    Args:
        session: Database session (caller commits)
        now: Reference time for relative dates (defaults to the current time)

    Returns:
        True if data was inserted, False if the database already had claims
    """
    claims = ClaimRepository(session)
    if claims.count() > 0:
        logger.info("Database already has claims, skipping seed")
        return False

    now = now or datetime.now(timezone.utc)
    today: date = now.date()

    logger.info("Seeding database with demo data...")

    claim_ids: dict[str, int] = {}
    for demo in DEMO_CLAIMS:
        fields = {k: v for k, v in demo.items() if k != "days_ago"}
        fields.setdefault("missing_information", [])
        submitted = now - timedelta(days=demo["days_ago"])
        if fields["status"] == ClaimStatus.COMPLETED.value:
            fields["completion_date"] = now
        claim = claims.create(date_submitted=submitted, **fields)
        claim_ids[claim.claim_number] = claim.id

    tasks = TaskRepository(session)
    for claim_number, title, description, due_in, assignee in DEMO_TASKS:
        tasks.create(
            claim_id=claim_ids[claim_number],
            title=title,
            description=description,
            due_date=today + timedelta(days=due_in),
            assigned_to=assignee,
        )

    activities = ActivityRepository(session)
    for claim_number, activity_type, description, hours_ago, created_by, details in DEMO_ACTIVITIES:
        activities.create(
            claim_id=claim_ids[claim_number],
            type=activity_type.value,
            description=description,
            timestamp=now - timedelta(hours=hours_ago),
            created_by=created_by,
            extra_data={"details": details},
        )

    logger.info(
        f"Seeded {len(DEMO_CLAIMS)} claims, {len(DEMO_TASKS)} tasks, "
        f"{len(DEMO_ACTIVITIES)} activities"
    )
    return True
