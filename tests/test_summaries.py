"""Tests for claim, task and activity snapshots."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from claimdesk.models.db import ClaimStatus
from claimdesk.models.summaries import ActivitySummary, ClaimSummary, TaskSummary


class TestClaimSummary:
    """Tests for ClaimSummary."""

    def test_from_model(self, sample_claim):
        summary = ClaimSummary.from_model(sample_claim)

        assert summary.id == sample_claim.id
        assert summary.claim_number == "CLM-20001"
        assert summary.status == ClaimStatus.MISSING_INFO
        assert summary.amount == "$1,250.00"
        assert summary.missing_info is True

    def test_projection(self, completed_claim):
        projection = ClaimSummary.from_model(completed_claim).projection()

        assert set(projection) == {
            "id",
            "claimNumber",
            "status",
            "dateSubmitted",
            "completionDate",
            "amount",
            "missingInfo",
        }
        assert projection["status"] == "completed"
        assert projection["missingInfo"] is False
        assert projection["completionDate"].startswith("2024-02-15")

    def test_history_projection_omits_identity(self, sample_claim):
        projection = ClaimSummary.from_model(sample_claim).history_projection()

        assert "id" not in projection
        assert "claimNumber" not in projection
        assert projection["missingInfo"] is True

    def test_numeric_amount_formatted(self):
        summary = ClaimSummary(
            id=1,
            claim_number="CLM-1",
            status="new",
            date_submitted=datetime(2024, 1, 1, tzinfo=timezone.utc),
            amount=1250,
        )
        assert summary.amount == "1250.00"

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            ClaimSummary(
                id=1,
                claim_number="CLM-1",
                status="archived",
                date_submitted=datetime(2024, 1, 1, tzinfo=timezone.utc),
                amount="$1.00",
            )

    def test_frozen(self, sample_claim):
        summary = ClaimSummary.from_model(sample_claim)
        with pytest.raises(ValidationError):
            summary.amount = "$0.00"


class TestTaskAndActivitySummary:
    """Tests for TaskSummary and ActivitySummary."""

    def test_task_projection(self, sample_task):
        projection = TaskSummary.from_model(sample_task).projection()

        assert projection["claimId"] == sample_task.claim_id
        assert projection["status"] == "pending"
        assert projection["dueDate"] == sample_task.due_date.isoformat()
        assert projection["completionDate"] is None

    def test_activity_projection(self, sample_activity):
        projection = ActivitySummary.from_model(sample_activity).projection()

        assert projection["type"] == "email"
        assert projection["description"] == "Email Sent: Missing Information Request"
        assert projection["timestamp"].startswith("2024-03-02")
