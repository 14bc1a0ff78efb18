"""Tests for demo data seeding."""

from datetime import datetime, timezone

from claimdesk.db.repositories import (
    ActivityRepository,
    ClaimRepository,
    TaskRepository,
)
from claimdesk.db.seed import seed_database


class TestSeedDatabase:
    """Tests for seed_database."""

    def test_seeds_empty_database(self, db_session):
        now = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

        assert seed_database(db_session, now=now) is True

        claims = ClaimRepository(db_session)
        assert claims.count() == 5
        assert claims.count_by_status() == {
            "missing_info": 1,
            "in_review": 1,
            "follow_up": 1,
            "completed": 2,
        }
        assert TaskRepository(db_session).count() == 4
        assert ActivityRepository(db_session).count() == 4

    def test_seeded_claim_details(self, db_session):
        seed_database(db_session)

        claim = ClaimRepository(db_session).get_by_number("CLM-10001")
        assert claim.claim_amount == "$1,250.00"
        assert len(claim.missing_information) == 3
        assert claim.completion_date is None

        completed = ClaimRepository(db_session).get_by_number("CLM-10005")
        assert completed.completion_date is not None

    def test_skips_when_claims_exist(self, db_session, sample_claim):
        assert seed_database(db_session) is False
        assert ClaimRepository(db_session).count() == 1
