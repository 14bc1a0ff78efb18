"""
Claim repository.
"""

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from claimdesk.db.repositories.base import BaseRepository
from claimdesk.models.db import Claim


class ClaimRepository(BaseRepository[Claim]):
    """Repository for Claim model."""

    def __init__(self, session: Session):
        super().__init__(Claim, session)

    def get_by_number(self, claim_number: str) -> Optional[Claim]:
        """
        Get claim by its display number (e.g. "CLM-10001").

        Args:
            claim_number: Claim number

        Returns:
            Claim instance or None
        """
        return (
            self.session.query(Claim)
            .filter(Claim.claim_number == claim_number)
            .first()
        )

    def get_by_status(
        self, status: str, limit: Optional[int] = None, offset: int = 0
    ) -> List[Claim]:
        """
        Get claims with a given status, newest first.

        Args:
            status: Claim status value
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of claims
        """
        query = (
            self.session.query(Claim)
            .filter(Claim.status == status)
            .order_by(Claim.date_submitted.desc())
            .offset(offset)
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def get_recent(self, limit: int = 10) -> List[Claim]:
        """Get the most recently submitted claims."""
        return (
            self.session.query(Claim)
            .order_by(Claim.date_submitted.desc())
            .limit(limit)
            .all()
        )

    def count_by_status(self) -> dict[str, int]:
        """Count claims grouped by status."""
        rows = (
            self.session.query(Claim.status, func.count(Claim.id))
            .group_by(Claim.status)
            .all()
        )
        return {status: count for status, count in rows}
