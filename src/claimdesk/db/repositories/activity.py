"""
Activity repository.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from claimdesk.db.repositories.base import BaseRepository
from claimdesk.models.db import Activity


class ActivityRepository(BaseRepository[Activity]):
    """Repository for Activity model."""

    def __init__(self, session: Session):
        super().__init__(Activity, session)

    def get_by_claim(self, claim_id: int) -> List[Activity]:
        """Get all activities for a claim, newest first."""
        return (
            self.session.query(Activity)
            .filter(Activity.claim_id == claim_id)
            .order_by(Activity.timestamp.desc(), Activity.id.desc())
            .all()
        )

    def get_recent(self, limit: Optional[int] = None) -> List[Activity]:
        """Get activities across all claims, newest first."""
        query = self.session.query(Activity).order_by(
            Activity.timestamp.desc(), Activity.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()
