"""
Task repository.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from claimdesk.db.repositories.base import BaseRepository
from claimdesk.models.db import Task, TaskStatus


class TaskRepository(BaseRepository[Task]):
    """Repository for Task model."""

    def __init__(self, session: Session):
        super().__init__(Task, session)

    def get_by_claim(self, claim_id: int) -> List[Task]:
        """Get all tasks for a claim ordered by due date."""
        return (
            self.session.query(Task)
            .filter(Task.claim_id == claim_id)
            .order_by(Task.due_date)
            .all()
        )

    def get_by_status(self, status: str, limit: Optional[int] = None) -> List[Task]:
        """Get tasks with a given status ordered by due date."""
        query = (
            self.session.query(Task)
            .filter(Task.status == status)
            .order_by(Task.due_date)
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count_open(self) -> int:
        """Count tasks that are not completed (pending or in progress)."""
        return (
            self.session.query(Task)
            .filter(Task.status != TaskStatus.COMPLETED.value)
            .count()
        )

    def get_overdue(self, today: Optional[date] = None) -> List[Task]:
        """
        Get open tasks whose due date has passed.

        Args:
            today: Reference date (defaults to the current date)

        Returns:
            List of overdue tasks, oldest due date first
        """
        today = today or date.today()
        return (
            self.session.query(Task)
            .filter(Task.status != TaskStatus.COMPLETED.value, Task.due_date < today)
            .order_by(Task.due_date)
            .all()
        )
