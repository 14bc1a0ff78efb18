"""
Repository layer for database operations.

Provides a clean API for CRUD operations on database models.
"""

from claimdesk.db.repositories.activity import ActivityRepository
from claimdesk.db.repositories.base import BaseRepository
from claimdesk.db.repositories.claim import ClaimRepository
from claimdesk.db.repositories.document import DocumentRepository
from claimdesk.db.repositories.task import TaskRepository

__all__ = [
    "ActivityRepository",
    "BaseRepository",
    "ClaimRepository",
    "DocumentRepository",
    "TaskRepository",
]
