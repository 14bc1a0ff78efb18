"""
Document repository.
"""

from typing import List

from sqlalchemy.orm import Session

from claimdesk.db.repositories.base import BaseRepository
from claimdesk.models.db import Document


class DocumentRepository(BaseRepository[Document]):
    """Repository for Document model."""

    def __init__(self, session: Session):
        super().__init__(Document, session)

    def get_by_claim(self, claim_id: int) -> List[Document]:
        """Get all documents filed for a claim, most recent upload first."""
        return (
            self.session.query(Document)
            .filter(Document.claim_id == claim_id)
            .order_by(Document.uploaded_at.desc(), Document.id.desc())
            .all()
        )
