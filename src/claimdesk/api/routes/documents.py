"""
Document API routes.

Records of supporting files filed against claims. The files themselves
live in external storage; only their metadata is kept here.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from claimdesk.api.schemas import DocumentCreate, DocumentResponse
from claimdesk.db.connection import get_db
from claimdesk.db.repositories import ClaimRepository, DocumentRepository

router = APIRouter()


@router.get("", response_model=list[DocumentResponse])
def list_documents(session: Session = Depends(get_db)) -> list[DocumentResponse]:
    """List all document records."""
    documents = DocumentRepository(session).get_all()
    return [DocumentResponse.model_validate(d) for d in documents]


@router.post("", response_model=DocumentResponse, status_code=201)
def create_document(
    payload: DocumentCreate, session: Session = Depends(get_db)
) -> DocumentResponse:
    """
    Register a document.

    Raises:
        HTTPException 404: The referenced claim does not exist
    """
    if payload.claim_id is not None and not ClaimRepository(session).get(
        payload.claim_id
    ):
        raise HTTPException(
            status_code=404, detail=f"Claim {payload.claim_id} not found"
        )

    document = DocumentRepository(session).create(**payload.model_dump())
    return DocumentResponse.model_validate(document)
