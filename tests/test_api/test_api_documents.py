"""
Tests for Document API routes.
"""

from fastapi.testclient import TestClient

from claimdesk.models.db import Claim, Document


class TestDocuments:
    """Tests for /documents endpoints."""

    def test_list_empty(self, api_client: TestClient):
        response = api_client.get("/documents")

        assert response.status_code == 200
        assert response.json() == []

    def test_list(self, api_client: TestClient, sample_document: Document):
        response = api_client.get("/documents")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["fileName"] == "delivery_receipt.pdf"
        assert data[0]["fileType"] == "application/pdf"
        assert data[0]["uploadedBy"] == "Sarah Johnson"
        assert "uploadedAt" in data[0]

    def test_create(self, api_client: TestClient, sample_claim: Claim):
        response = api_client.post(
            "/documents",
            json={
                "claimId": sample_claim.id,
                "fileName": "damage_photos.zip",
                "fileType": "application/zip",
                "filePath": "uploads/damage_photos.zip",
                "uploadedBy": "Sarah Johnson",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["id"] is not None
        assert data["claimId"] == sample_claim.id
        assert data["uploadedAt"] is not None

    def test_create_for_unknown_claim(self, api_client: TestClient):
        response = api_client.post(
            "/documents",
            json={
                "claimId": 999,
                "fileName": "invoice.pdf",
                "fileType": "application/pdf",
                "filePath": "uploads/invoice.pdf",
                "uploadedBy": "Mike Thompson",
            },
        )

        assert response.status_code == 404

    def test_create_missing_file_name(self, api_client: TestClient):
        response = api_client.post(
            "/documents",
            json={
                "fileType": "application/pdf",
                "filePath": "uploads/invoice.pdf",
                "uploadedBy": "Mike Thompson",
            },
        )

        assert response.status_code == 422


class TestClaimDocuments:
    """Tests for GET /claims/{id}/documents."""

    def test_lists_claim_documents(
        self,
        api_client: TestClient,
        sample_document: Document,
        completed_claim: Claim,
    ):
        api_client.post(
            "/documents",
            json={
                "claimId": completed_claim.id,
                "fileName": "bill_of_lading.pdf",
                "fileType": "application/pdf",
                "filePath": "uploads/bill_of_lading.pdf",
                "uploadedBy": "Jessica Williams",
            },
        )

        response = api_client.get(f"/claims/{sample_document.claim_id}/documents")

        assert response.status_code == 200
        assert [d["id"] for d in response.json()] == [sample_document.id]

    def test_unknown_claim(self, api_client: TestClient):
        assert api_client.get("/claims/999/documents").status_code == 404
