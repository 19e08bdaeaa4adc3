"""Tests for company profile, company documents, customers and crew endpoints."""

from __future__ import annotations

import base64
from unittest.mock import MagicMock

import pytest

from flightops.api.deps import get_document_storage
from flightops.services.storage import DocumentStorage

PNG_URI = "data:image/png;base64," + base64.b64encode(b"\x89PNG").decode()


@pytest.fixture
def gcs(test_app):
    client = MagicMock()
    client.bucket.return_value.blob.return_value.public_url = "https://storage.example/logo.png"
    test_app.dependency_overrides[get_document_storage] = lambda: DocumentStorage("ops-bucket", client)
    return client


class TestCompanyProfileAPI:
    async def test_default_profile(self, client):
        resp = await client.get("/api/company/profile")
        assert resp.status_code == 200
        data = resp.json()
        assert data["companyName"] == "FlightOps (Default Name)"
        assert data["companyAddress"] == "123 Sky Lane, Aviation City, FL 33333"
        assert data["companyPhone"] == "555-123-4567"

    async def test_save_profile(self, client, fake_client):
        resp = await client.put("/api/company/profile", json={"companyName": "Blue Sky Charter"})
        assert resp.status_code == 200
        assert resp.json()["id"] == "main"
        assert fake_client.doc("companyProfile", "main")["companyName"] == "Blue Sky Charter"

    async def test_logo_upload(self, client, gcs):
        resp = await client.post("/api/company/logo", json={"fileName": "logo.png", "dataUri": PNG_URI})
        assert resp.status_code == 200
        assert resp.json()["logoUrl"] == "https://storage.example/logo.png"
        gcs.bucket.return_value.blob.assert_called_once_with("company/logo/logo.png")

    async def test_logo_bad_data_uri(self, client, gcs):
        resp = await client.post("/api/company/logo", json={"fileName": "logo.png", "dataUri": "nope"})
        assert resp.status_code == 422

    async def test_logo_without_bucket(self, client, test_app, monkeypatch):
        monkeypatch.delenv("FIREBASE_STORAGE_BUCKET", raising=False)
        test_app.dependency_overrides[get_document_storage] = lambda: DocumentStorage(client=MagicMock())
        resp = await client.post("/api/company/logo", json={"fileName": "logo.png", "dataUri": PNG_URI})
        assert resp.status_code == 503


class TestAircraftDocumentsAPI:
    async def test_upload_returns_url(self, client, gcs):
        resp = await client.post("/api/aircraft-documents/upload", json={
            "aircraftId": "ac-1", "documentId": "doc-1", "fileName": "insurance.png", "dataUri": PNG_URI,
        })
        assert resp.status_code == 201
        assert resp.json() == {
            "documentId": "doc-1",
            "fileUrl": "https://storage.example/logo.png",
            "filePath": "aircraft_documents/ac-1/doc-1/insurance.png",
        }

    async def test_file_name_with_path_rejected(self, client, gcs):
        resp = await client.post("/api/aircraft-documents/upload", json={
            "aircraftId": "ac-1", "fileName": "../evil.png", "dataUri": PNG_URI,
        })
        assert resp.status_code == 422

    async def test_crud(self, client):
        body = {"aircraftId": "ac-1", "documentName": "Registration", "documentType": "Registration"}
        doc = (await client.post("/api/aircraft-documents", json=body)).json()

        resp = await client.put(f"/api/aircraft-documents/{doc['id']}", json={**body, "notes": "Renewed"})
        assert resp.json()["notes"] == "Renewed"
        resp = await client.get("/api/aircraft-documents", params={"aircraftId": "ac-1"})
        assert len(resp.json()) == 1
        resp = await client.delete(f"/api/aircraft-documents/{doc['id']}")
        assert resp.status_code == 200


class TestCustomersAPI:
    async def test_blank_email_stored_as_absent(self, client):
        resp = await client.post("/api/customers", json={"name": "Acme Corp", "email": ""})
        assert resp.status_code == 201
        assert "email" not in resp.json()

    async def test_list_ordered_by_name(self, client):
        for name in ("Zulu Air", "Acme Corp"):
            await client.post("/api/customers", json={"name": name})
        resp = await client.get("/api/customers")
        assert [c["name"] for c in resp.json()] == ["Acme Corp", "Zulu Air"]

    async def test_invalid_email(self, client):
        resp = await client.post("/api/customers", json={"name": "Acme", "email": "nope"})
        assert resp.status_code == 422


class TestCompanyDocumentsAPI:
    async def test_crud(self, client):
        body = {"documentName": "Operations Manual", "documentType": "Manual", "version": "3.1"}
        doc = (await client.post("/api/company-documents", json=body)).json()
        assert doc["version"] == "3.1"

        resp = await client.delete(f"/api/company-documents/{doc['id']}")
        assert resp.status_code == 200
        resp = await client.delete(f"/api/company-documents/{doc['id']}")
        assert resp.status_code == 404


class TestCrewAPI:
    async def test_crew_document_gets_member_name(self, client):
        member = (await client.post("/api/crew", json={
            "firstName": "Pat", "lastName": "Pilot", "role": "Captain",
        })).json()

        resp = await client.post("/api/crew-documents", json={
            "crewMemberId": member["id"], "documentName": "Medical", "documentType": "Medical",
        })
        assert resp.status_code == 201
        assert resp.json()["crewMemberName"] == "Pat Pilot"

        resp = await client.get("/api/crew-documents", params={"crewMemberId": member["id"]})
        assert len(resp.json()) == 1

    async def test_crew_document_for_unknown_member(self, client):
        resp = await client.post("/api/crew-documents", json={
            "crewMemberId": "missing", "documentName": "Medical", "documentType": "Medical",
        })
        assert resp.status_code == 404
