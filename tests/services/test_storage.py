"""Tests for Cloud Storage uploads, with a mocked storage client."""

from __future__ import annotations

import base64
from unittest.mock import MagicMock

import pytest
from google.api_core.exceptions import Forbidden, ServiceUnavailable

from flightops.persistence.errors import ConfigurationError, StoreError
from flightops.services.errors import ValidationError
from flightops.services.storage import DocumentStorage, aircraft_document_path, parse_data_uri

PDF_URI = "data:application/pdf;base64," + base64.b64encode(b"%PDF-1.4 test").decode()


@pytest.fixture
def gcs():
    client = MagicMock()
    blob = client.bucket.return_value.blob.return_value
    blob.public_url = "https://storage.googleapis.com/ops-bucket/file"
    return client


class TestParseDataUri:
    def test_valid(self):
        assert parse_data_uri(PDF_URI) == ("application/pdf", b"%PDF-1.4 test")

    @pytest.mark.parametrize("uri", ["not a data uri", "data:text/plain;base64,@@@"])
    def test_invalid(self, uri):
        with pytest.raises(ValidationError):
            parse_data_uri(uri)


class TestDocumentStorage:
    def test_upload_aircraft_document(self, gcs):
        storage = DocumentStorage(bucket_name="ops-bucket", client=gcs)
        uploaded = storage.upload_aircraft_document("ac-1", "doc-1", "insurance.pdf", PDF_URI)

        assert uploaded.file_path == "aircraft_documents/ac-1/doc-1/insurance.pdf"
        assert uploaded.file_url == "https://storage.googleapis.com/ops-bucket/file"
        gcs.bucket.assert_called_once_with("ops-bucket")
        gcs.bucket.return_value.blob.assert_called_once_with(uploaded.file_path)
        blob = gcs.bucket.return_value.blob.return_value
        blob.upload_from_string.assert_called_once_with(b"%PDF-1.4 test", content_type="application/pdf")

    def test_upload_logo_path(self, gcs):
        uploaded = DocumentStorage(bucket_name="ops-bucket", client=gcs).upload_company_logo(
            "logo.png", "data:image/png;base64," + base64.b64encode(b"png").decode()
        )
        assert uploaded.file_path == "company/logo/logo.png"

    def test_public_acl_failure_is_not_fatal(self, gcs):
        gcs.bucket.return_value.blob.return_value.make_public.side_effect = Forbidden("uniform access")
        uploaded = DocumentStorage(bucket_name="ops-bucket", client=gcs).upload_aircraft_document(
            "ac-1", "doc-1", "insurance.pdf", PDF_URI
        )
        assert uploaded.file_url

    def test_upload_failure(self, gcs):
        gcs.bucket.return_value.blob.return_value.upload_from_string.side_effect = ServiceUnavailable("down")
        with pytest.raises(StoreError):
            DocumentStorage(bucket_name="ops-bucket", client=gcs).upload_aircraft_document(
                "ac-1", "doc-1", "insurance.pdf", PDF_URI
            )

    def test_bucket_not_configured(self, gcs, monkeypatch):
        monkeypatch.delenv("FIREBASE_STORAGE_BUCKET", raising=False)
        with pytest.raises(ConfigurationError):
            DocumentStorage(client=gcs).upload_company_logo("logo.png", PDF_URI)

    def test_path_helper(self):
        assert aircraft_document_path("a", "d", "f.pdf") == "aircraft_documents/a/d/f.pdf"
