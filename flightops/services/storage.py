"""Upload aircraft documents and the company logo to Cloud Storage."""

from __future__ import annotations

import base64
import binascii
import logging
import os
import re
from typing import Any, NamedTuple

from google.api_core.exceptions import GoogleAPICallError
from google.cloud import storage

from flightops.persistence.errors import ConfigurationError, StoreError
from flightops.services.errors import ValidationError

logger = logging.getLogger(__name__)

_DATA_URI = re.compile(r"^data:(.+?);base64,(.+)$", re.DOTALL)


class UploadedFile(NamedTuple):
    file_url: str
    file_path: str


def parse_data_uri(data_uri: str) -> tuple[str, bytes]:
    """Split ``data:<mime>;base64,<payload>`` into (content type, bytes)."""
    match = _DATA_URI.match(data_uri)
    if not match:
        raise ValidationError("Invalid data URI: expected data:<mime>;base64,<data>")
    content_type, payload = match.groups()
    try:
        return content_type, base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValidationError(f"Invalid base64 payload: {exc}") from exc


def aircraft_document_path(aircraft_id: str, document_id: str, file_name: str) -> str:
    return f"aircraft_documents/{aircraft_id}/{document_id}/{file_name}"


class DocumentStorage:
    """Writes uploaded files to the Firebase Storage bucket and returns public URLs."""

    def __init__(self, bucket_name: str | None = None, client: Any = None):
        self._bucket_name = bucket_name or os.environ.get("FIREBASE_STORAGE_BUCKET")
        self._client = client

    def _bucket(self):
        if not self._bucket_name:
            raise ConfigurationError("FIREBASE_STORAGE_BUCKET is not set")
        if self._client is None:
            self._client = storage.Client()
        return self._client.bucket(self._bucket_name)

    def _upload(self, path: str, data_uri: str) -> UploadedFile:
        content_type, content = parse_data_uri(data_uri)
        blob = self._bucket().blob(path)
        try:
            blob.upload_from_string(content, content_type=content_type)
        except GoogleAPICallError as exc:
            logger.error("Failed to upload gs://%s/%s: %s", self._bucket_name, path, exc)
            raise StoreError("upload", f"gs://{self._bucket_name}/{path}", exc) from exc

        try:
            blob.make_public()
        except GoogleAPICallError as exc:
            # Uniform bucket-level access rejects per-object ACLs.
            logger.warning("Could not make gs://%s/%s public: %s", self._bucket_name, path, exc)

        logger.info("Uploaded %d bytes to gs://%s/%s", len(content), self._bucket_name, path)
        return UploadedFile(file_url=blob.public_url, file_path=path)

    def upload_aircraft_document(
        self, aircraft_id: str, document_id: str, file_name: str, data_uri: str
    ) -> UploadedFile:
        return self._upload(aircraft_document_path(aircraft_id, document_id, file_name), data_uri)

    def upload_company_logo(self, file_name: str, data_uri: str) -> UploadedFile:
        return self._upload(f"company/logo/{file_name}", data_uri)
