"""Firestore async client singleton."""

from __future__ import annotations

import logging
import os
from typing import Any

from flightops.persistence.errors import ConfigurationError

logger = logging.getLogger(__name__)

_client: Any = None


def get_firestore_client() -> Any:
    """Return a lazy-initialized Firestore AsyncClient.

    Uses Application Default Credentials (ADC). ``GOOGLE_CLOUD_PROJECT``
    overrides the project when set. Repositories never call this directly:
    the API layer passes the client into their constructors.
    """
    global _client
    if _client is not None:
        return _client

    try:
        from google.cloud.firestore import AsyncClient
    except ImportError as exc:
        raise ConfigurationError("google-cloud-firestore is not installed") from exc

    try:
        _client = AsyncClient(project=os.environ.get("GOOGLE_CLOUD_PROJECT"))
    except Exception as exc:
        raise ConfigurationError(f"Firestore client could not be created: {exc}") from exc

    logger.info("Using Google Cloud Firestore")
    return _client


def _reset_client() -> None:
    """Reset the singleton (for testing only)."""
    global _client
    _client = None
