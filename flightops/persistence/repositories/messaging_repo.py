"""Bulletins and notifications."""

from __future__ import annotations

import logging
from typing import Any

from google.api_core.exceptions import Conflict, NotFound
from google.cloud.firestore import SERVER_TIMESTAMP, Query

from flightops.contracts.messaging import Bulletin, Notification
from flightops.persistence.errors import DocumentExistsError, DocumentNotFoundError
from flightops.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

NOTIFICATION_LIST_LIMIT = 50


class BulletinRepository(BaseRepository[Bulletin]):
    order_field = "publishedAt"

    def __init__(self, client: Any):
        super().__init__(client, Bulletin, "bulletins")

    def _to_document(self, entity: Bulletin) -> dict[str, Any]:
        data = entity.to_firestore()
        data["publishedAt"] = SERVER_TIMESTAMP
        return data


class NotificationRepository(BaseRepository[Notification]):
    order_field = "timestamp"

    def __init__(self, client: Any):
        super().__init__(client, Notification, "notifications")

    async def list_recent(self, limit: int = NOTIFICATION_LIST_LIMIT) -> list[Notification]:
        """Newest notifications first, at most *limit* of them."""
        query = (
            self._collection_ref()
            .order_by("timestamp", direction=Query.DESCENDING)
            .limit(limit)
        )
        async with self._store_call("list"):
            docs = await self._collect(query)
        return [Notification.from_firestore(d) for d in docs]

    async def create(self, notification: Notification) -> Notification:
        """Create *notification* and return it with its id. An existing id is never overwritten."""
        doc_id = notification.id or self.new_id()
        payload = notification.to_firestore()
        payload["createdAt"] = SERVER_TIMESTAMP
        payload["updatedAt"] = SERVER_TIMESTAMP
        ref = self._collection_ref().document(doc_id)
        async with self._store_call("create", doc_id):
            try:
                await ref.create(payload)
            except Conflict as exc:
                raise DocumentExistsError(self._collection_name, doc_id) from exc
            snapshot = await ref.get()
        logger.info("Created notification %s (%s)", doc_id, notification.title)
        return self._hydrate(snapshot)

    async def mark_read(self, doc_id: str, is_read: bool = True) -> Notification:
        ref = self._collection_ref().document(doc_id)
        async with self._store_call("update", doc_id):
            try:
                await ref.update({"isRead": is_read, "updatedAt": SERVER_TIMESTAMP})
            except NotFound as exc:
                raise DocumentNotFoundError(self._collection_name, doc_id) from exc
            snapshot = await ref.get()
        return self._hydrate(snapshot)
