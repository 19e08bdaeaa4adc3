"""Generic async Firestore repository for top-level collections."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Generic, Type, TypeVar

from google.api_core.exceptions import Conflict, GoogleAPICallError
from google.cloud.firestore import SERVER_TIMESTAMP

from flightops.contracts.common import DeleteResult, FirestoreDocument
from flightops.persistence.errors import ConfigurationError, DocumentNotFoundError, StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=FirestoreDocument)


class BaseRepository(Generic[T]):
    """CRUD for one top-level Firestore collection.

    The Firestore client is injected; a repository cannot exist without one.
    Serialization relies entirely on the contract's ``to_firestore()``
    and ``from_firestore()`` methods, no extra mapping layer.

    ``order_field`` is the stored (camelCase) field used to order listings,
    newest first unless ``descending`` is False.
    """

    order_field: str | None = None
    descending: bool = True

    def __init__(self, client: Any, model_class: Type[T], collection_name: str):
        if client is None:
            raise ConfigurationError(f"No Firestore client configured for '{collection_name}'")
        self._client = client
        self._model_class = model_class
        self._collection_name = collection_name

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def collection_name(self) -> str:
        return self._collection_name

    def _collection_ref(self):
        return self._client.collection(self._collection_name)

    def _target(self, doc_id: str | None) -> str:
        return f"{self._collection_name}/{doc_id or '*'}"

    @asynccontextmanager
    async def _store_call(self, operation: str, doc_id: str | None = None) -> AsyncIterator[None]:
        """Translate Firestore API failures into ``StoreError``."""
        try:
            yield
        except GoogleAPICallError as exc:
            logger.error("Failed to %s %s: %s", operation, self._target(doc_id), exc)
            raise StoreError(operation, self._target(doc_id), exc) from exc

    def _hydrate(self, snapshot) -> T:
        data = snapshot.to_dict()
        data["id"] = snapshot.id
        return self._model_class.from_firestore(data)

    def _sorted(self, docs: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Order raw documents in memory by ``order_field``; missing values go last."""
        if not self.order_field:
            return docs
        present = [d for d in docs if d.get(self.order_field) is not None]
        missing = [d for d in docs if d.get(self.order_field) is None]
        present.sort(key=lambda d: d[self.order_field], reverse=self.descending)
        return present + missing

    async def _collect(self, query) -> list[dict[str, Any]]:
        docs: list[dict[str, Any]] = []
        async for snapshot in query.stream():
            data = snapshot.to_dict()
            data["id"] = snapshot.id
            docs.append(data)
        return docs

    def _document_id(self, entity: T) -> str | None:
        """Document id to write *entity* under; ``None`` lets Firestore pick one."""
        return entity.id

    def _to_document(self, entity: T) -> dict[str, Any]:
        return entity.to_firestore()

    def new_id(self) -> str:
        """Return a fresh Firestore auto-id for this collection."""
        return self._collection_ref().document().id

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get(self, doc_id: str) -> T | None:
        """Fetch a single document by ID. Returns *None* if missing."""
        async with self._store_call("fetch", doc_id):
            snapshot = await self._collection_ref().document(doc_id).get()
        if not snapshot.exists:
            return None
        return self._hydrate(snapshot)

    async def exists(self, doc_id: str) -> bool:
        async with self._store_call("fetch", doc_id):
            snapshot = await self._collection_ref().document(doc_id).get()
        return snapshot.exists

    async def list_all(self) -> list[T]:
        """Stream every document in the collection, ordered by ``order_field``.

        Ordering happens in memory so documents lacking the field are kept
        (a Firestore ``order_by`` would drop them).
        """
        async with self._store_call("list"):
            docs = await self._collect(self._collection_ref())
        return [self._model_class.from_firestore(d) for d in self._sorted(docs)]

    async def list_by(self, field: str, value: Any) -> list[T]:
        """Equality-filtered listing, ordered in memory (no composite index needed)."""
        query = self._collection_ref().where(field, "==", value)
        async with self._store_call("list"):
            docs = await self._collect(query)
        return [self._model_class.from_firestore(d) for d in self._sorted(docs)]

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def save(self, entity: T) -> T:
        """Create or merge-update *entity* and return the stored record.

        ``createdAt`` is only ever written by ``create()``, which Firestore
        rejects when the document already exists; the merge update that
        follows a rejection leaves it untouched. ``updatedAt`` is refreshed
        on every save. The document is re-read so server timestamps are
        resolved in the returned model.
        """
        doc_id = self._document_id(entity) or self.new_id()
        ref = self._collection_ref().document(doc_id)
        payload = self._to_document(entity)
        payload["updatedAt"] = SERVER_TIMESTAMP

        async with self._store_call("save", doc_id):
            try:
                await ref.create({**payload, "createdAt": SERVER_TIMESTAMP})
                logger.info("Created %s", self._target(doc_id))
            except Conflict:
                await ref.set(payload, merge=True)
                logger.info("Updated %s", self._target(doc_id))
            snapshot = await ref.get()
        return self._hydrate(snapshot)

    async def delete(self, doc_id: str) -> DeleteResult:
        """Delete a document. Raises ``DocumentNotFoundError`` if it does not exist."""
        ref = self._collection_ref().document(doc_id)
        async with self._store_call("delete", doc_id):
            snapshot = await ref.get()
            if not snapshot.exists:
                raise DocumentNotFoundError(self._collection_name, doc_id)
            await ref.delete()
        logger.info("Deleted %s", self._target(doc_id))
        return DeleteResult(success=True, id=doc_id)

    async def require(self, doc_id: str) -> T:
        """Like ``get`` but raises ``DocumentNotFoundError`` when missing."""
        entity = await self.get(doc_id)
        if entity is None:
            raise DocumentNotFoundError(self._collection_name, doc_id)
        return entity

    async def update(self, doc_id: str, entity: T) -> T:
        """Save *entity* over an existing document. Raises if the document is missing."""
        await self.require(doc_id)
        return await self.save(entity.model_copy(update={"id": doc_id}))
