"""In-memory Firestore fake for repository and API tests.

Mimics the google-cloud-firestore AsyncClient interface just enough
to test BaseRepository, the concrete repositories and the routes without
network access. ``SERVER_TIMESTAMP`` resolves to the current UTC time and
``Increment`` transforms are applied on write.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from google.api_core.exceptions import AlreadyExists, NotFound
from google.cloud.firestore import SERVER_TIMESTAMP, Increment


def _resolve(value: Any, current: Any = None) -> Any:
    if value is SERVER_TIMESTAMP:
        return datetime.now(timezone.utc)
    if isinstance(value, Increment):
        return (current or 0) + value.value
    if isinstance(value, dict):
        base = current if isinstance(current, dict) else {}
        return {k: _resolve(v, base.get(k)) for k, v in value.items()}
    return value


def _merge(target: dict, data: dict) -> None:
    for key, value in data.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = _resolve(value, target.get(key))


class FakeDocumentSnapshot:
    def __init__(self, data: dict[str, Any] | None, doc_id: str):
        self._data = data
        self.id = doc_id
        self.exists = data is not None

    def to_dict(self) -> dict[str, Any] | None:
        if self._data is None:
            return None
        return dict(self._data)


class FakeDocumentRef:
    def __init__(self, store: dict[str, dict], path: str):
        self._store = store
        self._path = path
        self.id = path.rsplit("/", 1)[-1]

    async def get(self) -> FakeDocumentSnapshot:
        return FakeDocumentSnapshot(self._store.get(self._path), self.id)

    async def create(self, data: dict) -> None:
        if self._path in self._store:
            raise AlreadyExists(f"Document already exists: {self._path}")
        self._store[self._path] = _resolve(data)

    async def set(self, data: dict, merge: bool = False) -> None:
        if merge and self._path in self._store:
            _merge(self._store[self._path], data)
        else:
            self._store[self._path] = _resolve(data)

    async def update(self, data: dict) -> None:
        if self._path not in self._store:
            raise NotFound(f"No document to update: {self._path}")
        _merge(self._store[self._path], data)

    async def delete(self) -> None:
        self._store.pop(self._path, None)


class FakeBatch:
    def __init__(self, store: dict[str, dict]):
        self._store = store
        self._ops: list[tuple[str, FakeDocumentRef, dict | None, bool]] = []

    def set(self, doc_ref: FakeDocumentRef, data: dict, merge: bool = False) -> None:
        self._ops.append(("set", doc_ref, dict(data), merge))

    def delete(self, doc_ref: FakeDocumentRef) -> None:
        self._ops.append(("delete", doc_ref, None, False))

    async def commit(self) -> None:
        for op, ref, data, merge in self._ops:
            if op == "set":
                await ref.set(data, merge=merge)
            else:
                await ref.delete()


class FakeQuery:
    """Chainable query: equality filters, a single ordering and a limit."""

    def __init__(self, store: dict[str, dict], path: str):
        self._store = store
        self._path = path
        self._filters: list[tuple[str, str, Any]] = []
        self._order: tuple[str, bool] | None = None
        self._limit: int | None = None

    def _copy(self) -> "FakeQuery":
        query = FakeQuery(self._store, self._path)
        query._filters = list(self._filters)
        query._order = self._order
        query._limit = self._limit
        return query

    def where(self, field: str, op: str, value: Any) -> "FakeQuery":
        query = self._copy()
        query._filters.append((field, op, value))
        return query

    def order_by(self, field: str, direction: str = "ASCENDING") -> "FakeQuery":
        query = self._copy()
        query._order = (field, direction == "DESCENDING")
        return query

    def limit(self, count: int) -> "FakeQuery":
        query = self._copy()
        query._limit = count
        return query

    def _matches(self, data: dict) -> bool:
        for field, op, value in self._filters:
            current = data.get(field)
            if op == "==" and current != value:
                return False
            if op == "array_contains" and not (isinstance(current, list) and value in current):
                return False
        return True

    async def stream(self):
        prefix = self._path + "/"
        rows = []
        for path, data in sorted(self._store.items()):
            rest = path[len(prefix):]
            # Only direct children
            if path.startswith(prefix) and "/" not in rest and self._matches(data):
                rows.append((rest, data))
        if self._order:
            field, descending = self._order
            # Firestore drops documents lacking the ordering field
            rows = [r for r in rows if r[1].get(field) is not None]
            rows.sort(key=lambda r: r[1][field], reverse=descending)
        if self._limit is not None:
            rows = rows[: self._limit]
        for doc_id, data in rows:
            yield FakeDocumentSnapshot(dict(data), doc_id)


class FakeCollectionRef(FakeQuery):
    def document(self, doc_id: str | None = None) -> FakeDocumentRef:
        if doc_id is None:
            doc_id = uuid.uuid4().hex[:20]
        return FakeDocumentRef(self._store, f"{self._path}/{doc_id}")


class FakeFirestoreClient:
    """Drop-in replacement for ``google.cloud.firestore.AsyncClient``."""

    def __init__(self):
        self.store: dict[str, dict] = {}

    def collection(self, name: str) -> FakeCollectionRef:
        return FakeCollectionRef(self.store, name)

    def batch(self) -> FakeBatch:
        return FakeBatch(self.store)

    def doc(self, collection: str, doc_id: str) -> dict | None:
        """Raw stored document, for assertions."""
        return self.store.get(f"{collection}/{doc_id}")
