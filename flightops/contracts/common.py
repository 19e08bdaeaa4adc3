"""Base classes and shared types for FlightOps contracts.

Conventions (all contracts and API responses):
- **Attribute names**: snake_case in Python, camelCase in Firestore and JSON
  (``tail_number`` ↔ ``tailNumber``). Both spellings are accepted on input.
- **Dates**: ``date`` fields serialize as ``YYYY-MM-DD`` strings.
- **Datetimes**: UTC. Native Firestore timestamps when stored, ISO 8601 in
  the API. ``createdAt`` and ``updatedAt`` are Firestore server timestamps,
  never sent by clients.
- **Durations**: decimal hours (suffix ``_hours``) unless named ``_mins``.
- **Money**: plain floats in the operator's currency.
"""

from datetime import datetime, timezone
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _native_datetimes(dumped: Any, native: Any) -> Any:
    """Put the datetimes of a Python-mode dump back into its JSON-mode twin, in UTC."""
    if isinstance(native, datetime):
        if native.tzinfo is None:
            return native.replace(tzinfo=timezone.utc)
        return native.astimezone(timezone.utc)
    if isinstance(native, dict):
        return {k: _native_datetimes(v, native.get(k)) for k, v in dumped.items()}
    if isinstance(native, (list, tuple)):
        return [_native_datetimes(d, n) for d, n in zip(dumped, native)]
    return dumped


class FirestoreModel(BaseModel):
    """Base model with Firestore-friendly serialization.

    - Enums serialize as string values (Firestore stores strings).
    - ``to_firestore()`` produces a Firestore-ready dict: dates as ISO strings,
      datetimes as UTC ``datetime`` objects (stored as Firestore timestamps),
      without the server-managed fields listed in ``server_fields``.
    - ``to_api()`` is the response shape, server-managed fields included.
    - ``from_firestore()`` hydrates from a Firestore document dict.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    server_fields: ClassVar[frozenset[str]] = frozenset()

    def to_firestore(self) -> dict[str, Any]:
        """Dump to Firestore-compatible dict."""
        options = dict(by_alias=True, exclude_none=True, exclude=set(self.server_fields))
        return _native_datetimes(self.model_dump(mode="json", **options), self.model_dump(**options))

    def to_api(self) -> dict[str, Any]:
        """Dump to the camelCase JSON returned by the HTTP API."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_firestore(cls, data: dict[str, Any]) -> "FirestoreModel":
        """Create model instance from Firestore document dict."""
        return cls.model_validate(data)


class FirestoreDocument(FirestoreModel):
    """A top-level Firestore document with server-managed timestamps."""

    server_fields: ClassVar[frozenset[str]] = frozenset({"id", "created_at", "updated_at"})

    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DeleteResult(FirestoreModel):
    """Outcome of a delete call."""

    success: bool
    id: str


class FileUpload(FirestoreModel):
    """A file sent inline as ``data:<mime>;base64,<payload>``."""

    file_name: str = Field(..., min_length=1, pattern=r"^[^/\\]+$")
    data_uri: str = Field(..., min_length=1)
