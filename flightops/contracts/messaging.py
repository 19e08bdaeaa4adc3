"""Company bulletins and user notifications.

Stored at:
- ``/bulletins/{bulletin_id}``
- ``/notifications/{notification_id}``
"""

from datetime import datetime, timezone
from typing import ClassVar

from pydantic import Field

from flightops.contracts.common import FirestoreDocument
from flightops.contracts.enums import BulletinType, NotificationType


class Bulletin(FirestoreDocument):
    """A company-wide announcement. ``published_at`` is refreshed on every save."""

    server_fields: ClassVar[frozenset[str]] = FirestoreDocument.server_fields | {"published_at"}

    title: str = Field(..., min_length=3)
    message: str = Field(..., min_length=10)
    type: BulletinType = BulletinType.INFO
    is_active: bool = True
    published_at: datetime | None = None


class Notification(FirestoreDocument):
    type: NotificationType = NotificationType.INFO
    title: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    is_read: bool = False
    link: str | None = None
    user_id: str | None = Field(default=None, description="Recipient; None means everyone")
