"""Bulletin and notification endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from flightops.api.deps import (
    get_bulletin_repo,
    get_bulletin_service,
    get_current_user,
    get_notification_repo,
    get_notification_service,
)
from flightops.contracts.common import FirestoreModel
from flightops.contracts.messaging import Bulletin, Notification
from flightops.persistence.repositories.messaging_repo import (
    BulletinRepository,
    NotificationRepository,
)
from flightops.services.bulletin_service import BulletinService
from flightops.services.notification_service import NotificationService

router = APIRouter(tags=["messaging"])


class ReadState(FirestoreModel):
    is_read: bool = True


# ------------------------------------------------------------------
# Bulletins
# ------------------------------------------------------------------


@router.get("/bulletins")
async def list_bulletins(
    user_id: str = Depends(get_current_user),
    repo: BulletinRepository = Depends(get_bulletin_repo),
) -> list[dict]:
    return [b.to_api() for b in await repo.list_all()]


@router.post("/bulletins", status_code=201)
async def create_bulletin(
    bulletin: Bulletin,
    user_id: str = Depends(get_current_user),
    service: BulletinService = Depends(get_bulletin_service),
) -> dict:
    return (await service.save(bulletin)).to_api()


@router.put("/bulletins/{bulletin_id}")
async def update_bulletin(
    bulletin_id: str,
    bulletin: Bulletin,
    user_id: str = Depends(get_current_user),
    repo: BulletinRepository = Depends(get_bulletin_repo),
    service: BulletinService = Depends(get_bulletin_service),
) -> dict:
    await repo.require(bulletin_id)
    return (await service.save(bulletin.model_copy(update={"id": bulletin_id}))).to_api()


@router.delete("/bulletins/{bulletin_id}")
async def delete_bulletin(
    bulletin_id: str,
    user_id: str = Depends(get_current_user),
    repo: BulletinRepository = Depends(get_bulletin_repo),
) -> dict:
    return (await repo.delete(bulletin_id)).to_api()


# ------------------------------------------------------------------
# Notifications
# ------------------------------------------------------------------


@router.get("/notifications")
async def list_notifications(
    user_id: str = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service),
) -> list[dict]:
    """Recent notifications, after generating any pending system alerts."""
    return [n.to_api() for n in await service.list_with_alerts()]


@router.post("/notifications", status_code=201)
async def create_notification(
    notification: Notification,
    user_id: str = Depends(get_current_user),
    repo: NotificationRepository = Depends(get_notification_repo),
) -> dict:
    return (await repo.create(notification)).to_api()


@router.post("/notifications/{notification_id}/read")
async def mark_notification_read(
    notification_id: str,
    state: ReadState | None = None,
    user_id: str = Depends(get_current_user),
    repo: NotificationRepository = Depends(get_notification_repo),
) -> dict:
    is_read = state.is_read if state else True
    return (await repo.mark_read(notification_id, is_read)).to_api()
