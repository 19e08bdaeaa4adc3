"""Bulletin publishing with its notification side effect."""

from __future__ import annotations

import logging

from flightops.contracts.enums import NotificationType
from flightops.contracts.messaging import Bulletin, Notification

logger = logging.getLogger(__name__)


def bulletin_notification(bulletin: Bulletin) -> Notification:
    return Notification(
        type=NotificationType.INFO,
        title=f"New Bulletin: {bulletin.title}",
        message=f'A bulletin titled "{bulletin.title}" has just been published.',
        link="/dashboard",
    )


class BulletinService:
    def __init__(self, bulletins, notifications):
        self._bulletins = bulletins
        self._notifications = notifications

    async def save(self, bulletin: Bulletin) -> Bulletin:
        """Save *bulletin*; notify everyone when it goes from inactive to active."""
        prior = await self._bulletins.get(bulletin.id) if bulletin.id else None
        was_active = prior.is_active if prior else False
        saved = await self._bulletins.save(bulletin)
        if saved.is_active and not was_active:
            await self._notifications.create(bulletin_notification(saved))
            logger.info("Published bulletin %s", saved.id)
        return saved
