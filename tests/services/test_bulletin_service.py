"""Tests for bulletin publishing."""

from __future__ import annotations

import pytest

from flightops.contracts.messaging import Bulletin
from flightops.persistence.repositories.messaging_repo import BulletinRepository, NotificationRepository
from flightops.services.bulletin_service import BulletinService
from tests.persistence.fake_firestore import FakeFirestoreClient


@pytest.fixture
def fake_client():
    return FakeFirestoreClient()


@pytest.fixture
def service(fake_client):
    return BulletinService(BulletinRepository(fake_client), NotificationRepository(fake_client))


def _bulletin(**kwargs) -> Bulletin:
    return Bulletin(title="Ramp closure", message="The north ramp is closed on Friday.", **kwargs)


class TestBulletinService:
    async def test_new_active_bulletin_notifies(self, fake_client, service):
        await service.save(_bulletin())

        notifications = await NotificationRepository(fake_client).list_recent()
        assert len(notifications) == 1
        n = notifications[0]
        assert n.title == "New Bulletin: Ramp closure"
        assert n.message == 'A bulletin titled "Ramp closure" has just been published.'
        assert n.link == "/dashboard"
        assert n.type == "info"

    async def test_inactive_bulletin_does_not_notify(self, fake_client, service):
        await service.save(_bulletin(is_active=False))
        assert await NotificationRepository(fake_client).list_recent() == []

    async def test_activation_notifies_once(self, fake_client, service):
        draft = await service.save(_bulletin(is_active=False))
        active = await service.save(draft.model_copy(update={"is_active": True}))
        await service.save(active.model_copy(update={"message": "The north ramp is closed all weekend."}))

        assert len(await NotificationRepository(fake_client).list_recent()) == 1
