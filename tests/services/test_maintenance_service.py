"""Tests for MEL item and discrepancy saving."""

from __future__ import annotations

import logging
from datetime import date

import pytest

from flightops.contracts.fleet import FleetAircraft
from flightops.contracts.maintenance import AircraftDiscrepancy, MelItem
from flightops.persistence.errors import DocumentNotFoundError
from flightops.persistence.repositories.fleet_repo import FleetRepository
from flightops.persistence.repositories.maintenance_repo import DiscrepancyRepository, MelRepository
from flightops.services.maintenance_service import MaintenanceService
from tests.persistence.fake_firestore import FakeFirestoreClient


@pytest.fixture
def fake_client():
    return FakeFirestoreClient()


@pytest.fixture
def service(fake_client):
    return MaintenanceService(
        FleetRepository(fake_client), MelRepository(fake_client), DiscrepancyRepository(fake_client)
    )


@pytest.fixture
async def aircraft(fake_client):
    return await FleetRepository(fake_client).save(FleetAircraft(tail_number="N123AB", model="King Air 350"))


class TestSaveMelItem:
    async def test_lifecycle(self, service, aircraft):
        item = MelItem(
            aircraft_id=aircraft.id,
            mel_number="25-10-01a",
            description="Cabin reading light inoperative",
            status="Open",
            is_deferred=False,
            date_entered=date(2023, 12, 1),
        )
        saved = await service.save_mel_item(item)
        assert saved.status == "Open"
        assert saved.aircraft_tail_number == "N123AB"

        deferred = await service.save_mel_item(
            saved.model_copy(update={"status": None, "is_deferred": True})
        )
        assert deferred.status == "Deferred"
        assert deferred.is_deferred is True

        closed = await service.save_mel_item(deferred.model_copy(update={
            "status": "Closed",
            "corrective_action": "Replaced part",
            "closed_date": date(2024, 1, 1),
        }))
        assert closed.status == "Closed"
        assert closed.is_deferred is False

    async def test_closed_item_stays_closed(self, service, aircraft):
        saved = await service.save_mel_item(MelItem(
            aircraft_id=aircraft.id,
            mel_number="33-40-01",
            description="Logo light inoperative",
            status="Closed",
            corrective_action="Bulb replaced",
            closed_date=date(2024, 1, 2),
            date_entered=date(2024, 1, 1),
        ))
        again = await service.save_mel_item(saved.model_copy(update={"status": None, "is_deferred": True}))
        assert again.status == "Closed"
        assert again.is_deferred is False

    async def test_closed_without_corrective_action_warns(self, service, aircraft, caplog):
        with caplog.at_level(logging.WARNING):
            saved = await service.save_mel_item(MelItem(
                aircraft_id=aircraft.id,
                mel_number="33-40-01",
                description="Logo light inoperative",
                status="Closed",
                date_entered=date(2024, 1, 1),
            ))
        assert saved.status == "Closed"
        assert "closed without corrective action" in caplog.text

    async def test_unknown_aircraft(self, service):
        with pytest.raises(DocumentNotFoundError):
            await service.save_mel_item(MelItem(
                aircraft_id="missing",
                mel_number="33-40-01",
                description="Logo light inoperative",
                date_entered=date(2024, 1, 1),
            ))


class TestSaveDiscrepancy:
    async def test_deferred_then_closed(self, service, aircraft):
        saved = await service.save_discrepancy(AircraftDiscrepancy(
            aircraft_id=aircraft.id,
            date_discovered=date(2024, 2, 1),
            description="Oil leak at left engine cowling",
            is_deferred=True,
        ))
        assert saved.status == "Deferred"
        assert saved.aircraft_tail_number == "N123AB"

        closed = await service.save_discrepancy(saved.model_copy(update={
            "status": "Closed", "corrective_action": "Gasket replaced",
        }))
        assert closed.status == "Closed"
        assert closed.is_deferred is False
