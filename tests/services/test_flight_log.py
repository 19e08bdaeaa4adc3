"""Tests for flight-log arithmetic and component-time roll-up."""

from __future__ import annotations

import pytest

from flightops.contracts.fleet import ComponentTime, FleetAircraft
from flightops.contracts.trip import FlightLogLeg, Trip, TripLeg
from flightops.persistence.errors import DocumentNotFoundError
from flightops.persistence.repositories.fleet_repo import ComponentTimesRepository, FleetRepository
from flightops.persistence.repositories.trip_repo import FlightLogRepository, TripRepository
from flightops.services.errors import ValidationError
from flightops.services.flight_log import (
    FlightLogService,
    block_time_hours,
    component_usage,
    flight_duration_hours,
    fuel_burn,
    usage_delta,
)
from tests.persistence.fake_firestore import FakeFirestoreClient


def _log(**kwargs) -> FlightLogLeg:
    data = dict(trip_id="trip-1", leg_index=0, take_off_time="10:00", landing_time="11:30")
    data.update(kwargs)
    return FlightLogLeg(**data)


class TestFlightArithmetic:
    def test_duration_from_clock(self):
        assert flight_duration_hours(_log()) == 1.5

    def test_duration_wraps_midnight(self):
        assert flight_duration_hours(_log(take_off_time="23:30", landing_time="01:00")) == 1.5

    def test_duration_prefers_hobbs(self):
        log = _log(hobbs_take_off=1234.5, hobbs_landing=1236.26)
        assert flight_duration_hours(log) == 1.76

    def test_block_time_adds_taxi(self):
        assert block_time_hours(_log(taxi_out_time_mins=12, taxi_in_time_mins=6)) == 1.8

    def test_fuel_burn(self):
        log = _log(fob_starting_fuel=2000, fuel_purchased_amount=500, ending_fuel=900)
        assert fuel_burn(log) == 1600


class TestComponentUsage:
    def test_airframe_engines_and_apu(self):
        log = _log(post_leg_apu_time_decimal=0.4)
        usage = component_usage(log, ["Airframe", "Engine 1", "Engine 2", "Propeller 1", "APU", "Avionics"])

        assert usage["Airframe"] == ComponentTime(time=1.5, cycles=1)
        assert usage["Engine 2"] == ComponentTime(time=1.5, cycles=1)
        assert usage["Propeller 1"].cycles == 1
        assert usage["APU"] == ComponentTime(time=0.4, cycles=0)
        assert "Avionics" not in usage

    def test_apu_without_time(self):
        assert "APU" not in component_usage(_log(), ["APU"])

    def test_usage_delta(self):
        new = {"Airframe": ComponentTime(time=2.0, cycles=1)}
        old = {"Airframe": ComponentTime(time=1.5, cycles=1), "APU": ComponentTime(time=0.3, cycles=0)}

        assert usage_delta(new, old) == {"Airframe": (0.5, 0), "APU": (-0.3, 0)}

    def test_usage_delta_unchanged_is_empty(self):
        same = {"Airframe": ComponentTime(time=1.5, cycles=1)}
        assert usage_delta(same, same) == {}


class TestFlightLogService:
    @pytest.fixture
    def fake_client(self):
        return FakeFirestoreClient()

    @pytest.fixture
    def service(self, fake_client):
        return FlightLogService(
            FlightLogRepository(fake_client),
            TripRepository(fake_client),
            FleetRepository(fake_client),
            ComponentTimesRepository(fake_client),
        )

    async def _setup(self, fake_client, tracked: bool = True) -> Trip:
        aircraft = await FleetRepository(fake_client).save(
            FleetAircraft(tail_number="N123AB", model="Citation CJ3", is_maintenance_tracked=tracked)
        )
        return await TripRepository(fake_client).save(Trip(
            trip_id="TRP-1",
            client_name="Acme",
            aircraft_id=aircraft.id,
            legs=[TripLeg(origin="KTEB", destination="KPBI")],
        ))

    async def test_save_rolls_up_component_times(self, fake_client, service):
        trip = await self._setup(fake_client)
        await service.save(_log(trip_id=trip.id))

        times = await ComponentTimesRepository(fake_client).get(trip.aircraft_id)
        assert times.component_times["Airframe"] == ComponentTime(time=1.5, cycles=1)
        assert times.component_times["Engine 1"] == ComponentTime(time=1.5, cycles=1)

    async def test_resave_applies_only_the_difference(self, fake_client, service):
        trip = await self._setup(fake_client)
        await service.save(_log(trip_id=trip.id))
        await service.save(_log(trip_id=trip.id, landing_time="12:00"))

        times = await ComponentTimesRepository(fake_client).get(trip.aircraft_id)
        assert times.component_times["Airframe"].time == pytest.approx(2.0)
        assert times.component_times["Airframe"].cycles == 1

    async def test_untracked_aircraft_keeps_times(self, fake_client, service):
        trip = await self._setup(fake_client, tracked=False)
        saved = await service.save(_log(trip_id=trip.id))

        assert saved.id == f"{trip.id}_0"
        assert await ComponentTimesRepository(fake_client).get(trip.aircraft_id) is None

    async def test_unknown_trip(self, service):
        with pytest.raises(DocumentNotFoundError):
            await service.save(_log(trip_id="missing"))

    async def test_leg_index_out_of_range(self, fake_client, service):
        trip = await self._setup(fake_client)
        with pytest.raises(ValidationError):
            await service.save(_log(trip_id=trip.id, leg_index=3))

    async def test_delete_takes_usage_back(self, fake_client, service):
        trip = await self._setup(fake_client)
        await service.save(_log(trip_id=trip.id))

        result = await service.delete(trip.id, 0)

        assert result.success is True
        times = await ComponentTimesRepository(fake_client).get(trip.aircraft_id)
        assert times.component_times["Airframe"] == ComponentTime(time=0, cycles=0)

    async def test_delete_missing_log(self, fake_client, service):
        trip = await self._setup(fake_client)
        with pytest.raises(DocumentNotFoundError):
            await service.delete(trip.id, 0)
