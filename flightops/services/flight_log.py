"""Flight-log arithmetic and component-time roll-up."""

from __future__ import annotations

import logging

from flightops.contracts.fleet import ComponentTime
from flightops.contracts.trip import FlightLogLeg, Trip
from flightops.persistence.errors import DocumentNotFoundError
from flightops.services.errors import ValidationError

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60


def _clock_minutes(hhmm: str) -> int:
    hours, minutes = hhmm.split(":")
    return int(hours) * 60 + int(minutes)


def flight_duration_hours(log: FlightLogLeg) -> float:
    """Airborne time of a leg in decimal hours.

    Uses the Hobbs readings when both are present and increasing, otherwise
    the take-off/landing clock times (a landing earlier than the take-off
    is taken as the next day).
    """
    if (
        log.hobbs_take_off is not None
        and log.hobbs_landing is not None
        and log.hobbs_landing > log.hobbs_take_off
    ):
        return round(log.hobbs_landing - log.hobbs_take_off, 2)

    minutes = _clock_minutes(log.landing_time) - _clock_minutes(log.take_off_time)
    if minutes < 0:
        minutes += MINUTES_PER_DAY
    return round(minutes / 60, 2)


def block_time_hours(log: FlightLogLeg) -> float:
    """Flight time plus taxi-out and taxi-in."""
    taxi = (log.taxi_out_time_mins + log.taxi_in_time_mins) / 60
    return round(flight_duration_hours(log) + taxi, 2)


def fuel_burn(log: FlightLogLeg) -> float:
    """Fuel used on the leg, in the unit the crew logged."""
    return round(log.fob_starting_fuel + log.fuel_purchased_amount - log.ending_fuel, 2)


def component_usage(log: FlightLogLeg, tracked_components: list[str]) -> dict[str, ComponentTime]:
    """Hours and cycles a flown leg adds to each tracked component.

    Airframe, engines and propellers get the flight duration and one cycle.
    The APU gets the post-leg APU time, without a cycle.
    """
    duration = flight_duration_hours(log)
    usage: dict[str, ComponentTime] = {}
    for name in tracked_components:
        key = name.strip().lower()
        if key == "airframe" or key.startswith("engine") or key.startswith("propeller"):
            if duration > 0:
                usage[name] = ComponentTime(time=duration, cycles=1)
        elif key == "apu":
            if log.post_leg_apu_time_decimal:
                usage[name] = ComponentTime(time=log.post_leg_apu_time_decimal, cycles=0)
        else:
            logger.debug("No usage rule for component %s", name)
    return usage


def usage_delta(
    new: dict[str, ComponentTime], old: dict[str, ComponentTime]
) -> dict[str, tuple[float, int]]:
    """Per-component (hours, cycles) to add when a logged leg is re-saved."""
    delta: dict[str, tuple[float, int]] = {}
    for name in set(new) | set(old):
        n = new.get(name, ComponentTime())
        o = old.get(name, ComponentTime())
        hours = round(n.time - o.time, 2)
        cycles = n.cycles - o.cycles
        if hours or cycles:
            delta[name] = (hours, cycles)
    return delta


class FlightLogService:
    """Saves leg logs and rolls flown time into the aircraft's component times."""

    def __init__(self, logs, trips, fleet, component_times):
        self._logs = logs
        self._trips = trips
        self._fleet = fleet
        self._component_times = component_times

    async def _require_trip(self, trip_id: str) -> Trip:
        trip = await self._trips.get(trip_id)
        if trip is None:
            raise DocumentNotFoundError("trips", trip_id)
        return trip

    async def _roll_up(
        self, trip: Trip, new: FlightLogLeg | None, old: FlightLogLeg | None
    ) -> None:
        aircraft = await self._fleet.get(trip.aircraft_id)
        if aircraft is None or not aircraft.is_maintenance_tracked:
            logger.info("Aircraft %s not maintenance-tracked; component times unchanged",
                        trip.aircraft_id)
            return
        components = aircraft.tracked_component_names
        new_usage = component_usage(new, components) if new else {}
        old_usage = component_usage(old, components) if old else {}
        delta = usage_delta(new_usage, old_usage)
        if delta:
            await self._component_times.add_usage(aircraft.id, delta)

    async def save(self, log: FlightLogLeg) -> FlightLogLeg:
        trip = await self._require_trip(log.trip_id)
        if log.leg_index >= len(trip.legs):
            raise ValidationError(
                f"Trip {trip.trip_id} has {len(trip.legs)} legs; no leg at index {log.leg_index}"
            )

        previous = await self._logs.get_leg(log.trip_id, log.leg_index)
        saved = await self._logs.save(log)
        await self._roll_up(trip, saved, previous)
        return saved

    async def delete(self, trip_id: str, leg_index: int):
        """Delete a leg log and take its usage back off the component times."""
        trip = await self._require_trip(trip_id)
        previous = await self._logs.get_leg(trip_id, leg_index)
        result = await self._logs.delete_leg(trip_id, leg_index)
        if previous is not None:
            await self._roll_up(trip, None, previous)
        return result
