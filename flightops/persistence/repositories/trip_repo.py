"""Trips and flight logs."""

from __future__ import annotations

from typing import Any

from flightops.contracts.trip import FlightLogLeg, Trip
from flightops.persistence.repositories.base import BaseRepository


class TripRepository(BaseRepository[Trip]):
    order_field = "createdAt"

    def __init__(self, client: Any):
        super().__init__(client, Trip, "trips")

    def _to_document(self, entity: Trip) -> dict[str, Any]:
        # Unassigning a pilot must clear the stored value, which a merge
        # without the key would keep.
        data = entity.to_firestore()
        data["assignedPilotId"] = entity.assigned_pilot_id
        data["assignedCoPilotId"] = entity.assigned_co_pilot_id
        return data

    async def list_for_aircraft(self, aircraft_id: str) -> list[Trip]:
        return await self.list_by("aircraftId", aircraft_id)


def flight_log_id(trip_id: str, leg_index: int) -> str:
    return f"{trip_id}_{leg_index}"


class FlightLogRepository(BaseRepository[FlightLogLeg]):
    """One document per flown leg, keyed ``{tripId}_{legIndex}``."""

    order_field = "legIndex"
    descending = False

    def __init__(self, client: Any):
        super().__init__(client, FlightLogLeg, "flightLogs")

    def _document_id(self, entity: FlightLogLeg) -> str:
        return flight_log_id(entity.trip_id, entity.leg_index)

    async def get_leg(self, trip_id: str, leg_index: int) -> FlightLogLeg | None:
        return await self.get(flight_log_id(trip_id, leg_index))

    async def delete_leg(self, trip_id: str, leg_index: int):
        return await self.delete(flight_log_id(trip_id, leg_index))

    async def list_for_trip(self, trip_id: str) -> list[FlightLogLeg]:
        return await self.list_by("tripId", trip_id)
