"""Trip endpoints, dashboard classifications and per-leg flight logs."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from flightops.api.deps import (
    get_current_user,
    get_flight_log_repo,
    get_flight_log_service,
    get_trip_repo,
)
from flightops.contracts.trip import FlightLogInput, FlightLogLeg, Trip
from flightops.persistence.repositories.trip_repo import FlightLogRepository, TripRepository
from flightops.services.flight_log import FlightLogService, block_time_hours, flight_duration_hours, fuel_burn
from flightops.services.trips import current_trips, upcoming_trips

router = APIRouter(prefix="/trips", tags=["trips"])


def _log_response(log: FlightLogLeg) -> dict:
    data = log.to_api()
    data["flightTimeHours"] = flight_duration_hours(log)
    data["blockTimeHours"] = block_time_hours(log)
    data["fuelBurn"] = fuel_burn(log)
    return data


@router.get("")
async def list_trips(
    user_id: str = Depends(get_current_user),
    repo: TripRepository = Depends(get_trip_repo),
) -> list[dict]:
    return [t.to_api() for t in await repo.list_all()]


@router.post("", status_code=201)
async def create_trip(
    trip: Trip,
    user_id: str = Depends(get_current_user),
    repo: TripRepository = Depends(get_trip_repo),
) -> dict:
    return (await repo.save(trip)).to_api()


@router.get("/current")
async def list_current_trips(
    user_id: str = Depends(get_current_user),
    repo: TripRepository = Depends(get_trip_repo),
) -> list[dict]:
    now = datetime.now(timezone.utc)
    return [t.to_api() for t in current_trips(await repo.list_all(), now)]


@router.get("/upcoming")
async def list_upcoming_trips(
    user_id: str = Depends(get_current_user),
    repo: TripRepository = Depends(get_trip_repo),
) -> list[dict]:
    now = datetime.now(timezone.utc)
    return [t.to_api() for t in upcoming_trips(await repo.list_all(), now)]


@router.get("/{trip_id}")
async def get_trip(
    trip_id: str,
    user_id: str = Depends(get_current_user),
    repo: TripRepository = Depends(get_trip_repo),
) -> dict:
    return (await repo.require(trip_id)).to_api()


@router.put("/{trip_id}")
async def update_trip(
    trip_id: str,
    trip: Trip,
    user_id: str = Depends(get_current_user),
    repo: TripRepository = Depends(get_trip_repo),
) -> dict:
    return (await repo.update(trip_id, trip)).to_api()


@router.delete("/{trip_id}")
async def delete_trip(
    trip_id: str,
    user_id: str = Depends(get_current_user),
    repo: TripRepository = Depends(get_trip_repo),
) -> dict:
    return (await repo.delete(trip_id)).to_api()


# ------------------------------------------------------------------
# Flight logs
# ------------------------------------------------------------------


@router.get("/{trip_id}/logs")
async def list_flight_logs(
    trip_id: str,
    user_id: str = Depends(get_current_user),
    repo: FlightLogRepository = Depends(get_flight_log_repo),
) -> list[dict]:
    return [_log_response(log) for log in await repo.list_for_trip(trip_id)]


@router.put("/{trip_id}/logs/{leg_index}")
async def save_flight_log(
    trip_id: str,
    leg_index: int,
    log: FlightLogInput,
    user_id: str = Depends(get_current_user),
    service: FlightLogService = Depends(get_flight_log_service),
) -> dict:
    return _log_response(await service.save(log.for_leg(trip_id, leg_index)))


@router.delete("/{trip_id}/logs/{leg_index}")
async def delete_flight_log(
    trip_id: str,
    leg_index: int,
    user_id: str = Depends(get_current_user),
    service: FlightLogService = Depends(get_flight_log_service),
) -> dict:
    return (await service.delete(trip_id, leg_index)).to_api()
