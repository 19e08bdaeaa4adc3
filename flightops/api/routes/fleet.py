"""Fleet endpoints: aircraft, rates, performance, component times, block-outs."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from flightops.api.deps import (
    get_block_out_repo,
    get_component_times_repo,
    get_current_user,
    get_fleet_repo,
    get_generation_service,
    get_performance_repo,
    get_rate_repo,
)
from flightops.contracts.fleet import (
    AircraftBlockOut,
    AircraftPerformanceData,
    AircraftRate,
    ComponentTimes,
    FleetAircraft,
)
from flightops.persistence.repositories.fleet_repo import (
    AircraftRateRepository,
    BlockOutRepository,
    ComponentTimesRepository,
    FleetRepository,
    PerformanceRepository,
)
from flightops.services.generation import GenerationService

router = APIRouter(tags=["fleet"])


# ------------------------------------------------------------------
# Aircraft
# ------------------------------------------------------------------


@router.get("/fleet")
async def list_fleet(
    user_id: str = Depends(get_current_user),
    repo: FleetRepository = Depends(get_fleet_repo),
) -> list[dict]:
    return [a.to_api() for a in await repo.list_all()]


@router.post("/fleet", status_code=201)
async def create_aircraft(
    aircraft: FleetAircraft,
    user_id: str = Depends(get_current_user),
    repo: FleetRepository = Depends(get_fleet_repo),
) -> dict:
    return (await repo.save(aircraft)).to_api()


@router.get("/fleet/{aircraft_id}")
async def get_aircraft(
    aircraft_id: str,
    user_id: str = Depends(get_current_user),
    repo: FleetRepository = Depends(get_fleet_repo),
) -> dict:
    return (await repo.require(aircraft_id)).to_api()


@router.put("/fleet/{aircraft_id}")
async def update_aircraft(
    aircraft_id: str,
    aircraft: FleetAircraft,
    user_id: str = Depends(get_current_user),
    repo: FleetRepository = Depends(get_fleet_repo),
) -> dict:
    return (await repo.update(aircraft_id, aircraft)).to_api()


@router.delete("/fleet/{aircraft_id}")
async def delete_aircraft(
    aircraft_id: str,
    user_id: str = Depends(get_current_user),
    repo: FleetRepository = Depends(get_fleet_repo),
) -> dict:
    return (await repo.delete(aircraft_id)).to_api()


# ------------------------------------------------------------------
# Rates
# ------------------------------------------------------------------


@router.get("/rates")
async def list_rates(
    user_id: str = Depends(get_current_user),
    repo: AircraftRateRepository = Depends(get_rate_repo),
) -> list[dict]:
    return [r.to_api() for r in await repo.list_all()]


@router.get("/fleet/{aircraft_id}/rate")
async def get_rate(
    aircraft_id: str,
    user_id: str = Depends(get_current_user),
    repo: AircraftRateRepository = Depends(get_rate_repo),
) -> dict:
    return (await repo.require(aircraft_id)).to_api()


@router.put("/fleet/{aircraft_id}/rate")
async def save_rate(
    aircraft_id: str,
    rate: AircraftRate,
    user_id: str = Depends(get_current_user),
    fleet: FleetRepository = Depends(get_fleet_repo),
    repo: AircraftRateRepository = Depends(get_rate_repo),
) -> dict:
    await fleet.require(aircraft_id)
    return (await repo.save(rate.model_copy(update={"id": aircraft_id}))).to_api()


# ------------------------------------------------------------------
# Performance
# ------------------------------------------------------------------


@router.get("/fleet/{aircraft_id}/performance")
async def get_performance(
    aircraft_id: str,
    user_id: str = Depends(get_current_user),
    repo: PerformanceRepository = Depends(get_performance_repo),
) -> dict | None:
    data = await repo.get(aircraft_id)
    return data.to_api() if data else None


@router.put("/fleet/{aircraft_id}/performance")
async def save_performance(
    aircraft_id: str,
    data: AircraftPerformanceData,
    user_id: str = Depends(get_current_user),
    fleet: FleetRepository = Depends(get_fleet_repo),
    repo: PerformanceRepository = Depends(get_performance_repo),
) -> dict:
    await fleet.require(aircraft_id)
    return (await repo.save(data.model_copy(update={"id": aircraft_id}))).to_api()


@router.post("/fleet/{aircraft_id}/performance/suggest")
async def suggest_performance(
    aircraft_id: str,
    user_id: str = Depends(get_current_user),
    fleet: FleetRepository = Depends(get_fleet_repo),
    generator: GenerationService = Depends(get_generation_service),
) -> dict:
    """Ask the language model for typical figures; nothing is saved."""
    aircraft = await fleet.require(aircraft_id)
    return (await generator.suggest_performance(aircraft.model)).to_api()


# ------------------------------------------------------------------
# Component times
# ------------------------------------------------------------------


@router.get("/fleet/{aircraft_id}/component-times")
async def get_component_times(
    aircraft_id: str,
    user_id: str = Depends(get_current_user),
    repo: ComponentTimesRepository = Depends(get_component_times_repo),
) -> dict:
    data = await repo.get(aircraft_id)
    return (data or ComponentTimes(id=aircraft_id)).to_api()


@router.put("/fleet/{aircraft_id}/component-times")
async def save_component_times(
    aircraft_id: str,
    data: ComponentTimes,
    user_id: str = Depends(get_current_user),
    fleet: FleetRepository = Depends(get_fleet_repo),
    repo: ComponentTimesRepository = Depends(get_component_times_repo),
) -> dict:
    await fleet.require(aircraft_id)
    return (await repo.save(data.model_copy(update={"id": aircraft_id}))).to_api()


# ------------------------------------------------------------------
# Block-outs
# ------------------------------------------------------------------


@router.get("/block-outs")
async def list_block_outs(
    user_id: str = Depends(get_current_user),
    repo: BlockOutRepository = Depends(get_block_out_repo),
) -> list[dict]:
    return [b.to_api() for b in await repo.list_all()]


@router.post("/block-outs", status_code=201)
async def create_block_out(
    block_out: AircraftBlockOut,
    user_id: str = Depends(get_current_user),
    repo: BlockOutRepository = Depends(get_block_out_repo),
) -> dict:
    return (await repo.save(block_out)).to_api()


@router.delete("/block-outs/{block_out_id}")
async def delete_block_out(
    block_out_id: str,
    user_id: str = Depends(get_current_user),
    repo: BlockOutRepository = Depends(get_block_out_repo),
) -> dict:
    return (await repo.delete(block_out_id)).to_api()
