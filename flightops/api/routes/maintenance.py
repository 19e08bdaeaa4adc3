"""Maintenance endpoints: tasks, work orders, MEL items, discrepancies, costs."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from flightops.api.deps import (
    get_current_user,
    get_discrepancy_repo,
    get_generation_service,
    get_maintenance_cost_repo,
    get_maintenance_service,
    get_mel_repo,
    get_task_repo,
)
from flightops.contracts.maintenance import (
    AircraftDiscrepancy,
    MaintenanceCost,
    MaintenanceTask,
    MelItem,
    WorkOrderRequest,
)
from flightops.persistence.repositories.maintenance_repo import (
    DiscrepancyRepository,
    MaintenanceCostRepository,
    MaintenanceTaskRepository,
    MelRepository,
)
from flightops.services.generation import GenerationService
from flightops.services.maintenance_service import MaintenanceService

router = APIRouter(tags=["maintenance"])


# ------------------------------------------------------------------
# Scheduled tasks
# ------------------------------------------------------------------


@router.get("/maintenance-tasks")
async def list_tasks(
    aircraft_id: str | None = Query(None, alias="aircraftId"),
    user_id: str = Depends(get_current_user),
    repo: MaintenanceTaskRepository = Depends(get_task_repo),
) -> list[dict]:
    tasks = await repo.list_for_aircraft(aircraft_id) if aircraft_id else await repo.list_all()
    return [t.to_api() for t in tasks]


@router.post("/maintenance-tasks", status_code=201)
async def create_task(
    task: MaintenanceTask,
    user_id: str = Depends(get_current_user),
    repo: MaintenanceTaskRepository = Depends(get_task_repo),
) -> dict:
    return (await repo.save(task)).to_api()


@router.get("/maintenance-tasks/{task_id}")
async def get_task(
    task_id: str,
    user_id: str = Depends(get_current_user),
    repo: MaintenanceTaskRepository = Depends(get_task_repo),
) -> dict:
    return (await repo.require(task_id)).to_api()


@router.put("/maintenance-tasks/{task_id}")
async def update_task(
    task_id: str,
    task: MaintenanceTask,
    user_id: str = Depends(get_current_user),
    repo: MaintenanceTaskRepository = Depends(get_task_repo),
) -> dict:
    return (await repo.update(task_id, task)).to_api()


@router.delete("/maintenance-tasks/{task_id}")
async def delete_task(
    task_id: str,
    user_id: str = Depends(get_current_user),
    repo: MaintenanceTaskRepository = Depends(get_task_repo),
) -> dict:
    return (await repo.delete(task_id)).to_api()


@router.post("/fleet/{aircraft_id}/work-order")
async def generate_work_order(
    aircraft_id: str,
    request: WorkOrderRequest,
    user_id: str = Depends(get_current_user),
    generator: GenerationService = Depends(get_generation_service),
) -> dict:
    return (await generator.generate_work_order(aircraft_id, request.task_ids)).to_api()


# ------------------------------------------------------------------
# MEL items
# ------------------------------------------------------------------


@router.get("/mel-items")
async def list_mel_items(
    aircraft_id: str | None = Query(None, alias="aircraftId"),
    user_id: str = Depends(get_current_user),
    repo: MelRepository = Depends(get_mel_repo),
) -> list[dict]:
    items = await repo.list_for_aircraft(aircraft_id) if aircraft_id else await repo.list_all()
    return [i.to_api() for i in items]


@router.post("/mel-items", status_code=201)
async def create_mel_item(
    item: MelItem,
    user_id: str = Depends(get_current_user),
    service: MaintenanceService = Depends(get_maintenance_service),
) -> dict:
    return (await service.save_mel_item(item)).to_api()


@router.put("/mel-items/{item_id}")
async def update_mel_item(
    item_id: str,
    item: MelItem,
    user_id: str = Depends(get_current_user),
    repo: MelRepository = Depends(get_mel_repo),
    service: MaintenanceService = Depends(get_maintenance_service),
) -> dict:
    await repo.require(item_id)
    return (await service.save_mel_item(item.model_copy(update={"id": item_id}))).to_api()


@router.delete("/mel-items/{item_id}")
async def delete_mel_item(
    item_id: str,
    user_id: str = Depends(get_current_user),
    repo: MelRepository = Depends(get_mel_repo),
) -> dict:
    return (await repo.delete(item_id)).to_api()


# ------------------------------------------------------------------
# Discrepancies
# ------------------------------------------------------------------


@router.get("/discrepancies")
async def list_discrepancies(
    aircraft_id: str | None = Query(None, alias="aircraftId"),
    user_id: str = Depends(get_current_user),
    repo: DiscrepancyRepository = Depends(get_discrepancy_repo),
) -> list[dict]:
    items = await repo.list_for_aircraft(aircraft_id) if aircraft_id else await repo.list_all()
    return [i.to_api() for i in items]


@router.post("/discrepancies", status_code=201)
async def create_discrepancy(
    item: AircraftDiscrepancy,
    user_id: str = Depends(get_current_user),
    service: MaintenanceService = Depends(get_maintenance_service),
) -> dict:
    return (await service.save_discrepancy(item)).to_api()


@router.put("/discrepancies/{item_id}")
async def update_discrepancy(
    item_id: str,
    item: AircraftDiscrepancy,
    user_id: str = Depends(get_current_user),
    repo: DiscrepancyRepository = Depends(get_discrepancy_repo),
    service: MaintenanceService = Depends(get_maintenance_service),
) -> dict:
    await repo.require(item_id)
    return (await service.save_discrepancy(item.model_copy(update={"id": item_id}))).to_api()


@router.delete("/discrepancies/{item_id}")
async def delete_discrepancy(
    item_id: str,
    user_id: str = Depends(get_current_user),
    repo: DiscrepancyRepository = Depends(get_discrepancy_repo),
) -> dict:
    return (await repo.delete(item_id)).to_api()


# ------------------------------------------------------------------
# Costs
# ------------------------------------------------------------------


@router.get("/maintenance-costs")
async def list_costs(
    aircraft_id: str | None = Query(None, alias="aircraftId"),
    user_id: str = Depends(get_current_user),
    repo: MaintenanceCostRepository = Depends(get_maintenance_cost_repo),
) -> list[dict]:
    costs = await repo.list_for_aircraft(aircraft_id) if aircraft_id else await repo.list_all()
    return [c.to_api() for c in costs]


@router.post("/maintenance-costs", status_code=201)
async def create_cost(
    cost: MaintenanceCost,
    user_id: str = Depends(get_current_user),
    repo: MaintenanceCostRepository = Depends(get_maintenance_cost_repo),
) -> dict:
    return (await repo.save(cost)).to_api()


@router.put("/maintenance-costs/{cost_id}")
async def update_cost(
    cost_id: str,
    cost: MaintenanceCost,
    user_id: str = Depends(get_current_user),
    repo: MaintenanceCostRepository = Depends(get_maintenance_cost_repo),
) -> dict:
    return (await repo.update(cost_id, cost)).to_api()


@router.delete("/maintenance-costs/{cost_id}")
async def delete_cost(
    cost_id: str,
    user_id: str = Depends(get_current_user),
    repo: MaintenanceCostRepository = Depends(get_maintenance_cost_repo),
) -> dict:
    return (await repo.delete(cost_id)).to_api()
