"""Maintenance tasks, MEL items, discrepancies and maintenance costs."""

from __future__ import annotations

from typing import Any

from flightops.contracts.maintenance import (
    AircraftDiscrepancy,
    MaintenanceCost,
    MaintenanceTask,
    MelItem,
)
from flightops.persistence.repositories.base import BaseRepository


class MaintenanceTaskRepository(BaseRepository[MaintenanceTask]):
    order_field = "itemTitle"
    descending = False

    def __init__(self, client: Any):
        super().__init__(client, MaintenanceTask, "maintenanceTasks")

    async def list_for_aircraft(self, aircraft_id: str) -> list[MaintenanceTask]:
        return await self.list_by("aircraftId", aircraft_id)

    async def get_many(self, aircraft_id: str, task_ids: list[str]) -> list[MaintenanceTask]:
        """Return the tasks of *aircraft_id* whose id is in *task_ids*, in that order."""
        wanted = set(task_ids)
        by_id = {
            t.id: t for t in await self.list_for_aircraft(aircraft_id) if t.id in wanted
        }
        return [by_id[i] for i in task_ids if i in by_id]


class MelRepository(BaseRepository[MelItem]):
    order_field = "dateEntered"

    def __init__(self, client: Any):
        super().__init__(client, MelItem, "aircraftMelItems")

    async def list_for_aircraft(self, aircraft_id: str) -> list[MelItem]:
        return await self.list_by("aircraftId", aircraft_id)


class DiscrepancyRepository(BaseRepository[AircraftDiscrepancy]):
    order_field = "dateDiscovered"

    def __init__(self, client: Any):
        super().__init__(client, AircraftDiscrepancy, "aircraftDiscrepancies")

    async def list_for_aircraft(self, aircraft_id: str) -> list[AircraftDiscrepancy]:
        return await self.list_by("aircraftId", aircraft_id)


class MaintenanceCostRepository(BaseRepository[MaintenanceCost]):
    order_field = "invoiceDate"

    def __init__(self, client: Any):
        super().__init__(client, MaintenanceCost, "maintenanceCosts")

    async def list_for_aircraft(self, aircraft_id: str) -> list[MaintenanceCost]:
        return await self.list_by("aircraftId", aircraft_id)
