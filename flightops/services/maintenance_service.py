"""Saving MEL items and discrepancies with derived status and tail number."""

from __future__ import annotations

import logging

from flightops.contracts.enums import ItemStatus
from flightops.contracts.maintenance import AircraftDiscrepancy, MelItem
from flightops.persistence.errors import DocumentNotFoundError
from flightops.services.status import derive_item_status

logger = logging.getLogger(__name__)


class MaintenanceService:
    def __init__(self, fleet, mel_items, discrepancies):
        self._fleet = fleet
        self._mel_items = mel_items
        self._discrepancies = discrepancies

    async def _tail_number(self, aircraft_id: str) -> str:
        aircraft = await self._fleet.get(aircraft_id)
        if aircraft is None:
            raise DocumentNotFoundError("fleet", aircraft_id)
        return aircraft.tail_number

    async def save_mel_item(self, item: MelItem) -> MelItem:
        prior = await self._mel_items.get(item.id) if item.id else None
        decision = derive_item_status(item.status, prior.status if prior else None, item.is_deferred)
        if decision.status == ItemStatus.CLOSED and not (item.corrective_action and item.closed_date):
            logger.warning("MEL item %s closed without corrective action or closed date",
                           item.mel_number)
        item = item.model_copy(
            update={
                "status": decision.status,
                "is_deferred": decision.is_deferred,
                "aircraft_tail_number": await self._tail_number(item.aircraft_id),
            }
        )
        return await self._mel_items.save(item)

    async def save_discrepancy(self, item: AircraftDiscrepancy) -> AircraftDiscrepancy:
        prior = await self._discrepancies.get(item.id) if item.id else None
        decision = derive_item_status(item.status, prior.status if prior else None, item.is_deferred)
        item = item.model_copy(
            update={
                "status": decision.status,
                "is_deferred": decision.is_deferred,
                "aircraft_tail_number": await self._tail_number(item.aircraft_id),
            }
        )
        return await self._discrepancies.save(item)
