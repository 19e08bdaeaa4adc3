"""Fleet aircraft and per-aircraft records keyed by the aircraft id."""

from __future__ import annotations

import logging
from typing import Any

from google.cloud.firestore import SERVER_TIMESTAMP, Increment

from flightops.contracts.common import DeleteResult
from flightops.contracts.fleet import (
    AircraftBlockOut,
    AircraftDocument,
    AircraftPerformanceData,
    AircraftRate,
    ComponentTimes,
    FleetAircraft,
)
from flightops.persistence.errors import DocumentNotFoundError
from flightops.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

FLEET_COLLECTION = "fleet"
RATES_COLLECTION = "aircraftRates"


def _add_floored(stored: Any, delta: float, digits: int | None = None) -> Any:
    """Firestore value adding *delta* to *stored*, never below zero."""
    if delta >= 0:
        return Increment(delta)
    value = max(0, (stored or 0) + delta)
    return round(value, digits) if digits is not None else value


class FleetRepository(BaseRepository[FleetAircraft]):
    order_field = "tailNumber"
    descending = False

    def __init__(self, client: Any):
        super().__init__(client, FleetAircraft, FLEET_COLLECTION)

    async def delete(self, doc_id: str) -> DeleteResult:
        """Delete an aircraft and its rate document in one batch."""
        aircraft_ref = self._collection_ref().document(doc_id)
        rate_ref = self._client.collection(RATES_COLLECTION).document(doc_id)
        async with self._store_call("delete", doc_id):
            snapshot = await aircraft_ref.get()
            if not snapshot.exists:
                raise DocumentNotFoundError(self._collection_name, doc_id)
            batch = self._client.batch()
            batch.delete(aircraft_ref)
            batch.delete(rate_ref)
            await batch.commit()
        logger.info("Deleted %s and %s/%s", self._target(doc_id), RATES_COLLECTION, doc_id)
        return DeleteResult(success=True, id=doc_id)


class AircraftRateRepository(BaseRepository[AircraftRate]):
    def __init__(self, client: Any):
        super().__init__(client, AircraftRate, RATES_COLLECTION)


class PerformanceRepository(BaseRepository[AircraftPerformanceData]):
    def __init__(self, client: Any):
        super().__init__(client, AircraftPerformanceData, "aircraftPerformanceData")


class ComponentTimesRepository(BaseRepository[ComponentTimes]):
    def __init__(self, client: Any):
        super().__init__(client, ComponentTimes, "aircraftComponentTimes")

    async def add_usage(self, aircraft_id: str, usage: dict[str, tuple[float, int]]) -> None:
        """Add (hours, cycles) to the named components.

        Growth is an atomic ``Increment``. A negative delta is applied to the
        stored value and floored at zero, so totals corrected downward by hand
        never go below zero when a log is later edited or deleted.
        """
        if not usage:
            return
        ref = self._collection_ref().document(aircraft_id)
        async with self._store_call("update", aircraft_id):
            stored: dict[str, Any] = {}
            if any(hours < 0 or cycles < 0 for hours, cycles in usage.values()):
                snapshot = await ref.get()
                if snapshot.exists:
                    stored = snapshot.to_dict().get("componentTimes") or {}
            fields = {}
            for name, (hours, cycles) in usage.items():
                current = stored.get(name) or {}
                fields[name] = {
                    "time": _add_floored(current.get("time"), hours, digits=2),
                    "cycles": _add_floored(current.get("cycles"), cycles),
                }
            await ref.set({"componentTimes": fields, "updatedAt": SERVER_TIMESTAMP}, merge=True)
        logger.info("Added usage to %s for %s", self._target(aircraft_id), ", ".join(usage))


class BlockOutRepository(BaseRepository[AircraftBlockOut]):
    order_field = "startDate"

    def __init__(self, client: Any):
        super().__init__(client, AircraftBlockOut, "aircraftBlockOuts")


class AircraftDocumentRepository(BaseRepository[AircraftDocument]):
    order_field = "expiryDate"
    descending = False

    def __init__(self, client: Any):
        super().__init__(client, AircraftDocument, "aircraftDocuments")

    async def list_for_aircraft(self, aircraft_id: str) -> list[AircraftDocument]:
        return await self.list_by("aircraftId", aircraft_id)
