"""Maintenance tracking: scheduled tasks, MEL items, discrepancies, costs.

Stored at:
- ``/maintenanceTasks/{task_id}``
- ``/aircraftMelItems/{mel_item_id}``
- ``/aircraftDiscrepancies/{discrepancy_id}``
- ``/maintenanceCosts/{cost_id}``
"""

from datetime import date

from pydantic import Field, computed_field

from flightops.contracts.common import FirestoreDocument, FirestoreModel
from flightops.contracts.enums import (
    CostCategory,
    CostType,
    DaysIntervalType,
    ItemStatus,
    MaintenanceItemType,
    MelCategory,
    TrackType,
)


class MaintenanceTask(FirestoreDocument):
    """A recurring or one-time maintenance item tracked against an aircraft.

    Due limits can be expressed in hours, cycles and calendar days; each is
    switched on by its ``is_*_due_enabled`` flag.
    """

    aircraft_id: str = Field(..., min_length=1)
    item_title: str = Field(..., min_length=1)
    reference_number: str | None = None
    part_number: str | None = None
    serial_number: str | None = None
    item_type: MaintenanceItemType
    associated_component: str | None = None
    details: str | None = None
    is_active: bool = True
    track_type: TrackType = TrackType.INTERVAL
    is_trips_not_affected: bool = False

    last_completed_date: date | None = None
    last_completed_hours: float | None = Field(default=None, ge=0)
    last_completed_cycles: int | None = Field(default=None, ge=0)
    last_completed_notes: str | None = None

    is_hours_due_enabled: bool = False
    hours_due: float | None = Field(default=None, ge=0)
    hours_tolerance: float | None = Field(default=None, ge=0)
    alert_hours_prior: float | None = Field(default=None, ge=0)

    is_cycles_due_enabled: bool = False
    cycles_due: int | None = Field(default=None, ge=0)
    cycles_tolerance: int | None = Field(default=None, ge=0)
    alert_cycles_prior: int | None = Field(default=None, ge=0)

    is_days_due_enabled: bool = False
    days_interval_type: DaysIntervalType | None = None
    days_due_value: str | None = None
    days_due_date: date | None = Field(default=None, description="Next calendar due date")
    days_tolerance: int | None = Field(default=None, ge=0)
    alert_days_prior: int | None = Field(default=None, ge=0)


class MelItem(FirestoreDocument):
    """Minimum Equipment List item open against an aircraft.

    ``status`` may be omitted on save; it is then derived from the stored
    item and ``is_deferred``.
    """

    aircraft_id: str = Field(..., min_length=1)
    aircraft_tail_number: str | None = None
    mel_number: str = Field(..., min_length=1, description="e.g. 25-10-01a")
    description: str = Field(..., min_length=5)
    category: MelCategory | None = None
    status: ItemStatus | None = None
    is_deferred: bool = False
    date_entered: date
    due_date: date | None = None
    provisions_or_limitations: str | None = None
    corrective_action: str | None = None
    closed_date: date | None = None


class AircraftDiscrepancy(FirestoreDocument):
    """A defect written up against an aircraft."""

    aircraft_id: str = Field(..., min_length=1)
    aircraft_tail_number: str | None = None
    status: ItemStatus | None = None
    date_discovered: date
    description: str = Field(..., min_length=5)
    discovered_by: str | None = None
    discovered_by_cert_number: str | None = None
    is_deferred: bool = False
    deferral_reference: str | None = None
    deferral_date: date | None = None
    corrective_action: str | None = None
    date_corrected: date | None = None
    corrected_by: str | None = None
    corrected_by_cert_number: str | None = None


class CostBreakdown(FirestoreModel):
    category: CostCategory
    projected_cost: float = Field(default=0, ge=0)
    actual_cost: float = Field(default=0, ge=0)
    description: str | None = None


class Attachment(FirestoreModel):
    name: str
    url: str


class MaintenanceCost(FirestoreDocument):
    """An invoice for maintenance work on an aircraft."""

    aircraft_id: str = Field(..., min_length=1)
    tail_number: str = Field(..., min_length=1)
    invoice_date: date
    invoice_number: str = Field(..., min_length=1)
    cost_type: CostType
    cost_breakdowns: list[CostBreakdown] = Field(..., min_length=1)
    notes: str | None = None
    attachments: list[Attachment] = Field(default_factory=list)

    @computed_field
    @property
    def projected_total(self) -> float:
        return round(sum(b.projected_cost for b in self.cost_breakdowns), 2)

    @computed_field
    @property
    def actual_total(self) -> float:
        return round(sum(b.actual_cost for b in self.cost_breakdowns), 2)

    @computed_field
    @property
    def variance(self) -> float:
        return round(self.actual_total - self.projected_total, 2)


class WorkOrderRequest(FirestoreModel):
    task_ids: list[str] = Field(default_factory=list)


class WorkOrder(FirestoreModel):
    aircraft_id: str
    work_order_number: str | None = None
    text: str
