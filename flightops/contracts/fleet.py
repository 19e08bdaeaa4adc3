"""Fleet aircraft and the per-aircraft records keyed by aircraft id.

Stored at:
- ``/fleet/{aircraft_id}``
- ``/aircraftRates/{aircraft_id}``
- ``/aircraftPerformanceData/{aircraft_id}``
- ``/aircraftComponentTimes/{aircraft_id}``
- ``/aircraftBlockOuts/{block_out_id}``
- ``/aircraftDocuments/{document_id}``
"""

from datetime import date, datetime, timezone

from pydantic import Field, field_validator, model_validator

from flightops.contracts.common import FileUpload, FirestoreDocument, FirestoreModel
from flightops.contracts.enums import AircraftDocumentType

DEFAULT_TRACKED_COMPONENTS = ["Airframe", "Engine 1"]


class EngineDetail(FirestoreModel):
    model: str | None = None
    serial_number: str | None = None


class PropellerDetail(FirestoreModel):
    model: str | None = None
    serial_number: str | None = None


class FleetAircraft(FirestoreDocument):
    """An aircraft operated by the company."""

    tail_number: str = Field(..., min_length=1, description="e.g. N123AB")
    model: str = Field(..., min_length=1, description="e.g. Citation CJ3")
    serial_number: str | None = None
    aircraft_year: int | None = None
    base_location: str | None = Field(default=None, description="ICAO code of home base")
    engine_details: list[EngineDetail] = Field(default_factory=list)
    propeller_details: list[PropellerDetail] = Field(default_factory=list)
    is_maintenance_tracked: bool = True
    tracked_component_names: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TRACKED_COMPONENTS)
    )
    primary_contact_name: str | None = None
    primary_contact_phone: str | None = None
    primary_contact_email: str | None = None
    internal_notes: str | None = None

    @field_validator("aircraft_year")
    @classmethod
    def _check_year(cls, v: int | None) -> int | None:
        if v is None:
            return v
        latest = datetime.now(timezone.utc).year + 10
        if not 1900 <= v <= latest:
            raise ValueError(f"aircraft year must be between 1900 and {latest}")
        return v

    @field_validator("tracked_component_names")
    @classmethod
    def _default_components(cls, v: list[str]) -> list[str]:
        names = [n.strip() for n in v if n and n.strip()]
        return names or list(DEFAULT_TRACKED_COMPONENTS)

    @property
    def label(self) -> str:
        return f"{self.tail_number} - {self.model}"


class AircraftRate(FirestoreDocument):
    """Hourly buy/sell rate pair. Document id is the aircraft id."""

    buy: float = Field(..., ge=0, description="Operator cost per flight hour")
    sell: float = Field(..., ge=0, description="Price charged per flight hour")


class AircraftPerformanceData(FirestoreDocument):
    """Performance parameters used for quoting. Document id is the aircraft id."""

    takeoff_speed: float | None = Field(default=None, ge=0, description="kt")
    landing_speed: float | None = Field(default=None, ge=0, description="kt")
    climb_speed: float | None = Field(default=None, ge=0, description="kt")
    climb_rate: float | None = Field(default=None, ge=0, description="ft/min")
    cruise_speed: float | None = Field(default=None, ge=0, description="kt TAS")
    cruise_altitude: float | None = Field(default=None, ge=0, description="ft")
    descent_speed: float | None = Field(default=None, ge=0, description="kt")
    descent_rate: float | None = Field(default=None, ge=0, description="ft/min")
    fuel_type: str | None = None
    fuel_burn: float | None = Field(default=None, ge=0, description="per hour, in fuel_type units")
    max_range: float | None = Field(default=None, ge=0, description="NM")
    max_allowable_takeoff_weight: float | None = Field(default=None, ge=0, description="lbs")


class ComponentTime(FirestoreModel):
    time: float = Field(default=0, ge=0, description="Total time in hours")
    cycles: int = Field(default=0, ge=0)


class ComponentTimes(FirestoreDocument):
    """Accumulated time/cycles per tracked component. Document id is the aircraft id."""

    component_times: dict[str, ComponentTime] = Field(default_factory=dict)


class AircraftBlockOut(FirestoreDocument):
    """A period during which an aircraft is unavailable for trips."""

    aircraft_id: str = Field(..., min_length=1)
    aircraft_label: str | None = None
    title: str = Field(..., min_length=1)
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def _check_range(self) -> "AircraftBlockOut":
        if self.end_date < self.start_date:
            raise ValueError("end date must not be before start date")
        return self


class AircraftDocument(FirestoreDocument):
    """Regulatory or administrative document attached to an aircraft."""

    aircraft_id: str = Field(..., min_length=1)
    aircraft_tail_number: str | None = None
    document_name: str = Field(..., min_length=1)
    document_type: AircraftDocumentType
    issue_date: date | None = None
    expiry_date: date | None = None
    file_url: str | None = None
    notes: str | None = None


class AircraftDocumentUpload(FileUpload):
    aircraft_id: str = Field(..., min_length=1)
    document_id: str | None = Field(default=None, description="Existing document to attach the file to")
