"""Trips and their post-flight leg logs.

Stored at:
- ``/trips/{trip_id}``
- ``/flightLogs/{trip_id}_{leg_index}``
"""

import re
from datetime import datetime

from pydantic import Field, field_validator, model_validator

from flightops.contracts.common import FirestoreDocument, FirestoreModel
from flightops.contracts.enums import ApproachType, FuelUnit, LegType, TripStatus

_HHMM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class TripLeg(FirestoreModel):
    origin: str = Field(..., min_length=3, description="ICAO code")
    destination: str = Field(..., min_length=3, description="ICAO code")
    departure_date_time: datetime | None = None
    arrival_date_time: datetime | None = None
    leg_type: LegType = LegType.CHARTER
    passenger_count: int = Field(default=0, ge=0)
    origin_fbo: str | None = None
    destination_fbo: str | None = None
    flight_time_hours: float | None = Field(default=None, ge=0)
    block_time_hours: float | None = Field(default=None, ge=0)


class Trip(FirestoreDocument):
    """A scheduled charter trip. ``legs`` is never empty."""

    trip_id: str = Field(..., min_length=1, description="Display code, e.g. TRP-ABC123")
    quote_id: str | None = None
    customer_id: str | None = None
    client_name: str = Field(..., min_length=1)
    aircraft_id: str = Field(..., min_length=1)
    aircraft_label: str | None = None
    legs: list[TripLeg] = Field(..., min_length=1)
    status: TripStatus = TripStatus.SCHEDULED
    assigned_pilot_id: str | None = None
    assigned_co_pilot_id: str | None = None
    assigned_flight_attendant_ids: list[str] = Field(default_factory=list)
    notes: str | None = None

    @field_validator("assigned_flight_attendant_ids")
    @classmethod
    def _unique_attendants(cls, v: list[str]) -> list[str]:
        return list(dict.fromkeys(v))


class FlightLogLeg(FirestoreDocument):
    """Actual times, landings and fuel for one flown leg of a trip."""

    trip_id: str = Field(..., min_length=1)
    leg_index: int = Field(..., ge=0)
    taxi_out_time_mins: int = Field(default=0, ge=0)
    take_off_time: str = Field(..., description="HH:MM, UTC")
    hobbs_take_off: float | None = Field(default=None, ge=0)
    landing_time: str = Field(..., description="HH:MM, UTC")
    hobbs_landing: float | None = Field(default=None, ge=0)
    taxi_in_time_mins: int = Field(default=0, ge=0)
    approaches: int = Field(default=0, ge=0)
    approach_type: ApproachType | None = None
    day_landings: int = Field(default=0, ge=0)
    night_landings: int = Field(default=0, ge=0)
    night_time_decimal: float = Field(default=0, ge=0)
    instrument_time_decimal: float = Field(default=0, ge=0)
    fob_starting_fuel: float = Field(default=0, ge=0)
    fuel_purchased_amount: float = Field(default=0, ge=0)
    fuel_purchased_unit: FuelUnit = FuelUnit.LBS
    ending_fuel: float = Field(default=0, ge=0)
    fuel_cost: float | None = Field(default=None, ge=0)
    post_leg_apu_time_decimal: float | None = Field(default=None, ge=0)

    @field_validator("take_off_time", "landing_time")
    @classmethod
    def _check_clock(cls, v: str) -> str:
        if not _HHMM.match(v):
            raise ValueError("time must be HH:MM")
        return v

    @model_validator(mode="after")
    def _check_consistency(self) -> "FlightLogLeg":
        if (
            self.hobbs_take_off is not None
            and self.hobbs_landing is not None
            and self.hobbs_landing <= self.hobbs_take_off
        ):
            raise ValueError("Hobbs landing must be greater than Hobbs take-off")
        if self.ending_fuel > self.fob_starting_fuel + self.fuel_purchased_amount:
            raise ValueError("Ending fuel cannot exceed starting fuel plus fuel purchased")
        return self


class FlightLogInput(FlightLogLeg):
    """Request body for a leg log; the URL supplies the trip and the leg."""

    trip_id: str | None = None
    leg_index: int | None = Field(default=None, ge=0)

    def for_leg(self, trip_id: str, leg_index: int) -> FlightLogLeg:
        data = self.model_dump(exclude={"id", "created_at", "updated_at", "trip_id", "leg_index"})
        return FlightLogLeg(**data, trip_id=trip_id, leg_index=leg_index)
