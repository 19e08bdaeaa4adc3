"""Charter quotes: legs, options, priced line items.

Stored at: ``/quotes/{quote_id}`` (document id defaults to ``quoteId``)

Totals and margin are derived from the line items by
``flightops.services.pricing.price_quote`` before the quote is saved; the
repository stores whatever it is given.
"""

from datetime import datetime

from pydantic import EmailStr, Field

from flightops.contracts.common import FirestoreDocument, FirestoreModel
from flightops.contracts.enums import LegType, QuoteStatus


class QuoteLeg(FirestoreModel):
    origin: str = Field(..., min_length=3, description="ICAO code")
    destination: str = Field(..., min_length=3, description="ICAO code")
    departure_date_time: datetime | None = None
    leg_type: LegType = LegType.CHARTER
    passenger_count: int = Field(default=0, ge=0)
    origin_fbo: str | None = None
    destination_fbo: str | None = None
    origin_taxi_time_minutes: int | None = Field(default=None, ge=0)
    destination_taxi_time_minutes: int | None = Field(default=None, ge=0)
    flight_time_hours: float | None = Field(default=None, ge=0)
    calculated_block_time_hours: float | None = Field(default=None, ge=0)


class QuoteOptions(FirestoreModel):
    medics_requested: bool = False
    catering_requested: bool = False
    include_landing_fees: bool = False
    estimated_overnights: int = Field(default=0, ge=0)
    fuel_surcharge_requested: bool = False
    catering_notes: str | None = None
    notes: str | None = None
    sell_price_fuel_surcharge_per_hour: float | None = Field(default=None, ge=0)
    sell_price_medics: float | None = Field(default=None, ge=0)
    sell_price_catering: float | None = Field(default=None, ge=0)
    sell_price_landing_fee_per_leg: float | None = Field(default=None, ge=0)
    sell_price_overnight: float | None = Field(default=None, ge=0)


class QuoteLineItem(FirestoreModel):
    id: str = Field(..., min_length=1)
    description: str
    buy_rate: float = 0
    sell_rate: float = 0
    unit_description: str = "Per Unit"
    quantity: float = Field(default=1, ge=0)
    buy_total: float = 0
    sell_total: float = 0


class Quote(FirestoreDocument):
    quote_id: str = Field(..., min_length=1, description="Display code, e.g. QT-20240101-ABCD")
    selected_customer_id: str | None = None
    client_name: str = Field(..., min_length=1)
    client_email: EmailStr
    client_phone: str | None = None
    aircraft_id: str | None = None
    aircraft_label: str | None = None
    legs: list[QuoteLeg] = Field(..., min_length=1)
    options: QuoteOptions = Field(default_factory=QuoteOptions)
    line_items: list[QuoteLineItem] = Field(default_factory=list)
    total_buy_cost: float = 0
    total_sell_price: float = 0
    margin_amount: float = 0
    margin_percentage: float = 0
    status: QuoteStatus = QuoteStatus.DRAFT


# ------------------------------------------------------------------
# Generated content (not stored)
# ------------------------------------------------------------------


class QuoteEmailRequest(FirestoreModel):
    quote_link: str | None = None


class QuoteEmail(FirestoreModel):
    recipient_email: str
    email_subject: str
    email_body: str
    status: str


class FlightEstimateRequest(FirestoreModel):
    origin: str = Field(..., min_length=3, description="ICAO or IATA code, or airport name")
    destination: str = Field(..., min_length=3)
    aircraft_type: str = Field(..., min_length=1, description="e.g. Citation CJ3")
    known_cruise_speed_kts: float | None = Field(default=None, gt=0)


class FlightEstimate(FirestoreModel):
    resolved_origin_icao: str
    resolved_origin_name: str
    resolved_destination_icao: str
    resolved_destination_name: str
    estimated_mileage_nm: float
    estimated_flight_time_hours: float
    assumed_cruise_speed_kts: float
    brief_explanation: str | None = None
