"""Trip classification and quote booking.

``current`` and ``upcoming`` are derived on read and never stored.
"""

from __future__ import annotations

from datetime import datetime, timezone

from flightops.contracts.enums import QuoteStatus, TripStatus
from flightops.contracts.quote import Quote
from flightops.contracts.trip import Trip, TripLeg
from flightops.services.errors import OperationNotAllowedError, ValidationError
from flightops.services.pricing import leg_block_time_hours

UPCOMING_STATUSES = (TripStatus.SCHEDULED, TripStatus.CONFIRMED)
CLOSED_STATUSES = (TripStatus.COMPLETED, TripStatus.CANCELLED)
UNBOOKABLE_QUOTE_STATUSES = (QuoteStatus.BOOKED, QuoteStatus.CANCELLED)


def _aware(dt: datetime) -> datetime:
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


def first_departure(trip: Trip) -> datetime | None:
    """Departure time of the first leg, as an aware UTC datetime."""
    departure = trip.legs[0].departure_date_time if trip.legs else None
    return _aware(departure) if departure is not None else None


def is_current_trip(trip: Trip, now: datetime) -> bool:
    """Released trip whose first leg has already departed."""
    departure = first_departure(trip)
    return (
        trip.status == TripStatus.RELEASED
        and trip.status not in CLOSED_STATUSES
        and departure is not None
        and departure < _aware(now)
    )


def is_upcoming_trip(trip: Trip, now: datetime) -> bool:
    """Scheduled or confirmed trip whose first leg departs in the future."""
    departure = first_departure(trip)
    return trip.status in UPCOMING_STATUSES and departure is not None and departure > _aware(now)


def current_trips(trips: list[Trip], now: datetime) -> list[Trip]:
    return [t for t in trips if is_current_trip(t, now)]


def upcoming_trips(trips: list[Trip], now: datetime) -> list[Trip]:
    """Upcoming trips, soonest departure first."""
    return sorted(
        (t for t in trips if is_upcoming_trip(t, now)),
        key=first_departure,
    )


def trip_id_for_quote(quote: Quote) -> str:
    suffix = quote.quote_id.rsplit("-", 1)[-1]
    return f"TRP-{suffix}"


def trip_from_quote(quote: Quote) -> Trip:
    """Build the Scheduled trip booked from an accepted quote."""
    if quote.status in UNBOOKABLE_QUOTE_STATUSES:
        raise OperationNotAllowedError(f"Quote {quote.quote_id} is {quote.status} and cannot be booked")
    if not quote.aircraft_id:
        raise ValidationError(f"Quote {quote.quote_id} has no aircraft selected")
    legs = [
        TripLeg(
            origin=leg.origin,
            destination=leg.destination,
            departure_date_time=leg.departure_date_time,
            leg_type=leg.leg_type,
            passenger_count=leg.passenger_count,
            origin_fbo=leg.origin_fbo,
            destination_fbo=leg.destination_fbo,
            flight_time_hours=leg.flight_time_hours,
            block_time_hours=leg_block_time_hours(leg),
        )
        for leg in quote.legs
    ]
    return Trip(
        trip_id=trip_id_for_quote(quote),
        quote_id=quote.quote_id,
        customer_id=quote.selected_customer_id,
        client_name=quote.client_name,
        aircraft_id=quote.aircraft_id,
        aircraft_label=quote.aircraft_label,
        legs=legs,
        status=TripStatus.SCHEDULED,
        notes=quote.options.notes,
    )


def mark_booked(quote: Quote) -> Quote:
    return quote.model_copy(update={"status": QuoteStatus.BOOKED})
