"""Tests for trip classification and quote booking."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from flightops.contracts.enums import QuoteStatus, TripStatus
from flightops.contracts.quote import Quote, QuoteLeg
from flightops.contracts.trip import Trip, TripLeg
from flightops.services.errors import OperationNotAllowedError, ValidationError
from flightops.services.trips import (
    current_trips,
    is_current_trip,
    mark_booked,
    trip_from_quote,
    upcoming_trips,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _trip(trip_id: str, status: TripStatus, departure: datetime | None) -> Trip:
    return Trip(
        id=trip_id,
        trip_id=trip_id,
        client_name="Acme",
        aircraft_id="ac-1",
        status=status,
        legs=[TripLeg(origin="KTEB", destination="KPBI", departure_date_time=departure)],
    )


class TestUpcomingTrips:
    def test_filters_and_sorts_by_departure(self):
        day = timedelta(days=1)
        trips = []
        for status in (TripStatus.SCHEDULED, TripStatus.CONFIRMED, TripStatus.COMPLETED):
            for offset in (-1, 2, 1):
                trips.append(_trip(f"{status.value}{offset}", status, NOW + offset * day))

        result = upcoming_trips(trips, NOW)

        assert {t.id for t in result} == {"Scheduled1", "Scheduled2", "Confirmed1", "Confirmed2"}
        departures = [t.legs[0].departure_date_time for t in result]
        assert departures == sorted(departures)

    def test_trip_without_departure_is_not_upcoming(self):
        assert upcoming_trips([_trip("t", TripStatus.SCHEDULED, None)], NOW) == []

    def test_naive_departure_treated_as_utc(self):
        naive = datetime(2024, 6, 2, 12, 0)
        assert len(upcoming_trips([_trip("t", TripStatus.SCHEDULED, naive)], NOW)) == 1


class TestCurrentTrips:
    def test_released_and_departed(self):
        trip = _trip("t", TripStatus.RELEASED, NOW - timedelta(hours=1))
        assert is_current_trip(trip, NOW)

    def test_released_but_not_yet_departed(self):
        trip = _trip("t", TripStatus.RELEASED, NOW + timedelta(hours=1))
        assert not is_current_trip(trip, NOW)

    def test_other_statuses_excluded(self):
        trips = [
            _trip("a", TripStatus.SCHEDULED, NOW - timedelta(hours=1)),
            _trip("b", TripStatus.COMPLETED, NOW - timedelta(hours=1)),
        ]
        assert current_trips(trips, NOW) == []


class TestTripFromQuote:
    def _quote(self, **kwargs) -> Quote:
        data = dict(
            quote_id="QT-20240101-ABCD",
            client_name="Jane Doe",
            client_email="jane@example.com",
            selected_customer_id="cust-1",
            aircraft_id="ac-1",
            aircraft_label="N123AB - Citation CJ3",
            legs=[QuoteLeg(origin="KTEB", destination="KPBI", flight_time_hours=2.5,
                           origin_taxi_time_minutes=15, destination_taxi_time_minutes=15,
                           departure_date_time=NOW)],
        )
        data.update(kwargs)
        return Quote(**data)

    def test_copies_quote(self):
        trip = trip_from_quote(self._quote())

        assert trip.trip_id == "TRP-ABCD"
        assert trip.quote_id == "QT-20240101-ABCD"
        assert trip.customer_id == "cust-1"
        assert trip.aircraft_id == "ac-1"
        assert trip.status == TripStatus.SCHEDULED
        assert trip.legs[0].block_time_hours == 3.0
        assert trip.legs[0].departure_date_time == NOW

    def test_requires_aircraft(self):
        with pytest.raises(ValidationError):
            trip_from_quote(self._quote(aircraft_id=None))

    def test_mark_booked(self):
        assert mark_booked(self._quote()).status == QuoteStatus.BOOKED

    @pytest.mark.parametrize("status", [QuoteStatus.BOOKED, QuoteStatus.CANCELLED])
    def test_booked_or_cancelled_quote_refused(self, status):
        with pytest.raises(OperationNotAllowedError, match="cannot be booked"):
            trip_from_quote(self._quote(status=status))
