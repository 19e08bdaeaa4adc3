"""Quote endpoints: CRUD, pricing, e-mail drafting, booking, flight estimates."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from flightops.api.deps import (
    get_company_profile_repo,
    get_current_user,
    get_generation_service,
    get_quote_repo,
    get_rate_repo,
    get_trip_repo,
)
from flightops.contracts.quote import FlightEstimateRequest, Quote, QuoteEmailRequest
from flightops.persistence.repositories.company_repo import CompanyProfileRepository
from flightops.persistence.repositories.fleet_repo import AircraftRateRepository
from flightops.persistence.repositories.quote_repo import QuoteRepository
from flightops.persistence.repositories.trip_repo import TripRepository
from flightops.services.generation import GenerationService
from flightops.services.pricing import build_line_items, price_quote
from flightops.services.trips import mark_booked, trip_from_quote

router = APIRouter(prefix="/quotes", tags=["quotes"])


@router.get("")
async def list_quotes(
    user_id: str = Depends(get_current_user),
    repo: QuoteRepository = Depends(get_quote_repo),
) -> list[dict]:
    return [q.to_api() for q in await repo.list_all()]


@router.post("", status_code=201)
async def create_quote(
    quote: Quote,
    user_id: str = Depends(get_current_user),
    repo: QuoteRepository = Depends(get_quote_repo),
) -> dict:
    return (await repo.save(price_quote(quote))).to_api()


@router.post("/price")
async def price(
    quote: Quote,
    user_id: str = Depends(get_current_user),
    rates: AircraftRateRepository = Depends(get_rate_repo),
    profiles: CompanyProfileRepository = Depends(get_company_profile_repo),
) -> dict:
    """Build the standard line items from rates and options and price them. Nothing is saved."""
    rate = await rates.get(quote.aircraft_id) if quote.aircraft_id else None
    profile = await profiles.get_profile()
    items = build_line_items(quote, rate, profile)
    return price_quote(quote.model_copy(update={"line_items": items})).to_api()


@router.post("/estimate-flight")
async def estimate_flight(
    request: FlightEstimateRequest,
    user_id: str = Depends(get_current_user),
    generator: GenerationService = Depends(get_generation_service),
) -> dict:
    return (await generator.estimate_flight_details(request)).to_api()


@router.get("/{quote_id}")
async def get_quote(
    quote_id: str,
    user_id: str = Depends(get_current_user),
    repo: QuoteRepository = Depends(get_quote_repo),
) -> dict:
    return (await repo.require(quote_id)).to_api()


@router.put("/{quote_id}")
async def update_quote(
    quote_id: str,
    quote: Quote,
    user_id: str = Depends(get_current_user),
    repo: QuoteRepository = Depends(get_quote_repo),
) -> dict:
    return (await repo.update(quote_id, price_quote(quote))).to_api()


@router.delete("/{quote_id}")
async def delete_quote(
    quote_id: str,
    user_id: str = Depends(get_current_user),
    repo: QuoteRepository = Depends(get_quote_repo),
) -> dict:
    return (await repo.delete(quote_id)).to_api()


@router.post("/{quote_id}/email")
async def draft_quote_email(
    quote_id: str,
    request: QuoteEmailRequest,
    user_id: str = Depends(get_current_user),
    repo: QuoteRepository = Depends(get_quote_repo),
    profiles: CompanyProfileRepository = Depends(get_company_profile_repo),
    generator: GenerationService = Depends(get_generation_service),
) -> dict:
    """Draft the e-mail presenting a quote. The e-mail is returned, not sent."""
    quote = await repo.require(quote_id)
    profile = await profiles.get_profile()
    return (await generator.generate_quote_email(quote, profile, request.quote_link)).to_api()


@router.post("/{quote_id}/book", status_code=201)
async def book_quote(
    quote_id: str,
    user_id: str = Depends(get_current_user),
    repo: QuoteRepository = Depends(get_quote_repo),
    trips: TripRepository = Depends(get_trip_repo),
) -> dict:
    """Create a Scheduled trip from the quote and mark the quote Booked."""
    quote = await repo.require(quote_id)
    trip = await trips.save(trip_from_quote(quote))
    await repo.save(mark_booked(quote))
    return trip.to_api()
