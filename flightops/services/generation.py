"""Language-model backed generation: work orders, quote e-mails, flight
estimates and performance suggestions.

This module only assembles prompts from validated records and shapes the
replies. Provider errors propagate as ``ProviderError``.
"""

from __future__ import annotations

import logging
import math
from datetime import date

from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from flightops.contracts.company import CompanyProfile
from flightops.contracts.fleet import AircraftPerformanceData, FleetAircraft
from flightops.contracts.maintenance import MaintenanceTask, WorkOrder
from flightops.contracts.quote import FlightEstimate, FlightEstimateRequest, Quote, QuoteEmail
from flightops.persistence.errors import DocumentNotFoundError
from flightops.services.errors import ProviderError

logger = logging.getLogger(__name__)

EARTH_RADIUS_NM = 3440.065
NO_TASKS_TEXT = "No tasks selected or found for work order."
QUOTE_EMAIL_STATUS = "Email content generated (not sent)."

WORK_ORDER_SYSTEM_PROMPT = """You are an aviation maintenance planner. You write clear,
professional maintenance work orders in Markdown for certificated mechanics.
Keep the structure you are given, fill in task instructions concisely, and never
invent part numbers or references that are not provided."""

QUOTE_EMAIL_SYSTEM_PROMPT = """You write concise, courteous e-mails for a private charter
operator. Reply with a JSON object with exactly two string keys:
"emailSubject" and "emailBody"."""

FLIGHT_ESTIMATE_SYSTEM_PROMPT = """You are a flight planning assistant. Resolve airports to
their ICAO code, name and coordinates, and give a typical cruise speed for the
aircraft type. Reply with a JSON object only."""

PERFORMANCE_SYSTEM_PROMPT = """You are an aircraft performance specialist. Give typical
published performance figures for the aircraft type. Reply with a JSON object only."""


# ------------------------------------------------------------------
# Prompt assembly
# ------------------------------------------------------------------


def work_order_number(aircraft: FleetAircraft, today: date) -> str:
    return f"WO-{today:%Y%m%d}-{aircraft.tail_number.replace('N', '', 1)}"


def _last_completed(task: MaintenanceTask) -> str:
    parts = []
    if task.last_completed_date:
        parts.append(task.last_completed_date.isoformat())
    if task.last_completed_hours is not None:
        parts.append(f"{task.last_completed_hours} hrs")
    if task.last_completed_cycles is not None:
        parts.append(f"{task.last_completed_cycles} cycles")
    return ", ".join(parts) or "N/A"


def work_order_prompt(aircraft: FleetAircraft, tasks: list[MaintenanceTask], today: date) -> str:
    lines = [
        "Generate a maintenance work order in Markdown with the following header and tasks.",
        "",
        f"# Work Order {work_order_number(aircraft, today)}",
        f"- **Date:** {today.isoformat()}",
        f"- **Aircraft:** {aircraft.model}",
        f"- **Tail Number:** {aircraft.tail_number}",
        f"- **Serial Number:** {aircraft.serial_number or 'N/A'}",
        "",
        "## Tasks",
    ]
    for number, task in enumerate(tasks, start=1):
        references = ", ".join(
            p for p in (task.reference_number, task.part_number and f"P/N {task.part_number}") if p
        )
        lines += [
            f"### {number}. {task.item_title}",
            f"- **Type:** {task.item_type}",
            f"- **Associated Component:** {task.associated_component or 'N/A'}",
            f"- **Reference / Part Number:** {references or 'N/A'}",
            f"- **Details:** {task.details or 'N/A'}",
            f"- **Last Completed:** {_last_completed(task)}",
            "",
        ]
    lines += [
        "## Sign-off",
        "For each task include lines for: Mechanic Name, Certificate Number, Date, Signature.",
        "End with a final return-to-service block with the same fields.",
        "",
        "Notes: All work to be performed in accordance with applicable FAA regulations "
        "and the manufacturer's maintenance manual.",
    ]
    return "\n".join(lines)


def quote_email_prompt(quote: Quote, company_name: str, quote_link: str | None = None) -> str:
    route = "; ".join(f"{leg.origin} → {leg.destination}" for leg in quote.legs)
    lines = [
        f"Write an e-mail from {company_name} to {quote.client_name} presenting charter "
        f"quote {quote.quote_id}.",
        f"Itinerary: {route}",
        f"Total price: ${quote.total_sell_price:,.2f}",
    ]
    if quote_link:
        lines.append(f"Include this link to view and accept the quote: {quote_link}")
    lines.append("Thank the client and invite them to reply with any questions.")
    return "\n".join(lines)


def great_circle_nm(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance in nautical miles."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlmb = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    return EARTH_RADIUS_NM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def flight_time_hours(distance_nm: float, speed_kts: float) -> float:
    if speed_kts <= 0:
        return 0.0
    return round(distance_nm / speed_kts, 2)


# ------------------------------------------------------------------
# Service
# ------------------------------------------------------------------


class GenerationService:
    def __init__(self, llm, fleet=None, tasks=None):
        self._llm = llm
        self._fleet = fleet
        self._tasks = tasks

    async def generate_work_order(
        self, aircraft_id: str, task_ids: list[str], today: date | None = None
    ) -> WorkOrder:
        aircraft = await self._fleet.get(aircraft_id)
        if aircraft is None:
            raise DocumentNotFoundError("fleet", aircraft_id)
        tasks = await self._tasks.get_many(aircraft_id, task_ids)
        if not tasks:
            return WorkOrder(aircraft_id=aircraft_id, text=NO_TASKS_TEXT)

        today = today or date.today()
        logger.info("Generating work order for %s with %d tasks", aircraft.tail_number, len(tasks))
        text = await self._llm.complete(
            work_order_prompt(aircraft, tasks, today),
            system=WORK_ORDER_SYSTEM_PROMPT,
            max_tokens=3000,
        )
        return WorkOrder(
            aircraft_id=aircraft_id,
            work_order_number=work_order_number(aircraft, today),
            text=text,
        )

    async def generate_quote_email(
        self, quote: Quote, profile: CompanyProfile, quote_link: str | None = None
    ) -> QuoteEmail:
        reply = await self._llm.complete_json(
            quote_email_prompt(quote, profile.company_name, quote_link),
            system=QUOTE_EMAIL_SYSTEM_PROMPT,
        )
        try:
            subject, body = str(reply["emailSubject"]), str(reply["emailBody"])
        except KeyError as exc:
            raise ProviderError(f"Quote e-mail reply is missing {exc}") from exc
        logger.info("Quote e-mail for %s generated (not sent)", quote.quote_id)
        return QuoteEmail(
            recipient_email=quote.client_email,
            email_subject=subject,
            email_body=body,
            status=QUOTE_EMAIL_STATUS,
        )

    async def estimate_flight_details(self, request: FlightEstimateRequest) -> FlightEstimate:
        """Resolve both airports with the model, then compute distance and time locally."""
        prompt = (
            f"Origin: {request.origin}\nDestination: {request.destination}\n"
            f"Aircraft type: {request.aircraft_type}\n"
            "Return keys: originIcao, originName, originLat, originLon, destinationIcao, "
            "destinationName, destinationLat, destinationLon, typicalCruiseSpeedKts, "
            "briefExplanation."
        )
        reply = await self._llm.complete_json(prompt, system=FLIGHT_ESTIMATE_SYSTEM_PROMPT)
        try:
            distance = great_circle_nm(
                float(reply["originLat"]), float(reply["originLon"]),
                float(reply["destinationLat"]), float(reply["destinationLon"]),
            )
            speed = request.known_cruise_speed_kts or float(reply.get("typicalCruiseSpeedKts") or 0)
            origin_icao = str(reply["originIcao"]).upper()
            destination_icao = str(reply["destinationIcao"]).upper()
        except (KeyError, TypeError, ValueError) as exc:
            raise ProviderError(f"Flight estimate reply is incomplete: {exc}") from exc

        return FlightEstimate(
            resolved_origin_icao=origin_icao,
            resolved_origin_name=str(reply.get("originName") or origin_icao),
            resolved_destination_icao=destination_icao,
            resolved_destination_name=str(reply.get("destinationName") or destination_icao),
            estimated_mileage_nm=round(distance),
            estimated_flight_time_hours=flight_time_hours(distance, speed),
            assumed_cruise_speed_kts=speed,
            brief_explanation=reply.get("briefExplanation"),
        )

    async def suggest_performance(self, aircraft_type: str) -> AircraftPerformanceData:
        fields = ", ".join(
            to_camel(name)
            for name in AircraftPerformanceData.model_fields
            if name not in AircraftPerformanceData.server_fields
        )
        reply = await self._llm.complete_json(
            f"Aircraft type: {aircraft_type}\nReturn keys: {fields}. "
            "Speeds in knots, rates in ft/min, altitude in ft, range in NM, weight in lbs.",
            system=PERFORMANCE_SYSTEM_PROMPT,
        )
        try:
            return AircraftPerformanceData.model_validate(reply)
        except PydanticValidationError as exc:
            raise ProviderError(f"Performance suggestion is invalid: {exc}") from exc
