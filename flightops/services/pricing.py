"""Quote pricing: line items, totals and margin.

Everything here is arithmetic on already-validated contracts. Callers run
``price_quote`` before saving; the repository never recomputes prices.
"""

from __future__ import annotations

from typing import NamedTuple

from flightops.contracts.company import CompanyProfile
from flightops.contracts.fleet import AircraftRate
from flightops.contracts.quote import Quote, QuoteLeg, QuoteLineItem

# Service-fee keys of CompanyProfile.service_fee_rates driven by quote options.
FUEL_SURCHARGE_KEY = "FUEL_SURCHARGE_PER_BLOCK_HOUR"
LANDING_FEE_KEY = "LANDING_FEE_PER_LEG"
OVERNIGHT_FEE_KEY = "OVERNIGHT_FEE_PER_NIGHT"
MEDICS_FEE_KEY = "MEDICS_FEE_FLAT"
CATERING_FEE_KEY = "CATERING_FEE_FLAT"


class Margin(NamedTuple):
    amount: float
    percentage: float


def compute_margin(total_buy: float, total_sell: float) -> Margin:
    """``sell - buy``, and that as a percentage of buy (0 when buy is not positive)."""
    amount = total_sell - total_buy
    percentage = amount / total_buy * 100 if total_buy > 0 else 0.0
    return Margin(amount, percentage)


def line_item_totals(item: QuoteLineItem) -> QuoteLineItem:
    return item.model_copy(
        update={
            "buy_total": round(item.buy_rate * item.quantity, 2),
            "sell_total": round(item.sell_rate * item.quantity, 2),
        }
    )


def price_quote(quote: Quote) -> Quote:
    """Return *quote* with line totals, quote totals and margin recomputed."""
    items = [line_item_totals(i) for i in quote.line_items]
    total_buy = round(sum(i.buy_total for i in items), 2)
    total_sell = round(sum(i.sell_total for i in items), 2)
    margin = compute_margin(total_buy, total_sell)
    return quote.model_copy(
        update={
            "line_items": items,
            "total_buy_cost": total_buy,
            "total_sell_price": total_sell,
            "margin_amount": margin.amount,
            "margin_percentage": margin.percentage,
        }
    )


# ------------------------------------------------------------------
# Line-item construction
# ------------------------------------------------------------------


def leg_block_time_hours(leg: QuoteLeg) -> float:
    """Block time of a quoted leg: flight time plus both taxi times."""
    if leg.calculated_block_time_hours is not None:
        return leg.calculated_block_time_hours
    taxi_minutes = (leg.origin_taxi_time_minutes or 0) + (leg.destination_taxi_time_minutes or 0)
    return round((leg.flight_time_hours or 0) + taxi_minutes / 60, 2)


def _fee_item(
    item_id: str,
    profile: CompanyProfile,
    key: str,
    quantity: float,
    sell_override: float | None,
    fallback_description: str,
) -> QuoteLineItem | None:
    fee = profile.service_fee_rates.get(key)
    if fee is not None and not fee.is_active:
        fee = None
    if fee is None and sell_override is None:
        return None
    return line_item_totals(
        QuoteLineItem(
            id=item_id,
            description=fee.display_description if fee else fallback_description,
            buy_rate=fee.buy if fee else 0,
            sell_rate=sell_override if sell_override is not None else fee.sell,
            unit_description=fee.unit_description if fee else "Per Unit",
            quantity=quantity,
        )
    )


def build_line_items(
    quote: Quote,
    rate: AircraftRate | None,
    profile: CompanyProfile,
) -> list[QuoteLineItem]:
    """Derive the standard line items of *quote* from rates and options.

    The aircraft is charged per flight hour at its buy/sell rate. Fees come
    from the company's service-fee table; a sell price given in the quote
    options overrides the table's sell price.
    """
    options = quote.options
    items: list[QuoteLineItem] = []

    flight_hours = round(sum(leg.flight_time_hours or 0 for leg in quote.legs), 2)
    if rate is not None:
        label = quote.aircraft_label or quote.aircraft_id or "Aircraft"
        items.append(
            line_item_totals(
                QuoteLineItem(
                    id="aircraftFlightTime",
                    description=f"Aircraft Flight Time ({label})",
                    buy_rate=rate.buy,
                    sell_rate=rate.sell,
                    unit_description="Per Flight Hour",
                    quantity=flight_hours,
                )
            )
        )

    block_hours = round(sum(leg_block_time_hours(leg) for leg in quote.legs), 2)
    candidates = []
    if options.fuel_surcharge_requested:
        candidates.append(("fuelSurcharge", FUEL_SURCHARGE_KEY, block_hours,
                           options.sell_price_fuel_surcharge_per_hour, "Fuel Surcharge"))
    if options.include_landing_fees:
        candidates.append(("landingFees", LANDING_FEE_KEY, len(quote.legs),
                           options.sell_price_landing_fee_per_leg, "Landing Fee"))
    if options.estimated_overnights > 0:
        candidates.append(("overnightFees", OVERNIGHT_FEE_KEY, options.estimated_overnights,
                           options.sell_price_overnight, "Overnight Fee"))
    if options.medics_requested:
        candidates.append(("medicsFee", MEDICS_FEE_KEY, 1, options.sell_price_medics, "Medics Fee"))
    if options.catering_requested:
        candidates.append(("cateringFee", CATERING_FEE_KEY, 1,
                           options.sell_price_catering, "Catering Fee"))

    for item_id, key, quantity, override, fallback in candidates:
        item = _fee_item(item_id, profile, key, quantity, override, fallback)
        if item is not None:
            items.append(item)
    return items
