"""Status derivation for MEL items and discrepancies.

Pure functions over (prior stored state, input); no store access.
"""

from __future__ import annotations

from typing import NamedTuple

from flightops.contracts.enums import ItemStatus


class ItemStatusDecision(NamedTuple):
    status: ItemStatus
    is_deferred: bool


def derive_item_status(
    requested: ItemStatus | str | None,
    prior: ItemStatus | str | None,
    is_deferred: bool,
) -> ItemStatusDecision:
    """Resolve the status to store for a MEL item or discrepancy.

    Precedence: an explicitly requested status wins; otherwise a Closed item
    stays Closed; otherwise ``is_deferred`` gives Deferred; otherwise Open.
    A Closed result always clears ``is_deferred``.
    """
    if requested:
        status = ItemStatus(requested)
    elif prior and ItemStatus(prior) == ItemStatus.CLOSED:
        status = ItemStatus.CLOSED
    elif is_deferred:
        status = ItemStatus.DEFERRED
    else:
        status = ItemStatus.OPEN

    if status == ItemStatus.CLOSED:
        return ItemStatusDecision(status, False)
    return ItemStatusDecision(status, is_deferred)
