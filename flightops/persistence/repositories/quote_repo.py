"""Charter quotes."""

from __future__ import annotations

from typing import Any

from flightops.contracts.quote import Quote
from flightops.persistence.repositories.base import BaseRepository


class QuoteRepository(BaseRepository[Quote]):
    """Quotes are keyed by their display code unless an explicit id is given."""

    order_field = "createdAt"

    def __init__(self, client: Any):
        super().__init__(client, Quote, "quotes")

    def _document_id(self, entity: Quote) -> str:
        return entity.id or entity.quote_id
