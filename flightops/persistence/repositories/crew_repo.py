"""Crew roster and crew documents."""

from __future__ import annotations

from typing import Any

from flightops.contracts.crew import CrewDocument, CrewMember
from flightops.persistence.repositories.base import BaseRepository


class CrewRepository(BaseRepository[CrewMember]):
    order_field = "lastName"
    descending = False

    def __init__(self, client: Any):
        super().__init__(client, CrewMember, "crewMembers")


class CrewDocumentRepository(BaseRepository[CrewDocument]):
    order_field = "expiryDate"
    descending = False

    def __init__(self, client: Any):
        super().__init__(client, CrewDocument, "crewDocuments")

    async def list_for_crew_member(self, crew_member_id: str) -> list[CrewDocument]:
        return await self.list_by("crewMemberId", crew_member_id)
