"""Application roles (permission sets referenced by user custom claims)."""

from __future__ import annotations

from typing import Any

from flightops.contracts.access import Role
from flightops.persistence.repositories.base import BaseRepository


class RoleRepository(BaseRepository[Role]):
    order_field = "name"
    descending = False

    def __init__(self, client: Any):
        super().__init__(client, Role, "roles")
