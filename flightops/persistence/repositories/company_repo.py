"""Company profile singleton, company documents and customers."""

from __future__ import annotations

from typing import Any

from flightops.contracts.company import (
    COMPANY_PROFILE_ID,
    DEFAULT_COMPANY_PROFILE,
    CompanyDocument,
    CompanyProfile,
    Customer,
)
from flightops.persistence.repositories.base import BaseRepository


class CompanyProfileRepository(BaseRepository[CompanyProfile]):
    """``/companyProfile/main``; every save targets the singleton document."""

    def __init__(self, client: Any):
        super().__init__(client, CompanyProfile, "companyProfile")

    def _document_id(self, entity: CompanyProfile) -> str:
        return COMPANY_PROFILE_ID

    async def get_profile(self) -> CompanyProfile:
        """Return the stored profile, or the default one if none was saved yet."""
        profile = await self.get(COMPANY_PROFILE_ID)
        if profile is None:
            return DEFAULT_COMPANY_PROFILE.model_copy(deep=True)
        return profile


class CompanyDocumentRepository(BaseRepository[CompanyDocument]):
    order_field = "createdAt"

    def __init__(self, client: Any):
        super().__init__(client, CompanyDocument, "companyDocuments")


class CustomerRepository(BaseRepository[Customer]):
    order_field = "name"
    descending = False

    def __init__(self, client: Any):
        super().__init__(client, Customer, "customers")
