"""Company profile, company documents and customers.

Stored at:
- ``/companyProfile/main`` (singleton)
- ``/companyDocuments/{document_id}``
- ``/customers/{customer_id}``
"""

from datetime import date
from typing import Literal

from pydantic import EmailStr, Field, field_validator

from flightops.contracts.common import FirestoreDocument, FirestoreModel
from flightops.contracts.enums import CompanyDocumentType, CustomerType

COMPANY_PROFILE_ID = "main"


class ServiceFeeRate(FirestoreModel):
    """A billable service offered on quotes (catering, medics, landing fees...)."""

    display_description: str = Field(..., min_length=1)
    buy: float = Field(default=0, ge=0)
    sell: float = Field(default=0, ge=0)
    unit_description: str = Field(default="Per Unit", description="e.g. Per Hour, Per Leg")
    is_active: bool = True


class CompanyProfile(FirestoreDocument):
    company_name: str = Field(..., min_length=1)
    company_address: str | None = None
    company_email: EmailStr | None = None
    company_phone: str | None = None
    logo_url: str | None = None
    service_fee_rates: dict[str, ServiceFeeRate] = Field(default_factory=dict)


DEFAULT_COMPANY_PROFILE = CompanyProfile(
    id=COMPANY_PROFILE_ID,
    company_name="FlightOps (Default Name)",
    company_address="123 Sky Lane, Aviation City, FL 33333",
    company_email="ops@example.com",
    company_phone="555-123-4567",
)


class CompanyDocument(FirestoreDocument):
    document_name: str = Field(..., min_length=1)
    document_type: CompanyDocumentType
    description: str | None = None
    version: str | None = None
    effective_date: date | None = None
    review_date: date | None = None
    file_url: str | None = None
    tags: list[str] = Field(default_factory=list)


class Customer(FirestoreDocument):
    name: str = Field(..., min_length=1)
    customer_type: CustomerType = CustomerType.CHARTER
    contact_first_name: str | None = None
    contact_last_name: str | None = None
    email: EmailStr | Literal[""] | None = None
    email2: EmailStr | Literal[""] | None = None
    phone: str | None = None
    phone2: str | None = None
    street_address1: str | None = None
    street_address2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    start_date: date | None = None
    is_active: bool = True
    internal_notes: str | None = None
    crew_notes: str | None = None

    @field_validator("email", "email2")
    @classmethod
    def _blank_to_none(cls, v: str | None) -> str | None:
        return v or None
