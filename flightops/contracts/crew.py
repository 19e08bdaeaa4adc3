"""Crew roster and crew documents.

Stored at:
- ``/crewMembers/{crew_member_id}``
- ``/crewDocuments/{document_id}``
"""

from datetime import date

from pydantic import EmailStr, Field

from flightops.contracts.common import FirestoreDocument, FirestoreModel
from flightops.contracts.enums import CrewDocumentType, CrewRole


class CrewLicense(FirestoreModel):
    type: str = Field(..., min_length=1, description="e.g. ATP, Commercial")
    number: str = Field(..., min_length=1)
    expiry_date: date | None = None


class CrewMember(FirestoreDocument):
    employee_id: str | None = None
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    role: CrewRole
    email: EmailStr | None = None
    phone: str | None = None
    licenses: list[CrewLicense] = Field(default_factory=list)
    type_ratings: list[str] = Field(default_factory=list)
    home_base: str | None = None
    is_active: bool = True
    notes: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class CrewDocument(FirestoreDocument):
    crew_member_id: str = Field(..., min_length=1)
    crew_member_name: str | None = None
    document_name: str = Field(..., min_length=1)
    document_type: CrewDocumentType
    issue_date: date | None = None
    expiry_date: date | None = None
    file_url: str | None = None
    notes: str | None = None
