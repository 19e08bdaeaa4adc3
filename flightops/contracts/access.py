"""Roles (Firestore) and users (Firebase Auth).

Roles are stored at ``/roles/{role_id}``. Users live in Firebase Auth; their
role names are kept in the ``roles`` custom claim.
"""

from datetime import datetime

from pydantic import EmailStr, Field

from flightops.contracts.common import FirestoreDocument, FirestoreModel
from flightops.contracts.enums import Permission


class Role(FirestoreDocument):
    name: str = Field(..., min_length=1)
    description: str | None = None
    permissions: list[Permission] = Field(default_factory=list)
    is_system_role: bool = False


class User(FirestoreModel):
    uid: str
    email: str | None = None
    display_name: str | None = None
    roles: list[str] = Field(default_factory=list)
    disabled: bool = False
    created_at: datetime | None = None
    last_sign_in_at: datetime | None = None


class CreateUserInput(FirestoreModel):
    email: EmailStr
    display_name: str | None = None
    password: str | None = Field(default=None, min_length=6)
    roles: list[str] = Field(..., min_length=1)


class UpdateUserInput(FirestoreModel):
    display_name: str | None = None
    email: EmailStr | None = None
    roles: list[str] | None = None
    disabled: bool | None = None
