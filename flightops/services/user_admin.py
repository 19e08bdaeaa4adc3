"""Firebase Auth user administration. Role names live in the ``roles`` custom claim."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from firebase_admin import auth as firebase_auth
from firebase_admin.exceptions import FirebaseError

from flightops.contracts.access import CreateUserInput, UpdateUserInput, User
from flightops.persistence.errors import DocumentNotFoundError
from flightops.services.errors import ProviderError

logger = logging.getLogger(__name__)


def _millis(value: int | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


def user_from_record(record: Any) -> User:
    claims = record.custom_claims or {}
    metadata = record.user_metadata
    return User(
        uid=record.uid,
        email=record.email,
        display_name=record.display_name,
        roles=list(claims.get("roles", [])),
        disabled=bool(record.disabled),
        created_at=_millis(getattr(metadata, "creation_timestamp", None)),
        last_sign_in_at=_millis(getattr(metadata, "last_sign_in_timestamp", None)),
    )


class UserAdmin:
    """Synchronous wrapper around ``firebase_admin.auth`` (the SDK has no async API)."""

    def __init__(self, auth_module: Any = firebase_auth):
        self._auth = auth_module

    def _call(self, action: str, fn, *args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except firebase_auth.UserNotFoundError as exc:
            raise DocumentNotFoundError("users", str(args[0]) if args else "?") from exc
        except FirebaseError as exc:
            logger.error("Failed to %s: %s", action, exc)
            raise ProviderError(f"Failed to {action}: {exc}") from exc

    def list_users(self) -> list[User]:
        page = self._call("list users", self._auth.list_users)
        return [user_from_record(record) for record in page.iterate_all()]

    def create_user(self, data: CreateUserInput) -> User:
        kwargs: dict[str, Any] = {"email": data.email}
        if data.display_name:
            kwargs["display_name"] = data.display_name
        if data.password:
            kwargs["password"] = data.password
        record = self._call(f"create user {data.email}", self._auth.create_user, **kwargs)
        self._call(f"set roles for {record.uid}", self._auth.set_custom_user_claims,
                   record.uid, {"roles": data.roles})
        logger.info("Created user %s with roles %s", record.uid, data.roles)
        return user_from_record(self._call(f"fetch user {record.uid}", self._auth.get_user, record.uid))

    def update_user(self, uid: str, data: UpdateUserInput) -> User:
        kwargs: dict[str, Any] = {}
        if data.display_name is not None:
            kwargs["display_name"] = data.display_name
        if data.email is not None:
            kwargs["email"] = data.email
        if data.disabled is not None:
            kwargs["disabled"] = data.disabled
        if kwargs:
            self._call(f"update user {uid}", self._auth.update_user, uid, **kwargs)
        if data.roles is not None:
            self._call(f"set roles for {uid}", self._auth.set_custom_user_claims,
                       uid, {"roles": data.roles})
        logger.info("Updated user %s", uid)
        return user_from_record(self._call(f"fetch user {uid}", self._auth.get_user, uid))

    def delete_user(self, uid: str) -> None:
        self._call(f"delete user {uid}", self._auth.delete_user, uid)
        logger.info("Deleted user %s", uid)
