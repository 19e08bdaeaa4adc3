"""Service-level exceptions, mapped to HTTP statuses in ``flightops.api.app``."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError


class ValidationError(ValueError):
    """Input rejected by a contract or a business rule.

    ``issues`` holds one ``{"loc": ..., "msg": ...}`` entry per problem.
    """

    def __init__(self, message: str, issues: list[dict[str, Any]] | None = None):
        self.issues = issues or [{"loc": [], "msg": message}]
        super().__init__(message)

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        issues = [
            {"loc": list(err["loc"]), "msg": err["msg"]} for err in exc.errors()
        ]
        summary = "; ".join(
            f"{'.'.join(str(p) for p in i['loc']) or 'input'}: {i['msg']}" for i in issues
        )
        return cls(f"Invalid {exc.title}: {summary}", issues)


class ProviderError(Exception):
    """An external provider (language model, identity provider) failed."""


class OperationNotAllowedError(Exception):
    """The operation is refused by a business rule (e.g. deleting a system role)."""
