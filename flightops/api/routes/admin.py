"""Role and user administration endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from flightops.api.deps import get_current_user, get_role_repo, get_user_admin
from flightops.contracts.access import CreateUserInput, Role, UpdateUserInput
from flightops.contracts.common import DeleteResult
from flightops.persistence.repositories.role_repo import RoleRepository
from flightops.services.errors import OperationNotAllowedError
from flightops.services.user_admin import UserAdmin

router = APIRouter(tags=["admin"])


# ------------------------------------------------------------------
# Roles
# ------------------------------------------------------------------


@router.get("/roles")
async def list_roles(
    user_id: str = Depends(get_current_user),
    repo: RoleRepository = Depends(get_role_repo),
) -> list[dict]:
    return [r.to_api() for r in await repo.list_all()]


@router.post("/roles", status_code=201)
async def create_role(
    role: Role,
    user_id: str = Depends(get_current_user),
    repo: RoleRepository = Depends(get_role_repo),
) -> dict:
    return (await repo.save(role)).to_api()


@router.put("/roles/{role_id}")
async def update_role(
    role_id: str,
    role: Role,
    user_id: str = Depends(get_current_user),
    repo: RoleRepository = Depends(get_role_repo),
) -> dict:
    """Update a role; the system-role flag is fixed at creation."""
    stored = await repo.require(role_id)
    role = role.model_copy(update={"is_system_role": stored.is_system_role})
    return (await repo.update(role_id, role)).to_api()


@router.delete("/roles/{role_id}")
async def delete_role(
    role_id: str,
    user_id: str = Depends(get_current_user),
    repo: RoleRepository = Depends(get_role_repo),
) -> dict:
    role = await repo.require(role_id)
    if role.is_system_role:
        raise OperationNotAllowedError("System roles cannot be deleted.")
    return (await repo.delete(role_id)).to_api()


# ------------------------------------------------------------------
# Users (Firebase Auth, synchronous SDK)
# ------------------------------------------------------------------


@router.get("/users")
async def list_users(
    user_id: str = Depends(get_current_user),
    admin: UserAdmin = Depends(get_user_admin),
) -> list[dict]:
    users = await run_in_threadpool(admin.list_users)
    return [u.to_api() for u in users]


@router.post("/users", status_code=201)
async def create_user(
    data: CreateUserInput,
    user_id: str = Depends(get_current_user),
    admin: UserAdmin = Depends(get_user_admin),
) -> dict:
    user = await run_in_threadpool(admin.create_user, data)
    return user.to_api()


@router.put("/users/{uid}")
async def update_user(
    uid: str,
    data: UpdateUserInput,
    user_id: str = Depends(get_current_user),
    admin: UserAdmin = Depends(get_user_admin),
) -> dict:
    user = await run_in_threadpool(admin.update_user, uid, data)
    return user.to_api()


@router.delete("/users/{uid}")
async def delete_user(
    uid: str,
    user_id: str = Depends(get_current_user),
    admin: UserAdmin = Depends(get_user_admin),
) -> dict:
    await run_in_threadpool(admin.delete_user, uid)
    return DeleteResult(success=True, id=uid).to_api()
