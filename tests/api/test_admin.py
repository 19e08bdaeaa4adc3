"""Tests for role and user administration endpoints."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from flightops.api.deps import get_user_admin
from flightops.services.user_admin import UserAdmin


class TestRolesAPI:
    async def test_crud(self, client):
        resp = await client.post("/api/roles", json={"name": "Dispatcher", "permissions": ["VIEW_TRIPS"]})
        assert resp.status_code == 201
        role = resp.json()

        resp = await client.put(f"/api/roles/{role['id']}", json={
            "name": "Dispatcher", "permissions": ["VIEW_TRIPS", "MANAGE_TRIPS"],
        })
        assert resp.json()["permissions"] == ["VIEW_TRIPS", "MANAGE_TRIPS"]

        resp = await client.delete(f"/api/roles/{role['id']}")
        assert resp.json() == {"success": True, "id": role["id"]}

    async def test_unknown_permission_rejected(self, client):
        resp = await client.post("/api/roles", json={"name": "X", "permissions": ["FLY_ANYTHING"]})
        assert resp.status_code == 422

    async def test_system_role_cannot_be_deleted(self, client):
        role = (await client.post("/api/roles", json={"name": "Admin", "isSystemRole": True})).json()

        resp = await client.delete(f"/api/roles/{role['id']}")
        assert resp.status_code == 409
        assert resp.json()["detail"] == "System roles cannot be deleted."
        assert len((await client.get("/api/roles")).json()) == 1

    async def test_system_flag_kept_on_update(self, client):
        role = (await client.post("/api/roles", json={"name": "Admin", "isSystemRole": True})).json()

        resp = await client.put(f"/api/roles/{role['id']}", json={"name": "Admin", "isSystemRole": False})
        assert resp.status_code == 200
        assert resp.json()["isSystemRole"] is True

        resp = await client.delete(f"/api/roles/{role['id']}")
        assert resp.status_code == 409


class TestUsersAPI:
    @pytest.fixture
    def auth_module(self, test_app):
        module = MagicMock()
        record = SimpleNamespace(
            uid="u1", email="pilot@example.com", display_name="Pat Pilot",
            custom_claims={"roles": ["Pilot"]}, disabled=False,
            user_metadata=SimpleNamespace(creation_timestamp=None, last_sign_in_timestamp=None),
        )
        module.get_user.return_value = record
        module.create_user.return_value = record
        module.list_users.return_value.iterate_all.return_value = [record]
        test_app.dependency_overrides[get_user_admin] = lambda: UserAdmin(module)
        return module

    async def test_list(self, client, auth_module):
        resp = await client.get("/api/users")
        assert resp.status_code == 200
        assert resp.json() == [{
            "uid": "u1", "email": "pilot@example.com", "displayName": "Pat Pilot",
            "roles": ["Pilot"], "disabled": False,
        }]

    async def test_create(self, client, auth_module):
        resp = await client.post("/api/users", json={"email": "pilot@example.com", "roles": ["Pilot"]})
        assert resp.status_code == 201
        auth_module.set_custom_user_claims.assert_called_once_with("u1", {"roles": ["Pilot"]})

    async def test_create_requires_a_role(self, client, auth_module):
        resp = await client.post("/api/users", json={"email": "pilot@example.com", "roles": []})
        assert resp.status_code == 422

    async def test_update_and_delete(self, client, auth_module):
        resp = await client.put("/api/users/u1", json={"displayName": "Pat P."})
        assert resp.status_code == 200
        auth_module.update_user.assert_called_once_with("u1", display_name="Pat P.")

        resp = await client.delete("/api/users/u1")
        assert resp.json() == {"success": True, "id": "u1"}
