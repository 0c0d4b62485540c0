# tests/test_access_router.py

"""
Tests for the /access endpoints.
"""

from fastapi.testclient import TestClient
from unittest.mock import patch


def test_missing_role_header_is_unauthorized(client: TestClient):
    response = client.get("/access/me/permissions")
    assert response.status_code == 401


def test_unknown_role_is_forbidden(client: TestClient, role_headers):
    response = client.get("/access/me/permissions", headers=role_headers("root"))
    assert response.status_code == 403


def test_catalog(client: TestClient):
    response = client.get("/access/catalog")

    assert response.status_code == 200
    data = response.json()
    assert len(data["roles"]) == 6
    assert "manage_users" in data["permissions"]


def test_admin_end_to_end(client: TestClient, role_headers):
    headers = role_headers("admin")

    response = client.get("/access/me/permissions/manage_users", headers=headers)
    assert response.status_code == 200
    assert response.json()["granted"] is True

    response = client.get("/access/me/buildings/any-id", headers=headers)
    assert response.json()["granted"] is True
    assert response.json()["rule"] == "unrestricted"

    response = client.get("/access/me/navigation", headers=headers)
    paths = [item["path"] for item in response.json()["items"]]
    assert "/admin" in paths


def test_citizen_end_to_end(client: TestClient, role_headers):
    headers = role_headers("buerger")

    assert client.get(
        "/access/me/permissions/view_public_data", headers=headers
    ).json()["granted"] is True
    assert client.get(
        "/access/me/permissions/manage_users", headers=headers
    ).json()["granted"] is False

    assert client.get(
        "/access/me/buildings/rathaus-hechingen", headers=headers
    ).json()["granted"] is True
    assert client.get(
        "/access/me/buildings/other-building", headers=headers
    ).json()["granted"] is False

    items = client.get("/access/me/navigation", headers=headers).json()["items"]
    assert items == [{"path": "/public", "label": "Öffentliche Daten", "icon": "Globe"}]


def test_my_permissions_are_sorted(client: TestClient, role_headers):
    response = client.get("/access/me/permissions", headers=role_headers("user"))

    assert response.status_code == 200
    assert response.json() == {
        "role": "user",
        "permissions": ["export_data", "view_assigned_buildings", "view_public_data"],
    }


def test_unknown_permission_is_not_found(client: TestClient, role_headers):
    response = client.get(
        "/access/me/permissions/fly_drones", headers=role_headers("admin")
    )
    assert response.status_code == 404


def test_building_check_with_explicit_assignments(client: TestClient, role_headers):
    headers = role_headers("gebaeudemanager", "gm-1")

    with patch("core.permission_helpers.get_assigned_building_ids") as mock_store:
        response = client.get(
            "/access/me/buildings/b1?assigned=b1&assigned=b2", headers=headers
        )
        mock_store.assert_not_called()

    assert response.json()["granted"] is True
    assert response.json()["rule"] == "dynamic_assignment"


def test_building_check_uses_store(client: TestClient, role_headers):
    headers = role_headers("gebaeude_manager", "gm-1")

    with patch(
        "core.permission_helpers.get_assigned_building_ids", return_value=["b1"]
    ):
        assert client.get("/access/me/buildings/b1", headers=headers).json()["granted"] is True
        assert client.get("/access/me/buildings/b3", headers=headers).json()["granted"] is False


def test_building_check_without_assignments_denies(client: TestClient, role_headers):
    with patch("core.permission_helpers.get_assigned_building_ids", return_value=[]):
        response = client.get("/access/me/buildings/b1", headers=role_headers("user"))

    assert response.status_code == 200
    assert response.json()["granted"] is False


def test_enforce_building(client: TestClient, role_headers):
    headers = role_headers("buerger")

    assert client.get("/access/buildings/rathaus-hechingen", headers=headers).status_code == 204
    assert client.get("/access/buildings/other-building", headers=headers).status_code == 403


def test_role_table_requires_manage_users(client: TestClient, role_headers):
    response = client.get("/access/admin/roles", headers=role_headers("manager"))
    assert response.status_code == 403

    response = client.get("/access/admin/roles", headers=role_headers("admin"))
    assert response.status_code == 200
    roles = response.json()["roles"]
    assert roles["buerger"] == ["view_public_data"]
    assert set(roles) == {
        "admin", "manager", "user", "buergermeister", "gebaeudemanager", "buerger",
    }


def test_health(client: TestClient):
    assert client.get("/health/app").json()["status"] == "ok"

    catalogs = client.get("/health/catalogs").json()
    assert catalogs["status"] == "ok"
    assert catalogs["problems"] == []


def test_role_lookup_for_staff(client: TestClient, role_headers):
    response = client.get("/access/roles/buerger", headers=role_headers("manager"))
    assert response.status_code == 200
    assert response.json() == {"role": "buerger", "permissions": ["view_public_data"]}

    response = client.get("/access/roles/gebaeude_manager", headers=role_headers("admin"))
    assert response.json()["role"] == "gebaeudemanager"

    response = client.get("/access/roles/root", headers=role_headers("admin"))
    assert response.status_code == 404


def test_role_lookup_forbidden_for_other_roles(client: TestClient, role_headers):
    response = client.get("/access/roles/admin", headers=role_headers("buergermeister"))
    assert response.status_code == 403
    assert response.json()["detail"] == "Requires one of: ['admin', 'manager']"


def test_explicit_empty_assignments_skip_store(client: TestClient, role_headers):
    # An empty `assigned` query value is sent as a single empty string
    with patch(
        "core.permission_helpers.get_assigned_building_ids", return_value=["b1"]
    ) as mock_store:
        response = client.get(
            "/access/me/buildings/b1?assigned=", headers=role_headers("user", "u-1")
        )
        mock_store.assert_not_called()

    assert response.json()["granted"] is False
