"""User administration and authentication endpoints."""

import pytest
from fastapi.testclient import TestClient

from recruiting.main import app
from recruiting.models import USER_ROLE, RoleModel, UserModel
from recruiting.services.consultant_service import get_consultant_service
from recruiting.services.user_service import get_user_service


@pytest.fixture
def client(consultant_service, user_service):
    app.dependency_overrides[get_consultant_service] = lambda: consultant_service
    app.dependency_overrides[get_user_service] = lambda: user_service
    yield TestClient(app, follow_redirects=False)
    app.dependency_overrides.clear()


def login(client, username: str, password: str) -> dict:
    response = client.post("/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def admin_headers(client):
    return login(client, "admin", "admin")


@pytest.fixture
def bruno(user_service):
    return user_service.save_user(
        UserModel(username="bruno", password="secret", role=RoleModel(name=USER_ROLE))
    )


class TestAuth:

    def test_login_returns_token(self, client):
        body = client.post("/auth/login", json={"username": "admin", "password": "admin"}).json()
        assert body["token_type"] == "bearer"
        assert body["authorization"] == "Administrator"

    def test_wrong_password(self, client):
        response = client.post("/auth/login", json={"username": "admin", "password": "wrong"})
        assert response.status_code == 401

    def test_me(self, client, admin_headers):
        body = client.get("/auth/me", headers=admin_headers).json()
        assert body["username"] == "admin"
        assert "password" not in body

    def test_token_required(self, client):
        assert client.get("/user/users").status_code == 401
        assert client.get("/user/users", headers={"Authorization": "Bearer garbage"}).status_code == 401


class TestUsers:

    def test_listing_excludes_caller(self, client, admin_headers, bruno):
        body = client.get("/user/users", headers=admin_headers).json()
        assert [u["username"] for u in body["content"]] == ["bruno"]

    def test_find_and_edit(self, client, admin_headers, bruno):
        assert client.get(f"/user/findUser/{bruno.id}", headers=admin_headers).json()["username"] == "bruno"
        edit = client.get(f"/user/editUser/{bruno.id}", headers=admin_headers).json()
        assert edit["user"]["role"]["name"] == USER_ROLE
        assert [r["name"] for r in edit["roles"]] == ["Administrator", "User"]
        assert client.get("/user/findUser/999", headers=admin_headers).status_code == 404

    def test_save_user(self, client, admin_headers, user_service):
        response = client.post("/user/saveUser", headers=admin_headers, data={
            "username": "carla", "password": "secret", "password_confirmed": "secret", "role_name": USER_ROLE,
        })
        assert response.status_code == 303
        assert response.headers["location"] == "/user/users"
        assert user_service.find_by_username_and_password("carla", "secret") is not None

    def test_save_user_rejects_duplicates(self, client, admin_headers):
        response = client.post("/user/saveUser", headers=admin_headers, data={
            "username": "admin", "password": "secret", "password_confirmed": "secret", "role_name": USER_ROLE,
        })
        assert response.status_code == 400

    def test_validate_user(self, client, admin_headers):
        body = client.post("/user/validateUser", headers=admin_headers, data={
            "username": "carla", "password": "abc", "password_confirmed": "abc",
        }).json()
        assert body["status"] == "FAIL"
        assert {e["field"] for e in body["errors"]} == {"role_id", "password"}

    def test_update_user(self, client, admin_headers, bruno, user_service):
        response = client.post("/user/updateUser", headers=admin_headers, data={
            "id": bruno.id, "username": "bruno", "last_name": "Neri", "role_id": bruno.role.id,
        })
        assert response.status_code == 303
        assert user_service.find_user_by_id(bruno.id).last_name == "Neri"

    def test_delete_user(self, client, admin_headers, bruno, user_service):
        assert client.get(f"/user/deleteUser/{bruno.id}", headers=admin_headers).status_code == 303
        assert user_service.find_user_by_id(bruno.id) is None

    def test_admin_cannot_be_deleted(self, client, admin_headers, user_service):
        admin = user_service.find_by_username("admin")
        client.get(f"/user/deleteUser/{admin.id}", headers=admin_headers)
        assert user_service.find_user_by_id(admin.id) is not None

    def test_only_administrators_manage_users(self, client, bruno):
        headers = login(client, "bruno", "secret")
        response = client.get(f"/user/deleteUser/{bruno.id}", headers=headers)
        assert response.status_code == 403

    def test_roles(self, client, admin_headers):
        assert [r["name"] for r in client.get("/user/roles", headers=admin_headers).json()] == [
            "Administrator", "User",
        ]


class TestChangePassword:

    def test_own_password(self, client, bruno):
        headers = login(client, "bruno", "secret")
        response = client.post("/user/changePassword", headers=headers, data={
            "user_id": bruno.id, "current_password": "secret",
            "new_password": "n3wpass", "password_confirmed": "n3wpass",
        })
        assert response.status_code == 200
        login(client, "bruno", "n3wpass")

    def test_wrong_current_password(self, client, bruno):
        headers = login(client, "bruno", "secret")
        response = client.post("/user/changePassword", headers=headers, data={
            "user_id": bruno.id, "current_password": "nope",
            "new_password": "n3wpass", "password_confirmed": "n3wpass",
        })
        assert response.status_code == 400

    def test_someone_elses_password(self, client, bruno, user_service):
        headers = login(client, "bruno", "secret")
        admin = user_service.find_by_username("admin")
        response = client.post("/user/changePassword", headers=headers, data={
            "user_id": admin.id, "current_password": "admin",
            "new_password": "n3wpass", "password_confirmed": "n3wpass",
        })
        assert response.status_code == 403
