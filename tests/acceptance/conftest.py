import pytest
from fastapi.testclient import TestClient

from recruiting.main import app
from recruiting.services.consultant_service import get_consultant_service
from recruiting.services.user_service import get_user_service

from tests.acceptance.pages import Navigator


@pytest.fixture
def navigator(consultant_service, user_service):
    app.dependency_overrides[get_consultant_service] = lambda: consultant_service
    app.dependency_overrides[get_user_service] = lambda: user_service
    navigator = Navigator(TestClient(app, follow_redirects=False))
    navigator.go_to_login_page().login("admin", "admin")
    yield navigator
    navigator.log_out()
    app.dependency_overrides.clear()
