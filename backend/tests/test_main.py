# backend/tests/test_main.py
import pytest
from unittest.mock import AsyncMock, patch
from sqlalchemy.exc import OperationalError

from fittrack.main import app


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "0.1.0"
    assert data["environment"] == "test"


def test_routers_mounted_under_api():
    paths = app.openapi()["paths"]
    assert "/api/auth/login" in paths
    assert "/api/auth/logout/{user_id}" in paths
    assert "/api/users/me" in paths
    assert "/api/foods" in paths
    assert "/api/exercises" in paths


@pytest.mark.asyncio
async def test_database_errors_become_500(client, make_user, login):
    await make_user("alice")
    headers = await login("alice")

    with patch(
        "fittrack.services.auth.sessions.SessionService.resolve_session",
        new_callable=AsyncMock,
        side_effect=OperationalError("SELECT 1", {}, Exception("database is locked")),
    ):
        response = await client.get("/api/users/me", headers=headers)

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
