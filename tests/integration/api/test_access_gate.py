from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest
from httpx import AsyncClient

from src.api.utils.jwt import create_access_token


@pytest.mark.asyncio
async def test_missing_header_requires_authentication(client: AsyncClient):
    response = await client.get("/api/tasks")

    assert response.status_code == 401
    assert response.json() == {"error": "Authentication required"}


@pytest.mark.asyncio
async def test_non_bearer_header_requires_authentication(client: AsyncClient):
    response = await client.get("/api/tasks", headers={"Authorization": "Basic abc"})

    assert response.status_code == 401
    assert response.json() == {"error": "Authentication required"}


@pytest.mark.asyncio
async def test_garbage_token_is_invalid(client: AsyncClient):
    response = await client.get(
        "/api/tasks", headers={"Authorization": "Bearer invalid_token_here"}
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid or expired token"}


@pytest.mark.asyncio
async def test_token_signed_with_other_secret_is_invalid(client: AsyncClient):
    token = create_access_token(uuid4(), "someone-elses-secret", timedelta(days=7))

    response = await client.get(
        "/api/tasks", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid or expired token"}


@pytest.mark.asyncio
async def test_expired_token_is_invalid(client: AsyncClient, test_config):
    token = create_access_token(
        uuid4(),
        test_config.JWT_SECRET,
        timedelta(days=7),
        issued_at=datetime.now(UTC) - timedelta(days=8),
    )

    response = await client.get(
        "/api/tasks", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid or expired token"}


@pytest.mark.asyncio
async def test_health_is_public(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_security_headers_on_success_and_error(client: AsyncClient):
    for response in (await client.get("/health"), await client.get("/api/tasks")):
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "SAMEORIGIN"
        assert response.headers["Referrer-Policy"] == "no-referrer"
