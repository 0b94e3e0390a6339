import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_successful_registration(client: AsyncClient, test_data):
    response = await client.post("/api/users", json=test_data.get_copy("ann"))

    assert response.status_code == 201
    assert response.json() == {"message": "User created successfully"}


@pytest.mark.asyncio
async def test_duplicate_email_is_case_insensitive(client: AsyncClient, test_data):
    user = test_data.get_copy("ann")
    assert (await client.post("/api/users", json=user)).status_code == 201

    user["email"] = "A@X.COM"
    response = await client.post("/api/users", json=user)

    assert response.status_code == 409
    assert response.json() == {"error": "User with given email already exists"}


@pytest.mark.asyncio
async def test_registration_reports_first_failing_rule(client: AsyncClient, test_data):
    user = test_data.get_copy("ann")
    user["lastName"] = "L"
    user["password"] = "weak"

    response = await client.post("/api/users", json=user)

    assert response.status_code == 400
    assert response.json() == {"error": "lastName must be at least 2 characters long"}


@pytest.mark.asyncio
async def test_registration_missing_field(client: AsyncClient, test_data):
    user = test_data.get_copy("ann")
    del user["email"]

    response = await client.post("/api/users", json=user)

    assert response.status_code == 400
    assert response.json() == {"error": "email is required"}


@pytest.mark.asyncio
async def test_registration_weak_password(client: AsyncClient, test_data):
    user = test_data.get_copy("ann")
    user["password"] = "abcdefgh"

    response = await client.post("/api/users", json=user)

    assert response.status_code == 400
    assert "password" in response.json()["error"]


@pytest.mark.asyncio
async def test_registration_unknown_field_rejected(client: AsyncClient, test_data):
    user = test_data.get_copy("ann")
    user["isAdmin"] = True

    response = await client.post("/api/users", json=user)

    assert response.status_code == 400
    assert "isAdmin" in response.json()["error"]


@pytest.mark.asyncio
async def test_password_hash_is_stored_not_plaintext(client: AsyncClient, test_data, db_session):
    user = test_data.get_copy("ann")
    await client.post("/api/users", json=user)

    from src.domain.entities import User
    from sqlmodel import select

    result = await db_session.exec(select(User).where(User.email == "a@x.com"))
    stored = result.one()
    assert stored.password_hash != user["password"]
    assert stored.password_hash.startswith("$2")


@pytest.mark.asyncio
async def test_registration_rejects_password_over_72_bytes(client: AsyncClient, test_data):
    user = test_data.get_copy("ann")
    # 26 characters but 92 bytes once encoded
    user["password"] = "Aa1!" + "\U0001F600" * 22

    response = await client.post("/api/users", json=user)

    assert response.status_code == 400
    assert response.json() == {"error": "password must be at most 72 bytes long"}
