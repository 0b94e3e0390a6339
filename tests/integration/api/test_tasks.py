from uuid import uuid4

import pytest
from httpx import AsyncClient

from tests.utils.json_compare import same_resource


async def create_task(client: AsyncClient, headers: dict, **fields) -> dict:
    response = await client.post("/api/tasks", headers=headers, json=fields)
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_end_to_end_scenario(client: AsyncClient, test_data):
    ann = test_data.get_copy("ann")

    response = await client.post("/api/users", json=ann)
    assert response.status_code == 201

    response = await client.post("/api/auth", json=test_data.credentials("ann"))
    assert response.status_code == 200
    headers = {"Authorization": f"Bearer {response.json()['token']}"}

    response = await client.post("/api/tasks", headers=headers, json=test_data.get_copy("task"))
    assert response.status_code == 201
    task = response.json()
    assert task["status"] == "pending"
    assert task["title"] == "Buy milk"

    response = await client.get("/api/tasks", headers=headers)
    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [task["id"]]


@pytest.mark.asyncio
async def test_create_then_get_round_trip(client: AsyncClient, login_as):
    headers = await login_as("ann")
    created = await create_task(client, headers, title="T", description="D")

    response = await client.get(f"/api/tasks/{created['id']}", headers=headers)

    assert response.status_code == 200
    fetched = response.json()
    assert fetched["title"] == "T"
    assert fetched["description"] == "D"
    assert fetched["status"] == "pending"
    assert same_resource(fetched, created)


@pytest.mark.asyncio
async def test_title_and_description_boundaries(client: AsyncClient, login_as):
    headers = await login_as("ann")

    ok = await client.post(
        "/api/tasks", headers=headers, json={"title": "t" * 100, "description": "d" * 500}
    )
    assert ok.status_code == 201

    long_title = await client.post(
        "/api/tasks", headers=headers, json={"title": "t" * 101, "description": "D"}
    )
    assert long_title.status_code == 400
    assert long_title.json() == {"error": "title must be at most 100 characters long"}

    long_description = await client.post(
        "/api/tasks", headers=headers, json={"title": "T", "description": "d" * 501}
    )
    assert long_description.status_code == 400


@pytest.mark.asyncio
async def test_create_requires_title_and_description(client: AsyncClient, login_as):
    headers = await login_as("ann")

    response = await client.post("/api/tasks", headers=headers, json={"title": "T"})

    assert response.status_code == 400
    assert response.json() == {"error": "description is required"}


@pytest.mark.asyncio
async def test_list_is_newest_first_and_filters_by_status(client: AsyncClient, login_as):
    headers = await login_as("ann")
    first = await create_task(client, headers, title="first", description="D")
    second = await create_task(client, headers, title="second", description="D", status="completed")
    third = await create_task(client, headers, title="third", description="D")

    response = await client.get("/api/tasks", headers=headers)
    assert [t["id"] for t in response.json()] == [third["id"], second["id"], first["id"]]

    response = await client.get("/api/tasks", headers=headers, params={"status": "completed"})
    assert [t["id"] for t in response.json()] == [second["id"]]

    # Unknown filter values are ignored
    response = await client.get("/api/tasks", headers=headers, params={"status": "archived"})
    assert len(response.json()) == 3


@pytest.mark.asyncio
async def test_tasks_are_invisible_to_other_users(client: AsyncClient, login_as):
    ann = await login_as("ann")
    bob = await login_as("bob")
    task = await create_task(client, ann, title="Ann's", description="private")

    for method in ("get", "delete"):
        response = await client.request(method, f"/api/tasks/{task['id']}", headers=bob)
        assert response.status_code == 404
        assert response.json() == {"error": "Task not found"}

    response = await client.put(
        f"/api/tasks/{task['id']}", headers=bob, json={"title": "hijacked"}
    )
    assert response.status_code == 404

    response = await client.get("/api/tasks", headers=bob)
    assert response.json() == []

    response = await client.get(f"/api/tasks/{task['id']}", headers=ann)
    assert response.json()["title"] == "Ann's"


@pytest.mark.asyncio
async def test_update_is_a_merge_patch(client: AsyncClient, login_as):
    headers = await login_as("ann")
    task = await create_task(client, headers, title="T", description="D")

    response = await client.put(
        f"/api/tasks/{task['id']}", headers=headers, json={"status": "in-progress"}
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["status"] == "in-progress"
    assert updated["title"] == "T"
    assert updated["description"] == "D"

    # Any status can move to any other
    response = await client.put(
        f"/api/tasks/{task['id']}", headers=headers, json={"status": "pending"}
    )
    assert response.json()["status"] == "pending"


@pytest.mark.asyncio
async def test_update_rejects_bad_status_and_unknown_fields(client: AsyncClient, login_as):
    headers = await login_as("ann")
    task = await create_task(client, headers, title="T", description="D")

    response = await client.put(
        f"/api/tasks/{task['id']}", headers=headers, json={"status": "done"}
    )
    assert response.status_code == 400

    response = await client.put(
        f"/api/tasks/{task['id']}", headers=headers, json={"userId": str(uuid4())}
    )
    assert response.status_code == 400

    response = await client.get(f"/api/tasks/{task['id']}", headers=headers)
    assert response.json()["status"] == "pending"
    assert response.json()["userId"] == task["userId"]


@pytest.mark.asyncio
async def test_delete_twice(client: AsyncClient, login_as):
    headers = await login_as("ann")
    task = await create_task(client, headers, title="T", description="D")

    first = await client.delete(f"/api/tasks/{task['id']}", headers=headers)
    assert first.status_code == 200
    assert first.json() == {"message": "Task deleted successfully"}

    second = await client.delete(f"/api/tasks/{task['id']}", headers=headers)
    assert second.status_code == 404
    assert second.json() == {"error": "Task not found"}


@pytest.mark.asyncio
async def test_malformed_task_id(client: AsyncClient, login_as):
    headers = await login_as("ann")

    for method in ("get", "delete"):
        response = await client.request(method, "/api/tasks/not-an-id", headers=headers)
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid task ID"}

    response = await client.get(f"/api/tasks/{uuid4()}", headers=headers)
    assert response.status_code == 404
