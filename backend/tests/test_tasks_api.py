"""
Workboard Backend: /tasks Endpoint Tests
==========================================

What:  HTTP contract of the task routes. PUT and DELETE never check the
       affected-row count; the tests pin that behaviour.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from workboard.exceptions import StorageError


class TestCreateAndRead:

    @pytest.mark.asyncio
    async def test_create_echoes_fields_with_id(self, test_client, task_payload):
        response = await test_client.post("/tasks", json=task_payload)

        assert response.status_code == 201
        assert response.json() == {
            "id": 1,
            "name": "Fix bug",
            "description": "desc",
            "assigned_to": "Jane",
            "priority": "high",
            "status": "open",
            "deadline": "2024-01-01",
        }

    @pytest.mark.asyncio
    async def test_get_returns_created_task(self, test_client, task_payload):
        new_id = (await test_client.post("/tasks", json=task_payload)).json()["id"]

        response = await test_client.get(f"/tasks/{new_id}")

        assert response.status_code == 200
        assert response.json() == {"id": new_id, **task_payload}

    @pytest.mark.asyncio
    async def test_get_missing_task(self, test_client):
        response = await test_client.get("/tasks/7")

        assert response.status_code == 404
        assert response.json() == {"message": "Task not found"}

    @pytest.mark.asyncio
    async def test_list_tasks(self, test_client, task_payload):
        await test_client.post("/tasks", json=task_payload)
        await test_client.post("/tasks", json={**task_payload, "name": "Ship it"})

        response = await test_client.get("/tasks")

        assert response.status_code == 200
        assert [task["name"] for task in response.json()] == ["Fix bug", "Ship it"]

    @pytest.mark.asyncio
    async def test_missing_field_surfaces_storage_error(self, test_client, task_payload):
        del task_payload["deadline"]

        response = await test_client.post("/tasks", json=task_payload)

        assert response.status_code == 500
        assert response.json() == {"error": "NOT NULL constraint failed: tasks.deadline"}
        assert (await test_client.get("/tasks")).json() == []


class TestUpdate:

    @pytest.mark.asyncio
    async def test_update_returns_stored_row(self, test_client, task_payload):
        new_id = (await test_client.post("/tasks", json=task_payload)).json()["id"]
        changed = {**task_payload, "status": "closed"}

        response = await test_client.put(f"/tasks/{new_id}", json=changed)

        assert response.status_code == 200
        assert response.json() == {"id": new_id, **changed}

    @pytest.mark.asyncio
    async def test_update_missing_task_returns_null(self, test_client, task_payload):
        response = await test_client.put("/tasks/999", json=task_payload)

        assert response.status_code == 200
        assert response.json() is None
        assert (await test_client.get("/tasks")).json() == []


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_twice_reports_changes(self, test_client, task_payload):
        new_id = (await test_client.post("/tasks", json=task_payload)).json()["id"]

        first = await test_client.delete(f"/tasks/{new_id}")
        second = await test_client.delete(f"/tasks/{new_id}")

        assert first.status_code == 200
        assert first.json() == {"message": "Task deleted successfully", "changes": 1}
        assert second.status_code == 200
        assert second.json() == {"message": "Task deleted successfully", "changes": 0}

    @pytest.mark.asyncio
    async def test_delete_non_integer_id_changes_nothing(self, test_client, task_payload):
        await test_client.post("/tasks", json=task_payload)

        response = await test_client.delete("/tasks/abc")

        assert response.status_code == 200
        assert response.json() == {"message": "Task deleted successfully", "changes": 0}
        assert len((await test_client.get("/tasks")).json()) == 1


class TestNonIntegerIds:

    @pytest.mark.asyncio
    async def test_get_is_not_found(self, test_client):
        response = await test_client.get("/tasks/abc")

        assert response.status_code == 404
        assert response.json() == {"message": "Task not found"}

    @pytest.mark.asyncio
    async def test_update_returns_null(self, test_client, task_payload):
        response = await test_client.put("/tasks/abc", json=task_payload)

        assert response.status_code == 200
        assert response.json() is None
        assert (await test_client.get("/tasks")).json() == []


class TestRequestBody:

    @pytest.mark.asyncio
    async def test_boolean_is_stored_as_text(self, test_client, task_payload):
        response = await test_client.post("/tasks", json={**task_payload, "priority": True})

        assert response.status_code == 201
        assert response.json()["priority"] is True
        stored = (await test_client.get(f"/tasks/{response.json()['id']}")).json()
        assert stored["priority"] == "1"

    @pytest.mark.asyncio
    async def test_no_body_reaches_storage(self, test_client):
        response = await test_client.post("/tasks")

        assert response.status_code == 500
        assert response.json() == {"error": "NOT NULL constraint failed: tasks.name"}

    @pytest.mark.asyncio
    async def test_nested_value_is_a_storage_error(self, test_client, task_payload):
        response = await test_client.post(
            "/tasks", json={**task_payload, "status": {"state": "open"}}
        )

        assert response.status_code == 500
        assert list(response.json()) == ["error"]
        assert (await test_client.get("/tasks")).json() == []


class TestStorageFailures:

    @pytest.mark.asyncio
    async def test_update_with_missing_field_leaves_row_unchanged(
        self, test_client, task_payload
    ):
        new_id = (await test_client.post("/tasks", json=task_payload)).json()["id"]
        partial = {key: value for key, value in task_payload.items() if key != "status"}

        response = await test_client.put(f"/tasks/{new_id}", json={**partial, "name": "X"})

        assert response.status_code == 500
        assert response.json() == {"error": "NOT NULL constraint failed: tasks.status"}
        assert (await test_client.get(f"/tasks/{new_id}")).json() == {"id": new_id, **task_payload}

    @pytest.mark.asyncio
    async def test_missing_table_fails_every_operation(self, app, client_for, task_payload):
        app.state.task_repository.initialize = AsyncMock(
            side_effect=StorageError("disk I/O error")
        )

        async with client_for(app) as client:
            responses = [
                await client.get("/tasks/1"),
                await client.put("/tasks/1", json=task_payload),
                await client.delete("/tasks/1"),
            ]

        for response in responses:
            assert response.status_code == 500
            assert response.json() == {"error": "no such table: tasks"}


class TestConcurrentWrites:

    @pytest.mark.asyncio
    async def test_parallel_creates_get_distinct_stored_ids(self, test_client, task_payload):
        responses = await asyncio.gather(
            *(
                test_client.post("/tasks", json={**task_payload, "name": f"Task {n}"})
                for n in range(40)
            )
        )

        assert all(response.status_code == 201 for response in responses)
        ids = [response.json()["id"] for response in responses]
        assert len(set(ids)) == 40
        stored = (await test_client.get("/tasks")).json()
        assert sorted(task["id"] for task in stored) == sorted(ids)

    @pytest.mark.asyncio
    async def test_failed_creates_do_not_disturb_parallel_ones(self, test_client, task_payload):
        incomplete = {key: value for key, value in task_payload.items() if key != "deadline"}
        bodies = [task_payload if n % 2 else incomplete for n in range(30)]

        responses = await asyncio.gather(
            *(test_client.post("/tasks", json=body) for body in bodies)
        )

        acknowledged = [r.json()["id"] for r in responses if r.status_code == 201]
        failed = [r for r in responses if r.status_code == 500]
        assert len(acknowledged) == len(failed) == 15
        stored = (await test_client.get("/tasks")).json()
        assert sorted(task["id"] for task in stored) == sorted(acknowledged)
