"""
BARRIER TRACKER Planner API - Task CRUD Tests

CI-safe tests for focus and life tasks without MongoDB.
"""

import pytest
from datetime import datetime

from barrier_tracker.capacity.energy import MAX_FOCUS_ITEMS

DAY = "2025-01-15"


def create(client, headers, **fields):
    payload = {"checkin_date": DAY, "description": "Write report"}
    payload.update(fields)
    return client.post("/tasks", json=payload, headers=headers)


class TestCreateTask:
    """Tests for POST /tasks."""

    def test_create_task_minimal(self, client, auth_headers):
        """Create task with only required fields."""
        response = create(client, auth_headers)
        assert response.status_code == 201
        data = response.json()
        assert data["description"] == "Write report"
        assert data["checkin_date"] == DAY
        assert data["type"] == "focus"
        assert data["complexity"] == "medium"
        assert data["completed"] is False
        assert data["completed_at"] is None
        assert data["owner_id"] == "user-1"
        assert "id" in data
        assert "created_at" in data

    def test_create_task_all_fields(self, client, auth_headers):
        response = create(
            client,
            auth_headers,
            description="Call the bank",
            type="life",
            complexity="quick",
            sort_order=3,
            anchor_time="09:30",
            barrier="dread",
            custom_barrier="Hold music",
        )
        assert response.status_code == 201
        data = response.json()
        assert data["type"] == "life"
        assert data["complexity"] == "quick"
        assert data["sort_order"] == 3
        assert data["anchor_time"] == "09:30"
        assert data["barrier"] == "dread"
        assert data["custom_barrier"] == "Hold music"

    def test_create_task_requires_auth(self, client):
        response = client.post("/tasks", json={"checkin_date": DAY, "description": "x"})
        assert response.status_code == 401

    @pytest.mark.parametrize(
        "fields",
        [
            {"description": ""},
            {"type": "chore"},
            {"complexity": "huge"},
            {"anchor_time": "9:30am"},
            {"barrier": "laziness"},
            {"checkin_date": "15/01/2025"},
        ],
    )
    def test_create_task_validation(self, client, auth_headers, fields):
        assert create(client, auth_headers, **fields).status_code == 422

    def test_focus_limit(self, client, auth_headers):
        for i in range(MAX_FOCUS_ITEMS):
            assert create(client, auth_headers, description=f"Focus {i}").status_code == 201

        response = create(client, auth_headers, description="One too many")
        assert response.status_code == 409

    def test_focus_limit_ignores_life_and_other_days(self, client, auth_headers):
        for i in range(MAX_FOCUS_ITEMS):
            create(client, auth_headers, description=f"Focus {i}")

        assert create(client, auth_headers, type="life").status_code == 201
        assert create(client, auth_headers, checkin_date="2025-01-16").status_code == 201

    def test_completed_focus_frees_a_slot(self, client, auth_headers):
        ids = [create(client, auth_headers).json()["id"] for _ in range(MAX_FOCUS_ITEMS)]
        client.patch(f"/tasks/{ids[0]}", json={"completed": True}, headers=auth_headers)
        assert create(client, auth_headers).status_code == 201


class TestGetTask:
    """Tests for GET /tasks/{task_id}."""

    def test_get_task_success(self, client, auth_headers):
        task_id = create(client, auth_headers).json()["id"]
        response = client.get(f"/tasks/{task_id}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["id"] == task_id

    def test_get_task_not_found(self, client, auth_headers):
        response = client.get("/tasks/nonexistent-id", headers=auth_headers)
        assert response.status_code == 404

    def test_get_task_of_other_user(self, client, auth_headers, second_auth_headers):
        task_id = create(client, auth_headers).json()["id"]
        response = client.get(f"/tasks/{task_id}", headers=second_auth_headers)
        assert response.status_code == 404


class TestListTasks:
    """Tests for GET /tasks."""

    def test_list_tasks_empty(self, client, auth_headers):
        response = client.get("/tasks", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"tasks": [], "total": 0}

    def test_list_in_sort_order(self, client, auth_headers):
        create(client, auth_headers, description="Second", sort_order=2)
        create(client, auth_headers, description="First", sort_order=1)
        data = client.get("/tasks", headers=auth_headers).json()
        assert [t["description"] for t in data["tasks"]] == ["First", "Second"]

    def test_filters(self, client, auth_headers):
        create(client, auth_headers, description="Focus today")
        create(client, auth_headers, description="Life today", type="life")
        create(client, auth_headers, description="Focus tomorrow", checkin_date="2025-01-16")

        data = client.get(f"/tasks?day={DAY}", headers=auth_headers).json()
        assert data["total"] == 2

        data = client.get(f"/tasks?day={DAY}&type=life", headers=auth_headers).json()
        assert [t["description"] for t in data["tasks"]] == ["Life today"]

        data = client.get("/tasks?completed=true", headers=auth_headers).json()
        assert data["total"] == 0

    def test_list_is_owner_scoped(self, client, auth_headers, second_auth_headers):
        create(client, auth_headers)
        data = client.get("/tasks", headers=second_auth_headers).json()
        assert data["total"] == 0


class TestUpdateTask:
    """Tests for PATCH /tasks/{task_id}."""

    def test_complete_stamps_completed_at(self, client, auth_headers, frozen_now):
        task_id = create(client, auth_headers).json()["id"]
        response = client.patch(f"/tasks/{task_id}", json={"completed": True}, headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["completed"] is True
        completed_at = datetime.fromisoformat(data["completed_at"].replace("Z", "+00:00"))
        assert completed_at == frozen_now

        response = client.patch(f"/tasks/{task_id}", json={"completed": False}, headers=auth_headers)
        assert response.json()["completed_at"] is None

    def test_partial_update_keeps_other_fields(self, client, auth_headers):
        task_id = create(client, auth_headers, complexity="deep").json()["id"]
        response = client.patch(
            f"/tasks/{task_id}",
            json={"description": "Write half the report"},
            headers=auth_headers,
        )
        data = response.json()
        assert data["description"] == "Write half the report"
        assert data["complexity"] == "deep"

    def test_clear_barrier_with_null(self, client, auth_headers):
        task_id = create(client, auth_headers, barrier="fog").json()["id"]
        response = client.patch(f"/tasks/{task_id}", json={"barrier": None}, headers=auth_headers)
        assert response.json()["barrier"] is None

    def test_reopening_respects_focus_limit(self, client, auth_headers):
        first = create(client, auth_headers).json()["id"]
        client.patch(f"/tasks/{first}", json={"completed": True}, headers=auth_headers)
        for _ in range(MAX_FOCUS_ITEMS):
            create(client, auth_headers)

        response = client.patch(f"/tasks/{first}", json={"completed": False}, headers=auth_headers)
        assert response.status_code == 409

    def test_retyping_life_to_focus_respects_limit(self, client, auth_headers):
        life = create(client, auth_headers, type="life").json()["id"]
        for _ in range(MAX_FOCUS_ITEMS):
            create(client, auth_headers)

        response = client.patch(f"/tasks/{life}", json={"type": "focus"}, headers=auth_headers)
        assert response.status_code == 409

    def test_update_not_found(self, client, auth_headers):
        response = client.patch("/tasks/missing", json={"completed": True}, headers=auth_headers)
        assert response.status_code == 404


class TestDeleteTask:
    """Tests for DELETE /tasks/{task_id}."""

    def test_delete_task(self, client, auth_headers):
        task_id = create(client, auth_headers).json()["id"]
        response = client.delete(f"/tasks/{task_id}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["id"] == task_id
        assert client.get(f"/tasks/{task_id}", headers=auth_headers).status_code == 404

    def test_delete_other_users_task(self, client, auth_headers, second_auth_headers):
        task_id = create(client, auth_headers).json()["id"]
        response = client.delete(f"/tasks/{task_id}", headers=second_auth_headers)
        assert response.status_code == 404
