"""
BARRIER TRACKER Planner API - Check-in Tests
"""

DAY = "2025-01-15"


class TestCheckIns:
    """Tests for /checkins/{day}."""

    def test_set_energy(self, client, auth_headers):
        response = client.put(
            f"/checkins/{DAY}",
            json={"internal_weather": "steady", "forecast_note": "Slept ok"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["checkin_date"] == DAY
        assert data["internal_weather"] == "steady"
        assert data["forecast_note"] == "Slept ok"
        assert data["capacity_label"] == "Good energy"
        assert data["capacity_range"] == "2-3 tasks"

    def test_setting_again_replaces_energy(self, client, auth_headers):
        first = client.put(f"/checkins/{DAY}", json={"internal_weather": "sparky"}, headers=auth_headers)
        second = client.put(f"/checkins/{DAY}", json={"internal_weather": "foggy"}, headers=auth_headers)
        assert second.json()["id"] == first.json()["id"]

        data = client.get(f"/checkins/{DAY}", headers=auth_headers).json()
        assert data["internal_weather"] == "foggy"

    def test_get_missing(self, client, auth_headers):
        assert client.get(f"/checkins/{DAY}", headers=auth_headers).status_code == 404

    def test_invalid_energy(self, client, auth_headers):
        response = client.put(f"/checkins/{DAY}", json={"internal_weather": "hyper"}, headers=auth_headers)
        assert response.status_code == 422

    def test_invalid_day(self, client, auth_headers):
        response = client.put("/checkins/tomorrow", json={"internal_weather": "steady"}, headers=auth_headers)
        assert response.status_code == 422

    def test_delete_cascades_to_day_tasks(self, client, auth_headers):
        client.put(f"/checkins/{DAY}", json={"internal_weather": "steady"}, headers=auth_headers)
        client.post("/tasks", json={"checkin_date": DAY, "description": "A"}, headers=auth_headers)
        client.post("/tasks", json={"checkin_date": DAY, "description": "B", "type": "life"}, headers=auth_headers)
        client.post("/tasks", json={"checkin_date": "2025-01-16", "description": "C"}, headers=auth_headers)

        response = client.delete(f"/checkins/{DAY}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["tasks_deleted"] == 2

        remaining = client.get("/tasks", headers=auth_headers).json()
        assert [t["description"] for t in remaining["tasks"]] == ["C"]

    def test_delete_missing(self, client, auth_headers):
        assert client.delete(f"/checkins/{DAY}", headers=auth_headers).status_code == 404

    def test_checkins_are_per_user(self, client, auth_headers, second_auth_headers):
        client.put(f"/checkins/{DAY}", json={"internal_weather": "steady"}, headers=auth_headers)
        assert client.get(f"/checkins/{DAY}", headers=second_auth_headers).status_code == 404
