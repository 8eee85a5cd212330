"""
BARRIER TRACKER Planner API - Barrier Catalog Tests
"""

from barrier_tracker.barriers.catalog import (
    BARRIERS,
    BarrierKind,
    BarrierType,
    get_barrier,
    list_barriers,
)


class TestCatalog:

    def test_every_barrier_type_present(self):
        assert set(BARRIERS) == set(BarrierType)

    def test_each_barrier_has_two_strategies(self):
        for barrier in BARRIERS.values():
            assert len(barrier.strategies) == 2
            assert all(s.action for s in barrier.strategies)

    def test_filter_by_kind(self):
        drifts = list_barriers(BarrierKind.DRIFT)
        assert {b.id for b in drifts} == {
            BarrierType.BORING,
            BarrierType.DISTRACTION,
            BarrierType.IMPULSIVITY,
        }
        assert len(list_barriers()) == len(BARRIERS)

    def test_unknown_slug(self):
        assert get_barrier("procrastination") is None
        assert get_barrier("dread").kind == BarrierKind.STORM


class TestBarrierAPI:
    """Tests for /barriers endpoints."""

    def test_list(self, client, auth_headers):
        response = client.get("/barriers", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["total"] == len(BARRIERS)

    def test_list_storms(self, client, auth_headers):
        response = client.get("/barriers?kind=storm", headers=auth_headers)
        data = response.json()
        assert data["total"] == 4
        assert all(b["kind"] == "storm" for b in data["barriers"])

    def test_get_one(self, client, auth_headers):
        response = client.get("/barriers/fog", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "fog"
        assert len(data["strategies"]) == 2

    def test_get_unknown(self, client, auth_headers):
        response = client.get("/barriers/procrastination", headers=auth_headers)
        assert response.status_code == 404

    def test_requires_auth(self, client):
        assert client.get("/barriers").status_code == 401
