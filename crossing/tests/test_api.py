"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient
from crossing.main import app
from crossing.services import get_solver_service

CLASSIC = [
    {"name": "A", "speed": 1},
    {"name": "B", "speed": 2},
    {"name": "C", "speed": 5},
    {"name": "D", "speed": 10},
]


@pytest.fixture
def client():
    get_solver_service().clear()
    return TestClient(app)


def test_root(client):
    """Test the root endpoint answers."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_list_solvers(client):
    """Test both solvers are listed."""
    response = client.get("/api/solvers")
    
    assert response.status_code == 200
    assert [s["name"] for s in response.json()["solvers"]] == ["naive", "optimal"]


def test_solve_both(client):
    """Test solving the classic roster with both methods."""
    response = client.post("/api/solve", json={"people": CLASSIC})
    data = response.json()
    
    assert response.status_code == 200
    assert data["people_count"] == 4
    assert [(r["solver"], r["total"]) for r in data["results"]] == [("naive", 19), ("optimal", 17)]
    
    optimal = data["results"][1]
    assert optimal["total_formatted"] == "17 minutes"
    assert optimal["events"][2] == {
        "kind": "cross",
        "names": ["D", "C"],
        "cost": 10,
        "description": "(D,10) and (C,5) cross",
    }


def test_solve_single_solver(client):
    """Test solving with one named solver."""
    response = client.post("/api/solve", json={"people": CLASSIC, "solver": "naive"})
    
    assert response.status_code == 200
    assert [r["solver"] for r in response.json()["results"]] == ["naive"]


def test_solve_unknown_solver(client):
    """Test an unknown solver gives 404."""
    response = client.post("/api/solve", json={"people": CLASSIC, "solver": "exhaustive"})
    assert response.status_code == 404


def test_solve_non_positive_speed(client):
    """Test a zero speed gives 400 with the validation errors."""
    response = client.post("/api/solve", json={"people": [{"name": "A", "speed": 0}]})
    
    assert response.status_code == 400
    assert "must be positive" in response.json()["detail"][0]


def test_solve_non_integer_speed(client):
    """Test a fractional speed fails request validation."""
    response = client.post("/api/solve", json={"people": [{"name": "A", "speed": 1.5}]})
    assert response.status_code == 422


def test_history(client):
    """Test runs are recorded, most recent last."""
    client.post("/api/solve", json={"people": CLASSIC})
    client.post("/api/solve", json={"people": CLASSIC[:2], "solver": "optimal"})
    
    data = client.get("/api/history").json()
    assert data["total_runs"] == 3
    assert [(r["solver"], r["total"]) for r in data["runs"]] == [
        ("naive", 19),
        ("optimal", 17),
        ("optimal", 2),
    ]
    
    limited = client.get("/api/history", params={"limit": 1}).json()
    assert len(limited["runs"]) == 1


def test_solver_service_is_shared():
    """Test every caller gets the same service instance."""
    assert get_solver_service() is get_solver_service()
