from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from exampulse.container import init_container, reset_container
from exampulse.main import app
from exampulse.shared.config.settings import Settings


@pytest.fixture
def client():
    init_container(Settings(seed_sample_data=True))
    with TestClient(app) as test_client:
        yield test_client
    reset_container()


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "exampulse", "results": 5}


def test_catalog(client):
    data = client.get("/api/catalog/YDT").json()
    assert data["total_questions"] == 80
    assert data["question_limits"]["Paragraf"] == 15
    assert client.get("/api/catalog/KPSS").status_code == 422


def test_list_results_by_category(client):
    data = client.get("/api/results", params={"category": "TYT"}).json()
    assert data["count"] == 3
    assert [r["name"] for r in data["results"]] == ["TYT Deneme 3", "TYT Deneme 1", "TYT Deneme 2"]
    assert client.get("/api/results", params={"category": "LGS"}).status_code == 422


def test_record_and_fetch_result(client):
    response = client.post("/api/results", json={
        "name": "TYT Deneme 4",
        "exam_type": "TYT",
        "date": "2025-05-01T10:00:00",
        "answers": {"Türkçe": {"correct": 36, "wrong": 4}},
    })
    assert response.status_code == 201
    created = response.json()
    assert created["net_score"] == 35.0
    assert created["total_questions"] == 120

    fetched = client.get(f"/api/results/{created['id']}")
    assert fetched.json() == created
    assert client.get("/api/results").json()["results"][0]["id"] == created["id"]


def test_record_invalid_sheet_returns_domain_error(client):
    response = client.post("/api/results", json={
        "exam_type": "TYT",
        "date": "2025-05-01T10:00:00",
        "answers": {"Fizik": {"correct": 6, "wrong": 6}},
    })
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


def test_unknown_result_is_404(client):
    response = client.get("/api/results/doesnotexist")
    assert response.status_code == 404
    assert response.json() == {
        "error": "RESULT_NOT_FOUND",
        "message": "Resultado no encontrado: doesnotexist",
    }


def test_subject_averages(client):
    data = client.get("/api/analytics/subjects").json()
    assert len(data["subjects"]) == 8
    assert data["subjects"][0] == {"subject": "Türkçe", "score": 32.5}


def test_progress_all_time(client):
    data = client.get("/api/analytics/progress", params={"time_range": "allTime"}).json()
    assert data["test_count"] == 5
    assert data["average_net_score"] == 79.5
    assert data["best_subject"] == "Türkçe"
    assert data["has_data"] is True


def test_progress_default_range_without_recent_results(client):
    # Los ejemplos son de 2025; el último mes no contiene ninguno
    data = client.get("/api/analytics/progress").json()
    assert data["test_count"] == 0
    assert data["has_data"] is False
    assert data["improvement"] == 0.0


def test_progress_running_pairwise(client):
    data = client.get("/api/analytics/progress", params={
        "category": "TYT", "time_range": "allTime", "averaging": "running_pairwise",
    }).json()
    assert data["best_subject_score"] == 31.88


def test_trend(client):
    data = client.get("/api/analytics/trend/Matematik", params={"category": "TYT"}).json()
    assert data == {"subject": "Matematik", "category": "TYT", "trend": "improving"}


def test_insights(client):
    data = client.get("/api/analytics/insights", params={"time_range": "allTime"}).json()
    assert data["summary"]["test_count"] == 5
    assert data["subjects"][0]["subject"] == "Türkçe"


def test_aware_and_naive_dates_can_be_mixed(client):
    aware = client.post("/api/results", json={
        "exam_type": "TYT",
        "date": "2025-05-01T13:00:00+03:00",
        "answers": {"Türkçe": {"correct": 30}},
    })
    assert aware.status_code == 201
    assert aware.json()["date"] == "2025-05-01T10:00:00"

    utc = client.post("/api/results", json={
        "exam_type": "TYT",
        "date": "2025-05-02T10:00:00Z",
        "answers": {"Türkçe": {"correct": 31}},
    })
    assert utc.status_code == 201
    later = client.post("/api/results", json={
        "exam_type": "TYT",
        "date": "2025-05-03T10:00:00",
        "answers": {"Türkçe": {"correct": 32}},
    })
    assert later.status_code == 201

    ids = [r["id"] for r in client.get("/api/results").json()["results"][:3]]
    assert ids == [later.json()["id"], utc.json()["id"], aware.json()["id"]]

    progress = client.get("/api/analytics/progress", params={"time_range": "allTime"}).json()
    assert progress["test_count"] == 8
    assert client.get("/api/health").json()["results"] == 8
