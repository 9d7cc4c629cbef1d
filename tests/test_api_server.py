from fastapi.testclient import TestClient
import pytest

from solo_quiz.core.services.leaderboard import LeaderboardStore
from solo_quiz.server.api_server import create_api_app


@pytest.fixture
def client(results_path):
    results_path.write_text(
        "A - 5/10 @ 2024-01-01 10:00\n"
        "B - 8/10 @ 2024-01-01 10:00\n"
        "C - 5/10 @ 2024-01-02 10:00\n",
        encoding="utf-8",
    )
    app = create_api_app(LeaderboardStore(results_path), default_limit=2)
    return TestClient(app)


def test_leaderboard_uses_default_limit(client):
    response = client.get("/leaderboard")

    assert response.status_code == 200
    assert response.json() == [
        {"rank": 1, "name": "B", "score": 8, "total": 10, "timestamp": "2024-01-01 10:00"},
        {"rank": 2, "name": "C", "score": 5, "total": 10, "timestamp": "2024-01-02 10:00"},
    ]


def test_leaderboard_limit_query(client):
    response = client.get("/leaderboard", params={"limit": 3})
    assert [row["name"] for row in response.json()] == ["B", "C", "A"]


@pytest.mark.parametrize("limit", [0, 101])
def test_leaderboard_limit_is_validated(client, limit):
    assert client.get("/leaderboard", params={"limit": limit}).status_code == 422


def test_leaderboard_page_is_served(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "Leaderboard" in response.text


def test_missing_log_is_empty(tmp_path):
    client = TestClient(create_api_app(LeaderboardStore(tmp_path / "none.txt")))
    assert client.get("/leaderboard").json() == []


def test_unreadable_log_is_service_unavailable(tmp_path):
    blocked = tmp_path / "results.txt"
    blocked.mkdir()
    client = TestClient(create_api_app(LeaderboardStore(blocked)))

    response = client.get("/leaderboard")

    assert response.status_code == 503
    assert "results" in response.json()["detail"]
