import pytest


def test_progress_requires_user_id(client):
    resp = client.get("/api/progress")
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["error"] == "userId is required"


def test_progress_rejects_non_integer_user_id(client):
    resp = client.get("/api/progress", params={"userId": "abc"})
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_progress_for_user_without_attempts_is_zeroed(client, make_user):
    user_id = make_user()
    resp = client.get("/api/progress", params={"userId": user_id})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["data"] == {
        "totalAttempts": 0,
        "passedAttempts": 0,
        "averageScore": 0,
        "bestScore": 0,
        "byDifficulty": {"beginner": [], "intermediate": [], "advanced": []},
        "recentAttempts": [],
    }


def test_progress_statistics(client, make_user, make_scenario, record_attempt):
    user_id = make_user()
    scenario = make_scenario()
    record_attempt(user_id, scenario["id"], score=80, passed=True)
    record_attempt(user_id, scenario["id"], score=95, passed=True)
    record_attempt(user_id, scenario["id"], score=60, passed=False)

    data = client.get("/api/progress", params={"userId": user_id}).json()["data"]
    assert data["totalAttempts"] == 3
    assert data["passedAttempts"] == 2
    assert data["averageScore"] == 78
    assert data["bestScore"] == 95


def test_progress_only_counts_the_requested_user(client, make_user, make_scenario, record_attempt):
    alice, bob = make_user(), make_user()
    scenario = make_scenario()
    record_attempt(alice, scenario["id"], score=90, passed=True)
    record_attempt(bob, scenario["id"], score=10, passed=False)

    data = client.get("/api/progress", params={"userId": alice}).json()["data"]
    assert data["totalAttempts"] == 1
    assert data["bestScore"] == 90


def test_progress_rows_are_joined_and_annotated(client, make_user, make_scenario, record_attempt):
    user_id = make_user()
    crane = make_scenario(title="Crane Basics", difficulty="beginner")
    roof = make_scenario(title="Rooftop", difficulty="advanced")
    first = record_attempt(user_id, crane["id"], score=40, passed=False)
    second = record_attempt(user_id, roof["id"], score=70, passed=False)
    third = record_attempt(user_id, crane["id"], score=90, passed=True)

    data = client.get("/api/progress", params={"userId": user_id}).json()["data"]
    recent = data["recentAttempts"]
    assert [a["id"] for a in recent] == [third["id"], second["id"], first["id"]]
    assert recent[0]["scenario_title"] == "Crane Basics"
    assert recent[0]["difficulty"] == "beginner"
    assert [a["attempt_count"] for a in recent] == [2, 1, 2]

    groups = data["byDifficulty"]
    assert [a["id"] for a in groups["beginner"]] == [third["id"], first["id"]]
    assert groups["intermediate"] == []
    assert [a["id"] for a in groups["advanced"]] == [second["id"]]


def test_recent_attempts_capped_at_five(client, make_user, make_scenario, record_attempt):
    user_id = make_user()
    scenario = make_scenario()
    ids = [record_attempt(user_id, scenario["id"], score=i * 10)["id"] for i in range(7)]

    data = client.get("/api/progress", params={"userId": user_id}).json()["data"]
    assert data["totalAttempts"] == 7
    assert [a["id"] for a in data["recentAttempts"]] == list(reversed(ids))[:5]


@pytest.mark.parametrize("raw", ["1180591620717411303424", "0", "-3"])
def test_progress_rejects_out_of_range_user_id(client, raw):
    resp = client.get("/api/progress", params={"userId": raw})
    assert resp.status_code == 400
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {"success": False, "error": "userId is out of range", "code": "invalid_parameter"}
