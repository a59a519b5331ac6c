import pytest
from fastapi.testclient import TestClient

from liftplanner.core.security import verify_admin_token
from liftplanner.db.session import Database
from liftplanner.main import create_app
from liftplanner.services.seeding import SEED_SCENARIOS


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_seeding_runs_once(settings):
    seeded = settings.model_copy(update={"seed_on_startup": True})

    with TestClient(create_app(seeded)) as c:
        body = c.get("/api/scenarios").json()
        assert body["count"] == len(SEED_SCENARIOS)
        urban = next(s for s in body["data"] if s["title"] == "Urban Building Lift")
        detail = c.get(f"/api/scenarios/{urban['id']}").json()["data"]
        assert [o["type"] for o in detail["obstructions"]] == ["building", "power_line"]

    # second start on the same database must not duplicate
    with TestClient(create_app(seeded)) as c:
        assert c.get("/api/scenarios").json()["count"] == len(SEED_SCENARIOS)


def test_database_is_disposed_on_shutdown(app):
    with TestClient(app):
        assert app.state.db.engine is not None
    assert app.state.db.engine is None


def test_session_requires_connect(settings):
    with pytest.raises(RuntimeError):
        Database(settings).session()


def test_admin_token_check():
    assert verify_admin_token(None, None)
    assert verify_admin_token("", "anything")
    assert verify_admin_token("abc", "abc")
    assert not verify_admin_token("abc", "abd")
    assert not verify_admin_token("abc", None)


def test_unexpected_errors_use_the_failure_envelope(app):
    @app.get("/explode")
    async def explode():
        raise OverflowError("Python int too large to convert to SQLite INTEGER")

    with TestClient(app, raise_server_exceptions=False) as c:
        resp = c.get("/explode")
    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("application/json")
    # driver text stays in the log
    assert resp.json() == {"success": False, "error": "Internal server error", "code": "internal_error"}


@pytest.fixture
def tableless_client(settings):
    app = create_app(settings.model_copy(update={"create_tables_on_startup": False}))
    with TestClient(app) as c:
        yield c


@pytest.mark.parametrize(
    "path, params, message",
    [
        ("/api/scenarios", {}, "Failed to fetch scenarios"),
        ("/api/attempts", {"userId": "1"}, "Failed to fetch attempts"),
        ("/api/progress", {"userId": "1"}, "Failed to fetch progress"),
    ],
)
def test_read_failures_are_reported_generically(tableless_client, path, params, message):
    resp = tableless_client.get(path, params=params)
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": message, "code": "storage_error"}
