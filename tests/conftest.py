import pytest
from fastapi.testclient import TestClient

from liftplanner.core.config import Settings
from liftplanner.main import create_app
from liftplanner.models.user import User


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        seed_on_startup=False,
        admin_token=None,
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_user(app, client):
    """Insert a user row directly; identity is normally owned by the auth provider."""
    counter = {"n": 0}

    def _make(email: str | None = None, name: str = "Trainee") -> int:
        counter["n"] += 1
        email = email or f"trainee{counter['n']}@example.com"

        async def _insert() -> int:
            async with app.state.db.session() as session:
                user = User(email=email, name=name)
                session.add(user)
                await session.commit()
                return user.id

        return client.portal.call(_insert)

    return _make


@pytest.fixture
def make_scenario(client):
    def _make(title: str = "Urban Building Lift", difficulty: str = "beginner", category: str = "Urban", **extra) -> dict:
        body = {"title": title, "difficulty": difficulty, "category": category, **extra}
        resp = client.post("/api/scenarios", json=body)
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]

    return _make


@pytest.fixture
def record_attempt(client):
    def _record(user_id: int, scenario_id: int, **fields) -> dict:
        body = {"user_id": user_id, "scenario_id": scenario_id, **fields}
        resp = client.post("/api/attempts", json=body)
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]

    return _record
