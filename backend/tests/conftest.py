import pytest
from fastapi.testclient import TestClient

from notary_site.core.config import Settings
from notary_site.main import create_app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "Admin1234!"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        ENV="test",
        LOG_LEVEL="WARNING",
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        SECRET_KEY="test-secret",
        SEED_ADMIN_USERNAME=ADMIN_USERNAME,
        SEED_ADMIN_EMAIL="admin@example.com",
        SEED_ADMIN_PASSWORD=ADMIN_PASSWORD,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # the context manager runs the lifespan: engine, tables, seeded admin
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_client(client):
    r = client.post("/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert r.status_code == 200, r.text
    return client


@pytest.fixture
def anon_client(app, client):
    # shares the already started app state, but keeps its own (empty) cookie jar
    return TestClient(app)


@pytest.fixture
def db_session(app, client):
    db = app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
