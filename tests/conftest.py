"""
Fixtures partagées : application FastAPI sur une base SQLite en mémoire.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session

from todo_api.core.config import Settings
from todo_api.db.session import build_engine, init_db
from todo_api.main import create_app


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        ENV="test",
        DATABASE_URL="sqlite://",
        JWT_SECRET="test-secret",
        JWT_EXPIRES_IN="1h",
    )


@pytest.fixture
def engine(settings):
    # StaticPool : une seule connexion partagée, sinon chaque connexion a sa propre base en mémoire
    engine = build_engine(settings, poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def app(settings, engine):
    return create_app(settings, engine=engine)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


def signup(client, name="Alice", email="a@x.com", password="secret1"):
    return client.post("/signup", json={"name": name, "email": email, "password": password})


def login_token(client, email="a@x.com", password="secret1") -> str:
    res = client.post("/login", json={"email": email, "password": password})
    assert res.status_code == 200, res.text
    return res.json()["data"]["token"]


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice_token(client):
    signup(client)
    return login_token(client)


@pytest.fixture
def bob_token(client):
    signup(client, name="Bob", email="b@x.com", password="secret2")
    return login_token(client, email="b@x.com", password="secret2")
