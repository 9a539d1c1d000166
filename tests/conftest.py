"""
Configuration pytest : une app neuve par test, sur une base SQLite en mémoire.
"""

import os

# avant tout import de app.* : les settings globaux sont lus à l'import
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.db.session import build_engine, init_db
from app.main import create_app
from app.security.password import PasswordHasher


@pytest.fixture
def settings():
    return Settings(
        ENV="test",
        DATABASE_URL="sqlite://",
        JWT_SECRET_KEY="test-secret",
        LOG_LEVEL="WARNING",
        BCRYPT_ROUNDS=4,
    )


@pytest.fixture
def hasher(settings):
    return PasswordHasher(settings.BCRYPT_ROUNDS)


@pytest.fixture
def engine(settings):
    engine = build_engine(settings)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def app(settings, engine):
    return create_app(settings, engine)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def register(client):
    """Inscrit un utilisateur et retourne le corps de la réponse."""
    def _register(username="alice", email="alice@example.com", password="alice-password"):
        resp = client.post(
            "/auth/register",
            json={"username": username, "email": email, "password": password},
        )
        assert resp.status_code == 201, resp.text
        return resp.json()["user"]
    return _register


@pytest.fixture
def login(client):
    """Connecte un utilisateur et retourne les headers Authorization."""
    def _login(email="alice@example.com", password="alice-password"):
        resp = client.post("/auth/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['token']}"}
    return _login


@pytest.fixture
def alice(register, login):
    user = register()
    return user, login()


@pytest.fixture
def bob(register, login):
    user = register(username="bob", email="bob@example.com", password="bob-password")
    return user, login(email="bob@example.com", password="bob-password")
