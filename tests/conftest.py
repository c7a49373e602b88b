# tests/conftest.py

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test_jwt_secret"
os.environ["OPENSYMBOLS_ACCESS_KEY"] = "test_access_key"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from aac_server.database import get_db
from aac_server.main import app
from aac_server.models import Base


SIGNUP = {
    "username": "alice",
    "password": "s3cret!",
    "firstName": "Alice",
    "lastName": "Liddell",
    "email": "alice@example.com",
}


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    res = client.post("/api/auth/signup", json=SIGNUP)
    assert res.status_code == 201
    return res.json()["user"]


@pytest.fixture
def token(client, registered_user):
    res = client.post("/api/auth/login", json={
        "username": SIGNUP["username"],
        "password": SIGNUP["password"],
    })
    assert res.status_code == 200
    return res.json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
