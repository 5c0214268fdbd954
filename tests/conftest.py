import os

# Must be set before todo_api.config is imported
os.environ["DATABASE_URL"] = "sqlite:///./test_todo.db"
os.environ["SEED_USERS"] = "admin:admin123,guest:guest123"

import pytest
from fastapi.testclient import TestClient
from todo_api.main import app
from todo_api.database import SessionLocal, Base, engine
from todo_api.bootstrap import seed_users


# Recreate all tables (and the default accounts) for each test
@pytest.fixture(autouse=True)
def setup_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        seed_users(session)
    finally:
        session.close()
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def client():
    return TestClient(app)

@pytest.fixture
def auth_headers(client):
    r = client.post("/login", json={"username": "admin", "password": "admin123"})
    assert r.status_code == 200
    return {"Authorization": f"Bearer {r.json()['token']}"}
