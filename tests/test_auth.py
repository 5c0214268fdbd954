from jose import jwt
from todo_api.bootstrap import seed_users
from todo_api.config import SECRET_KEY, ALGORITHM
from todo_api.errors import Unauthenticated
from todo_api.models.user import User
from todo_api.services import auth as auth_service
from todo_api.utils.auth import create_token
import pytest
import time


def test_login_success_returns_token_and_username(client):
    r = client.post("/login", json={"username": "admin", "password": "admin123"})
    assert r.status_code == 200
    data = r.json()
    assert data["username"] == "admin"
    assert "token" in data

    claims = auth_service.verify(data["token"])
    assert claims.username == "admin"


def test_login_wrong_password(client):
    r = client.post("/login", json={"username": "admin", "password": "nope"})
    assert r.status_code == 401
    assert "error" in r.json()


def test_login_unknown_username(client):
    r = client.post("/login", json={"username": "ghost", "password": "admin123"})
    assert r.status_code == 401
    assert r.json()["error"] == "Invalid credentials"


def test_login_with_too_long_password_fails(client):
    r = client.post("/login", json={"username": "admin", "password": "a" * 100})
    assert r.status_code == 401


def test_token_carries_user_and_24h_expiry(client):
    r = client.post("/login", json={"username": "guest", "password": "guest123"})
    payload = jwt.decode(r.json()["token"], SECRET_KEY, algorithms=[ALGORITHM])
    assert payload["username"] == "guest"
    assert isinstance(payload["userId"], int)
    assert abs(payload["exp"] - (time.time() + 24 * 60 * 60)) < 60


def test_token_near_end_of_window_still_verifies():
    almost_expired = int(time.time()) + 30
    token = jwt.encode({"userId": 1, "username": "admin", "exp": almost_expired}, SECRET_KEY, algorithm=ALGORITHM)
    claims = auth_service.verify(token)
    assert claims.username == "admin"
    assert claims.user_id == 1


def test_protected_endpoint_requires_token(client):
    r = client.get("/allTodos")
    assert r.status_code == 401
    assert r.json()["error"] == "Missing token"


def test_protected_endpoint_rejects_non_bearer_header(client, auth_headers):
    token = auth_headers["Authorization"].split()[1]
    r = client.get("/allTodos", headers={"Authorization": f"Token {token}"})
    assert r.status_code == 401


def test_tampered_token_is_rejected(client, auth_headers):
    token = auth_headers["Authorization"].split()[1]
    head, body, sig = token.split(".")
    forged = jwt.encode({"userId": 1, "username": "admin"}, "other-secret", algorithm=ALGORITHM)
    r = client.get("/allTodos", headers={"Authorization": f"Bearer {forged}"})
    assert r.status_code == 401
    bad_sig = ("B" if sig[0] == "A" else "A") + sig[1:]
    r = client.get("/allTodos", headers={"Authorization": f"Bearer {head}.{body}.{bad_sig}"})
    assert r.status_code == 401


def test_expired_token_is_rejected(client, monkeypatch):
    import todo_api.config
    monkeypatch.setattr(todo_api.config, "ACCESS_TOKEN_EXPIRE_MINUTES", -1)
    token = create_token({"userId": 1, "username": "admin"})
    r = client.get("/allAssignees", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert "expired" in r.json()["error"].lower()

    with pytest.raises(Unauthenticated):
        auth_service.verify(token)


def test_token_without_user_claims_is_rejected():
    token = create_token({"sub": "someone"})
    with pytest.raises(Unauthenticated):
        auth_service.verify(token)


def test_seeding_is_idempotent(db):
    assert db.query(User).count() == 2
    assert seed_users(db) == 0
    assert db.query(User).count() == 2
    stored = db.query(User).filter(User.username == "admin").first()
    assert stored.password_hash != "admin123"
