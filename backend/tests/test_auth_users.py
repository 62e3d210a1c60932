from fastapi.testclient import TestClient
from app.main import app
from app.db import SessionLocal
from app.repositories.user_repo import UserRepository
from helpers import PWD, uniq_username, register, login

client = TestClient(app)

def test_register_weak_password_rejected():
    r = register(client, uniq_username(), "short")
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid input. Please check the submitted data and try again."}

def test_register_returns_message_and_id():
    r = register(client, uniq_username())
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "User registered successfully"
    assert isinstance(body["user_id"], int)

def test_register_malformed_json_persists_nothing():
    username = uniq_username("broken")
    r = client.post(
        "/register",
        content='{"username": "%s", "password": ' % username,
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert "error" in r.json()
    with SessionLocal() as db:
        assert UserRepository(db).get_by_username(username) is None

def test_register_missing_field_400():
    r = client.post("/register", json={"username": uniq_username()})
    assert r.status_code == 400

def test_register_login_returns_token():
    username = uniq_username()
    assert register(client, username).status_code == 200
    r = login(client, username)
    assert r.status_code == 200
    assert r.json()["token"]

def test_login_is_case_insensitive_on_username():
    username = uniq_username("Case")
    register(client, username)
    r = login(client, username.upper())
    assert r.status_code == 200
