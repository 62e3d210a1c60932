from fastapi.testclient import TestClient
from app.main import app
from app.db import SessionLocal
from app.repositories.user_repo import UserRepository
from helpers import PWD, make_user, login

client = TestClient(app)
NEW_PWD = "EvenStronger1?Pass"

def stored_hash(user_id):
    with SessionLocal() as db:
        return UserRepository(db).get(user_id).password_hash

def test_update_password_then_login_with_new():
    username, _, h = make_user(client, "prof")
    r = client.put("/app/profile", headers=h,
                   json={"current_password": PWD, "new_password": NEW_PWD})
    assert r.status_code == 200
    assert r.json() == {"message": "Password updated successfully"}
    assert login(client, username, NEW_PWD).status_code == 200
    assert login(client, username, PWD).status_code == 401

def test_update_password_wrong_current_keeps_hash():
    username, user_id, h = make_user(client, "prof")
    before = stored_hash(user_id)
    r = client.put("/app/profile", headers=h,
                   json={"current_password": "NotMyPassw0rd!", "new_password": NEW_PWD})
    assert r.status_code == 401
    assert stored_hash(user_id) == before
    assert login(client, username, PWD).status_code == 200

def test_update_password_requires_auth():
    r = client.put("/app/profile", json={"current_password": PWD, "new_password": NEW_PWD})
    assert r.status_code == 401

def test_update_password_weak_new_password_400():
    _, _, h = make_user(client, "prof")
    r = client.put("/app/profile", headers=h, json={"current_password": PWD, "new_password": "weak"})
    assert r.status_code == 400
