from fastapi.testclient import TestClient
from app.main import app
from helpers import make_user

client = TestClient(app)

def test_requires_auth():
    assert client.get("/app/sessions").status_code == 401
    assert client.post("/app/logClimb", json={"date": "2024-01-01", "grade": "V1", "load": 1}).status_code == 401
    assert client.get("/app/climbs/1").status_code == 401

def test_other_users_session_404():
    _, _, owner = make_user(client, "own")
    _, _, intruder = make_user(client, "int")
    sid = client.post("/app/sessions", headers=owner, json={"date": "2024-05-05"}).json()["id"]

    r = client.get(f"/app/sessions/{sid}", headers=intruder)
    assert r.status_code == 404
    assert r.json() == {"error": "Session not found."}

def test_other_users_climb_404():
    _, _, owner = make_user(client, "own")
    _, _, intruder = make_user(client, "int")
    cid = client.post("/app/logClimb", headers=owner,
                      json={"date": "2024-05-05", "grade": "V2", "load": 3}).json()["id"]
    assert client.get(f"/app/climbs/{cid}", headers=intruder).status_code == 404

def test_missing_session_by_date_404():
    _, _, h = make_user(client)
    assert client.get("/app/sessions/by-date/1999-01-01", headers=h).status_code == 404

def test_duplicate_session_date_400():
    _, _, h = make_user(client)
    assert client.post("/app/sessions", headers=h, json={"date": "2024-06-06"}).status_code == 200
    r = client.post("/app/sessions", headers=h, json={"date": "2024-06-06"})
    assert r.status_code == 400
    assert r.json() == {"error": "A session already exists for this date."}

def test_summary_inverted_range_400():
    _, _, h = make_user(client)
    r = client.get("/app/sessions/summary", headers=h,
                   params={"start_date": "2024-02-01", "end_date": "2024-01-01"})
    assert r.status_code == 400

def test_bad_pagination_400():
    _, _, h = make_user(client)
    assert client.get("/app/sessions", headers=h, params={"limit": 0}).status_code == 400
    assert client.get("/app/sessions", headers=h, params={"offset": -1}).status_code == 400

def test_log_climb_invalid_body_400():
    _, _, h = make_user(client)
    r = client.post("/app/logClimb", headers=h, json={"date": "2024-01-01", "grade": "   ", "load": 1})
    assert r.status_code == 400
    r = client.post("/app/logClimb", headers=h, json={"date": "2024-01-01", "grade": "V1", "load": -5})
    assert r.status_code == 400
