from fastapi.testclient import TestClient
from app.main import app
from app import main as app_main

client = TestClient(app)

def test_root():
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["name"] == "VertiLog API"

def test_ping():
    r = client.get("/ping")
    assert r.status_code == 200
    assert r.json() == {"pong": True}

def test_healthz():
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"

def test_version():
    r = client.get("/version")
    assert r.status_code == 200
    assert "version" in r.json()

def test_request_id_echoed():
    r = client.get("/ping", headers={"X-Request-ID": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"

def test_healthz_reports_degraded_database(monkeypatch):
    class Unreachable:
        def __enter__(self): raise RuntimeError("connection refused")
        def __exit__(self, *a): return False
    monkeypatch.setattr(app_main, "SessionLocal", lambda: Unreachable())
    r = client.get("/healthz")
    body = r.json()
    assert body == {"status": "degraded"}
    assert "connection refused" not in r.text
