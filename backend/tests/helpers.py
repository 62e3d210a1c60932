import uuid

PWD = "StrongPassw0rd!"

def uniq_username(prefix="u"):
    return f"{prefix}_{uuid.uuid4().hex[:10]}"

def register(client, username, pwd=PWD):
    return client.post("/register", json={"username": username, "password": pwd})

def login(client, username, pwd=PWD):
    return client.post("/login", json={"username": username, "password": pwd})

def make_user(client, prefix="u"):
    """Register + log in; returns (username, user_id, auth headers)."""
    username = uniq_username(prefix)
    r = register(client, username)
    assert r.status_code == 200, r.text
    user_id = r.json()["user_id"]
    token = login(client, username).json()["token"]
    return username, user_id, {"Authorization": f"Bearer {token}"}
