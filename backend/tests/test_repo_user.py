from app.db import SessionLocal
from app.errors import DuplicateRecord, RecordNotFound
from app.repositories.user_repo import UserRepository
from app.security import hash_password, verify_password
import uuid, pytest

def test_user_repo_create_and_get():
    db = SessionLocal()
    repo = UserRepository(db)
    username = f"repo_{uuid.uuid4().hex[:8]}"
    u = repo.create(username=username, password_hash=hash_password("StrongPassw0rd!"))
    assert u.id and u.username == username
    assert repo.get(u.id).username == username
    assert repo.get_by_username(username.upper()).id == u.id
    db.close()

def test_user_repo_unique_username_violation():
    db = SessionLocal()
    repo = UserRepository(db)
    username = f"dup_{uuid.uuid4().hex[:8]}"
    repo.create(username=username, password_hash="x")
    with pytest.raises(DuplicateRecord):
        repo.create(username=username, password_hash="y")
    db.close()

def test_update_password_hash():
    with SessionLocal() as db:
        repo = UserRepository(db)
        u = repo.create(username=f"pw_{uuid.uuid4().hex[:8]}", password_hash=hash_password("OldPassw0rd!!"))
        repo.update_password_hash(u.id, password_hash=hash_password("NewPassw0rd!!"))
        assert verify_password("NewPassw0rd!!", repo.get(u.id).password_hash)

def test_update_password_hash_missing_user():
    with SessionLocal() as db:
        with pytest.raises(RecordNotFound):
            UserRepository(db).update_password_hash(99999999, password_hash="x")
