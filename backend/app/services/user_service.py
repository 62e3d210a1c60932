# app/services/user_service.py
"""
User lifecycle: registration, credential checks and password changes.

Routers call these with an open SQLAlchemy session; errors surface as
``app.errors`` types (DuplicateRecord, InvalidCredentials, RepositoryError).
"""
from __future__ import annotations
import logging

from sqlalchemy.orm import Session

from app.errors import InvalidCredentials
from app.models import User
from app.repositories.user_repo import UserRepository
from app.schemas.user import UserRegister
from app.security import create_access_token, hash_password, verify_password

log = logging.getLogger(__name__)

def prepare_user(payload: UserRegister) -> dict:
    """Repository kwargs for a new user: lower-cased username, hashed password."""
    return {
        "username": payload.username.lower(),
        "password_hash": hash_password(payload.password),
    }

def register_user(db: Session, payload: UserRegister) -> User:
    user = UserRepository(db).create(**prepare_user(payload))
    log.info("registered user id=%s", user.id)
    return user

def verify_user(db: Session, username: str, password: str) -> str:
    """Return a signed access token for valid credentials."""
    user = UserRepository(db).get_by_username(username)
    if not user or not verify_password(password, user.password_hash):
        raise InvalidCredentials(f"login failed for {username!r}")
    return create_access_token(sub=str(user.id), extra={"username": user.username})

def update_password(db: Session, user_id: int, current_password: str, new_password: str) -> None:
    repo = UserRepository(db)
    user = repo.get(user_id)
    if not user or not verify_password(current_password, user.password_hash):
        raise InvalidCredentials(f"password check failed for user with id {user_id}")
    repo.update_password_hash(user_id, password_hash=hash_password(new_password))
    log.info("password updated for user id=%s", user_id)
