# app/repositories/user_repo.py
from __future__ import annotations
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from app.errors import DuplicateRecord, RecordNotFound
from app.models import User
from app.repositories.base import BaseRepository

class UserRepository(BaseRepository[User]):
    model = User

    # READS
    def get(self, user_id: int) -> Optional[User]:
        with self.storage_errors(f"Error loading user with id {user_id}"):
            return self.db.get(User, user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(User).where(func.lower(User.username) == username.lower())
        with self.storage_errors(f"Error loading user {username!r}"):
            return self.db.execute(stmt).scalar_one_or_none()

    # WRITES
    def create(self, *, username: str, password_hash: str) -> User:
        user = User(username=username, password_hash=password_hash)
        with self.storage_errors(f"Error creating user {username!r}"):
            try:
                self.db.add(user)
                self.db.commit()
            except IntegrityError as e:
                self.db.rollback()
                raise DuplicateRecord(f"username {username!r} already exists") from e
            self.db.refresh(user)
        return user

    def update_password_hash(self, user_id: int, *, password_hash: str) -> User:
        with self.storage_errors(f"Error updating password for user with id {user_id}"):
            user = self.db.get(User, user_id)
            if user is None:
                raise RecordNotFound(f"user with id {user_id} not found")
            user.password_hash = password_hash
            self.db.commit()
            self.db.refresh(user)
            return user
