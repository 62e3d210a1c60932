# app/repositories/base.py
from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import RepositoryError

T = TypeVar("T")  # SQLAlchemy model type

log = logging.getLogger(__name__)

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def storage_errors(self, message: str) -> Iterator[None]:
        """Log driver/ORM failures and re-raise them as RepositoryError(message)."""
        try:
            yield
        except SQLAlchemyError as e:
            log.error("Database error: %s", e)
            self.db.rollback()
            raise RepositoryError(message) from e
