from __future__ import annotations
import datetime as dt

from sqlalchemy import select

from app.errors import RecordNotFound
from app.models import Climb, ClimbingSession
from app.repositories.base import BaseRepository
from app.repositories.session_repo import SessionRepository

class ClimbRepository(BaseRepository[Climb]):
    model = Climb

    def find_by_id(self, user_id: int, climb_id: int) -> Climb:
        # ownership goes through the parent session
        stmt = (
            select(Climb)
            .join(ClimbingSession, ClimbingSession.id == Climb.session_id)
            .where(Climb.id == climb_id, ClimbingSession.user_id == user_id)
        )
        with self.storage_errors(f"Error finding climb with id {climb_id} for user with id {user_id}"):
            climb = self.db.execute(stmt).scalar_one_or_none()
        if climb is None:
            raise RecordNotFound(f"climb {climb_id} not found for user with id {user_id}")
        return climb

    def log(
        self,
        user_id: int,
        *,
        session_date: dt.date,
        grade: str,
        attempts: int = 1,
        sent: bool = False,
        load: float = 0.0,
        notes: str | None = None,
    ) -> Climb:
        """Append a climb to the user's session on ``session_date``, opening one if needed."""
        with self.storage_errors(
            f"Error logging climb on date {session_date} for user with id {user_id}"
        ):
            sess = SessionRepository(self.db).get_or_create_for_date(user_id, session_date)
            climb = Climb(
                session_id=sess.id,
                grade=grade,
                attempts=attempts,
                sent=sent,
                load=load,
                notes=notes,
            )
            self.db.add(climb)
            self.db.commit()
            self.db.refresh(climb)
        return climb
