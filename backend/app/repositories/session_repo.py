# app/repositories/session_repo.py
from __future__ import annotations
import datetime as dt
from collections import defaultdict
from dataclasses import dataclass
from typing import Optional, Sequence

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.attributes import set_committed_value

from app.errors import DuplicateRecord, RecordNotFound
from app.models import Climb, ClimbingSession
from app.repositories.base import BaseRepository

@dataclass(slots=True)
class SessionSummary:
    """Read-only projection: one session and the summed load of its climbs."""
    id: int
    date: dt.date
    load: float

class SessionRepository(BaseRepository[ClimbingSession]):
    """
    User-scoped session queries.

    Every read filters on ``user_id``. Climbs are never loaded through the
    ORM relationship (declared ``lazy="raise"``); they are fetched with an
    explicit query and attached via ``set_committed_value``.
    """
    model = ClimbingSession

    # READS
    def find_all(self, user_id: int, *, offset: int = 0, limit: int = 50) -> list[ClimbingSession]:
        stmt = (
            select(ClimbingSession)
            .where(ClimbingSession.user_id == user_id)
            .order_by(ClimbingSession.created_at.desc(), ClimbingSession.id.desc())
            .limit(limit)
            .offset(offset)
        )
        with self.storage_errors(f"Error finding sessions for user with id {user_id}"):
            sessions = list(self.db.execute(stmt).scalars().all())
            self._attach_climbs(sessions)
        return sessions

    def find_by_id(
        self, user_id: int, session_id: int, *, offset: int = 0, limit: int = 50
    ) -> ClimbingSession:
        stmt = select(ClimbingSession).where(
            ClimbingSession.user_id == user_id,
            ClimbingSession.id == session_id,
        )
        with self.storage_errors(
            f"Error finding session with id {session_id} for user with id {user_id}"
        ):
            sess = self.db.execute(stmt).scalar_one_or_none()
            if sess is None:
                raise RecordNotFound(f"session {session_id} not found for user with id {user_id}")
            # climbs are paged independently of the session itself
            self._attach_climbs([sess], offset=offset, limit=limit)
        return sess

    def find_by_date(self, user_id: int, session_date: dt.date) -> ClimbingSession:
        with self.storage_errors(
            f"Error finding session on date {session_date} for user with id {user_id}"
        ):
            sess = self._by_date(user_id, session_date)
            if sess is None:
                raise RecordNotFound(f"no session on {session_date} for user with id {user_id}")
            self._attach_climbs([sess])
        return sess

    def find_summaries(
        self, user_id: int, start_date: dt.date, end_date: dt.date
    ) -> list[SessionSummary]:
        # inner join: sessions without climbs drop out
        stmt = (
            select(
                ClimbingSession.id,
                ClimbingSession.date,
                func.sum(Climb.load).label("load"),
            )
            .join(Climb, Climb.session_id == ClimbingSession.id)
            .where(
                ClimbingSession.user_id == user_id,
                ClimbingSession.date.between(start_date, end_date),
            )
            .group_by(ClimbingSession.id, ClimbingSession.date)
            .order_by(ClimbingSession.date.asc())
        )
        with self.storage_errors(f"Error finding session summaries for user with id {user_id}"):
            rows = self.db.execute(stmt).all()
        return [SessionSummary(id=r.id, date=r.date, load=float(r.load)) for r in rows]

    # WRITES
    def create(self, user_id: int, *, session_date: dt.date, notes: str | None) -> ClimbingSession:
        sess = ClimbingSession(user_id=user_id, date=session_date, notes=notes)
        with self.storage_errors(f"Error creating session for user with id {user_id}"):
            try:
                self.db.add(sess)
                self.db.commit()
            except IntegrityError as e:
                self.db.rollback()
                raise DuplicateRecord(
                    f"user with id {user_id} already has a session on {session_date}"
                ) from e
            self.db.refresh(sess)
        set_committed_value(sess, "climbs", [])
        return sess

    def get_or_create_for_date(self, user_id: int, session_date: dt.date) -> ClimbingSession:
        """Flushes but does not commit; the caller owns the transaction."""
        sess = self._by_date(user_id, session_date)
        if sess is not None:
            return sess
        try:
            with self.db.begin_nested():
                sess = ClimbingSession(user_id=user_id, date=session_date)
                self.db.add(sess)
        except IntegrityError:
            # another request opened this date's session between our read and insert
            sess = self._by_date(user_id, session_date)
            if sess is None:
                raise
        return sess

    # helpers
    def _by_date(self, user_id: int, session_date: dt.date) -> Optional[ClimbingSession]:
        stmt = select(ClimbingSession).where(
            ClimbingSession.user_id == user_id,
            ClimbingSession.date == session_date,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def _attach_climbs(
        self,
        sessions: Sequence[ClimbingSession],
        *,
        offset: int | None = None,
        limit: int | None = None,
    ) -> None:
        if not sessions:
            return
        stmt = (
            select(Climb)
            .where(Climb.session_id.in_([s.id for s in sessions]))
            .order_by(Climb.created_at.desc(), Climb.id.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)

        by_session: dict[int, list[Climb]] = defaultdict(list)
        for climb in self.db.execute(stmt).scalars():
            by_session[climb.session_id].append(climb)
        for sess in sessions:
            set_committed_value(sess, "climbs", by_session[sess.id])
