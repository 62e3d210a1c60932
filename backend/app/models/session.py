import datetime as dt

from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, Date, DateTime, Text, UniqueConstraint, func
from app.db import Base

class ClimbingSession(Base):
    __tablename__ = "sessions"
    # one session per user per calendar day
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_sessions_user_date"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[DateTime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    user = relationship("User", back_populates="sessions", lazy="raise")
    # populated explicitly by SessionRepository, never lazily
    climbs = relationship("Climb", back_populates="session", lazy="raise")
