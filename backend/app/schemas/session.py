from typing import Annotated
import datetime as dt
from pydantic import BaseModel, StringConstraints

from app.schemas.climb import ClimbRead

# Notes: trimmed, up to 500 chars
NotesStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]

class SessionCreate(BaseModel):
    date: dt.date
    notes: NotesStr | None = None

class SessionRead(BaseModel):
    id: int
    user_id: int
    date: dt.date
    notes: str | None = None
    created_at: dt.datetime
    updated_at: dt.datetime
    climbs: list[ClimbRead] = []

    model_config = {"from_attributes": True}

class SessionSummaryRead(BaseModel):
    id: int
    date: dt.date
    load: float

    model_config = {"from_attributes": True}
