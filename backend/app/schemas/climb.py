from typing import Annotated
import datetime as dt
from pydantic import BaseModel, Field, StringConstraints, field_validator

GradeStr = Annotated[str, Field(max_length=16)]
NotesStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]

class ClimbCreate(BaseModel):
    date: dt.date
    grade: GradeStr
    attempts: Annotated[int, Field(ge=1, le=1000)] = 1
    sent: bool = False
    load: Annotated[float, Field(ge=0, le=10000)]
    notes: NotesStr | None = None

    @field_validator("grade")
    @classmethod
    def grade_non_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("grade cannot be blank")
        return v2

class ClimbRead(BaseModel):
    id: int
    session_id: int
    grade: str
    attempts: int
    sent: bool
    load: float
    notes: str | None = None
    created_at: dt.datetime
    updated_at: dt.datetime

    model_config = {"from_attributes": True}
