import datetime as dt

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.deps.auth import Principal, get_current_principal
from app.errors import APIError, api_errors
from app.schemas.session import SessionCreate, SessionRead, SessionSummaryRead
from app.repositories.session_repo import SessionRepository

router = APIRouter(prefix="/app/sessions", tags=["sessions"])

LOAD_ERROR = "We could not load your sessions. Please try again later."
NOT_FOUND = "Session not found."

@router.get("", response_model=list[SessionRead])
def list_my_sessions(
    db: Session = Depends(get_db),
    current: Principal = Depends(get_current_principal),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    with api_errors(LOAD_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR):
        return SessionRepository(db).find_all(current.user_id, offset=offset, limit=limit)

@router.post("", response_model=SessionRead)
def create_session(
    payload: SessionCreate,
    db: Session = Depends(get_db),
    current: Principal = Depends(get_current_principal),
):
    with api_errors(
        "We could not create your session. Please try again later.",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        conflict="A session already exists for this date.",
    ):
        return SessionRepository(db).create(current.user_id, session_date=payload.date, notes=payload.notes)

# declared before /{session_id} so the literal paths win
@router.get("/summary", response_model=list[SessionSummaryRead])
def session_summaries(
    start_date: dt.date,
    end_date: dt.date,
    db: Session = Depends(get_db),
    current: Principal = Depends(get_current_principal),
):
    if start_date > end_date:
        raise APIError("start_date must not be after end_date.", status.HTTP_400_BAD_REQUEST)
    with api_errors(LOAD_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR):
        return SessionRepository(db).find_summaries(current.user_id, start_date, end_date)

@router.get("/by-date/{session_date}", response_model=SessionRead)
def get_session_by_date(
    session_date: dt.date,
    db: Session = Depends(get_db),
    current: Principal = Depends(get_current_principal),
):
    with api_errors(LOAD_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR, not_found=NOT_FOUND):
        return SessionRepository(db).find_by_date(current.user_id, session_date)

@router.get("/{session_id}", response_model=SessionRead)
def get_session(
    session_id: int,
    db: Session = Depends(get_db),
    current: Principal = Depends(get_current_principal),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    # offset/limit page the session's climbs
    with api_errors(LOAD_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR, not_found=NOT_FOUND):
        return SessionRepository(db).find_by_id(current.user_id, session_id, offset=offset, limit=limit)
