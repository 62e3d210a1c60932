from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.deps.auth import Principal, get_current_principal
from app.errors import api_errors
from app.schemas.climb import ClimbCreate, ClimbRead
from app.repositories.climb_repo import ClimbRepository

router = APIRouter(prefix="/app", tags=["climbs"])

@router.post("/logClimb", response_model=ClimbRead)
def log_climb(
    payload: ClimbCreate,
    db: Session = Depends(get_db),
    current: Principal = Depends(get_current_principal),
):
    with api_errors(
        "We could not log your climb. Please try again later.",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        return ClimbRepository(db).log(
            current.user_id,
            session_date=payload.date,
            grade=payload.grade,
            attempts=payload.attempts,
            sent=payload.sent,
            load=payload.load,
            notes=payload.notes,
        )

@router.get("/climbs/{climb_id}", response_model=ClimbRead)
def get_climb(
    climb_id: int,
    db: Session = Depends(get_db),
    current: Principal = Depends(get_current_principal),
):
    with api_errors(
        "We could not load this climb. Please try again later.",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        not_found="Climb not found.",
    ):
        return ClimbRepository(db).find_by_id(current.user_id, climb_id)
