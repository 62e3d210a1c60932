from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.deps.auth import Principal, get_current_principal
from app.errors import api_errors
from app.schemas.user import PasswordUpdate, MessageResponse
from app.services import user_service

router = APIRouter(prefix="/app", tags=["users"])

@router.put("/profile", response_model=MessageResponse)
def update_profile(
    payload: PasswordUpdate,
    db: Session = Depends(get_db),
    current: Principal = Depends(get_current_principal),
):
    with api_errors(
        "Invalid password. Please check your credentials and try again.",
        status.HTTP_401_UNAUTHORIZED,
    ):
        user_service.update_password(db, current.user_id, payload.current_password, payload.new_password)
    return {"message": "Password updated successfully"}
