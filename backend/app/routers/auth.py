from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.errors import api_errors
from app.schemas.user import UserRegister, UserLogin, RegisterResponse, TokenResponse
from app.services import user_service

router = APIRouter(tags=["auth"])

@router.post("/register", response_model=RegisterResponse)
def register(payload: UserRegister, db: Session = Depends(get_db)):
    with api_errors(
        "We encountered an issue while registering your account. Please try again later.",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        conflict="That username is already taken. Please choose another one.",
    ):
        user = user_service.register_user(db, payload)
    return {"message": "User registered successfully", "user_id": user.id}

@router.post("/login", response_model=TokenResponse)
def login(payload: UserLogin, db: Session = Depends(get_db)):
    with api_errors(
        "Invalid username or password. Please check your credentials and try again.",
        status.HTTP_401_UNAUTHORIZED,
    ):
        token = user_service.verify_user(db, payload.username, payload.password)
    return {"token": token}
