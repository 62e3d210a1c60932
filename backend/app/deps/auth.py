# app/deps/auth.py
from dataclasses import dataclass

from fastapi import Depends, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from jose.exceptions import ExpiredSignatureError, JWTError

from app.db import get_db
from app.errors import APIError, AppError
from app.repositories.user_repo import UserRepository
from app.security import decode_token

# Exposes Bearer auth in Swagger; login endpoint issues the token.
# auto_error=False so a missing header goes through our own 401 body.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/login", auto_error=False)

INVALID_TOKEN = "Authorization token is invalid or missing. Please log in and try again."
EXPIRED_TOKEN = "Authorization token has expired. Please log in again."
BEARER = {"WWW-Authenticate": "Bearer"}

@dataclass(frozen=True, slots=True)
class Principal:
    """The authenticated caller; routers pass ``user_id`` into every data-access call."""
    user_id: int
    username: str

def get_current_principal(
    db: Session = Depends(get_db),
    token: str | None = Depends(oauth2_scheme),
) -> Principal:
    unauth = APIError(INVALID_TOKEN, status.HTTP_401_UNAUTHORIZED, headers=BEARER)
    if not token:
        raise unauth
    try:
        payload = decode_token(token)
        sub = payload.get("sub")
        if sub is None:
            raise unauth
        user = UserRepository(db).get(int(sub))
    except ExpiredSignatureError:
        raise APIError(EXPIRED_TOKEN, status.HTTP_401_UNAUTHORIZED, headers=BEARER)
    except (JWTError, ValueError):
        raise unauth
    except AppError as e:
        raise APIError(
            "An error occurred while processing your request. Please try again later.",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        ) from e

    if not user:
        raise unauth
    return Principal(user_id=user.id, username=user.username)
