from typing import Annotated
from pydantic import BaseModel, Field, StringConstraints, field_validator

UsernameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=64)]
PasswordStr = Annotated[str, Field(min_length=12, max_length=128)]

def check_password_policy(v: str) -> str:
    # lower, upper, digit, special
    if not any(c.islower() for c in v):
        raise ValueError("password must include a lowercase letter")
    if not any(c.isupper() for c in v):
        raise ValueError("password must include an uppercase letter")
    if not any(c.isdigit() for c in v):
        raise ValueError("password must include a digit")
    if not any(not c.isalnum() for c in v):
        raise ValueError("password must include a special character")
    return v

class UserRegister(BaseModel):
    username: UsernameStr
    password: PasswordStr

    @field_validator("username")
    @classmethod
    def username_charset(cls, v: str) -> str:
        if not all(c.isalnum() or c in "._-" for c in v):
            raise ValueError("username may only contain letters, digits, '.', '_' and '-'")
        return v

    @field_validator("password")
    @classmethod
    def password_policy(cls, v: str) -> str:
        return check_password_policy(v)

class UserLogin(BaseModel):
    username: Annotated[str, Field(min_length=1, max_length=64)]
    password: Annotated[str, Field(min_length=1, max_length=256)]

class PasswordUpdate(BaseModel):
    current_password: Annotated[str, Field(min_length=1, max_length=256)]
    new_password: PasswordStr

    @field_validator("new_password")
    @classmethod
    def password_policy(cls, v: str) -> str:
        return check_password_policy(v)

class RegisterResponse(BaseModel):
    message: str
    user_id: int

class TokenResponse(BaseModel):
    token: str

class MessageResponse(BaseModel):
    message: str
