from datetime import datetime
from pydantic import field_validator
from schemas.base import CamelModel


class Token(CamelModel):
    token: str


class CreateUserRequest(CamelModel):
    username: str
    password: str

    @field_validator('username', 'password')
    @classmethod
    def validate_present(cls, value):
        if not value or not value.strip():
            raise ValueError('Field cannot be empty')
        return value


class LoginRequest(CamelModel):
    username: str
    password: str


class UserResponse(CamelModel):
    """
    Signup response. ``password`` carries the stored bcrypt hash, never the
    plaintext.
    """
    id: int
    username: str
    password: str
    created_at: datetime
    updated_at: datetime


class CurrentUserResponse(CamelModel):
    id: int
    username: str
