"""
User data models.
"""
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field, field_validator

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class UserBase(BaseModel):
    """Base user model."""
    email: EmailStr


class UserCreate(UserBase):
    """Registration request model."""
    name: str = Field(min_length=1)
    password: str = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class UserInDB(UserBase):
    """User model as stored in database."""
    id: str
    name: str
    password_hash: str
    created_at: datetime


class UserResponse(UserBase):
    """Public user profile (no password hash)."""
    id: str
    name: str


class LoginRequest(UserBase):
    """Login request model."""
    password: str


class LoginResponse(BaseModel):
    """Token issued at login together with the public profile."""
    token: str
    user: UserResponse


class TokenData(BaseModel):
    """Data encoded in JWT token."""
    user_id: str
    issued_at: datetime
    expires_at: datetime


class MessageResponse(BaseModel):
    """Plain acknowledgement body."""
    msg: str
