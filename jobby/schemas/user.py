"""
Pydantic schemas for user signup, login and profile responses.
"""

from pydantic import BaseModel, EmailStr, Field, UUID4, field_validator
from typing import Optional
from datetime import datetime


class SignupRequest(BaseModel):
    """Request schema for user signup."""
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)  # hashed as its first 72 bytes
    email: EmailStr

    @field_validator('username')
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('Username cannot be blank')
        return v


class LoginRequest(BaseModel):
    """Request schema for user login."""
    username: str
    password: str


class TokenResponse(BaseModel):
    """Signup/login response carrying a session token."""
    message: str
    token: str


class UserResponse(BaseModel):
    """User profile response (no credential material)."""
    id: UUID4
    username: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserDeleteResponse(BaseModel):
    message: str
    user: UserResponse
