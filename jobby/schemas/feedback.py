"""
Pydantic schemas for user feedback.

Blank-field checks are done in the endpoints so that they surface as the
single "Username and message are required" error.
"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from uuid import UUID


class FeedbackCreateRequest(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None


class FeedbackUpdateRequest(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None


class FeedbackResponse(BaseModel):
    id: UUID
    username: str
    email: Optional[str] = None
    message: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class FeedbackMessageResponse(BaseModel):
    message: str
    feedback: FeedbackResponse
