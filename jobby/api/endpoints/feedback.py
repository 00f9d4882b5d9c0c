"""
Feedback endpoints.

Submitting feedback does not require a token. When a bearer token is sent it
must be valid, and the feedback is attributed to the token's user instead of
the username in the body.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobby.core.database import get_db
from jobby.core.deps import get_optional_user
from jobby.core.exceptions import BadRequestError, InternalError, NotFoundError
from jobby.crud import feedback as feedback_crud
from jobby.models.user import User
from jobby.schemas.common import BulkDeleteResponse
from jobby.schemas.feedback import (
    FeedbackCreateRequest,
    FeedbackMessageResponse,
    FeedbackResponse,
    FeedbackUpdateRequest,
)

router = APIRouter(prefix="/feedback", tags=["Feedback"])
logger = logging.getLogger(__name__)

REQUIRED_FIELDS_ERROR = "Username and message are required"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@router.post("", status_code=201, response_model=FeedbackMessageResponse)
def create_feedback(
    request: FeedbackCreateRequest,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user)
):
    """Submit a feedback message."""
    username, email = request.username, request.email
    if current_user is not None:
        username, email = current_user.username, current_user.email

    if _is_blank(username) or _is_blank(request.message):
        raise BadRequestError(REQUIRED_FIELDS_ERROR)

    try:
        feedback = feedback_crud.create(db, username.strip(), request.message, email)
    except Exception as e:
        db.rollback()
        logger.error(f"Error saving feedback: {e}")
        raise InternalError(details=str(e))

    logger.info(f"Feedback {feedback.id} submitted by {feedback.username}")
    return FeedbackMessageResponse(
        message="Feedback submitted successfully",
        feedback=FeedbackResponse.model_validate(feedback)
    )


@router.get("", response_model=List[FeedbackResponse])
def list_feedback(db: Session = Depends(get_db)):
    try:
        return feedback_crud.get_multi(db)
    except Exception as e:
        logger.error(f"Error listing feedback: {e}")
        raise InternalError(details=str(e))


@router.get("/{feedback_id}", response_model=FeedbackResponse)
def get_feedback(feedback_id: str, db: Session = Depends(get_db)):
    try:
        feedback = feedback_crud.get_by_id(db, feedback_id)
    except Exception as e:
        logger.error(f"Error fetching feedback {feedback_id}: {e}")
        raise InternalError(details=str(e))

    if not feedback:
        raise NotFoundError("Feedback not found")

    return feedback


@router.put("/{feedback_id}", response_model=FeedbackMessageResponse)
def update_feedback(
    feedback_id: str,
    request: FeedbackUpdateRequest,
    db: Session = Depends(get_db)
):
    """Update any of username, email and message on a feedback record."""
    fields = request.model_dump(exclude_unset=True)
    for key in ("username", "message"):
        if key in fields and _is_blank(fields[key]):
            raise BadRequestError(REQUIRED_FIELDS_ERROR)

    try:
        feedback = feedback_crud.update(db, feedback_id, fields)
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating feedback {feedback_id}: {e}")
        raise InternalError(details=str(e))

    if not feedback:
        raise NotFoundError("Feedback not found")

    logger.info(f"Updated feedback {feedback_id}")
    return FeedbackMessageResponse(
        message="Feedback updated successfully",
        feedback=FeedbackResponse.model_validate(feedback)
    )


@router.delete("/{feedback_id}", response_model=FeedbackMessageResponse)
def delete_feedback(feedback_id: str, db: Session = Depends(get_db)):
    try:
        deleted = feedback_crud.delete(db, feedback_id)
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting feedback {feedback_id}: {e}")
        raise InternalError(details=str(e))

    if not deleted:
        raise NotFoundError("Feedback not found")

    logger.info(f"Deleted feedback {feedback_id}")
    return FeedbackMessageResponse(
        message="Feedback deleted successfully",
        feedback=FeedbackResponse.model_validate(deleted)
    )


@router.delete("", response_model=BulkDeleteResponse)
def delete_all_feedback(db: Session = Depends(get_db)):
    try:
        count = feedback_crud.delete_all(db)
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting all feedback: {e}")
        raise InternalError(details=str(e))

    logger.info(f"Deleted all feedback ({count})")
    return BulkDeleteResponse(message="All feedbacks deleted successfully", deletedCount=count)
