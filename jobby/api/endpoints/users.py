"""
User administration endpoints.

SECURITY WARNING: these routes are not gated by a token, matching the web
client's admin page. Put them behind a reverse-proxy rule in production.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobby.core.database import get_db
from jobby.core.exceptions import InternalError, NotFoundError
from jobby.crud import user as user_crud
from jobby.schemas.user import UserDeleteResponse, UserResponse

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db)):
    """List all users in the system (without password hashes)."""
    try:
        return user_crud.get_multi(db)
    except Exception as e:
        logger.error(f"Error listing users: {e}")
        raise InternalError(details=str(e))


@router.delete("/{user_id}", response_model=UserDeleteResponse)
def delete_user(user_id: str, db: Session = Depends(get_db)):
    """Delete a user by ID."""
    try:
        deleted = user_crud.delete(db, user_id)
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting user {user_id}: {e}")
        raise InternalError(details=str(e))

    if not deleted:
        raise NotFoundError("User not found")

    logger.info(f"Deleted user {user_id}")
    return UserDeleteResponse(
        message="User deleted successfully",
        user=UserResponse.model_validate(deleted)
    )
