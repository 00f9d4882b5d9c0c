"""
Authentication endpoints for signup, login and the protected profile route.

Implements JWT-based stateless authentication:
- POST /signup: Create new user account and return a session token
- POST /login: Authenticate and receive a session token
- GET /protected: Get the profile of the user identified by the bearer token
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobby.core.config import Settings
from jobby.core.database import get_db
from jobby.core.deps import get_current_user, get_settings
from jobby.core.exceptions import (
    ConflictError,
    InternalError,
    InvalidCredentialsError,
    JobbyError,
    ServerMisconfiguredError,
)
from jobby.core.security import create_user_token, verify_password
from jobby.crud import user as user_crud
from jobby.models.user import User
from jobby.schemas.user import LoginRequest, SignupRequest, TokenResponse, UserResponse

router = APIRouter(tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/signup", response_model=TokenResponse)
def signup(
    request: SignupRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """
    Register a new user account.

    Rejects the request if either the username or the email is already
    registered. Returns a session token for immediate login.
    """
    if not settings.JWT_SECRET:
        raise ServerMisconfiguredError("JWT_SECRET is not set")

    try:
        existing_user = user_crud.get_by_username_or_email(db, request.username, request.email)
        if existing_user:
            raise ConflictError()

        new_user = user_crud.create(db, request.username, request.email, request.password)
        token = create_user_token(new_user, settings)

    except JobbyError:
        raise
    except IntegrityError:
        # Lost a race with a concurrent signup for the same username/email
        db.rollback()
        raise ConflictError()
    except Exception as e:
        db.rollback()
        logger.error(f"Signup failed: {e}")
        raise InternalError(details=str(e))

    logger.info(f"New user registered: {new_user.username} (id: {new_user.id})")
    return TokenResponse(message="Signup successful", token=token)


@router.post("/login", response_model=TokenResponse)
def login(
    request: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """
    Authenticate user and return a fresh session token.
    """
    if not settings.JWT_SECRET:
        raise ServerMisconfiguredError("JWT_SECRET is not set")

    try:
        user = user_crud.get_by_username(db, request.username)
        if not user or not verify_password(request.password, user.hashed_password):
            logger.warning(f"Failed login attempt for username: {request.username}")
            raise InvalidCredentialsError()

        token = create_user_token(user, settings)

    except JobbyError:
        raise
    except Exception as e:
        logger.error(f"Login failed: {e}")
        raise InternalError(details=str(e))

    logger.info(f"User logged in: {user.username}")
    return TokenResponse(message="Login successful", token=token)


@router.get("/protected", response_model=UserResponse)
def get_current_user_profile(
    current_user: User = Depends(get_current_user)
):
    """
    Get current authenticated user's profile.

    Requires `Authorization: Bearer <token>`.
    """
    return current_user
