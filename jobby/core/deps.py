"""
FastAPI dependencies for application context and authentication.

These dependencies are used to protect endpoints and extract user context.
"""

import logging
from typing import Optional
from uuid import UUID
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from jobby.core.config import Settings
from jobby.core.database import get_db
from jobby.core.exceptions import InvalidTokenError, NotFoundError, TokenMissingError
from jobby.core.security import verify_token
from jobby.crud import user as user_crud
from jobby.models.user import User

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme (Authorization: Bearer <token>)
# auto_error is off so a missing header and a malformed one can be told apart
security = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


def get_current_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_settings)
) -> UUID:
    """
    Extract and validate the user id carried by the bearer token.

    Raises:
        TokenMissingError (403): No Authorization header was sent
        InvalidTokenError (401): Header is not a Bearer credential, or the
            token is tampered with or expired
    """
    if credentials is None:
        if request.headers.get("Authorization"):
            logger.warning("Rejected malformed Authorization header")
            raise InvalidTokenError()
        raise TokenMissingError()

    try:
        return verify_token(credentials.credentials, settings)
    except InvalidTokenError:
        logger.warning("Rejected invalid or expired session token")
        raise


def get_current_user(
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
) -> User:
    """
    Fetch the user identified by the bearer token.

    Raises:
        NotFoundError (404): The token is valid but the user no longer exists
    """
    user = user_crud.get_by_id(db, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def get_optional_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
) -> Optional[User]:
    """
    Resolve the caller when an Authorization header is present, else None.

    A header that is present must still carry a valid token for an existing user.
    """
    if credentials is None and not request.headers.get("Authorization"):
        return None

    user_id = get_current_user_id(request, credentials, settings)
    return get_current_user(user_id, db)
