"""
CRUD operations for User model.
"""

from typing import List, Optional, Union
from uuid import UUID
from sqlalchemy import or_
from sqlalchemy.orm import Session
from jobby.core.security import get_password_hash
from jobby.crud.base import parse_id
from jobby.models.user import User


def create(db: Session, username: str, email: str, password: str) -> User:
    """
    Create a new user with a hashed password.

    Raises:
        sqlalchemy.exc.IntegrityError: If the username or email is already taken
    """
    db_user = User(
        username=username,
        email=email,
        hashed_password=get_password_hash(password),
    )

    db.add(db_user)
    db.commit()
    db.refresh(db_user)

    return db_user


def get_by_id(db: Session, user_id: Union[str, UUID]) -> Optional[User]:
    uid = parse_id(user_id)
    if uid is None:
        return None
    return db.query(User).filter(User.id == uid).first()


def get_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def get_by_username_or_email(db: Session, username: str, email: str) -> Optional[User]:
    """Find a user holding either the given username or the given email."""
    return db.query(User).filter(
        or_(User.username == username, User.email == email)
    ).first()


def get_multi(db: Session) -> List[User]:
    return db.query(User).order_by(User.created_at, User.id).all()


def delete(db: Session, user_id: Union[str, UUID]) -> Optional[User]:
    """
    Delete a user by ID.

    Returns:
        The deleted User, or None if not found
    """
    user = get_by_id(db, user_id)
    if not user:
        return None

    db.delete(user)
    db.commit()

    return user
