"""
CRUD operations for Feedback model.
"""

from typing import List, Optional, Union
from uuid import UUID
from sqlalchemy.orm import Session
from jobby.crud.base import parse_id
from jobby.models.feedback import Feedback


def create(db: Session, username: str, message: str, email: Optional[str] = None) -> Feedback:
    feedback = Feedback(username=username, email=email, message=message)

    db.add(feedback)
    db.commit()
    db.refresh(feedback)

    return feedback


def get_by_id(db: Session, feedback_id: Union[str, UUID]) -> Optional[Feedback]:
    fid = parse_id(feedback_id)
    if fid is None:
        return None
    return db.query(Feedback).filter(Feedback.id == fid).first()


def get_multi(db: Session) -> List[Feedback]:
    return db.query(Feedback).order_by(Feedback.created_at, Feedback.id).all()


def update(db: Session, feedback_id: Union[str, UUID], fields: dict) -> Optional[Feedback]:
    """
    Apply a partial update to a feedback record.

    Args:
        fields: Column values to set; keys other than username, email and
            message are ignored

    Returns:
        Updated Feedback instance if found, None otherwise
    """
    feedback = get_by_id(db, feedback_id)
    if not feedback:
        return None

    for key in ("username", "email", "message"):
        if key in fields:
            setattr(feedback, key, fields[key])

    db.commit()
    db.refresh(feedback)

    return feedback


def delete(db: Session, feedback_id: Union[str, UUID]) -> Optional[Feedback]:
    feedback = get_by_id(db, feedback_id)
    if not feedback:
        return None

    db.delete(feedback)
    db.commit()

    return feedback


def delete_all(db: Session) -> int:
    count = db.query(Feedback).delete(synchronize_session=False)
    db.commit()
    return count
