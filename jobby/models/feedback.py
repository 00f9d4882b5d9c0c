import uuid
from sqlalchemy import Column, String, DateTime, Uuid, func
from jobby.core.database import Base


class Feedback(Base):
    """Feedback message left by a user of the web app."""
    __tablename__ = "feedback"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    username = Column(String, nullable=False)
    email = Column(String, nullable=True)
    message = Column(String, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Feedback(id={self.id}, username='{self.username}')>"
